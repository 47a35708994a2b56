from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board

Position = tuple[int, int]
CaptureSequence = tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class Move:
    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.start[0]},{self.start[1]} - {self.end[0]},{self.end[1]}"


@dataclass(frozen=True, slots=True)
class MoveResult:
    board: "Board"
    successful: bool
    captures: CaptureSequence = ()

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)
