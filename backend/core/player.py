from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board
    from .move import Move
    from .pieces import Player

MovePolicy = Callable[["Board", "Player"], Optional["Move"]]


class PlayerKind(str, Enum):
    HUMAN = "human"
    ARBITRARY = "arbitrary"


@dataclass
class PlayerController:
    kind: PlayerKind
    name: str
    policy: Optional[MovePolicy] = None

    @property
    def is_human(self) -> bool:
        return self.policy is None or self.kind == PlayerKind.HUMAN

    def select_move(self, board: "Board", player: "Player") -> Optional["Move"]:
        if self.policy is None:
            return None
        return self.policy(board, player)

    @classmethod
    def human(cls, name: str) -> "PlayerController":
        return cls(kind=PlayerKind.HUMAN, name=name)
