from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Optional


_CELL_ID_COUNTER = count()


class Player(Enum):
    USER = "user"
    OPPONENT = "opponent"

    @property
    def code(self) -> int:
        return 1 if self is Player.USER else 2


@dataclass(slots=True)
class Cell:
    """One square of the board.

    ``id`` is fixed when the cell is created and survives copies so a front
    end can follow a square across board snapshots. ``is_highlighted`` marks
    a destination on boards returned by a reachability query and means
    nothing anywhere else.
    """

    id: int
    player: Optional[Player] = None
    is_highlighted: bool = False

    def getCopy(self) -> "Cell":
        return Cell(self.id, self.player, self.is_highlighted)

    def __repr__(self) -> str:
        owner = self.player.name if self.player else "-"
        mark = "*" if self.is_highlighted else ""
        return f"Cell({self.id},{owner}{mark})"


def create_cell(player: Optional[Player] = None) -> Cell:
    return Cell(id=next(_CELL_ID_COUNTER), player=player)


def is_empty(cell: Cell) -> bool:
    return cell.player is None


def opponent(player: Optional[Player]) -> Optional[Player]:
    if player is None:
        return None
    return Player.OPPONENT if player is Player.USER else Player.USER


def player_from_code(code: int) -> Optional[Player]:
    if code == 0:
        return None
    if code == 1:
        return Player.USER
    if code == 2:
        return Player.OPPONENT
    raise ValueError(f"Unknown layout code {code!r}.")
