from __future__ import annotations

from typing import Optional

from core.board import Board
from core.move import Move
from core.pieces import Player
from core.player import PlayerController, PlayerKind

from .arbitrary import choose_move

__all__ = ["create_arbitrary_controller"]


def create_arbitrary_controller(name: str) -> PlayerController:
    def _policy(board: Board, player: Player) -> Optional[Move]:
        return choose_move(board, player)

    return PlayerController(
        kind=PlayerKind.ARBITRARY,
        name=f"{name} (first legal move)",
        policy=_policy,
    )
