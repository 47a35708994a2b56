"""Core checkers engine package."""

from .board import BOARD_SIZE, Board, create_initial_board, deep_copy, is_in_bounds
from .game import Game
from .move import Move, MoveResult, Position
from .pieces import Cell, Player, create_cell, is_empty, opponent
from .player import PlayerController, PlayerKind
from .rules import (
    apply_move,
    can_capture,
    compute_reachable,
    is_game_over,
    legal_moves,
    reachable_destinations,
    resolve_capture,
)

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Cell",
    "Game",
    "Move",
    "MoveResult",
    "Player",
    "PlayerController",
    "PlayerKind",
    "Position",
    "apply_move",
    "can_capture",
    "compute_reachable",
    "create_cell",
    "create_initial_board",
    "deep_copy",
    "is_empty",
    "is_game_over",
    "is_in_bounds",
    "legal_moves",
    "opponent",
    "reachable_destinations",
    "resolve_capture",
]
