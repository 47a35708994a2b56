from __future__ import annotations

from typing import Any, Optional

from core.board import Board
from core.game import Game
from core.move import Move, MoveResult, Position
from core.pieces import Cell, Player
from core.player import PlayerController
from core.rules import can_capture


def _coord_tuple_to_dict(coord: Position) -> dict[str, int]:
    row, col = coord
    return {"row": row, "col": col}


def serialize_cell(cell: Cell, row: int, col: int) -> dict[str, Any]:
    return {
        "id": cell.id,
        "row": row,
        "col": col,
        "player": cell.player.value if cell.player else None,
        "isHighlighted": cell.is_highlighted,
    }


def serialize_board(board: Board) -> list[list[dict[str, Any]]]:
    return [
        [serialize_cell(cell, row, col) for col, cell in enumerate(cells)]
        for row, cells in enumerate(board.board)
    ]


def serialize_destinations(destinations: frozenset[Position]) -> list[dict[str, int]]:
    return [_coord_tuple_to_dict(position) for position in sorted(destinations)]


def serialize_move(move: Move, result: Optional[MoveResult] = None) -> dict[str, Any]:
    captures = result.captures if result is not None else ()
    return {
        "start": _coord_tuple_to_dict(move.start),
        "end": _coord_tuple_to_dict(move.end),
        "captures": [_coord_tuple_to_dict(capture) for capture in captures],
        "isCapture": bool(captures),
    }


def serialize_controller(controller: PlayerController) -> dict[str, str]:
    return {"kind": controller.kind.value, "name": controller.name}


def serialize_game(
    game: Game,
    player_settings: dict[Player, dict[str, Any]],
) -> dict[str, Any]:
    board = game.board
    return {
        "turn": game.current_player.value,
        "winner": game.winner.value if game.winner else None,
        "cells": serialize_board(board),
        "pieceCounts": {
            "user": board.piece_count(Player.USER),
            "opponent": board.piece_count(Player.OPPONENT),
        },
        "mandatoryCapture": can_capture(board, game.current_player),
        "lastMove": serialize_move(game.last_move, game.last_result) if game.last_move else None,
        "players": {
            "user": serialize_controller(game.getPlayer(Player.USER)),
            "opponent": serialize_controller(game.getPlayer(Player.OPPONENT)),
        },
        "playerConfig": {
            "user": player_settings[Player.USER].copy(),
            "opponent": player_settings[Player.OPPONENT].copy(),
        },
    }
