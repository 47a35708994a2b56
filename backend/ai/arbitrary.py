from __future__ import annotations

from typing import Optional

from core.board import Board
from core.move import Move
from core.pieces import Player
from core.rules import apply_move, compute_reachable


def choose_move(board: Board, player: Player = Player.OPPONENT) -> Optional[Move]:
	"""Return the first legal move of ``player`` in row-major scan order.

	No evaluation is done. Reachable sets are already restricted to captures
	whenever a capture exists, so a forced capture is never declined.
	"""
	for start in board.positions_of(player):
		highlighted = compute_reachable(board, start).highlighted_positions()
		if highlighted:
			return Move(start=start, end=highlighted[0])
	return None


def select_move(board: Board) -> Board:
	"""Play the automated opponent's move and return the new board.

	Only call this when the opponent has a move; otherwise an unmodified copy
	comes back.
	"""
	move = choose_move(board, Player.OPPONENT)
	if move is None:
		return board.copy()
	return apply_move(board, move.start, move.end).board
