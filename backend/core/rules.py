from __future__ import annotations

from typing import Optional

from .board import Board, is_in_bounds
from .move import CaptureSequence, MoveResult, Position
from .pieces import Player, create_cell, is_empty, opponent


Direction = tuple[int, int]
MoveMap = dict[Position, frozenset[Position]]

USER_DIRECTIONS: tuple[Direction, ...] = ((-1, -1), (-1, 1))
OPPONENT_DIRECTIONS: tuple[Direction, ...] = ((1, 1), (1, -1))


def directions_for(player: Player) -> tuple[Direction, ...]:
    return USER_DIRECTIONS if player is Player.USER else OPPONENT_DIRECTIONS


def _capture_step(
    board: Board, player: Player, row: int, col: int, direction: Direction
) -> Optional[tuple[Position, Position]]:
    """Return ``(jumped, landing)`` if a single capture is possible."""
    dr, dc = direction
    mid_r, mid_c = row + dr, col + dc
    end_r, end_c = row + 2 * dr, col + 2 * dc
    if not (is_in_bounds(mid_r, mid_c) and is_in_bounds(end_r, end_c)):
        return None
    if board.board[mid_r][mid_c].player != opponent(player):
        return None
    if not is_empty(board.board[end_r][end_c]):
        return None
    return (mid_r, mid_c), (end_r, end_c)


def can_capture(board: Board, player: Player) -> bool:
    directions = directions_for(player)
    for row, col in board.positions_of(player):
        for direction in directions:
            if _capture_step(board, player, row, col, direction) is not None:
                return True
    return False


def _simple_destinations(board: Board, player: Player, row: int, col: int) -> set[Position]:
    destinations: set[Position] = set()
    for dr, dc in directions_for(player):
        new_r, new_c = row + dr, col + dc
        if is_in_bounds(new_r, new_c) and is_empty(board.board[new_r][new_c]):
            destinations.add((new_r, new_c))
    return destinations


def _capture_destinations(board: Board, player: Player, row: int, col: int) -> set[Position]:
    # Landing squares only; paths are rebuilt by resolve_capture.
    landings: set[Position] = set()
    stack: list[Position] = [(row, col)]
    while stack:
        r, c = stack.pop()
        for direction in directions_for(player):
            step = _capture_step(board, player, r, c, direction)
            if step is None:
                continue
            _, landing = step
            if landing not in landings:
                landings.add(landing)
                stack.append(landing)
    return landings


def reachable_destinations(board: Board, position: Position) -> frozenset[Position]:
    """Squares the piece on ``position`` may legally move to.

    While ``can_capture`` holds for the owner anywhere on the board only
    capture landings are returned, so a piece that cannot itself capture
    gets an empty set. Out-of-bounds or empty squares also give an empty
    set.
    """
    row, col = position
    if not is_in_bounds(row, col):
        return frozenset()
    player = board.board[row][col].player
    if player is None:
        return frozenset()

    if not can_capture(board, player):
        return frozenset(_simple_destinations(board, player, row, col))
    return frozenset(_capture_destinations(board, player, row, col))


def compute_reachable(board: Board, position: Position) -> Board:
    """Copy of ``board`` with the destinations of ``position`` highlighted."""
    return board.with_highlights(reachable_destinations(board, position))


def legal_moves(board: Board, player: Player) -> MoveMap:
    moves: MoveMap = {}
    for position in board.positions_of(player):
        destinations = reachable_destinations(board, position)
        if destinations:
            moves[position] = destinations
    return moves


def resolve_capture(
    board: Board, player: Player, start: Position, end: Position
) -> Optional[CaptureSequence]:
    """Find a capture path from ``start`` to ``end`` and play it in place.

    Depth-first over ``(square, path)`` entries where ``path`` holds the
    start square followed by every jumped square. The first path that
    reaches ``end`` is committed: the moving cell lands on ``end`` and every
    square of the path is emptied. Returns the jumped squares, or ``None``
    when ``end`` cannot be reached (the board is left untouched).
    """
    stack: list[tuple[Position, tuple[Position, ...]]] = [(start, (start,))]

    while stack:
        (row, col), path = stack.pop()
        if (row, col) == end:
            start_r, start_c = start
            end_r, end_c = end
            board.board[end_r][end_c] = board.board[start_r][start_c]
            for path_r, path_c in path:
                board.board[path_r][path_c] = create_cell()
            return path[1:]

        for direction in directions_for(player):
            step = _capture_step(board, player, row, col, direction)
            if step is None:
                continue
            jumped, landing = step
            stack.append((landing, path + (jumped,)))

    return None


def apply_move(board: Board, start: Position, end: Position) -> MoveResult:
    """Play ``start`` -> ``end`` on a copy of ``board``.

    Invalid requests are not errors: the untouched copy comes back with
    ``successful=False``.
    """
    board_copy = board.copy()
    start_r, start_c = start
    end_r, end_c = end

    if (
        not is_in_bounds(start_r, start_c)
        or not is_in_bounds(end_r, end_c)
        or is_empty(board_copy.board[start_r][start_c])
        or not is_empty(board_copy.board[end_r][end_c])
    ):
        return MoveResult(board_copy, False)

    player = board_copy.board[start_r][start_c].player
    delta = (end_r - start_r, end_c - start_c)

    if not can_capture(board, player) and delta in directions_for(player):
        cells = board_copy.board
        cells[start_r][start_c], cells[end_r][end_c] = cells[end_r][end_c], cells[start_r][start_c]
        return MoveResult(board_copy, True)

    captures = resolve_capture(board_copy, player, start, end)
    if captures is None:
        return MoveResult(board_copy, False)
    return MoveResult(board_copy, True, captures)


def is_game_over(board: Board, player: Player) -> bool:
    if board.piece_count(player) == 0:
        return True
    return not legal_moves(board, player)
