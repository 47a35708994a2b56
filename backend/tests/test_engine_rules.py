from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from core.board import Board, create_initial_board  # noqa: E402
from core.pieces import Player  # noqa: E402
from core.rules import (  # noqa: E402
    apply_move,
    can_capture,
    compute_reachable,
    legal_moves,
    reachable_destinations,
    resolve_capture,
)


def _board(user=(), opponent=()) -> Board:
    board = Board.empty()
    for row, col in user:
        board.board[row][col].player = Player.USER
    for row, col in opponent:
        board.board[row][col].player = Player.OPPONENT
    return board


class ReachabilityTests(unittest.TestCase):
    def test_initial_board_simple_moves(self) -> None:
        board = create_initial_board()
        self.assertEqual(reachable_destinations(board, (5, 0)), {(4, 1)})
        self.assertEqual(reachable_destinations(board, (5, 2)), {(4, 1), (4, 3)})
        self.assertEqual(reachable_destinations(board, (2, 1)), {(3, 0), (3, 2)})

    def test_blocked_piece_has_no_destinations(self) -> None:
        board = create_initial_board()
        self.assertEqual(reachable_destinations(board, (1, 0)), frozenset())
        self.assertEqual(reachable_destinations(board, (6, 1)), frozenset())
        self.assertEqual(compute_reachable(board, (1, 0)).highlighted_positions(), [])

    def test_compute_reachable_highlights_a_copy(self) -> None:
        board = create_initial_board()
        highlighted = compute_reachable(board, (5, 0))
        self.assertIsNot(highlighted, board)
        self.assertEqual(highlighted.highlighted_positions(), [(4, 1)])
        self.assertEqual(highlighted.to_layout(), board.to_layout())
        self.assertEqual(board.highlighted_positions(), [])

    def test_previous_highlights_are_dropped(self) -> None:
        board = create_initial_board()
        stale = compute_reachable(board, (5, 0))
        fresh = compute_reachable(stale, (5, 6))
        self.assertEqual(fresh.highlighted_positions(), [(4, 5), (4, 7)])

    def test_out_of_bounds_and_empty_queries_are_no_ops(self) -> None:
        board = create_initial_board()
        for position in [(-1, 0), (0, -1), (8, 3), (3, 8), (100, 100), (4, 4)]:
            result = compute_reachable(board, position)
            self.assertEqual(result.to_layout(), board.to_layout(), position)
            self.assertEqual(result.highlighted_positions(), [], position)
            self.assertEqual(reachable_destinations(board, position), frozenset())

    def test_opponent_moves_toward_higher_rows(self) -> None:
        board = _board(opponent=[(4, 4)])
        self.assertEqual(reachable_destinations(board, (4, 4)), {(5, 3), (5, 5)})

    def test_pieces_on_the_far_edge_cannot_move(self) -> None:
        board = _board(user=[(0, 3)], opponent=[(7, 2)])
        self.assertEqual(reachable_destinations(board, (0, 3)), frozenset())
        self.assertEqual(reachable_destinations(board, (7, 2)), frozenset())


class MandatoryCaptureTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = _board(user=[(5, 2), (5, 6)], opponent=[(4, 3)])

    def test_can_capture(self) -> None:
        self.assertTrue(can_capture(self.board, Player.USER))
        self.assertTrue(can_capture(self.board, Player.OPPONENT))
        self.assertFalse(can_capture(create_initial_board(), Player.USER))

    def test_capture_blocked_by_occupied_landing(self) -> None:
        board = _board(user=[(5, 2), (3, 4)], opponent=[(4, 3)])
        self.assertFalse(can_capture(board, Player.USER))

    def test_capture_blocked_by_board_edge(self) -> None:
        board = _board(user=[(1, 1)], opponent=[(0, 0)])
        self.assertFalse(can_capture(board, Player.USER))

    def test_only_capture_landings_are_offered(self) -> None:
        self.assertEqual(reachable_destinations(self.board, (5, 2)), {(3, 4)})

    def test_piece_without_capture_gets_nothing_while_capture_exists(self) -> None:
        self.assertEqual(reachable_destinations(self.board, (5, 6)), frozenset())
        self.assertEqual(legal_moves(self.board, Player.USER), {(5, 2): frozenset({(3, 4)})})

    def test_plain_neighbours_never_offered_when_capture_exists(self) -> None:
        for position in self.board.positions_of(Player.USER):
            destinations = reachable_destinations(self.board, position)
            row, col = position
            for dest in destinations:
                self.assertEqual(abs(dest[0] - row) % 2, 0, dest)

    def test_multi_jump_landings(self) -> None:
        board = _board(user=[(6, 1)], opponent=[(5, 2), (3, 2), (3, 4)])
        self.assertEqual(
            reachable_destinations(board, (6, 1)),
            {(4, 3), (2, 1), (2, 5)},
        )
        self.assertEqual(
            compute_reachable(board, (6, 1)).highlighted_positions(),
            [(2, 1), (2, 5), (4, 3)],
        )


class ApplyMoveTests(unittest.TestCase):
    def assertRejected(self, board: Board, start, end) -> None:
        before = board.to_layout()
        result = apply_move(board, start, end)
        self.assertFalse(result.successful, (start, end))
        self.assertEqual(result.board.to_layout(), before)
        self.assertEqual(result.captures, ())
        self.assertIsNot(result.board, board)
        self.assertEqual(board.to_layout(), before)

    def test_simple_move_swaps_cells(self) -> None:
        board = create_initial_board()
        moving_id = board.board[5][0].id
        result = apply_move(board, (5, 0), (4, 1))

        self.assertTrue(result.successful)
        self.assertFalse(result.is_capture)
        self.assertIsNone(result.board.board[5][0].player)
        self.assertIs(result.board.board[4][1].player, Player.USER)
        self.assertEqual(result.board.board[4][1].id, moving_id)
        self.assertIs(board.board[5][0].player, Player.USER)

    def test_opponent_simple_move(self) -> None:
        board = create_initial_board()
        result = apply_move(board, (2, 1), (3, 2))
        self.assertTrue(result.successful)
        self.assertIs(result.board.board[3][2].player, Player.OPPONENT)

    def test_precondition_failures(self) -> None:
        board = create_initial_board()
        self.assertRejected(board, (-1, 0), (4, 1))
        self.assertRejected(board, (5, 0), (4, -1))
        self.assertRejected(board, (8, 8), (9, 9))
        self.assertRejected(board, (4, 1), (3, 2))
        self.assertRejected(board, (6, 1), (5, 0))

    def test_illegal_destinations_are_rejected(self) -> None:
        board = create_initial_board()
        self.assertRejected(board, (5, 0), (3, 2))
        self.assertRejected(board, (5, 2), (4, 2))

        lone = _board(user=[(4, 4)], opponent=[(0, 1)])
        self.assertRejected(lone, (4, 4), (5, 5))
        self.assertRejected(lone, (4, 4), (2, 2))

    def test_simple_move_refused_while_capture_exists(self) -> None:
        board = _board(user=[(5, 2), (5, 6)], opponent=[(4, 3)])
        self.assertRejected(board, (5, 6), (4, 5))
        self.assertRejected(board, (5, 2), (4, 1))

    def test_single_capture(self) -> None:
        board = _board(user=[(3, 4)], opponent=[(2, 3)])
        result = apply_move(board, (3, 4), (1, 2))

        self.assertTrue(result.successful)
        self.assertEqual(result.captures, ((2, 3),))
        self.assertIsNone(result.board.board[3][4].player)
        self.assertIsNone(result.board.board[2][3].player)
        self.assertIs(result.board.board[1][2].player, Player.USER)

    def test_opponent_capture(self) -> None:
        board = _board(user=[(3, 4)], opponent=[(2, 3)])
        result = apply_move(board, (2, 3), (4, 5))
        self.assertTrue(result.successful)
        self.assertEqual(result.board.piece_count(Player.USER), 0)
        self.assertIs(result.board.board[4][5].player, Player.OPPONENT)

    def test_multi_jump_removes_every_jumped_piece(self) -> None:
        board = _board(user=[(6, 1)], opponent=[(5, 2), (3, 2), (3, 4)])
        moving_id = board.board[6][1].id
        result = apply_move(board, (6, 1), (2, 5))

        self.assertTrue(result.successful)
        self.assertEqual(result.captures, ((5, 2), (3, 4)))
        after = result.board
        self.assertIsNone(after.board[6][1].player)
        self.assertIsNone(after.board[5][2].player)
        self.assertIsNone(after.board[3][4].player)
        self.assertIs(after.board[3][2].player, Player.OPPONENT)
        self.assertIs(after.board[2][5].player, Player.USER)
        self.assertEqual(after.board[2][5].id, moving_id)
        self.assertEqual(after.piece_count(Player.OPPONENT), 1)

    def test_intermediate_landing_is_a_valid_end(self) -> None:
        board = _board(user=[(6, 1)], opponent=[(5, 2), (3, 2), (3, 4)])
        result = apply_move(board, (6, 1), (4, 3))
        self.assertTrue(result.successful)
        self.assertEqual(result.captures, ((5, 2),))
        self.assertEqual(result.board.piece_count(Player.OPPONENT), 2)

    def test_ambiguous_paths_take_the_last_pushed_direction(self) -> None:
        # (6,3) reaches (2,3) either over (5,2),(3,2) or over (5,4),(3,4)
        board = _board(user=[(6, 3)], opponent=[(5, 2), (3, 2), (5, 4), (3, 4)])
        result = apply_move(board, (6, 3), (2, 3))

        self.assertTrue(result.successful)
        self.assertEqual(result.captures, ((5, 4), (3, 4)))
        self.assertIs(result.board.board[5][2].player, Player.OPPONENT)
        self.assertIs(result.board.board[3][2].player, Player.OPPONENT)
        self.assertIs(result.board.board[2][3].player, Player.USER)

    def test_capture_from_a_piece_that_cannot_capture_fails(self) -> None:
        board = _board(user=[(5, 2), (5, 6)], opponent=[(4, 3)])
        self.assertRejected(board, (5, 6), (3, 4))

    def test_resolve_capture_leaves_board_alone_on_failure(self) -> None:
        board = _board(user=[(3, 4)], opponent=[(2, 3)])
        before = board.to_layout()
        self.assertIsNone(resolve_capture(board, Player.USER, (3, 4), (1, 6)))
        self.assertEqual(board.to_layout(), before)

    def test_resolve_capture_mutates_in_place(self) -> None:
        board = _board(user=[(3, 4)], opponent=[(2, 3)])
        self.assertEqual(resolve_capture(board, Player.USER, (3, 4), (1, 2)), ((2, 3),))
        self.assertIs(board.board[1][2].player, Player.USER)
        self.assertIsNone(board.board[2][3].player)


if __name__ == "__main__":
    unittest.main()
