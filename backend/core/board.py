from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from .move import Position
from .pieces import Cell, Player, create_cell, player_from_code


BOARD_SIZE = 8
Layout = tuple[tuple[int, ...], ...]

# 0 empty, 1 user, 2 opponent
INITIAL_LAYOUT: Layout = (
    (0, 2, 0, 2, 0, 2, 0, 2),
    (2, 0, 2, 0, 2, 0, 2, 0),
    (0, 2, 0, 2, 0, 2, 0, 2),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (1, 0, 1, 0, 1, 0, 1, 0),
    (0, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 0),
)


def is_in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """8x8 grid of cells, row-major.

    Engine functions never modify a board they are given; they copy it and
    work on the copy.
    """

    def __init__(self, cells: Optional[list[list[Cell]]] = None) -> None:
        if cells is None:
            cells = [[create_cell() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}.")
        self.board: list[list[Cell]] = cells
        self.boardSize = BOARD_SIZE

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        return cls.from_layout(INITIAL_LAYOUT)

    @classmethod
    def from_layout(cls, layout: Sequence[Sequence[int]]) -> "Board":
        return cls(
            [[create_cell(player_from_code(code)) for code in row] for row in layout]
        )

    def to_layout(self) -> Layout:
        return tuple(
            tuple(cell.player.code if cell.player else 0 for cell in row)
            for row in self.board
        )

    def getCell(self, row: int, col: int) -> Optional[Cell]:
        if is_in_bounds(row, col):
            return self.board[row][col]
        return None

    def iter_cells(self) -> Iterator[tuple[Position, Cell]]:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield (row, col), self.board[row][col]

    def positions_of(self, player: Player) -> list[Position]:
        return [position for position, cell in self.iter_cells() if cell.player == player]

    def piece_count(self, player: Player) -> int:
        return len(self.positions_of(player))

    def highlighted_positions(self) -> list[Position]:
        return [position for position, cell in self.iter_cells() if cell.is_highlighted]

    def copy(self) -> "Board":
        return Board([[cell.getCopy() for cell in row] for row in self.board])

    def with_highlights(self, positions: Iterable[Position]) -> "Board":
        """Copy of the board with exactly ``positions`` highlighted."""
        result = self.clear_highlights()
        for row, col in positions:
            result.board[row][col].is_highlighted = True
        return result

    def clear_highlights(self) -> "Board":
        result = self.copy()
        for _, cell in result.iter_cells():
            cell.is_highlighted = False
        return result

    def __str__(self) -> str:
        symbols = {None: ".", Player.USER: "u", Player.OPPONENT: "o"}
        return "\n".join(
            "".join(symbols[cell.player] for cell in row) for row in self.board
        )


def create_initial_board() -> Board:
    return Board.initial()


def deep_copy(board: Board) -> Board:
    return board.copy()
