from __future__ import annotations

import logging

import pygame
from pygame import gfxdraw

from core.board import Board
from core.game import Game
from core.move import Position
from core.pieces import Player
from core.rules import can_capture, compute_reachable

logger = logging.getLogger(__name__)

AI_MOVE_EVENT = pygame.USEREVENT + 1


class CheckersGUI:
    """Board window: hover a piece to see its moves, drag it to play."""

    def __init__(
        self,
        game: Game,
        square_size: int = 80,
        info_height: int = 120,
        ai_delay_ms: int = 1000,
    ) -> None:
        self.game = game
        self.square_size = square_size
        self.board_size = self.game.board.boardSize
        self.board_pixels = self.square_size * self.board_size
        self.info_height = info_height
        self.ai_delay_ms = ai_delay_ms

        self.margin = 30
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 22)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 30, bold=True)
        self.clock = pygame.time.Clock()

        # board shown on screen; carries highlight flags while hovering
        self.display_board: Board = self.game.board
        self.hover_cell: Position | None = None
        self.drag_origin: Position | None = None
        self.drag_pos: tuple[int, int] | None = None
        self.ai_pending = False

        self.colors = {
            "light": (255, 228, 196),
            "dark": (186, 122, 58),
            "highlight": (135, 206, 250),
            "user_piece": (255, 0, 0),
            "opponent_piece": (0, 0, 0),
            "piece_border": (255, 255, 255),
            "background": (30, 34, 45),
            "text": (230, 230, 230),
            "banner_bg": (20, 20, 20),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self._reset()
                elif event.type == pygame.MOUSEMOTION:
                    self._handle_motion(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_drag_start(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self._handle_drop(event.pos)
                elif event.type == AI_MOVE_EVENT:
                    self._play_ai_move()

            self._draw()
            pygame.display.flip()
            self.clock.tick(60)

    # input --------------------------------------------------------------

    def _user_can_act(self) -> bool:
        return (
            self.game.winner is None
            and not self.ai_pending
            and self.game.current_player is Player.USER
            and not self.game.isAITurn()
        )

    def _handle_motion(self, pos: tuple[int, int]) -> None:
        if self.drag_origin is not None:
            self.drag_pos = pos
            return
        cell = self._board_coords_from_pos(pos)
        if cell == self.hover_cell:
            return
        self.hover_cell = cell
        if cell is not None and self._user_can_act() and self._owner(cell) is Player.USER:
            self.display_board = compute_reachable(self.game.board, cell)
        else:
            self.display_board = self.game.board

    def _handle_drag_start(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None or not self._user_can_act() or self._owner(cell) is not Player.USER:
            return
        self.drag_origin = cell
        self.drag_pos = pos

    def _handle_drop(self, pos: tuple[int, int]) -> None:
        origin = self.drag_origin
        self.drag_origin = None
        self.drag_pos = None
        cell = self._board_coords_from_pos(pos)
        if origin is None or cell is None:
            return
        if self.game.makeMove(origin, cell):
            self.display_board = self.game.board
            self.hover_cell = None
            if self.game.winner is None and self.game.isAITurn():
                self.ai_pending = True
                if self.ai_delay_ms > 0:
                    pygame.time.set_timer(AI_MOVE_EVENT, self.ai_delay_ms, loops=1)
                else:
                    pygame.event.post(pygame.event.Event(AI_MOVE_EVENT))

    def _play_ai_move(self) -> None:
        if not self.ai_pending:
            return
        self.ai_pending = False
        if not self.game.requestAIMove():
            logger.warning("Computer could not move.")
        self.display_board = self.game.board

    def _reset(self) -> None:
        pygame.time.set_timer(AI_MOVE_EVENT, 0)
        self.ai_pending = False
        self.game.reset()
        self.display_board = self.game.board
        self.hover_cell = None
        self.drag_origin = None

    def _owner(self, cell: Position) -> Player | None:
        target = self.game.board.getCell(*cell)
        return target.player if target is not None else None

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Position | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return (y // self.square_size, x // self.square_size)

    # drawing ------------------------------------------------------------

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_pieces()
        self._draw_info_panel()
        if self.game.winner is not None:
            self._draw_game_over()

    def _draw_board(self) -> None:
        for (row, col), cell in self.display_board.iter_cells():
            if cell.is_highlighted:
                color = self.colors["highlight"]
            else:
                color = self.colors["light"] if (row + col) % 2 == 0 else self.colors["dark"]
            rect = pygame.Rect(
                self.margin + col * self.square_size,
                self.margin + row * self.square_size,
                self.square_size,
                self.square_size,
            )
            pygame.draw.rect(self.screen, color, rect)

    def _draw_pieces(self) -> None:
        for (row, col), cell in self.game.board.iter_cells():
            if cell.player is None:
                continue
            if (row, col) == self.drag_origin and self.drag_pos is not None:
                center = self.drag_pos
            else:
                center = self._center_for_cell(row, col)
            self._draw_checker(center, cell.player)

    def _draw_checker(self, center: tuple[int, int], player: Player) -> None:
        radius = int(self.square_size * 0.45) - 10
        fill = self.colors["user_piece"] if player is Player.USER else self.colors["opponent_piece"]
        gfxdraw.filled_circle(self.screen, center[0], center[1], radius, self.colors["piece_border"])
        gfxdraw.filled_circle(self.screen, center[0], center[1], radius - 4, fill)
        gfxdraw.aacircle(self.screen, center[0], center[1], radius, self.colors["piece_border"])

    def _draw_info_panel(self) -> None:
        top = self.margin * 2 + self.board_pixels - 10
        board = self.game.board
        if self.ai_pending or self.game.isAITurn():
            turn_label = "Computer is thinking..."
        else:
            turn_label = "Your move"
        lines = [
            turn_label,
            f"Your pieces: {board.piece_count(Player.USER)}   "
            f"Computer pieces: {board.piece_count(Player.OPPONENT)}",
            f"Mandatory capture: {'Yes' if can_capture(board, self.game.current_player) else 'No'}",
            "R: Reset  |  Esc/Q: Quit",
        ]
        y_offset = top
        for idx, line in enumerate(lines):
            font = self.font if idx == 0 else self.small_font
            text_surface = font.render(line, True, self.colors["text"])
            self.screen.blit(text_surface, (self.margin, y_offset))
            y_offset += 28 if idx == 0 else 22

    def _draw_game_over(self) -> None:
        message = "You have won!" if self.game.winner is Player.USER else "The Computer has won!"
        text = self.title_font.render(f"Game Over! {message}", True, self.colors["text"])
        rect = text.get_rect(center=(self.window_width // 2, self.margin + self.board_pixels // 2))
        banner = pygame.Surface(rect.inflate(40, 30).size, pygame.SRCALPHA)
        banner.fill((*self.colors["banner_bg"], 200))
        self.screen.blit(banner, rect.inflate(40, 30).topleft)
        self.screen.blit(text, rect)

    def _center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )
