from __future__ import annotations

import logging
from typing import Optional

from .board import Board, create_initial_board
from .move import Move, MoveResult, Position
from .pieces import Player, opponent
from .player import PlayerController
from .rules import apply_move, is_game_over, reachable_destinations

logger = logging.getLogger(__name__)


class Game:
    """Owns the board of one match and whose turn it is."""

    def __init__(self) -> None:
        self.board: Board = create_initial_board()
        self.current_player = Player.USER
        self.winner: Optional[Player] = None
        self.last_result: Optional[MoveResult] = None
        self.last_move: Optional[Move] = None
        self.players: dict[Player, PlayerController] = {
            Player.USER: PlayerController.human("User"),
            Player.OPPONENT: PlayerController.human("Opponent"),
        }

    def reset(self) -> None:
        self.board = create_initial_board()
        self.current_player = Player.USER
        self.winner = None
        self.last_result = None
        self.last_move = None
        logger.info("Game reset.")

    def switchTurn(self) -> None:
        self.current_player = opponent(self.current_player)

    def getValidMoves(self, position: Position) -> frozenset[Position]:
        return reachable_destinations(self.board, position)

    def setPlayer(self, player: Player, controller: PlayerController) -> None:
        self.players[player] = controller

    def getPlayer(self, player: Player) -> PlayerController:
        return self.players[player]

    def currentController(self) -> PlayerController:
        return self.getPlayer(self.current_player)

    def isAITurn(self) -> bool:
        return not self.currentController().is_human

    def requestAIMove(self) -> bool:
        controller = self.currentController()
        if controller.is_human or self.winner is not None:
            return False
        move = controller.select_move(self.board, self.current_player)
        if move is None:
            logger.warning("%s cannot find a move.", controller.name)
            return False
        return self.makeMove(move.start, move.end)

    def makeMove(self, start: Position, end: Position) -> bool:
        if self.winner is not None:
            logger.debug("Move %s -> %s ignored, game is over.", start, end)
            return False
        cell = self.board.getCell(*start)
        if cell is None or cell.player != self.current_player:
            logger.debug("Invalid piece selection at %s.", start)
            return False

        result = apply_move(self.board, start, end)
        if not result.successful:
            logger.debug("Invalid move selection %s -> %s.", start, end)
            return False

        mover = self.current_player
        self.board = result.board
        self.last_result = result
        self.last_move = Move(start=start, end=end)
        self.switchTurn()
        logger.info(
            "%s moved %s -> %s%s",
            mover.value,
            start,
            end,
            f" capturing {list(result.captures)}" if result.captures else "",
        )
        self.isGameOver()
        if self.winner is not None:
            logger.info("Game over! Winner: %s", self.winner.value)
        return True

    def isGameOver(self) -> bool:
        if is_game_over(self.board, self.current_player):
            self.winner = opponent(self.current_player)
            return True
        self.winner = None
        return False

    def getWinner(self) -> Optional[Player]:
        return self.winner
