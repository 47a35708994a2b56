from __future__ import annotations

import logging
from copy import deepcopy
from threading import Lock
from typing import Any

from ai.agents import create_arbitrary_controller
from core.game import Game
from core.pieces import Player
from core.player import PlayerController
from core.rules import compute_reachable

from .schemas import AIMoveRequest, ConfigRequest, MoveRequest
from .serializers import serialize_board, serialize_destinations, serialize_game

logger = logging.getLogger(__name__)


def _default_player_settings(player: Player) -> dict[str, Any]:
    return {"type": "human" if player is Player.USER else "arbitrary"}


def _player_from_label(label: str) -> Player:
    try:
        return Player(label)
    except ValueError as exc:
        raise ValueError(f"Unsupported player '{label}'.") from exc


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self) -> None:
        self.lock = Lock()
        self.game = Game()
        self.player_settings: dict[Player, dict[str, Any]] = {
            Player.USER: _default_player_settings(Player.USER),
            Player.OPPONENT: _default_player_settings(Player.OPPONENT),
        }
        self._apply_player_controllers()

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.game.reset()
            self._apply_player_controllers()
            return self._serialize_locked()

    def configure_players(self, payload: ConfigRequest) -> dict[str, Any]:
        with self.lock:
            config = payload.model_dump(exclude_unset=True)
            if not config:
                return self._serialize_locked()

            for label, overrides in config.items():
                if overrides is None:
                    continue
                player = _player_from_label(label)
                merged = deepcopy(self.player_settings[player])
                for key, value in overrides.items():
                    if value is not None:
                        merged[key] = value
                controller = self._controller_from_settings(player, merged)
                self.player_settings[player] = merged
                self.game.setPlayer(player, controller)
                logger.info("%s is now played by %s.", player.value, controller.name)

            return self._serialize_locked()

    def get_valid_moves(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            cell = self.game.board.getCell(row, col)
            if cell is not None and cell.player is not None and cell.player != self.game.current_player:
                raise ValueError("It is not this piece's turn.")
            destinations = self.game.getValidMoves((row, col))
            return {
                "piece": {"row": row, "col": col},
                "moves": serialize_destinations(destinations),
                "cells": serialize_board(compute_reachable(self.game.board, (row, col))),
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            if self.game.winner is not None:
                raise RuntimeError("The game is already over.")
            start = payload.start.as_position()
            end = payload.end.as_position()
            cell = self.game.board.getCell(*start)
            if cell is not None and cell.player is not None and cell.player != self.game.current_player:
                raise ValueError("Selected piece cannot move now.")
            if not self.game.makeMove(start, end):
                raise ValueError("Requested move is invalid for this piece.")
            return self._serialize_locked()

    def run_ai_move(self, payload: AIMoveRequest) -> dict[str, Any]:
        with self.lock:
            player = self.game.current_player if payload.player is None else _player_from_label(payload.player)
            if player != self.game.current_player:
                raise ValueError("AI move requested for a player that is not on turn.")
            if self.game.winner is not None:
                raise RuntimeError("The game is already over.")
            if not self.game.isAITurn():
                raise RuntimeError("The player on turn is not controlled by the computer.")
            if not self.game.requestAIMove():
                raise RuntimeError("AI controller could not choose a move.")
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game, self.player_settings)

    def _apply_player_controllers(self) -> None:
        for player in (Player.USER, Player.OPPONENT):
            controller = self._controller_from_settings(player, self.player_settings[player])
            self.game.setPlayer(player, controller)

    def _controller_from_settings(self, player: Player, settings: dict[str, Any]) -> PlayerController:
        label = "User" if player is Player.USER else "Computer"
        player_type = settings.get("type", "human")
        if player_type == "human":
            return PlayerController.human(f"{label} Human")
        if player_type == "arbitrary":
            return create_arbitrary_controller(label)
        raise ValueError(f"Player type '{player_type}' not implemented yet.")
