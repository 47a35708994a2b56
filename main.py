from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

BACKEND_DIR = Path(__file__).resolve().parent / "backend"
if str(BACKEND_DIR) not in sys.path:
	sys.path.insert(0, str(BACKEND_DIR))

from ai.agents import create_arbitrary_controller  # noqa: E402
from core.game import Game  # noqa: E402
from core.pieces import Player  # noqa: E402
from ui.pygame_gui import CheckersGUI  # noqa: E402


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers against the computer.")
	parser.add_argument("--ai-delay", type=int, default=1000, help="Milliseconds before the computer replies.")
	parser.add_argument("--square-size", type=int, default=80, help="Square size in pixels.")
	parser.add_argument("--log-level", default="info", help="Python logging level.")
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
	pygame.init()
	try:
		game = Game()
		game.setPlayer(Player.OPPONENT, create_arbitrary_controller("Computer"))
		gui = CheckersGUI(game, square_size=args.square_size, ai_delay_ms=max(0, args.ai_delay))
		gui.run()
	finally:
		pygame.quit()


if __name__ == "__main__":
	main()
