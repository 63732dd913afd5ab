from __future__ import annotations

import argparse
import logging

import pygame

from core.game import TurnEngine, new_game
from ui.pygame_gui import CheckersGUI


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers on a pygame board.")
	parser.add_argument("--board-size", type=int, default=8, help="Number of squares per side.")
	parser.add_argument("--square-size", type=int, default=80, help="Square size in pixels.")
	parser.add_argument("--log-level", default="warning", help="Python logging level.")
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	pygame.init()
	try:
		engine = TurnEngine(new_game(args.board_size))
		gui = CheckersGUI(engine, square_size=args.square_size)
		gui.run()
	finally:
		pygame.quit()


if __name__ == "__main__":
	main()
