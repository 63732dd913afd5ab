from __future__ import annotations

import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from core.board import Board  # noqa: E402
from core.game import GameState, TurnEngine  # noqa: E402
from core.move import MoveReason  # noqa: E402
from core.pieces import Color, Piece  # noqa: E402
from ui.controller import BoardController, board_coords_from_pos  # noqa: E402


class PixelMappingTests(unittest.TestCase):
    def test_maps_pixels_to_row_and_column(self) -> None:
        layout = {"margin": 40, "square_size": 80, "board_size": 8}
        self.assertEqual(board_coords_from_pos((40, 40), **layout), (0, 0))
        self.assertEqual(board_coords_from_pos((40 + 3 * 80 + 5, 40 + 2 * 80 + 79), **layout), (2, 3))
        self.assertEqual(board_coords_from_pos((679, 679), **layout), (7, 7))

    def test_outside_board_is_none(self) -> None:
        layout = {"margin": 40, "square_size": 80, "board_size": 8}
        self.assertIsNone(board_coords_from_pos((39, 100), **layout))
        self.assertIsNone(board_coords_from_pos((680, 50), **layout))


class ClickFlowTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = TurnEngine()
        self.controller = BoardController(self.engine)
        self.controller.take_dirty()

    def tearDown(self) -> None:
        self.controller.close()

    def test_select_then_move(self) -> None:
        self.assertIsNone(self.controller.click((5, 0)))
        self.assertEqual(self.controller.selected, (5, 0))

        outcome = self.controller.click((4, 1))
        self.assertIsNotNone(outcome)
        self.assertTrue(outcome.ok)
        self.assertIsNone(self.controller.selected)
        self.assertEqual(self.controller.message, "")
        self.assertTrue({(5, 0), (4, 1)} <= self.controller.take_dirty())
        self.assertEqual(self.controller.take_dirty(), set())

    def test_clicking_selected_square_deselects(self) -> None:
        self.controller.click((5, 0))
        self.controller.click((5, 0))
        self.assertIsNone(self.controller.selected)

    def test_empty_square_does_not_select(self) -> None:
        self.controller.click((4, 1))
        self.assertIsNone(self.controller.selected)

    def test_rejected_move_keeps_selection_and_reports(self) -> None:
        self.controller.click((5, 0))
        outcome = self.controller.click((3, 2))
        self.assertEqual(outcome.reason, MoveReason.NON_KING_TOO_FAR)
        self.assertEqual(self.controller.selected, (5, 0))
        self.assertEqual(self.controller.message, "Non-king pieces can't move that far!")

    def test_end_turn_and_reset(self) -> None:
        self.controller.click((5, 0))
        self.controller.end_turn()
        self.assertIsNone(self.controller.selected)
        self.assertIs(self.engine.current_player, Color.DARK)

        self.controller.reset()
        self.assertIs(self.engine.current_player, Color.LIGHT)
        self.assertEqual(len(self.controller.take_dirty()), 64)


class GameOverRuleTests(unittest.TestCase):
    def test_capturing_last_piece_ends_game(self) -> None:
        board = Board.empty(8)
        board.place((2, 1), Piece(Color.DARK))
        board.place((3, 2), Piece(Color.LIGHT))
        engine = TurnEngine(GameState(board=board, current_player=Color.DARK))
        controller = BoardController(engine)

        controller.click((2, 1))
        controller.click((4, 3))

        self.assertTrue(engine.is_game_over)
        self.assertIs(engine.state.winner, Color.DARK)

        controller.end_turn()
        self.assertEqual(controller.message, "The game is over.")
        self.assertIs(engine.current_player, Color.LIGHT)


if __name__ == "__main__":
    unittest.main()
