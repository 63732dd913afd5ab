from __future__ import annotations

import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from core.board import Board  # noqa: E402
from core.pieces import Color, Piece  # noqa: E402


class StartingLayoutTests(unittest.TestCase):
    def test_twelve_pieces_per_color_on_dark_squares(self) -> None:
        board = Board()
        self.assertEqual(board.count(Color.LIGHT), 12)
        self.assertEqual(board.count(Color.DARK), 12)

        for (row, col), piece in board.pieces():
            self.assertEqual((row + col) % 2, 1, (row, col))
            self.assertFalse(piece.is_king)
            if piece.color == Color.DARK:
                self.assertIn(row, (0, 1, 2))
            else:
                self.assertIn(row, (5, 6, 7))

    def test_middle_rows_start_empty(self) -> None:
        board = Board()
        for col in range(8):
            self.assertIsNone(board.piece_at((3, col)))
            self.assertIsNone(board.piece_at((4, col)))

    def test_too_small_board_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Board(2)
        with self.assertRaises(ValueError):
            Board.empty(0)


class BoardPrimitiveTests(unittest.TestCase):
    def test_piece_at_outside_board_is_none(self) -> None:
        board = Board()
        self.assertIsNone(board.piece_at((-1, 0)))
        self.assertIsNone(board.piece_at((8, 1)))
        self.assertIsNone(board.getPiece(0, 8))

    def test_move_piece_clears_start(self) -> None:
        board = Board.empty(8)
        piece = Piece(Color.LIGHT)
        board.place((5, 2), piece)

        board.movePiece((5, 2), (4, 3))

        self.assertIsNone(board.piece_at((5, 2)))
        self.assertIs(board.piece_at((4, 3)), piece)
        self.assertEqual(len(board.getAllPieces()), 1)

    def test_remove_returns_the_piece(self) -> None:
        board = Board.empty(8)
        piece = Piece(Color.DARK)
        board.place((2, 1), piece)

        self.assertIs(board.remove((2, 1)), piece)
        self.assertIsNone(board.piece_at((2, 1)))
        self.assertIsNone(board.remove((2, 1)))

    def test_place_outside_board_raises(self) -> None:
        board = Board.empty(8)
        with self.assertRaises(IndexError):
            board.place((8, 8), Piece(Color.DARK))

    def test_squares_are_row_major(self) -> None:
        board = Board.empty(3)
        self.assertEqual(
            list(board.squares()),
            [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
        )

    def test_copy_does_not_share_pieces(self) -> None:
        board = Board()
        clone = board.copy()

        clone.piece_at((5, 0)).promote()
        clone.remove((0, 1))

        self.assertFalse(board.piece_at((5, 0)).is_king)
        self.assertIsNotNone(board.piece_at((0, 1)))
        self.assertEqual(clone.count(Color.DARK), 11)


class PieceTests(unittest.TestCase):
    def test_promotion_is_one_way(self) -> None:
        piece = Piece(Color.LIGHT)
        self.assertTrue(piece.promote())
        self.assertTrue(piece.is_king)
        self.assertFalse(piece.promote())
        self.assertTrue(piece.is_king)

    def test_color_helpers(self) -> None:
        self.assertIs(Color.LIGHT.opponent, Color.DARK)
        self.assertIs(Color.DARK.opponent, Color.LIGHT)
        self.assertEqual(Color.LIGHT.promotion_row(8), 0)
        self.assertEqual(Color.DARK.promotion_row(8), 7)
        self.assertIs(Color.from_label("Dark"), Color.DARK)
        with self.assertRaises(ValueError):
            Color.from_label("red")


if __name__ == "__main__":
    unittest.main()
