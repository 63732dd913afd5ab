from __future__ import annotations

from typing import Iterator, Optional

from .move import Coordinate
from .pieces import Color, Piece

STANDARD_SIZE = 8
_MIN_SIZE = 3


class Board:
    """Square grid of optional pieces stored as a flat arena.

    Cell ``(row, col)`` lives at index ``row * boardSize + col``. Moving a
    piece swaps two arena slots, so a piece is referenced from exactly one
    cell at any time. The board applies no rules; callers validate first.
    """

    def __init__(self, boardSize: int = STANDARD_SIZE) -> None:
        if boardSize < _MIN_SIZE:
            raise ValueError(f"Board size must be at least {_MIN_SIZE}, got {boardSize}.")
        self.boardSize = boardSize
        self._cells: list[Optional[Piece]] = [None] * (boardSize * boardSize)
        self._set_start_pieces()

    @classmethod
    def empty(cls, boardSize: int = STANDARD_SIZE) -> "Board":
        board = cls.__new__(cls)
        if boardSize < _MIN_SIZE:
            raise ValueError(f"Board size must be at least {_MIN_SIZE}, got {boardSize}.")
        board.boardSize = boardSize
        board._cells = [None] * (boardSize * boardSize)
        return board

    # access -------------------------------------------------------------

    def piece_at(self, square: Coordinate) -> Optional[Piece]:
        if not self.in_bounds(square):
            return None
        return self._cells[self._index(square)]

    def getPiece(self, row: int, col: int) -> Optional[Piece]:
        return self.piece_at((row, col))

    def in_bounds(self, square: Coordinate) -> bool:
        return self._is_within_bounds(*square)

    def squares(self) -> Iterator[Coordinate]:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                yield (row, col)

    def pieces(self, color: Optional[Color] = None) -> Iterator[tuple[Coordinate, Piece]]:
        for square in self.squares():
            piece = self._cells[self._index(square)]
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield square, piece

    def getAllPieces(self) -> list[Piece]:
        return [piece for _, piece in self.pieces()]

    def count(self, color: Color) -> int:
        return sum(1 for _ in self.pieces(color))

    # mutation -----------------------------------------------------------

    def place(self, square: Coordinate, piece: Piece) -> None:
        self._cells[self._index(square)] = piece

    def remove(self, square: Coordinate) -> Optional[Piece]:
        index = self._index(square)
        piece = self._cells[index]
        self._cells[index] = None
        return piece

    def movePiece(self, start: Coordinate, end: Coordinate) -> None:
        src, dst = self._index(start), self._index(end)
        self._cells[src], self._cells[dst] = self._cells[dst], self._cells[src]

    def copy(self) -> "Board":
        new_board = Board.empty(self.boardSize)
        new_board._cells = [piece.getCopy() if piece else None for piece in self._cells]
        return new_board

    # helpers ------------------------------------------------------------

    def _index(self, square: Coordinate) -> int:
        row, col = square
        if not self._is_within_bounds(row, col):
            raise IndexError(f"Square {square} is outside a {self.boardSize}x{self.boardSize} board.")
        return row * self.boardSize + col

    def _is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    def _set_start_pieces(self) -> None:
        rows_to_fill = 3 if self.boardSize >= 8 else (self.boardSize - 2) // 2

        for row, col in self.squares():
            if (row + col) % 2 == 1:
                if row < rows_to_fill:
                    self.place((row, col), Piece(Color.DARK))
                elif row >= self.boardSize - rows_to_fill:
                    self.place((row, col), Piece(Color.LIGHT))

    def __repr__(self) -> str:
        lines = []
        for row in range(self.boardSize):
            cells = []
            for col in range(self.boardSize):
                piece = self._cells[row * self.boardSize + col]
                cells.append(piece.view().label.ljust(2) if piece else ". ")
            lines.append(" ".join(cells))
        return "\n".join(lines)
