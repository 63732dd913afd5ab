from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opponent(self) -> "Color":
        return Color.DARK if self is Color.LIGHT else Color.LIGHT

    @property
    def forward(self) -> int:
        """Row step a man of this color is allowed to take."""
        return -1 if self is Color.LIGHT else 1

    def promotion_row(self, board_size: int) -> int:
        return 0 if self is Color.LIGHT else board_size - 1

    @classmethod
    def from_label(cls, label: str) -> "Color":
        try:
            return cls[label.upper()]
        except KeyError as exc:
            raise ValueError(f"Unsupported color '{label}'.") from exc


class Piece:
    __slots__ = ("color", "is_king")

    def __init__(self, color: Color, *, is_king: bool = False) -> None:
        self.color = color
        self.is_king = is_king

    def promote(self) -> bool:
        """Crown the piece. Returns False if it already was a king."""
        if self.is_king:
            return False
        self.is_king = True
        return True

    def view(self) -> "PieceView":
        return PieceView(color=self.color, is_king=self.is_king)

    def getCopy(self) -> "Piece":
        return Piece(self.color, is_king=self.is_king)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.color.name})"


@dataclass(frozen=True, slots=True)
class PieceView:
    color: Color
    is_king: bool

    @property
    def label(self) -> str:
        prefix = "L" if self.color is Color.LIGHT else "D"
        return f"{prefix}K" if self.is_king else prefix
