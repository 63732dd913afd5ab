from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .pieces import Color

Coordinate = tuple[int, int]
CapturePath = tuple[Coordinate, ...]


class MoveReason(str, Enum):
    GAME_OVER = "game_over"
    NOT_YOUR_TURN = "not_your_turn"
    OFF_BOARD = "off_board"
    NO_PIECE_AT_START = "no_piece_at_start"
    NOT_DIAGONAL = "not_diagonal"
    WRONG_DIRECTION = "wrong_direction"
    DESTINATION_OCCUPIED = "destination_occupied"
    CANT_JUMP_MULTIPLE = "cant_jump_multiple"
    NON_KING_TOO_FAR = "non_king_too_far"
    ADJACENT_JUMP_ONLY = "adjacent_jump_only"
    ONE_SQUARE_BEHIND_ONLY = "one_square_behind_only"


_MESSAGES = {
    MoveReason.GAME_OVER: "The game is over.",
    MoveReason.NOT_YOUR_TURN: "It's {color}'s turn.",
    MoveReason.OFF_BOARD: "Move must stay on the board.",
    MoveReason.NO_PIECE_AT_START: "No piece at the starting position.",
    MoveReason.NOT_DIAGONAL: "Move must be diagonal.",
    MoveReason.WRONG_DIRECTION: "Regular {color} pieces can only move {direction} the board.",
    MoveReason.DESTINATION_OCCUPIED: "End position must be empty.",
    MoveReason.CANT_JUMP_MULTIPLE: "Can't jump over more than 1 piece.",
    MoveReason.NON_KING_TOO_FAR: "Non-king pieces can't move that far!",
    MoveReason.ADJACENT_JUMP_ONLY: "Non-king pieces must jump exactly 1 square over an opponent.",
    MoveReason.ONE_SQUARE_BEHIND_ONLY: "You can only capture a piece by jumping 1 square behind it.",
}

_COLORLESS_MESSAGES = {
    MoveReason.NOT_YOUR_TURN: "It's not your turn.",
    MoveReason.WRONG_DIRECTION: "Regular pieces can only move forward.",
}


def describe(reason: MoveReason, color: Optional[Color] = None) -> str:
    if color is None:
        return _COLORLESS_MESSAGES.get(reason, _MESSAGES[reason])
    direction = "up" if color is Color.LIGHT else "down"
    return _MESSAGES[reason].format(color=color.value, direction=direction)


@dataclass(frozen=True, slots=True)
class MoveCheck:
    """Validator verdict: either a capture path or the first broken rule."""

    reason: Optional[MoveReason] = None
    captures: CapturePath = ()
    color: Optional[Color] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def is_capture(self) -> bool:
        return self.ok and bool(self.captures)

    @property
    def message(self) -> str:
        return describe(self.reason, self.color) if self.reason is not None else ""


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    start: Coordinate
    end: Coordinate
    current_player: Color
    reason: Optional[MoveReason] = None
    color: Optional[Color] = None
    captured: CapturePath = ()
    promoted: bool = False
    turn_retained: bool = False

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str:
        return describe(self.reason, self.color) if self.reason is not None else ""

    @property
    def touched(self) -> tuple[Coordinate, ...]:
        """Squares a renderer has to redraw after this outcome."""
        if not self.ok:
            return ()
        return (self.start, self.end, *self.captured)

    def __str__(self) -> str:
        if not self.ok:
            return f"{self.start} -> {self.end}: {self.message}"
        connector = " x " if self.captured else " - "
        return connector.join(f"{row},{col}" for row, col in (self.start, self.end))
