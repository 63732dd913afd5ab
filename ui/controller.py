from __future__ import annotations

import logging
from typing import Optional

from core.game import TurnEngine
from core.move import Coordinate, MoveOutcome, describe

logger = logging.getLogger(__name__)


def board_coords_from_pos(
    pos: tuple[int, int],
    *,
    margin: int,
    square_size: int,
    board_size: int,
) -> Optional[Coordinate]:
    x, y = pos
    x -= margin
    y -= margin
    board_pixels = square_size * board_size
    if x < 0 or y < 0 or x >= board_pixels or y >= board_pixels:
        return None
    return (y // square_size, x // square_size)


class BoardController:
    """Turns board clicks into engine calls and tracks what to redraw.

    The first click on a piece selects it, a click on another square tries
    the move, and clicking the selected square again drops the selection.
    A side left without pieces loses; that is decided here, not in the
    engine.
    """

    def __init__(self, engine: TurnEngine) -> None:
        self.engine = engine
        self.selected: Optional[Coordinate] = None
        self.message = ""
        self.dirty: set[Coordinate] = set(engine.board.squares())
        self._unsubscribe = engine.subscribe(self._on_move)

    def click(self, cell: Coordinate) -> Optional[MoveOutcome]:
        if self.selected is not None:
            if cell == self.selected:
                self._deselect()
                return None
            outcome = self.engine.submit_move(self.selected, cell)
            self.message = outcome.message
            if outcome.ok:
                self._deselect()
            return outcome

        if self.engine.piece_at(cell) is not None:
            self.selected = cell
            self.dirty.add(cell)
            self.message = ""
        return None

    def end_turn(self) -> None:
        reason = self.engine.end_turn()
        self._deselect()
        self.message = "" if reason is None else describe(reason)

    def reset(self) -> None:
        self.engine.reset()
        self.selected = None
        self.message = ""
        self.dirty = set(self.engine.board.squares())

    def take_dirty(self) -> set[Coordinate]:
        squares, self.dirty = self.dirty, set()
        return squares

    def close(self) -> None:
        self._unsubscribe()

    def _deselect(self) -> None:
        if self.selected is not None:
            self.dirty.add(self.selected)
        self.selected = None

    def _on_move(self, outcome: MoveOutcome) -> None:
        self.dirty.update(outcome.touched)
        mover = outcome.current_player if outcome.turn_retained else outcome.current_player.opponent
        if self.engine.board.count(mover.opponent) == 0:
            logger.info("%s has no pieces left", mover.opponent.value)
            self.engine.declare_game_over(winner=mover)
