from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .board import STANDARD_SIZE, Board
from .move import Coordinate, MoveOutcome, MoveReason
from .pieces import Color, PieceView
from .rules import piece_can_capture, validate

logger = logging.getLogger(__name__)

MoveListener = Callable[[MoveOutcome], None]
SquareVisitor = Callable[[int, int], None]

FIRST_PLAYER = Color.LIGHT


@dataclass
class GameState:
    board: Board
    current_player: Color = FIRST_PLAYER
    is_game_over: bool = False
    winner: Optional[Color] = None


def new_game(board_size: int = STANDARD_SIZE) -> GameState:
    return GameState(board=Board(board_size))


class TurnEngine:
    """Applies validated moves to a game and decides who moves next.

    A player who captures keeps the turn while the moved piece has another
    legal follow-up from its new square; every other accepted move passes
    the turn. Rejected moves leave the state untouched.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self.state = state if state is not None else new_game()
        self.listeners: list[MoveListener] = []

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current_player(self) -> Color:
        return self.state.current_player

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    # public API ---------------------------------------------------------

    def submit_move(self, start: Coordinate, end: Coordinate) -> MoveOutcome:
        player = self.state.current_player

        if self.state.is_game_over:
            return self._reject(start, end, MoveReason.GAME_OVER)

        moving = self.board.piece_at(start)
        if moving is not None and moving.color != player:
            return self._reject(start, end, MoveReason.NOT_YOUR_TURN, color=player)

        check = validate(self.board, player, start, end)
        if not check.ok:
            return self._reject(start, end, check.reason, color=check.color)

        self.board.movePiece(start, end)
        for square in check.captures:
            removed = self.board.remove(square)
            logger.debug("%s captured %r on %s", player.value, removed, square)

        piece = self.board.piece_at(end)
        if piece is None:
            raise RuntimeError("Moved piece is missing from the board.")

        promoted = False
        if end[0] == piece.color.promotion_row(self.board.boardSize):
            promoted = piece.promote()
            if promoted:
                logger.debug("%s piece crowned on %s", piece.color.value, end)

        turn_retained = piece_can_capture(self.board, end)
        if not turn_retained:
            self.state.current_player = player.opponent

        outcome = MoveOutcome(
            start=start,
            end=end,
            current_player=self.state.current_player,
            captured=check.captures,
            promoted=promoted,
            turn_retained=turn_retained,
        )
        logger.debug("%s played %s; %s to move", player.value, outcome, self.state.current_player.value)
        self._emit(outcome)
        return outcome

    def end_turn(self) -> Optional[MoveReason]:
        """Pass the turn without moving, e.g. to decline a further jump."""
        if self.state.is_game_over:
            logger.info("Rejected end of turn: the game is over")
            return MoveReason.GAME_OVER
        player = self.state.current_player
        self.state.current_player = player.opponent
        logger.debug("%s ended the turn", player.value)
        return None

    def declare_game_over(self, winner: Optional[Color] = None) -> None:
        self.state.is_game_over = True
        self.state.winner = winner
        logger.info("Game over, winner: %s", winner.value if winner else "none")

    def reset(self, board_size: Optional[int] = None) -> None:
        size = board_size if board_size is not None else self.board.boardSize
        self.state = new_game(size)
        logger.debug("New %dx%d game", size, size)

    def traverse(self, action: SquareVisitor) -> None:
        for row, col in self.board.squares():
            action(row, col)

    def piece_at(self, square: Coordinate) -> Optional[PieceView]:
        piece = self.board.piece_at(square)
        return piece.view() if piece is not None else None

    def subscribe(self, listener: MoveListener) -> Callable[[], None]:
        self.listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return _unsubscribe

    # helpers ------------------------------------------------------------

    def _reject(
        self,
        start: Coordinate,
        end: Coordinate,
        reason: MoveReason,
        *,
        color: Optional[Color] = None,
    ) -> MoveOutcome:
        outcome = MoveOutcome(
            start=start,
            end=end,
            current_player=self.state.current_player,
            reason=reason,
            color=color,
        )
        logger.info("Rejected %s", outcome)
        return outcome

    def _emit(self, outcome: MoveOutcome) -> None:
        for listener in list(self.listeners):
            listener(outcome)


def submit_move(state: GameState, start: Coordinate, end: Coordinate) -> MoveOutcome:
    """Play one move on ``state`` in place and report what happened."""
    return TurnEngine(state).submit_move(start, end)
