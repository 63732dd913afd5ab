from __future__ import annotations

from typing import Optional

from .board import Board
from .move import CapturePath, Coordinate, MoveCheck, MoveReason
from .pieces import Color, Piece

DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _sign(value: int) -> int:
    return 1 if value > 0 else -1


def validate(board: Board, player: Optional[Color], start: Coordinate, end: Coordinate) -> MoveCheck:
    """Decide whether moving the piece on ``start`` to ``end`` is legal.

    Checks run in a fixed order and the first broken rule is reported. On
    success the result carries every occupied square strictly between the
    endpoints, which is either empty or a single square.

    Occupants of the path are not checked for color: a piece of the mover's
    own color lying in the jump line is treated like any other.
    """
    if not board.in_bounds(start) or not board.in_bounds(end):
        return MoveCheck(MoveReason.OFF_BOARD)

    piece = board.piece_at(start)
    if piece is None:
        return MoveCheck(MoveReason.NO_PIECE_AT_START)

    if player is not None and piece.color != player:
        return MoveCheck(MoveReason.NOT_YOUR_TURN, color=player)

    row_diff = end[0] - start[0]
    col_diff = end[1] - start[1]

    if abs(row_diff) != abs(col_diff) or row_diff == 0:
        return MoveCheck(MoveReason.NOT_DIAGONAL)

    if not piece.is_king and _sign(row_diff) != piece.color.forward:
        return MoveCheck(MoveReason.WRONG_DIRECTION, color=piece.color)

    if board.piece_at(end) is not None:
        return MoveCheck(MoveReason.DESTINATION_OCCUPIED)

    path = scan_path(board, start, end)
    reason = _path_and_distance_reason(piece, start, abs(row_diff), path)
    if reason is not None:
        return MoveCheck(reason)
    return MoveCheck(captures=path)


def scan_path(board: Board, start: Coordinate, end: Coordinate) -> CapturePath:
    """Occupied squares strictly between two points on one diagonal."""
    distance = abs(end[0] - start[0])
    step_row = _sign(end[0] - start[0])
    step_col = _sign(end[1] - start[1])

    occupied: list[Coordinate] = []
    for i in range(1, distance):
        square = (start[0] + i * step_row, start[1] + i * step_col)
        if board.piece_at(square) is not None:
            occupied.append(square)
    return tuple(occupied)


def _path_and_distance_reason(
    piece: Piece,
    start: Coordinate,
    distance: int,
    path: CapturePath,
) -> Optional[MoveReason]:
    if len(path) > 1:
        return MoveReason.CANT_JUMP_MULTIPLE

    if not path:
        if distance > 1 and not piece.is_king:
            return MoveReason.NON_KING_TOO_FAR
        return None

    jumped_row = path[0][0]
    distance_to_jumped = abs(start[0] - jumped_row)
    if distance_to_jumped != 1 and not piece.is_king:
        return MoveReason.ADJACENT_JUMP_ONLY
    if distance - distance_to_jumped != 1:
        return MoveReason.ONE_SQUARE_BEHIND_ONLY
    return None


def piece_can_capture(board: Board, square: Coordinate, *, captures_only: bool = False) -> bool:
    """Whether the piece on ``square`` has a follow-up after its move.

    Men probe the four two-square jumps. Kings probe every square along the
    four diagonals, and by default any legal king move counts, including a
    plain slide. Pass ``captures_only=True`` to require an actual capture.
    """
    piece = board.piece_at(square)
    if piece is None:
        return False

    row, col = square
    if piece.is_king:
        targets = (
            (row + i * dr, col + i * dc)
            for i in range(1, board.boardSize)
            for dr, dc in DIAGONALS
        )
    else:
        targets = ((row + 2 * dr, col + 2 * dc) for dr, dc in DIAGONALS)

    for target in targets:
        if not board.in_bounds(target):
            continue
        check = validate(board, piece.color, square, target)
        if check.ok and (check.is_capture or not captures_only):
            return True
    return False
