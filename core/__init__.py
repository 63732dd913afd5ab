"""Core checkers rules engine package."""

from .board import Board
from .game import GameState, TurnEngine, new_game, submit_move
from .move import CapturePath, Coordinate, MoveCheck, MoveOutcome, MoveReason
from .pieces import Color, Piece, PieceView
from .rules import piece_can_capture, validate

__all__ = [
	"Board",
	"GameState",
	"TurnEngine",
	"new_game",
	"submit_move",
	"Coordinate",
	"CapturePath",
	"MoveCheck",
	"MoveOutcome",
	"MoveReason",
	"Color",
	"Piece",
	"PieceView",
	"validate",
	"piece_can_capture",
]
