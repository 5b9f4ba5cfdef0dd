"""Core domain layer — pure Bagh-Chal rules with zero external dependencies.

Quick start::

    from baghie.core import Board, MoveValidator, Rules

    board = Board.initial()
    gen = MoveValidator(board)
    print(gen.tiger_destinations(0, 0))
    print(Rules.tigers_are_trapped(board))
"""

from baghie.core.board import Board
from baghie.core.enums import Cell, GameResult, MoveError, MoveKind, Side
from baghie.core.errors import IllegalMoveError, MalformedInputError, RecordError
from baghie.core.move import Move, Placement, Step, TigerVerdict
from baghie.core.record import RECORD_SIZE, decode_state, encode_state
from baghie.core.rules import Rules
from baghie.core.state import GameState
from baghie.core.types import (
    BOARD_SIZE,
    CAPTURES_TO_WIN,
    DIRECTIONS,
    TOTAL_GOATS,
    TOTAL_TIGERS,
    Point,
    is_in_bounds,
    parse_point,
    point_name,
)
from baghie.core.validator import MoveValidator

__all__ = [
    # Enums
    "Cell",
    "GameResult",
    "MoveError",
    "MoveKind",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "CAPTURES_TO_WIN",
    "DIRECTIONS",
    "TOTAL_GOATS",
    "TOTAL_TIGERS",
    "Point",
    "is_in_bounds",
    "parse_point",
    "point_name",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "MoveValidator",
    "Placement",
    "Rules",
    "Step",
    "TigerVerdict",
    # Errors
    "IllegalMoveError",
    "MalformedInputError",
    "RecordError",
    # Save records
    "RECORD_SIZE",
    "decode_state",
    "encode_state",
]
