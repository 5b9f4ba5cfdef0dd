"""High-level rules: trapped tigers, capture threshold, game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from baghie.core.enums import Cell, GameResult
from baghie.core.types import CAPTURES_TO_WIN, TOTAL_TIGERS
from baghie.core.validator import MoveValidator

if TYPE_CHECKING:
    from baghie.core.board import Board
    from baghie.core.state import GameState


class Rules:
    """Static rule-checker that operates on a :class:`Board` or :class:`GameState`."""

    # Product policy:
    # - A board with fewer than four tigers is never a goat win.
    # - When both win conditions hold at once, the capture threshold wins.

    @staticmethod
    def tigers_are_trapped(board: Board) -> bool:
        """All four tigers have neither a simple move nor a jump."""
        tigers = board.points(Cell.TIGER)
        if len(tigers) != TOTAL_TIGERS:
            return False
        gen = MoveValidator(board)
        return not any(gen.tiger_can_move(row, col) for row, col in tigers)

    @staticmethod
    def tigers_win(goats_captured: int) -> bool:
        return goats_captured >= CAPTURES_TO_WIN

    @staticmethod
    def goats_win(board: Board) -> bool:
        return Rules.tigers_are_trapped(board)

    @staticmethod
    def game_result(state: GameState) -> GameResult:
        """Determine the current game result."""
        if Rules.tigers_win(state.goats_captured):
            return GameResult.TIGERS_WIN
        if Rules.goats_win(state.board()):
            return GameResult.GOATS_WIN
        return GameResult.IN_PROGRESS
