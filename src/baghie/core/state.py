"""GameState — immutable snapshot of everything needed to resume a game."""

from __future__ import annotations

from dataclasses import dataclass

from baghie.core.board import Board
from baghie.core.enums import Cell, Side
from baghie.core.types import TOTAL_GOATS


@dataclass(frozen=True, slots=True)
class GameState:
    """Board cells + goat counters + side to move.

    ``goats_placed`` counts goats that have entered the board and is never
    decremented by captures; the goat placement phase is derived from it.
    """

    cells: tuple[Cell, ...]
    goats_to_place: int = TOTAL_GOATS
    goats_placed: int = 0
    goats_captured: int = 0
    turn: Side = Side.GOAT
    ply: int = 0

    @classmethod
    def initial(cls) -> GameState:
        return cls(cells=Board.initial().cells())

    # ── Derived values ───────────────────────────────────────────────────

    @property
    def goats_on_board(self) -> int:
        return self.goats_placed - self.goats_captured

    @property
    def is_placement_phase(self) -> bool:
        return self.goats_placed < TOTAL_GOATS

    def board(self) -> Board:
        """A fresh mutable board built from the snapshot."""
        return Board.from_cells(self.cells)

    def is_consistent(self) -> bool:
        """Counters agree with each other and with the cells."""
        if min(self.goats_to_place, self.goats_placed, self.goats_captured) < 0:
            return False
        if self.goats_to_place + self.goats_placed != TOTAL_GOATS:
            return False
        return self.cells.count(Cell.GOAT) == self.goats_on_board
