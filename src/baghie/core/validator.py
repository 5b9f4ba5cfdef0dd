"""Move legality checks for goat placement, goat steps and tiger moves.

Everything here is a pure predicate over a :class:`Board`; applying a move
is the game layer's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from baghie.core.enums import Cell, MoveError, MoveKind
from baghie.core.move import INVALID_TIGER_MOVE, SIMPLE_TIGER_MOVE, TigerVerdict
from baghie.core.types import BOARD_SIZE, DIRECTIONS, Point, is_in_bounds

if TYPE_CHECKING:
    from baghie.core.board import Board


# -- Precomputed lookup tables ---------------------------------------------


def _build_step_targets() -> dict[Point, tuple[Point, ...]]:
    targets: dict[Point, tuple[Point, ...]] = {}
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            targets[(row, col)] = tuple(
                (row + dr, col + dc)
                for dr, dc in DIRECTIONS
                if is_in_bounds(row + dr, col + dc)
            )
    return targets


def _build_jump_targets() -> dict[Point, tuple[tuple[Point, Point], ...]]:
    """(jumped point, landing point) pairs for every point."""
    targets: dict[Point, tuple[tuple[Point, Point], ...]] = {}
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            targets[(row, col)] = tuple(
                ((row + dr, col + dc), (row + 2 * dr, col + 2 * dc))
                for dr, dc in DIRECTIONS
                if is_in_bounds(row + 2 * dr, col + 2 * dc)
            )
    return targets


STEP_TARGETS = _build_step_targets()
JUMP_TARGETS = _build_jump_targets()


class MoveValidator:
    """Legality checks over a board.

    The ``validate_*`` methods answer yes/no (or classify, for tigers); the
    ``*_error`` methods say why a move is illegal and return ``None`` when it
    is legal.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # ── Goat placement ───────────────────────────────────────────────────

    def placement_error(self, row: int, col: int) -> MoveError | None:
        if not is_in_bounds(row, col):
            return MoveError.OUT_OF_BOUNDS
        if not self._board.is_empty(row, col):
            return MoveError.OCCUPIED_OR_WRONG_PIECE
        return None

    def validate_placement(self, row: int, col: int) -> bool:
        return self.placement_error(row, col) is None

    # ── Goat movement ────────────────────────────────────────────────────

    def goat_move_error(self, r1: int, c1: int, r2: int, c2: int) -> MoveError | None:
        if not (is_in_bounds(r1, c1) and is_in_bounds(r2, c2)):
            return MoveError.OUT_OF_BOUNDS
        if (r1, c1) == (r2, c2):
            return MoveError.NOT_ADJACENT
        if self._board.cell_at(r1, c1) != Cell.GOAT:
            return MoveError.OCCUPIED_OR_WRONG_PIECE
        if not self._board.is_empty(r2, c2):
            return MoveError.OCCUPIED_OR_WRONG_PIECE
        if not self._board.is_adjacent(r1, c1, r2, c2):
            return MoveError.NOT_ADJACENT
        return None

    def validate_goat_move(self, r1: int, c1: int, r2: int, c2: int) -> bool:
        return self.goat_move_error(r1, c1, r2, c2) is None

    # ── Tiger movement ───────────────────────────────────────────────────

    def validate_tiger_move(self, r1: int, c1: int, r2: int, c2: int) -> TigerVerdict:
        """Classify a tiger move as invalid, a simple step or a capture."""
        if self.tiger_move_error(r1, c1, r2, c2) is not None:
            return INVALID_TIGER_MOVE
        dr = r2 - r1
        dc = c2 - c1
        if abs(dr) <= 1 and abs(dc) <= 1:
            return SIMPLE_TIGER_MOVE
        return TigerVerdict(MoveKind.CAPTURE, (r1 + dr // 2, c1 + dc // 2))

    def tiger_move_error(self, r1: int, c1: int, r2: int, c2: int) -> MoveError | None:
        if not (is_in_bounds(r1, c1) and is_in_bounds(r2, c2)):
            return MoveError.OUT_OF_BOUNDS
        if (r1, c1) == (r2, c2):
            return MoveError.NOT_ADJACENT
        if self._board.cell_at(r1, c1) != Cell.TIGER:
            return MoveError.OCCUPIED_OR_WRONG_PIECE
        if not self._board.is_empty(r2, c2):
            return MoveError.OCCUPIED_OR_WRONG_PIECE

        dr = r2 - r1
        dc = c2 - c1
        if abs(dr) <= 1 and abs(dc) <= 1:
            return None

        # Jump: exactly two points along a line or diagonal, over a goat.
        if abs(dr) in (0, 2) and abs(dc) in (0, 2):
            if self._board.cell_at(r1 + dr // 2, c1 + dc // 2) == Cell.GOAT:
                return None
        return MoveError.INVALID_JUMP_GEOMETRY

    # ── Enumeration ──────────────────────────────────────────────────────

    def placement_points(self) -> list[Point]:
        """Every point a goat could be placed on."""
        return self._board.points(Cell.EMPTY)

    def goat_destinations(self, row: int, col: int) -> list[Point]:
        if self._board.cell_at(row, col) != Cell.GOAT:
            return []
        return [p for p in STEP_TARGETS[(row, col)] if self._board[p] == Cell.EMPTY]

    def tiger_destinations(self, row: int, col: int) -> list[Point]:
        """Simple steps first, then capture landings."""
        if self._board.cell_at(row, col) != Cell.TIGER:
            return []
        board = self._board
        steps = [p for p in STEP_TARGETS[(row, col)] if board[p] == Cell.EMPTY]
        jumps = [
            landing
            for jumped, landing in JUMP_TARGETS[(row, col)]
            if board[jumped] == Cell.GOAT and board[landing] == Cell.EMPTY
        ]
        return steps + jumps

    def tiger_can_move(self, row: int, col: int) -> bool:
        return bool(self.tiger_destinations(row, col))
