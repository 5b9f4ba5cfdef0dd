"""Board - cell placement on a 5x5 grid."""

from __future__ import annotations

from collections.abc import Iterable

from baghie.core.enums import Cell
from baghie.core.types import (
    BOARD_SIZE,
    CORNERS,
    Point,
    is_in_bounds,
    point_index,
)

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Board:
    """Mutable 25-point board.

    Only stores cells; piece-count invariants belong to the game layer.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Cell] = [Cell.EMPTY] * _CELL_COUNT

    # -- Geometry -----------------------------------------------------------

    @staticmethod
    def is_in_bounds(row: int, col: int) -> bool:
        return is_in_bounds(row, col)

    @staticmethod
    def is_adjacent(r1: int, c1: int, r2: int, c2: int) -> bool:
        """8-directional neighbourhood, diagonals included everywhere."""
        if not (is_in_bounds(r1, c1) and is_in_bounds(r2, c2)):
            return False
        dr = abs(r1 - r2)
        dc = abs(c1 - c2)
        return dr <= 1 and dc <= 1 and (dr, dc) != (0, 0)

    # -- Element access -----------------------------------------------------

    def cell_at(self, row: int, col: int) -> Cell:
        if not is_in_bounds(row, col):
            raise IndexError(f"Point out of bounds: ({row}, {col})")
        return self._cells[point_index(row, col)]

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        if not is_in_bounds(row, col):
            raise IndexError(f"Point out of bounds: ({row}, {col})")
        self._cells[point_index(row, col)] = cell

    def __getitem__(self, point: Point) -> Cell:
        return self.cell_at(*point)

    def __setitem__(self, point: Point, cell: Cell) -> None:
        self.set_cell(*point, cell)

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell_at(row, col) == Cell.EMPTY

    # -- Query helpers ------------------------------------------------------

    def points(self, cell: Cell) -> list[Point]:
        """Points holding *cell*, row-major."""
        return [
            divmod(idx, BOARD_SIZE)
            for idx, value in enumerate(self._cells)
            if value == cell
        ]

    def count(self, cell: Cell) -> int:
        return self._cells.count(cell)

    def cells(self) -> tuple[Cell, ...]:
        """Immutable row-major snapshot."""
        return tuple(self._cells)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._cells = [Cell.EMPTY] * _CELL_COUNT

    # -- Serialisation ------------------------------------------------------

    def to_bytes(self) -> bytes:
        """25 row-major ASCII bytes ('.', 'G', 'T')."""
        return "".join(cell.value for cell in self._cells).encode("ascii")

    @classmethod
    def from_bytes(cls, data: bytes) -> Board:
        if len(data) != _CELL_COUNT:
            raise ValueError(f"Board needs {_CELL_COUNT} bytes, got {len(data)}")
        try:
            text = data.decode("ascii")
        except UnicodeDecodeError:
            raise ValueError(f"Invalid board bytes: {data!r}") from None
        return cls.from_cells(Cell.from_char(ch) for ch in text)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position: a tiger in each corner."""
        b = cls()
        for corner in CORNERS:
            b[corner] = Cell.TIGER
        return b

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> Board:
        values = list(cells)
        if len(values) != _CELL_COUNT:
            raise ValueError(f"Board needs {_CELL_COUNT} cells, got {len(values)}")
        b = cls()
        b._cells = values
        return b

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build a board from text rows, e.g. ``["T...T", ".G...", ...]``.

        Whitespace inside a row is ignored.
        """
        grid = ["".join(row.split()) for row in rows]
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError(f"Board text must be {BOARD_SIZE}x{BOARD_SIZE}: {grid!r}")
        return cls.from_cells(Cell.from_char(ch) for row in grid for ch in row)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = ["  " + " ".join(str(c + 1) for c in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            line = " ".join(str(self.cell_at(row, col)) for col in range(BOARD_SIZE))
            rows.append(f"{row + 1} {line}")
        return "\n".join(rows)
