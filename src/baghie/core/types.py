"""Point type alias, board constants and coordinate helpers.

Board layout (row-major, 0-based)::

    (0,0) (0,1) ... (0,4)
    ...
    (4,0) (4,1) ... (4,4)

Players type 1-based ``row col`` pairs; :func:`parse_point` converts them.
"""

from __future__ import annotations

from typing import TypeAlias

Point: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 5
TOTAL_GOATS = 20
TOTAL_TIGERS = 4
CAPTURES_TO_WIN = 5

# N, S, E, W, NE, NW, SE, SW
DIRECTIONS: tuple[Point, ...] = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, 1),
    (-1, -1),
    (1, 1),
    (1, -1),
)

CORNERS: tuple[Point, ...] = (
    (0, 0),
    (0, BOARD_SIZE - 1),
    (BOARD_SIZE - 1, 0),
    (BOARD_SIZE - 1, BOARD_SIZE - 1),
)


def is_in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 5×5 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def point_index(row: int, col: int) -> int:
    """Row-major index 0–24."""
    return row * BOARD_SIZE + col


def point_name(point: Point) -> str:
    """Human-readable 1-based name, e.g. (0, 1) → '1,2'."""
    return f"{point[0] + 1},{point[1] + 1}"


def parse_point(row: int, col: int) -> Point:
    """Convert 1-based player coordinates to a 0-based point.

    No range check: out-of-board points are the validator's business.
    """
    return (row - 1, col - 1)
