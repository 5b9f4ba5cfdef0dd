"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from baghie.core.enums import MoveKind
from baghie.core.types import Point, point_name


@dataclass(frozen=True, slots=True)
class Placement:
    """A goat entering the board (placement phase only)."""

    to: Point

    def __str__(self) -> str:
        return f"+{point_name(self.to)}"


@dataclass(frozen=True, slots=True)
class Step:
    """A piece moving from one point to another (goat step or tiger move)."""

    src: Point
    dst: Point

    def __str__(self) -> str:
        return f"{point_name(self.src)}-{point_name(self.dst)}"

    @property
    def delta(self) -> Point:
        return (self.dst[0] - self.src[0], self.dst[1] - self.src[1])


Move: TypeAlias = Placement | Step


@dataclass(frozen=True, slots=True)
class TigerVerdict:
    """Result of classifying a tiger move.

    ``captured`` is the jumped goat's point for captures, ``None`` otherwise.
    """

    kind: MoveKind
    captured: Point | None = None

    def __bool__(self) -> bool:
        return self.kind != MoveKind.INVALID


INVALID_TIGER_MOVE = TigerVerdict(MoveKind.INVALID)
SIMPLE_TIGER_MOVE = TigerVerdict(MoveKind.SIMPLE)
