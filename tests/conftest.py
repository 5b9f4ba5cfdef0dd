"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from baghie.core.board import Board
from baghie.core.enums import Side
from baghie.core.state import GameState
from baghie.game.session import GameSession

# 20 goats on board, one empty point at (3,4) next to the bottom-right tiger.
MOVEMENT_ROWS = [
    "T G G G T",
    "G G G G G",
    "G G G G G",
    "G G G G .",
    "T G G G T",
]

# 20 goats, single hole at (1,2) that no tiger can reach: goats have won.
TRAPPED_ROWS = [
    "T G G G T",
    "G G . G G",
    "G G G G G",
    "G G G G G",
    "T G G G T",
]

# Tigers huddled in a corner, boxed in by 12 goats.
CLUSTER_ROWS = [
    "T T G G .",
    "T T G G .",
    "G G G G .",
    "G G G G .",
    ". . . . .",
]


def state_from_rows(
    rows: list[str],
    *,
    goats_placed: int,
    goats_captured: int = 0,
    turn: Side = Side.GOAT,
    ply: int | None = None,
) -> GameState:
    """Build a consistent-looking state around a text board."""
    if ply is None:
        ply = 2 * goats_placed - (1 if turn == Side.TIGER else 0)
    return GameState(
        cells=Board.from_rows(rows).cells(),
        goats_to_place=20 - goats_placed,
        goats_placed=goats_placed,
        goats_captured=goats_captured,
        turn=turn,
        ply=max(ply, 0),
    )


@pytest.fixture
def session() -> GameSession:
    """A fresh game at the starting position."""
    return GameSession()


@pytest.fixture
def movement_state() -> GameState:
    """Goat to move, all 20 goats placed, nothing captured."""
    return state_from_rows(MOVEMENT_ROWS, goats_placed=20)


@pytest.fixture
def movement_session(movement_state: GameState) -> GameSession:
    return GameSession(state=movement_state)


@pytest.fixture
def save_dir(tmp_path: Path) -> Path:
    return tmp_path / "saves"


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory fixture around :func:`state_from_rows`."""
    return state_from_rows


@pytest.fixture
def trapped_rows() -> list[str]:
    return list(TRAPPED_ROWS)


@pytest.fixture
def cluster_rows() -> list[str]:
    return list(CLUSTER_ROWS)
