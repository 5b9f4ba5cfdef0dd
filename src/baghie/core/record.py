"""Binary save record: encoding and decoding of a :class:`GameState`.

Layout (41 bytes)::

    25 bytes   cells, row-major, '.' / 'G' / 'T'
    int32 LE   goats remaining to place
    int32 LE   goats placed
    int32 LE   goats captured
    int32 LE   move counter

The side to move is not stored: goats move on even counters, tigers on odd.
Undo/redo history is never part of a record.
"""

from __future__ import annotations

import struct

from baghie.core.board import Board
from baghie.core.enums import Cell, Side
from baghie.core.errors import RecordError
from baghie.core.state import GameState
from baghie.core.types import TOTAL_TIGERS

_RECORD = struct.Struct("<25s4i")
RECORD_SIZE = _RECORD.size


def encode_state(state: GameState) -> bytes:
    """Serialise *state* into a save record."""
    return _RECORD.pack(
        Board.from_cells(state.cells).to_bytes(),
        state.goats_to_place,
        state.goats_placed,
        state.goats_captured,
        state.ply,
    )


def decode_state(data: bytes) -> GameState:
    """Parse a save record, rejecting anything a game could not have produced."""
    if len(data) != RECORD_SIZE:
        raise RecordError(f"Save record must be {RECORD_SIZE} bytes, got {len(data)}")

    cell_bytes, to_place, placed, captured, ply = _RECORD.unpack(data)
    try:
        board = Board.from_bytes(cell_bytes)
    except ValueError as exc:
        raise RecordError(f"Invalid board in save record: {exc}") from None

    if ply < 0:
        raise RecordError(f"Invalid move counter in save record: {ply}")
    state = GameState(
        cells=board.cells(),
        goats_to_place=to_place,
        goats_placed=placed,
        goats_captured=captured,
        turn=Side.GOAT if ply % 2 == 0 else Side.TIGER,
        ply=ply,
    )
    if not state.is_consistent():
        raise RecordError(
            "Inconsistent goat counters in save record: "
            f"to_place={to_place} placed={placed} captured={captured}"
        )
    if board.count(Cell.TIGER) != TOTAL_TIGERS:
        raise RecordError(f"Save record must hold {TOTAL_TIGERS} tigers")
    return state
