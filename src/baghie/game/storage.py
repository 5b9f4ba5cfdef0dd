"""Save slots on disk: one binary record per slot file."""

from __future__ import annotations

import logging
from pathlib import Path

from baghie.core.record import decode_state, encode_state
from baghie.core.state import GameState

_LOGGER = logging.getLogger(__name__)


class SaveSlots:
    """Numbered save files ``<prefix><slot>.dat`` inside *directory*.

    Slot 0 is conventionally the autosave slot.
    """

    __slots__ = ("_directory", "_prefix")

    def __init__(self, directory: Path, prefix: str = "savegame_slot_") -> None:
        self._directory = Path(directory)
        self._prefix = prefix

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, slot: int) -> Path:
        if slot < 0:
            raise ValueError(f"Save slot must be non-negative, got {slot}")
        return self._directory / f"{self._prefix}{slot}.dat"

    def exists(self, slot: int) -> bool:
        return self.path_for(slot).is_file()

    def save(self, slot: int, state: GameState) -> Path:
        path = self.path_for(slot)
        self._directory.mkdir(parents=True, exist_ok=True)
        path.write_bytes(encode_state(state))
        _LOGGER.debug("Saved ply %d to %s", state.ply, path)
        return path

    def load(self, slot: int) -> GameState:
        """Read a slot. Raises FileNotFoundError or RecordError."""
        path = self.path_for(slot)
        state = decode_state(path.read_bytes())
        _LOGGER.info("Loaded ply %d from %s", state.ply, path)
        return state

    def slots(self) -> list[int]:
        """Slot numbers that currently have a save file, ascending."""
        found: list[int] = []
        for path in self._directory.glob(f"{self._prefix}*.dat"):
            suffix = path.stem[len(self._prefix) :]
            if suffix.isdigit():
                found.append(int(suffix))
        return sorted(found)
