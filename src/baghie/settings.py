"""User-configurable settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from baghie.game.history import OverflowPolicy
from baghie.game.timer import DEFAULT_TURN_LIMIT


@dataclass
class GameSettings:
    """All user-configurable settings.

    Rule constants (board size, piece counts, capture threshold) are not
    settings; see :mod:`baghie.core.types`.
    """

    # History
    history_capacity: int = 100
    overflow_policy: OverflowPolicy = OverflowPolicy.DROP_NEWEST

    # Turn timer (advisory)
    turn_time_limit: float = DEFAULT_TURN_LIMIT

    # Save slots
    save_dir: Path = field(default_factory=lambda: Path("."))
    save_prefix: str = "savegame_slot_"
    autosave: bool = True
    autosave_slot: int = 0
