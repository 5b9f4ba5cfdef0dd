"""Undo/redo history of full game-state snapshots."""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Generic, TypeVar

from baghie.core.state import GameState

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class OverflowPolicy(Enum):
    """What a full :class:`BoundedStack` does with another push."""

    DROP_NEWEST = "drop-newest"  # refuse the push, keep the earliest entries
    EVICT_OLDEST = "evict-oldest"  # discard the bottom entry, keep the latest


class BoundedStack(Generic[T]):
    """LIFO stack that never holds more than *capacity* items."""

    __slots__ = ("_items", "_capacity", "_policy")

    def __init__(
        self,
        capacity: int,
        policy: OverflowPolicy = OverflowPolicy.DROP_NEWEST,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"Stack capacity must be positive, got {capacity}")
        self._items: deque[T] = deque()
        self._capacity = capacity
        self._policy = policy

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> OverflowPolicy:
        return self._policy

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def push(self, item: T) -> bool:
        """Push *item*. Returns False if the item was dropped."""
        if self.is_full:
            if self._policy == OverflowPolicy.DROP_NEWEST:
                return False
            self._items.popleft()
        self._items.append(item)
        return True

    def pop(self) -> T | None:
        return self._items.pop() if self._items else None

    def peek(self) -> T | None:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class History:
    """Two bounded stacks of :class:`GameState` snapshots.

    ``snapshot`` records the state *before* a move and invalidates redo;
    ``undo``/``redo`` swap the live state with the top of one stack, parking
    the live state on the other.
    """

    __slots__ = ("_undo", "_redo")

    def __init__(
        self,
        capacity: int = 100,
        policy: OverflowPolicy = OverflowPolicy.DROP_NEWEST,
    ) -> None:
        self._undo: BoundedStack[GameState] = BoundedStack(capacity, policy)
        self._redo: BoundedStack[GameState] = BoundedStack(capacity, policy)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def capacity(self) -> int:
        return self._undo.capacity

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    # ── Operations ───────────────────────────────────────────────────────

    def snapshot(self, state: GameState) -> None:
        """Record the pre-move *state*; any new move clears redo."""
        if not self._undo.push(state):
            _LOGGER.debug("Undo history full (%d), snapshot dropped", self.capacity)
        self._redo.clear()

    def undo(self, current: GameState) -> GameState | None:
        """Return the state to restore, or None if there is nothing to undo."""
        previous = self._undo.pop()
        if previous is None:
            return None
        self._redo.push(current)
        return previous

    def redo(self, current: GameState) -> GameState | None:
        """Return the state to restore, or None if there is nothing to redo."""
        following = self._redo.pop()
        if following is None:
            return None
        self._undo.push(current)
        return following

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
