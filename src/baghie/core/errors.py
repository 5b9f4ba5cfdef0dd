"""Exceptions raised by the rules engine.

All of them are ``ValueError`` subclasses so callers that only care about
"bad input" can catch that.
"""

from __future__ import annotations

from baghie.core.enums import MoveError


class IllegalMoveError(ValueError):
    """A move or command was rejected; the game state is unchanged."""

    def __init__(self, reason: MoveError, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or reason.name.replace("_", " ").lower())


class MalformedInputError(IllegalMoveError):
    """Player input could not be parsed into a command or a move."""

    def __init__(self, text: str) -> None:
        super().__init__(MoveError.MALFORMED_INPUT, f"Cannot parse input: {text!r}")
        self.text = text


class RecordError(ValueError):
    """A save record is truncated or inconsistent."""
