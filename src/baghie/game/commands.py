"""Player input parsing.

Input is handled in two stages: :func:`classify` decides whether a line is a
command (undo, redo, exit) or move text, then :func:`parse_move` turns move
text into a :class:`Placement` or :class:`Step` with 0-based points.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from baghie.core.errors import MalformedInputError
from baghie.core.move import Move, Placement, Step
from baghie.core.types import parse_point


class Command(Enum):
    """Non-move player commands."""

    UNDO = "undo"
    REDO = "redo"
    EXIT = "exit"


_COMMAND_TOKENS: dict[str, Command] = {
    "undo": Command.UNDO,
    "u": Command.UNDO,
    "redo": Command.REDO,
    "r": Command.REDO,
    "exit": Command.EXIT,
    "quit": Command.EXIT,
    "q": Command.EXIT,
}


@dataclass(frozen=True, slots=True)
class MoveInput:
    """Raw move text that still needs :func:`parse_move`."""

    text: str


def classify(line: str) -> Command | MoveInput:
    """Stage 1: command token or move text."""
    text = line.strip()
    if not text:
        raise MalformedInputError(line)
    command = _COMMAND_TOKENS.get(text.lower())
    if command is not None:
        return command
    return MoveInput(text)


def parse_move(move_input: MoveInput) -> Move:
    """Stage 2: ``"r c"`` → placement, ``"r1 c1 r2 c2"`` → step (1-based).

    Commas are accepted as separators. Range checks are left to the validator.
    """
    tokens = move_input.text.replace(",", " ").split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError:
        raise MalformedInputError(move_input.text) from None

    if len(numbers) == 2:
        return Placement(parse_point(*numbers))
    if len(numbers) == 4:
        return Step(parse_point(*numbers[:2]), parse_point(*numbers[2:]))
    raise MalformedInputError(move_input.text)


def parse_line(line: str) -> Command | Move:
    """Both stages at once."""
    kind = classify(line)
    if isinstance(kind, Command):
        return kind
    return parse_move(kind)
