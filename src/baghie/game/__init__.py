"""Game management layer — session state machine, history, input, saves.

Quick start::

    from baghie.game import GameSession

    session = GameSession()
    session.handle("1 2")        # goat placed at row 1, column 2
    session.handle("1 1 1 3")    # tiger jumps it
    session.handle("undo")
"""

from baghie.game.commands import Command, MoveInput, classify, parse_line, parse_move
from baghie.game.history import BoundedStack, History, OverflowPolicy
from baghie.game.session import GameEvents, GameSession, TurnOutcome
from baghie.game.storage import SaveSlots
from baghie.game.timer import DEFAULT_TURN_LIMIT, TurnTimer, TurnTiming

__all__ = [
    # Input
    "Command",
    "MoveInput",
    "classify",
    "parse_line",
    "parse_move",
    # History
    "BoundedStack",
    "History",
    "OverflowPolicy",
    # Session
    "GameEvents",
    "GameSession",
    "TurnOutcome",
    # Persistence / timing
    "DEFAULT_TURN_LIMIT",
    "SaveSlots",
    "TurnTimer",
    "TurnTiming",
]
