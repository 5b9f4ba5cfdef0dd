"""Core enumerations for the Bagh-Chal domain."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Cell(Enum):
    """Contents of a single board point (value = save-record character)."""

    EMPTY = "."
    GOAT = "G"
    TIGER = "T"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> Cell:
        """Create cell from its record character, e.g. 'G' → goat."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"Invalid cell character: {char!r}") from None


class Side(IntEnum):
    """Side to move."""

    GOAT = 0
    TIGER = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def piece(self) -> Cell:
        """Cell occupied by this side's pieces."""
        return Cell.GOAT if self == Side.GOAT else Cell.TIGER

    def __str__(self) -> str:
        return self.name.lower()


class MoveKind(IntEnum):
    """Classification of a tiger move."""

    INVALID = 0
    SIMPLE = 1
    CAPTURE = 2


class MoveError(IntEnum):
    """Why a move or command was rejected."""

    OUT_OF_BOUNDS = auto()
    OCCUPIED_OR_WRONG_PIECE = auto()
    NOT_ADJACENT = auto()
    INVALID_JUMP_GEOMETRY = auto()
    NO_HISTORY_AVAILABLE = auto()
    MALFORMED_INPUT = auto()
    WRONG_PHASE = auto()
    GAME_OVER = auto()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    GOATS_WIN = 1
    TIGERS_WIN = 2
