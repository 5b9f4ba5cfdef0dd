"""GameSession — the turn/phase state machine of a Bagh-Chal game.

Owns the board, the goat counters, the side to move and the undo/redo
history. Validates moves through :class:`MoveValidator`, snapshots the
pre-move state, applies the move and notifies listeners.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NoReturn

from baghie.core.board import Board
from baghie.core.enums import Cell, GameResult, MoveError, MoveKind, Side
from baghie.core.errors import IllegalMoveError
from baghie.core.move import Move, Placement, Step, TigerVerdict
from baghie.core.rules import Rules
from baghie.core.state import GameState
from baghie.core.types import TOTAL_GOATS, Point, point_name
from baghie.core.validator import MoveValidator
from baghie.game.commands import Command, classify, parse_move
from baghie.game.history import History, OverflowPolicy

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameSession"], None]
HistoryCallback = Callable[[Command, GameState], None]  # command, restored state
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_history: list[HistoryCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TurnOutcome:
    """What :meth:`GameSession.handle` did with one line of input."""

    accepted: bool
    command: Command | None = None
    move: Move | None = None
    error: MoveError | None = None
    message: str = ""

    @property
    def moved(self) -> bool:
        """A move was applied (the turn passed to the other side)."""
        return self.accepted and self.move is not None

    @property
    def exit_requested(self) -> bool:
        return self.command == Command.EXIT


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """A single game: live state plus undo/redo history.

    All methods are meant to be called from one thread. A rejected move
    raises :class:`IllegalMoveError` and leaves the state untouched; the same
    side simply tries again.
    """

    __slots__ = (
        "_board",
        "_goats_to_place",
        "_goats_placed",
        "_goats_captured",
        "_turn",
        "_ply",
        "_history",
        "events",
    )

    def __init__(
        self,
        history_capacity: int = 100,
        overflow_policy: OverflowPolicy = OverflowPolicy.DROP_NEWEST,
        state: GameState | None = None,
    ) -> None:
        self._history = History(history_capacity, overflow_policy)
        self.events = GameEvents()
        self._apply_state(state if state is not None else GameState.initial())

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """Copy of the live board (mutating it does not affect the game)."""
        return self._board.copy()

    def cell_at(self, row: int, col: int) -> Cell:
        return self._board.cell_at(row, col)

    @property
    def turn(self) -> Side:
        return self._turn

    @property
    def goats_to_place(self) -> int:
        return self._goats_to_place

    @property
    def goats_placed(self) -> int:
        return self._goats_placed

    @property
    def goats_on_board(self) -> int:
        return self._goats_placed - self._goats_captured

    @property
    def goats_captured(self) -> int:
        return self._goats_captured

    @property
    def ply(self) -> int:
        return self._ply

    @property
    def is_placement_phase(self) -> bool:
        return self._goats_placed < TOTAL_GOATS

    @property
    def history(self) -> History:
        return self._history

    @property
    def state(self) -> GameState:
        """Immutable snapshot of the live state."""
        return GameState(
            cells=self._board.cells(),
            goats_to_place=self._goats_to_place,
            goats_placed=self._goats_placed,
            goats_captured=self._goats_captured,
            turn=self._turn,
            ply=self._ply,
        )

    @property
    def result(self) -> GameResult:
        return Rules.game_result(self.state)

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    def validator(self) -> MoveValidator:
        """Validator bound to the live board."""
        return MoveValidator(self._board)

    def legal_moves(self) -> list[Move]:
        """Every move the side to move could make, in row-major order."""
        if self.is_game_over:
            return []
        validator = self.validator()
        if self._turn == Side.TIGER:
            return [
                Step(src, dst)
                for src in self._board.points(Cell.TIGER)
                for dst in validator.tiger_destinations(*src)
            ]
        if self.is_placement_phase:
            return [Placement(p) for p in validator.placement_points()]
        return [
            Step(src, dst)
            for src in self._board.points(Cell.GOAT)
            for dst in validator.goat_destinations(*src)
        ]

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset to the starting position and discard history."""
        self.restore(GameState.initial())

    def restore(self, state: GameState) -> None:
        """Replace the live state (e.g. after loading) and discard history."""
        self._apply_state(state)
        self._history.clear()

    # ── Moves ────────────────────────────────────────────────────────────

    def place_goat(self, to: Point) -> None:
        """Place a new goat on *to* (goat turn, placement phase)."""
        self._require_turn(Side.GOAT)
        if not self.is_placement_phase:
            raise IllegalMoveError(
                MoveError.WRONG_PHASE, "All goats are placed; move a goat instead"
            )
        error = MoveValidator(self._board).placement_error(*to)
        if error is not None:
            self._reject(error, Placement(to))

        self._history.snapshot(self.state)
        self._board[to] = Cell.GOAT
        self._goats_placed += 1
        self._goats_to_place -= 1
        self._finish_move(Placement(to))

    def move_goat(self, src: Point, dst: Point) -> None:
        """Step a goat to an adjacent empty point (goat turn, movement phase)."""
        self._require_turn(Side.GOAT)
        if self.is_placement_phase:
            raise IllegalMoveError(
                MoveError.WRONG_PHASE,
                f"{self._goats_to_place} goats still to place before moving",
            )
        error = MoveValidator(self._board).goat_move_error(*src, *dst)
        if error is not None:
            self._reject(error, Step(src, dst))

        self._history.snapshot(self.state)
        self._board[src] = Cell.EMPTY
        self._board[dst] = Cell.GOAT
        self._finish_move(Step(src, dst))

    def move_tiger(self, src: Point, dst: Point) -> TigerVerdict:
        """Move a tiger one step, or jump a goat to capture it."""
        self._require_turn(Side.TIGER)
        gen = MoveValidator(self._board)
        verdict = gen.validate_tiger_move(*src, *dst)
        if verdict.kind == MoveKind.INVALID:
            error = gen.tiger_move_error(*src, *dst)
            assert error is not None
            self._reject(error, Step(src, dst))

        self._history.snapshot(self.state)
        self._board[src] = Cell.EMPTY
        self._board[dst] = Cell.TIGER
        if verdict.kind == MoveKind.CAPTURE:
            assert verdict.captured is not None
            self._board[verdict.captured] = Cell.EMPTY
            self._goats_captured += 1
            _LOGGER.info(
                "Tiger captured goat at %s (%d captured)",
                point_name(verdict.captured),
                self._goats_captured,
            )
        self._finish_move(Step(src, dst))
        return verdict

    def play(self, move: Move) -> None:
        """Apply *move* for the side to move, raising on anything illegal."""
        if self._turn == Side.TIGER:
            if not isinstance(move, Step):
                raise IllegalMoveError(
                    MoveError.WRONG_PHASE, "Tigers move; they are never placed"
                )
            self.move_tiger(move.src, move.dst)
        elif isinstance(move, Placement):
            self.place_goat(move.to)
        else:
            self.move_goat(move.src, move.dst)

    def submit_move(self, move: Move) -> bool:
        """Returns True if *move* was legal and applied."""
        try:
            self.play(move)
        except IllegalMoveError:
            return False
        return True

    # ── History ──────────────────────────────────────────────────────────

    def undo(self) -> bool:
        """Restore the state before the last move. False if no history."""
        previous = self._history.undo(self.state)
        if previous is None:
            return False
        self._apply_state(previous)
        _LOGGER.info("Undo: back to ply %d, %s to move", self._ply, self._turn)
        self._emit_history(Command.UNDO, previous)
        return True

    def redo(self) -> bool:
        """Re-apply the last undone move. False if nothing was undone."""
        following = self._history.redo(self.state)
        if following is None:
            return False
        self._apply_state(following)
        _LOGGER.info("Redo: forward to ply %d, %s to move", self._ply, self._turn)
        self._emit_history(Command.REDO, following)
        return True

    # ── Input boundary ───────────────────────────────────────────────────

    def handle(self, line: str) -> TurnOutcome:
        """Interpret one line of player input.

        Commands are recognised before any move parsing. Errors never
        propagate: they come back as a rejected :class:`TurnOutcome`.
        """
        try:
            kind = classify(line)
            if isinstance(kind, Command):
                return self._run_command(kind)
            move = parse_move(kind)
            self.play(move)
        except IllegalMoveError as exc:
            return TurnOutcome(False, error=exc.reason, message=str(exc))
        return TurnOutcome(True, move=move)

    def _run_command(self, command: Command) -> TurnOutcome:
        if command == Command.EXIT:
            return TurnOutcome(True, command=command)
        done = self.undo() if command == Command.UNDO else self.redo()
        if not done:
            return TurnOutcome(
                False,
                command=command,
                error=MoveError.NO_HISTORY_AVAILABLE,
                message=f"Nothing to {command.value}",
            )
        return TurnOutcome(True, command=command)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply_state(self, state: GameState) -> None:
        self._board = state.board()
        self._goats_to_place = state.goats_to_place
        self._goats_placed = state.goats_placed
        self._goats_captured = state.goats_captured
        self._turn = state.turn
        self._ply = state.ply

    def _require_turn(self, side: Side) -> None:
        if self.is_game_over:
            raise IllegalMoveError(MoveError.GAME_OVER, "The game is over")
        if self._turn != side:
            raise IllegalMoveError(
                MoveError.WRONG_PHASE, f"It is the {self._turn}s' turn"
            )

    def _reject(self, error: MoveError, move: Move) -> NoReturn:
        _LOGGER.debug("Rejected %s move %s: %s", self._turn, move, error.name)
        raise IllegalMoveError(error)

    def _finish_move(self, move: Move) -> None:
        self._turn = self._turn.opposite
        self._ply += 1
        for cb in self.events.on_move:
            cb(move, self)
        result = self.result
        if result != GameResult.IN_PROGRESS:
            _LOGGER.info("Game over: %s", result.name)
            for cb in self.events.on_game_over:
                cb(result)

    def _emit_history(self, command: Command, state: GameState) -> None:
        for cb in self.events.on_history:
            cb(command, state)
