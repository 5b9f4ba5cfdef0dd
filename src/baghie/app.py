"""Console entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO, TypeVar

from baghie.core.enums import GameResult, Side
from baghie.core.errors import RecordError
from baghie.core.move import Placement
from baghie.core.types import CAPTURES_TO_WIN, point_name
from baghie.game.history import OverflowPolicy
from baghie.game.session import GameSession
from baghie.game.storage import SaveSlots
from baghie.game.timer import TurnTimer
from baghie.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T", int, float)

_RESULT_TEXT = {
    GameResult.TIGERS_WIN: f"TIGERS WIN! They captured {CAPTURES_TO_WIN} goats.",
    GameResult.GOATS_WIN: "GOATS WIN! All tigers are trapped.",
}


def _positive(kind: Callable[[str], T]) -> Callable[[str], T]:
    """argparse ``type=`` converter that only accepts values above zero."""

    def convert(text: str) -> T:
        try:
            value = kind(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
        if not value > 0:
            raise argparse.ArgumentTypeError(f"must be positive, got {text}")
        return value

    return convert


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baghie", description="Bagh-Chal: 20 goats against 4 tigers."
    )
    parser.add_argument(
        "--save-dir", type=Path, default=Path("."), help="directory for save slots"
    )
    parser.add_argument(
        "--load", type=int, metavar="SLOT", help="resume from a save slot (0 = autosave)"
    )
    parser.add_argument(
        "--time-limit",
        type=_positive(float),
        default=GameSettings.turn_time_limit,
        metavar="SECONDS",
        help="advisory time per turn",
    )
    parser.add_argument(
        "--history",
        type=_positive(int),
        default=GameSettings.history_capacity,
        metavar="N",
        help="undo/redo depth",
    )
    parser.add_argument(
        "--evict-oldest",
        action="store_true",
        help="keep the most recent N undo states instead of the first N",
    )
    parser.add_argument("--no-autosave", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    return GameSettings(
        history_capacity=args.history,
        overflow_policy=(
            OverflowPolicy.EVICT_OLDEST if args.evict_oldest else OverflowPolicy.DROP_NEWEST
        ),
        turn_time_limit=args.time_limit,
        save_dir=args.save_dir,
        autosave=not args.no_autosave,
    )


def _status(session: GameSession) -> str:
    return (
        f"Goats to place: {session.goats_to_place}   "
        f"Goats captured: {session.goats_captured}/{CAPTURES_TO_WIN}"
    )


def _prompt(session: GameSession) -> str:
    if session.turn == Side.TIGER:
        return "Move tiger (from_row from_col to_row to_col): "
    if session.is_placement_phase:
        return "Place goat (row col): "
    return "Move goat (from_row from_col to_row to_col): "


def _hint(session: GameSession) -> str:
    moves = [
        point_name(move.to) if isinstance(move, Placement) else str(move)
        for move in session.legal_moves()
    ]
    return "Legal moves: " + (" ".join(moves) if moves else "none")


def run_game(
    session: GameSession,
    settings: GameSettings,
    stdin: TextIO,
    stdout: TextIO,
) -> GameResult:
    """Play until the game ends, the player exits or input runs out."""
    slots = SaveSlots(settings.save_dir, settings.save_prefix)
    timer = TurnTimer(settings.turn_time_limit)

    while True:
        print(repr(session.board), file=stdout)
        print(_status(session), file=stdout)

        result = session.result
        if result != GameResult.IN_PROGRESS:
            print(_RESULT_TEXT[result], file=stdout)
            return result

        print(f"--- {str(session.turn).upper()}'S TURN ---", file=stdout)
        print(_prompt(session), end="", file=stdout)
        timer.start()
        line = stdin.readline()
        if not line:
            return result

        timing = timer.stop()

        outcome = session.handle(line)
        if outcome.exit_requested:
            return result
        if timing.overdue:
            print("(WARNING: You took too long!)", file=stdout)
        if not outcome.accepted:
            print(f"Rejected: {outcome.message}", file=stdout)
            if outcome.command is None:
                print(_hint(session), file=stdout)
            continue
        if outcome.moved and settings.autosave:
            slots.save(settings.autosave_slot, session.state)


def main(argv: list[str] | None = None) -> int:
    """Launch a console game."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = settings_from_args(args)
    session = GameSession(settings.history_capacity, settings.overflow_policy)

    if args.load is not None:
        slots = SaveSlots(settings.save_dir, settings.save_prefix)
        try:
            session.restore(slots.load(args.load))
        except FileNotFoundError:
            print(f"No saved game found in slot {args.load}.", file=sys.stderr)
            return 1
        except RecordError as exc:
            _LOGGER.error("Cannot load slot %d: %s", args.load, exc)
            return 1

    print("Controls: 'undo', 'redo', 'exit'")
    run_game(session, settings, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
