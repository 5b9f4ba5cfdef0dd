"""Tests for GameSession — the turn/phase state machine."""

import dataclasses
from collections.abc import Callable

import pytest

from baghie.core.enums import Cell, GameResult, MoveError, MoveKind, Side
from baghie.core.errors import IllegalMoveError
from baghie.core.move import Placement, Step
from baghie.core.state import GameState
from baghie.game.commands import Command
from baghie.game.history import OverflowPolicy
from baghie.game.session import GameSession


def _play_placements(session: GameSession, points: list[tuple[int, int]]) -> None:
    """Place goats, answering each with a bottom-right tiger shuffle."""
    for i, point in enumerate(points):
        session.place_goat(point)
        if i % 2 == 0:
            session.move_tiger((4, 4), (3, 4))
        else:
            session.move_tiger((3, 4), (4, 4))


class TestNewGame:
    def test_initial_state(self, session: GameSession) -> None:
        assert session.turn == Side.GOAT
        assert session.goats_to_place == 20
        assert session.goats_on_board == 0
        assert session.goats_captured == 0
        assert session.is_placement_phase
        assert session.result == GameResult.IN_PROGRESS

    def test_new_game_resets(self, session: GameSession) -> None:
        session.place_goat((2, 2))
        session.new_game()
        assert session.state == GameState.initial()
        assert not session.history.can_undo

    def test_board_accessor_is_a_copy(self, session: GameSession) -> None:
        board = session.board
        board[2, 2] = Cell.GOAT
        assert session.cell_at(2, 2) == Cell.EMPTY


class TestPlacement:
    def test_place_goat(self, session: GameSession) -> None:
        session.place_goat((0, 1))
        assert session.cell_at(0, 1) == Cell.GOAT
        assert session.goats_placed == 1
        assert session.goats_on_board == 1
        assert session.goats_to_place == 19
        assert session.turn == Side.TIGER
        assert session.ply == 1

    def test_occupied_rejected(self, session: GameSession) -> None:
        before = session.state
        with pytest.raises(IllegalMoveError) as info:
            session.place_goat((0, 0))
        assert info.value.reason == MoveError.OCCUPIED_OR_WRONG_PIECE
        assert session.state == before

    def test_out_of_bounds_rejected(self, session: GameSession) -> None:
        with pytest.raises(IllegalMoveError) as info:
            session.place_goat((5, 2))
        assert info.value.reason == MoveError.OUT_OF_BOUNDS
        assert session.turn == Side.GOAT

    def test_goat_cannot_step_during_placement(self, session: GameSession) -> None:
        session.place_goat((2, 2))
        session.move_tiger((0, 0), (1, 1))
        with pytest.raises(IllegalMoveError) as info:
            session.move_goat((2, 2), (2, 3))
        assert info.value.reason == MoveError.WRONG_PHASE

    def test_tiger_cannot_place(self, session: GameSession) -> None:
        session.place_goat((2, 2))
        assert not session.submit_move(Placement((3, 3)))
        assert session.turn == Side.TIGER

    def test_wrong_side(self, session: GameSession) -> None:
        with pytest.raises(IllegalMoveError) as info:
            session.move_tiger((0, 0), (1, 1))
        assert info.value.reason == MoveError.WRONG_PHASE

    def test_placements_keep_piece_count_invariant(self, session: GameSession) -> None:
        _play_placements(session, [(0, 1), (0, 2), (0, 3), (2, 2)])
        state = session.state
        assert state.is_consistent()
        assert session.goats_placed + session.goats_to_place == 20


class TestMovementPhase:
    def test_phase(self, movement_session: GameSession) -> None:
        assert not movement_session.is_placement_phase
        assert movement_session.turn == Side.GOAT

    def test_goat_step(self, movement_session: GameSession) -> None:
        movement_session.move_goat((2, 4), (3, 4))
        assert movement_session.cell_at(3, 4) == Cell.GOAT
        assert movement_session.cell_at(2, 4) == Cell.EMPTY
        assert movement_session.turn == Side.TIGER
        assert movement_session.goats_on_board == 20

    def test_self_move_rejected(self, movement_session: GameSession) -> None:
        before = movement_session.state
        with pytest.raises(IllegalMoveError) as info:
            movement_session.move_goat((2, 2), (2, 2))
        assert info.value.reason == MoveError.NOT_ADJACENT
        assert movement_session.state == before

    def test_non_adjacent_rejected(self, movement_session: GameSession) -> None:
        with pytest.raises(IllegalMoveError) as info:
            movement_session.move_goat((2, 2), (3, 4))
        assert info.value.reason == MoveError.NOT_ADJACENT

    def test_placement_refused(self, movement_session: GameSession) -> None:
        with pytest.raises(IllegalMoveError) as info:
            movement_session.place_goat((3, 4))
        assert info.value.reason == MoveError.WRONG_PHASE

    def test_phase_survives_undo(self, movement_session: GameSession) -> None:
        movement_session.move_goat((2, 4), (3, 4))
        movement_session.undo()
        assert not movement_session.is_placement_phase


class TestTiger:
    def test_capture_scenario(self, session: GameSession) -> None:
        session.place_goat((0, 1))
        verdict = session.move_tiger((0, 0), (0, 2))
        assert verdict.kind == MoveKind.CAPTURE
        assert verdict.captured == (0, 1)
        assert session.cell_at(0, 1) == Cell.EMPTY
        assert session.cell_at(0, 0) == Cell.EMPTY
        assert session.cell_at(0, 2) == Cell.TIGER
        assert session.goats_captured == 1
        assert session.goats_on_board == 0
        assert session.turn == Side.GOAT

    def test_simple_move_keeps_captures(self, session: GameSession) -> None:
        session.place_goat((2, 2))
        verdict = session.move_tiger((4, 4), (3, 3))
        assert verdict.kind == MoveKind.SIMPLE
        assert session.goats_captured == 0
        assert session.goats_on_board == 1

    def test_invalid_move_retried(self, session: GameSession) -> None:
        session.place_goat((2, 2))
        before = session.state
        with pytest.raises(IllegalMoveError) as info:
            session.move_tiger((0, 0), (0, 2))
        assert info.value.reason == MoveError.INVALID_JUMP_GEOMETRY
        assert session.state == before
        assert session.turn == Side.TIGER

    def test_capture_never_changes_placement_counters(self, session: GameSession) -> None:
        session.place_goat((1, 1))
        session.move_tiger((0, 0), (2, 2))
        assert session.goats_placed == 1
        assert session.goats_to_place == 19
        assert session.state.is_consistent()


class TestGameOver:
    def test_five_captures_end_game(
        self, make_state: Callable[..., GameState]
    ) -> None:
        state = make_state(
            ["T...T", ".G...", ".....", ".....", "T...T"],
            goats_placed=5,
            goats_captured=4,
            turn=Side.TIGER,
        )
        session = GameSession(state=state)
        results: list[GameResult] = []
        session.events.on_game_over.append(results.append)
        session.move_tiger((0, 0), (2, 2))
        assert session.goats_captured == 5
        assert session.result == GameResult.TIGERS_WIN
        assert results == [GameResult.TIGERS_WIN]

    def test_moves_refused_after_game_over(
        self, make_state: Callable[..., GameState], cluster_rows: list[str]
    ) -> None:
        session = GameSession(state=make_state(cluster_rows, goats_placed=12))
        assert session.result == GameResult.GOATS_WIN
        with pytest.raises(IllegalMoveError) as info:
            session.place_goat((4, 4))
        assert info.value.reason == MoveError.GAME_OVER

    def test_goats_trap_tigers(self, make_state: Callable[..., GameState]) -> None:
        rows = [
            "T T G G .",
            "T T G G .",
            "G G G . .",
            "G G G G .",
            ". . . . G",
        ]
        session = GameSession(state=make_state(rows, goats_placed=12))
        assert session.result == GameResult.IN_PROGRESS
        session.place_goat((2, 3))
        assert session.result == GameResult.GOATS_WIN

    def test_undo_reopens_finished_game(
        self, make_state: Callable[..., GameState]
    ) -> None:
        state = make_state(
            ["T...T", ".G...", ".....", ".....", "T...T"],
            goats_placed=5,
            goats_captured=4,
            turn=Side.TIGER,
        )
        session = GameSession(state=state)
        session.move_tiger((0, 0), (2, 2))
        assert session.is_game_over
        assert session.undo()
        assert session.result == GameResult.IN_PROGRESS
        assert session.state == state


class TestUndoRedo:
    def test_undo_empty(self, session: GameSession) -> None:
        before = session.state
        assert not session.undo()
        assert session.state == before

    def test_redo_empty(self, session: GameSession) -> None:
        assert not session.redo()

    def test_undo_restores_pre_move_state(self, session: GameSession) -> None:
        before = session.state
        session.place_goat((2, 2))
        assert session.undo()
        assert session.state == before
        assert session.turn == Side.GOAT

    def test_undo_restores_turn_from_snapshot(self, session: GameSession) -> None:
        session.place_goat((2, 2))
        session.move_tiger((0, 0), (1, 1))
        assert session.undo()
        assert session.turn == Side.TIGER
        assert session.cell_at(0, 0) == Cell.TIGER

    def test_undo_then_redo_round_trip(self, session: GameSession) -> None:
        session.place_goat((0, 1))
        session.move_tiger((0, 0), (0, 2))
        after = session.state
        assert session.undo()
        assert session.redo()
        assert session.state == after

    def test_new_move_clears_redo(self, session: GameSession) -> None:
        session.place_goat((2, 2))
        session.undo()
        assert session.history.can_redo
        session.place_goat((3, 3))
        assert not session.history.can_redo
        assert not session.redo()

    def test_undo_capture_restores_goat(self, session: GameSession) -> None:
        session.place_goat((0, 1))
        session.move_tiger((0, 0), (0, 2))
        session.undo()
        assert session.cell_at(0, 1) == Cell.GOAT
        assert session.goats_captured == 0

    def test_history_events(self, session: GameSession) -> None:
        seen: list[Command] = []
        session.events.on_history.append(lambda cmd, _st: seen.append(cmd))
        session.place_goat((2, 2))
        session.undo()
        session.redo()
        assert seen == [Command.UNDO, Command.REDO]

    def test_capacity_drop_newest(self) -> None:
        session = GameSession(history_capacity=2)
        session.place_goat((2, 2))
        session.move_tiger((0, 0), (1, 1))
        session.place_goat((3, 3))
        assert session.history.undo_depth == 2
        assert session.undo()
        # The third snapshot was dropped: undo lands on the state after ply 1.
        assert session.ply == 1

    def test_capacity_evict_oldest(self) -> None:
        session = GameSession(
            history_capacity=2, overflow_policy=OverflowPolicy.EVICT_OLDEST
        )
        session.place_goat((2, 2))
        session.move_tiger((0, 0), (1, 1))
        session.place_goat((3, 3))
        assert session.undo()
        assert session.ply == 2
        assert session.undo()
        assert session.ply == 1
        assert not session.undo()

    def test_restore_discards_history(
        self, session: GameSession, movement_state: GameState
    ) -> None:
        session.place_goat((2, 2))
        session.restore(movement_state)
        assert session.state == movement_state
        assert not session.history.can_undo
        assert not session.history.can_redo


class TestSubmitMove:
    def test_legal(self, session: GameSession) -> None:
        assert session.submit_move(Placement((2, 2)))
        assert session.submit_move(Step((0, 0), (1, 1)))

    def test_illegal(self, session: GameSession) -> None:
        assert not session.submit_move(Step((0, 0), (1, 1)))
        assert session.turn == Side.GOAT

    def test_move_event(self, session: GameSession) -> None:
        moves: list[str] = []
        session.events.on_move.append(lambda m, _s: moves.append(str(m)))
        session.submit_move(Placement((0, 1)))
        session.submit_move(Step((0, 0), (0, 2)))
        assert moves == ["+1,2", "1,1-1,3"]


class TestLegalMoves:
    def test_opening_placements(self, session: GameSession) -> None:
        moves = session.legal_moves()
        assert len(moves) == 21
        assert moves[:3] == [Placement((0, 1)), Placement((0, 2)), Placement((0, 3))]
        assert Placement((0, 0)) not in moves

    def test_tiger_steps_and_captures(self, session: GameSession) -> None:
        session.place_goat((0, 1))
        moves = session.legal_moves()
        assert Step((0, 0), (1, 0)) in moves
        assert Step((0, 0), (0, 2)) in moves
        assert all(isinstance(m, Step) for m in moves)
        for move in moves:
            assert session.validator().validate_tiger_move(*move.src, *move.dst)

    def test_goat_movement(self, movement_session: GameSession) -> None:
        assert movement_session.legal_moves() == [
            Step((2, 3), (3, 4)),
            Step((2, 4), (3, 4)),
            Step((3, 3), (3, 4)),
            Step((4, 3), (3, 4)),
        ]

    def test_single_tiger_escape(self, movement_state: GameState) -> None:
        state = dataclasses.replace(
            movement_state, turn=Side.TIGER, ply=movement_state.ply + 1
        )
        assert GameSession(state=state).legal_moves() == [Step((4, 4), (3, 4))]

    def test_none_once_game_over(
        self, make_state: Callable[..., GameState], trapped_rows: list[str]
    ) -> None:
        state = make_state(trapped_rows, goats_placed=20, turn=Side.TIGER)
        session = GameSession(state=state)
        assert session.result == GameResult.GOATS_WIN
        assert session.legal_moves() == []


class TestHandle:
    def test_placement_line(self, session: GameSession) -> None:
        outcome = session.handle("1 2")
        assert outcome.accepted
        assert outcome.moved
        assert outcome.move == Placement((0, 1))
        assert session.turn == Side.TIGER

    def test_capture_line(self, session: GameSession) -> None:
        session.handle("1 2")
        outcome = session.handle("1 1 1 3")
        assert outcome.moved
        assert session.goats_captured == 1

    def test_malformed_keeps_turn(self, session: GameSession) -> None:
        outcome = session.handle("hello")
        assert not outcome.accepted
        assert outcome.error == MoveError.MALFORMED_INPUT
        assert session.turn == Side.GOAT
        assert session.ply == 0

    def test_out_of_range(self, session: GameSession) -> None:
        outcome = session.handle("6 1")
        assert outcome.error == MoveError.OUT_OF_BOUNDS
        assert session.ply == 0

    def test_undo_without_history(self, session: GameSession) -> None:
        outcome = session.handle("undo")
        assert not outcome.accepted
        assert outcome.command == Command.UNDO
        assert outcome.error == MoveError.NO_HISTORY_AVAILABLE
        assert not outcome.moved

    def test_undo_redo_commands(self, session: GameSession) -> None:
        session.handle("3 3")
        assert session.handle("U").accepted
        assert session.ply == 0
        outcome = session.handle("redo")
        assert outcome.accepted
        assert not outcome.moved
        assert session.ply == 1

    def test_exit(self, session: GameSession) -> None:
        outcome = session.handle("EXIT")
        assert outcome.exit_requested
        assert session.state == GameState.initial()
