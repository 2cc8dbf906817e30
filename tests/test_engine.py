import dataclasses
import random

import pytest

from core.engine import RoundEngine
from core.moves import Move, Outcome
from core.state import Phase, RoundState
from settings import MAX_ROUNDS, REVEAL_SECONDS, ROUND_SECONDS


def test_correct_win_scores_after_reveal(engine, clock):
    assert engine.correct_move() is Move.PAPER
    engine.select(Move.PAPER)

    s = engine.state
    assert s.last_round_correct is True
    assert s.phase is Phase.REVEALING
    assert s.score == 0

    clock.advance(REVEAL_SECONDS - 0.1)
    assert s.score == 0
    assert s.selected_move is Move.PAPER

    clock.advance(0.1)
    assert s.score == 1
    assert s.question_count == 1
    assert s.phase is Phase.AWAITING_SELECTION
    assert s.selected_move is None
    assert s.last_round_correct is None


def test_wrong_lose_costs_a_point(engine, clock):
    engine.state.target_outcome = Outcome.LOSE
    assert engine.correct_move() is Move.SCISSOR

    engine.select(Move.PAPER)
    assert engine.state.last_round_correct is False

    clock.advance(REVEAL_SECONDS)
    assert engine.state.score == -1


def test_timeout_is_wrong_and_skips_reveal(engine, clock):
    s = engine.state
    clock.advance(ROUND_SECONDS - 1)
    assert s.time_remaining == 1
    assert s.question_count == 0

    clock.advance(1)
    assert s.score == -1
    assert s.question_count == 1
    assert s.time_remaining == ROUND_SECONDS
    assert s.target_outcome is Outcome.LOSE
    assert s.phase is Phase.AWAITING_SELECTION

    # the new round counts down from a full window
    clock.advance(ROUND_SECONDS - 1)
    assert s.time_remaining == 1
    assert s.score == -1


def test_timeout_on_last_round_ends_game(engine, clock):
    engine.state.question_count = MAX_ROUNDS - 1
    clock.advance(ROUND_SECONDS)
    assert engine.state.game_over
    assert engine.state.score == -1
    assert engine.state.question_count == MAX_ROUNDS


def test_new_round_never_repeats_opposing_move(engine):
    for _ in range(1000):
        before = engine.state.opposing_move
        engine.new_round()
        assert engine.state.opposing_move is not before


def test_new_round_picks_both_other_moves(engine):
    seen = set()
    for _ in range(200):
        engine.state.opposing_move = Move.ROCK
        engine.new_round()
        seen.add(engine.state.opposing_move)
    assert seen == {Move.PAPER, Move.SCISSOR}


def test_target_outcome_alternates(engine):
    targets = [engine.state.target_outcome]
    for _ in range(50):
        engine.new_round()
        targets.append(engine.state.target_outcome)
    assert all(a is not b for a, b in zip(targets, targets[1:]))


def test_select_twice_is_ignored(engine):
    engine.select(Move.PAPER)
    engine.select(Move.ROCK)
    assert engine.state.selected_move is Move.PAPER
    assert engine.state.pending_delta == 1
    assert engine.state.last_round_correct is True


def test_ticks_after_selection_have_no_effect(engine, clock):
    clock.advance(2)
    engine.select(Move.SCISSOR)
    engine.on_tick()
    clock.advance(REVEAL_SECONDS - 1)
    assert engine.state.time_remaining == ROUND_SECONDS - 2
    assert engine.state.phase is Phase.REVEALING


def test_select_rejects_non_moves(engine):
    with pytest.raises(TypeError):
        engine.select("rock")


def _play_correct_round(engine, clock):
    engine.select(engine.correct_move())
    clock.advance(REVEAL_SECONDS)


def test_game_over_after_max_rounds(engine, clock):
    for _ in range(MAX_ROUNDS - 1):
        _play_correct_round(engine, clock)
        assert not engine.state.game_over

    _play_correct_round(engine, clock)
    s = engine.state
    assert s.game_over
    assert s.phase is Phase.GAME_OVER
    assert s.question_count == MAX_ROUNDS
    assert s.score == MAX_ROUNDS
    assert clock.pending() == 0

    frozen = dataclasses.replace(s)
    engine.select(Move.ROCK)
    engine.on_tick()
    engine.advance()
    clock.advance(100)
    assert s == frozen


def test_restart_resets_from_game_over(engine, clock):
    for _ in range(MAX_ROUNDS):
        _play_correct_round(engine, clock)
    last = engine.state.opposing_move

    engine.restart()
    s = engine.state
    assert not s.game_over
    assert s.score == 0
    assert s.question_count == 0
    assert s.phase is Phase.AWAITING_SELECTION
    assert s.time_remaining == ROUND_SECONDS
    assert s.opposing_move is not last

    clock.advance(1)
    assert s.time_remaining == ROUND_SECONDS - 1


def test_restart_mid_reveal_drops_pending_advance(engine, clock):
    engine.select(Move.PAPER)
    clock.advance(1)
    engine.restart()

    clock.advance(REVEAL_SECONDS)
    s = engine.state
    assert s.score == 0
    assert s.question_count == 0
    assert s.phase is Phase.AWAITING_SELECTION
    assert s.time_remaining == ROUND_SECONDS - REVEAL_SECONDS


def test_restart_mid_game_resets_score(engine, clock):
    _play_correct_round(engine, clock)
    _play_correct_round(engine, clock)
    assert engine.state.score == 2

    engine.restart()
    assert engine.state.score == 0
    assert engine.state.question_count == 0


def test_stop_cancels_everything(engine, clock):
    engine.select(Move.PAPER)
    engine.stop()
    assert clock.pending() == 0

    clock.advance(20)
    assert engine.state.phase is Phase.REVEALING
    assert engine.state.score == 0

    # coming back re-arms the reveal
    engine.start()
    clock.advance(REVEAL_SECONDS)
    assert engine.state.score == 1
    assert engine.state.phase is Phase.AWAITING_SELECTION


def test_stopped_engine_does_not_count_down(engine, clock):
    engine.stop()
    clock.advance(ROUND_SECONDS * 3)
    assert engine.state.time_remaining == ROUND_SECONDS
    assert engine.state.question_count == 0

    engine.start()
    engine.start()
    clock.advance(1)
    assert engine.state.time_remaining == ROUND_SECONDS - 1


def test_snapshot_is_read_only(engine):
    engine.select(Move.PAPER)
    snap = engine.snapshot()
    assert snap.feedback == "Great move!"
    assert snap.selected_move is Move.PAPER
    assert snap.time_fraction() == 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 99


def test_snapshot_feedback_for_wrong_move(engine):
    engine.select(Move.ROCK)
    assert engine.snapshot().feedback == "Bad move :("


def test_engine_builds_its_own_state(clock):
    eng = RoundEngine(clock, rng=random.Random(7), round_seconds=5, max_rounds=2)
    assert eng.state.time_remaining == 5
    assert eng.state.question_count == 0
    assert eng.state.score == 0

    eng.start()
    clock.advance(5)
    clock.advance(5)
    assert eng.state.game_over
    assert eng.state.score == -2


def test_initial_state_is_random_but_valid():
    s = RoundState.initial(random.Random(3))
    assert s.opposing_move in Move
    assert s.target_outcome in Outcome
    assert s.selected_move is None
    assert s.phase is Phase.AWAITING_SELECTION
