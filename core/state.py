"""
core/state.py — Round state for RPSrush.

RoundState holds every piece of mutable game data:
    - Opposing move and target outcome for the current round
    - The player's selection and the judgment for it
    - Countdown, answered-question count and score
    - Phase of the round state machine

RoundState does NOT own the clock or any rendering. main.py constructs
it and hands it to RoundEngine, which is its only writer. The renderer
reads RoundSnapshot copies instead of the live object.

Usage:
    state  = RoundState.initial(random.Random())
    engine = RoundEngine(clock, state)
    snap   = engine.snapshot()
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum, auto

from core.moves import Move, Outcome
from settings import ROUND_SECONDS

FEEDBACK_CORRECT = "Great move!"
FEEDBACK_WRONG   = "Bad move :("


class Phase(Enum):
    """Round state machine phases."""
    AWAITING_SELECTION = auto()
    REVEALING          = auto()
    GAME_OVER          = auto()


@dataclass
class RoundState:
    """Mutable game state for one playthrough.

    Attributes:
        opposing_move:      Move the player answers against this round.
        target_outcome:     WIN or LOSE, what the player must achieve.
        selected_move:      The player's choice, None until selected.
        time_remaining:     Whole seconds left in the countdown.
        question_count:     Rounds completed so far.
        score:              Signed running total.
        last_round_correct: Judgment for the current round, None before it.
        game_over:          True once the final round has been completed.
        pending_delta:      +1/-1 judged this round, applied on advance.
        phase:              Current Phase.
        round_id:           Token identifying the round. Bumped on every
                            new round so stale clock callbacks can tell.
    """

    opposing_move:      Move
    target_outcome:     Outcome
    selected_move:      Move | None = None
    time_remaining:     int         = ROUND_SECONDS
    question_count:     int         = 0
    score:              int         = 0
    last_round_correct: bool | None = None
    game_over:          bool        = False
    pending_delta:      int         = 0
    phase:              Phase       = Phase.AWAITING_SELECTION
    round_id:           int         = 0

    @classmethod
    def initial(cls, rng: random.Random | None = None,
                round_seconds: int = ROUND_SECONDS) -> RoundState:
        """Build the state for a fresh game with a random move and target."""
        rng = rng or random.Random()
        return cls(
            opposing_move=rng.choice(list(Move)),
            target_outcome=rng.choice(list(Outcome)),
            time_remaining=round_seconds,
        )

    def feedback(self) -> str:
        if self.selected_move is None or self.last_round_correct is None:
            return ""
        return FEEDBACK_CORRECT if self.last_round_correct else FEEDBACK_WRONG


@dataclass(frozen=True)
class RoundSnapshot:
    """Read-only view of RoundState handed to the renderer."""

    opposing_move:      Move
    target_outcome:     Outcome
    selected_move:      Move | None
    time_remaining:     int
    round_seconds:      int
    score:              int
    question_count:     int
    last_round_correct: bool | None
    game_over:          bool
    phase:              Phase
    feedback:           str

    @classmethod
    def of(cls, state: RoundState, round_seconds: int) -> RoundSnapshot:
        return cls(
            opposing_move=state.opposing_move,
            target_outcome=state.target_outcome,
            selected_move=state.selected_move,
            time_remaining=state.time_remaining,
            round_seconds=round_seconds,
            score=state.score,
            question_count=state.question_count,
            last_round_correct=state.last_round_correct,
            game_over=state.game_over,
            phase=state.phase,
            feedback=state.feedback(),
        )

    def time_fraction(self) -> float:
        """Remaining time as a fraction in [0.0, 1.0] for the countdown ring."""
        if self.round_seconds <= 0:
            return 0.0
        return max(0.0, min(1.0, self.time_remaining / self.round_seconds))
