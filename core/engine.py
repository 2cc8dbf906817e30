"""
core/engine.py — Round and game state machine for RPSrush.

RoundEngine is the only writer of RoundState. It enforces the round
rules, scoring and transitions, and talks to time only through an
injected Clock.

Phases:
    AWAITING_SELECTION — countdown running, one selection accepted
    REVEALING          — judgment shown for REVEAL_SECONDS, input ignored
    GAME_OVER          — terminal until restart()

Transitions:
    AWAITING_SELECTION → REVEALING          : select()
    REVEALING          → AWAITING_SELECTION : reveal delay ends, more rounds left
    REVEALING          → GAME_OVER          : reveal delay ends after the last round
    AWAITING_SELECTION → AWAITING_SELECTION : countdown hits 0, more rounds left
    AWAITING_SELECTION → GAME_OVER          : countdown hits 0 on the last round
    GAME_OVER          → AWAITING_SELECTION : restart()

Scoring:
    A judgment sets a provisional +1/-1 on the state. advance() applies it,
    so during the reveal window the score shown is still the old one.

Out-of-order input (a second selection, anything after game over, a
clock callback belonging to an earlier round) is ignored, never raised.
"""

from __future__ import annotations
import logging
import random

from core.clock import Clock
from core.moves import Move, counter_for
from core.state import Phase, RoundSnapshot, RoundState
from settings import MAX_ROUNDS, REVEAL_SECONDS, ROUND_SECONDS, TICK_SECONDS

logger = logging.getLogger(__name__)


class RoundEngine:
    """Drives rounds on top of a RoundState and a Clock.

    Attributes:
        state:           The RoundState being driven.
        round_seconds:   Countdown length per round.
        reveal_seconds:  Delay between a selection and the next round.
        max_rounds:      Rounds per game.
        _clock:          Injected scheduler.
        _rng:            Random source for opposing moves.
        _active:         True while the view is showing (between start/stop).
        _tick_handle:    Handle of the repeating countdown tick, or None.
        _reveal_handle:  Handle of the pending reveal callback, or None.
    """

    def __init__(
        self,
        clock: Clock,
        state: RoundState | None = None,
        rng: random.Random | None = None,
        *,
        round_seconds: int = ROUND_SECONDS,
        reveal_seconds: float = REVEAL_SECONDS,
        max_rounds: int = MAX_ROUNDS,
        tick_seconds: float = TICK_SECONDS,
    ) -> None:
        self._clock = clock
        self._rng = rng or random.Random()
        self.round_seconds = round_seconds
        self.reveal_seconds = reveal_seconds
        self.max_rounds = max_rounds
        self._tick_seconds = tick_seconds
        self.state = state or RoundState.initial(self._rng, round_seconds)

        self._active = False
        self._tick_handle: int | None = None
        self._reveal_handle: int | None = None

    # ── View lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Begin driving the clock. Called when the game view appears.

        Resumes the countdown, or re-arms the reveal delay if the view
        went away mid-reveal. Calling it twice is harmless.
        """
        if self._active:
            return
        self._active = True
        if self.state.phase is Phase.AWAITING_SELECTION:
            self._start_ticking()
        elif self.state.phase is Phase.REVEALING:
            self._schedule_reveal()

    def stop(self) -> None:
        """Cancel every outstanding clock callback. Called on teardown."""
        self._active = False
        self._stop_ticking()
        self._cancel_reveal()

    @property
    def active(self) -> bool:
        return self._active

    # ── Round transitions ─────────────────────────────────────────────────────

    def new_round(self) -> None:
        """Set up the next question and restart the countdown.

        The opposing move is drawn uniformly from the two moves that differ
        from the current one; the target outcome flips every round.
        """
        s = self.state
        s.opposing_move = self._rng.choice([m for m in Move if m is not s.opposing_move])
        s.target_outcome = s.target_outcome.toggled()
        s.selected_move = None
        s.last_round_correct = None
        s.pending_delta = 0
        s.time_remaining = self.round_seconds
        s.question_count += 1
        s.round_id += 1
        s.phase = Phase.AWAITING_SELECTION

        self._cancel_reveal()
        if self._active:
            self._start_ticking()

        logger.info(
            "round %d: opposing=%s target=%s",
            s.round_id, s.opposing_move.label, s.target_outcome.label,
        )

    def select(self, move: Move) -> None:
        """Record the player's move and start the reveal window.

        Ignored if a move was already selected this round or the round is
        not awaiting a selection.

        Args:
            move: The move the player picked.

        Raises:
            TypeError: If move is not a Move.
        """
        if not isinstance(move, Move):
            raise TypeError(f"expected a Move, got {type(move).__name__}")

        s = self.state
        if s.phase is not Phase.AWAITING_SELECTION or s.selected_move is not None:
            logger.debug("ignoring selection %s in phase %s", move.label, s.phase.name)
            return

        correct = move is counter_for(s.opposing_move, s.target_outcome)
        s.selected_move = move
        s.last_round_correct = correct
        s.pending_delta = 1 if correct else -1
        s.phase = Phase.REVEALING

        self._stop_ticking()
        self._schedule_reveal()

        logger.info(
            "round %d: selected %s against %s (%s) -> %s",
            s.round_id, move.label, s.opposing_move.label,
            s.target_outcome.label, "correct" if correct else "wrong",
        )

    def on_tick(self) -> None:
        """Advance the countdown by one step.

        When the countdown reaches 0 without a selection the round is
        judged wrong and advanced immediately, with no reveal window.
        """
        s = self.state
        if s.phase is not Phase.AWAITING_SELECTION:
            return

        if s.time_remaining > 0:
            s.time_remaining -= 1

        if s.time_remaining == 0 and s.selected_move is None:
            logger.info("round %d: time is up", s.round_id)
            s.last_round_correct = False
            s.pending_delta = -1
            self.advance()

    def advance(self) -> None:
        """Apply the provisional score and move to the next round or game over."""
        s = self.state
        if s.phase is Phase.GAME_OVER:
            logger.debug("ignoring advance after game over")
            return

        s.score += s.pending_delta
        s.pending_delta = 0

        if s.question_count + 1 >= self.max_rounds:
            s.question_count += 1
            s.game_over = True
            s.phase = Phase.GAME_OVER
            self._stop_ticking()
            self._cancel_reveal()
            logger.info("game over after %d rounds, final score %d",
                        s.question_count, s.score)
        else:
            self.new_round()

    def restart(self) -> None:
        """Start a new game from any state.

        The fresh round still avoids repeating the last opposing move.
        """
        s = self.state
        self.new_round()
        s.question_count = 0
        s.score = 0
        s.game_over = False
        logger.info("game restarted")

    # ── Reads ─────────────────────────────────────────────────────────────────

    def correct_move(self) -> Move:
        """Return the move that would be judged correct right now."""
        return counter_for(self.state.opposing_move, self.state.target_outcome)

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot.of(self.state, self.round_seconds)

    # ── Clock plumbing ────────────────────────────────────────────────────────

    def _start_ticking(self) -> None:
        # restart so a fresh round gets a full first second
        self._stop_ticking()
        self._tick_handle = self._clock.schedule_repeating(self._tick_seconds, self.on_tick)

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._clock.cancel(self._tick_handle)
            self._tick_handle = None

    def _schedule_reveal(self) -> None:
        # deferred until start() while the view is away
        if not self._active:
            return
        self._cancel_reveal()
        round_id = self.state.round_id
        self._reveal_handle = self._clock.schedule_once(
            self.reveal_seconds, lambda: self._on_reveal_done(round_id),
        )

    def _cancel_reveal(self) -> None:
        if self._reveal_handle is not None:
            self._clock.cancel(self._reveal_handle)
            self._reveal_handle = None

    def _on_reveal_done(self, round_id: int) -> None:
        s = self.state
        if s.round_id != round_id or s.phase is not Phase.REVEALING:
            logger.debug("dropping stale reveal for round %d", round_id)
            return
        self._reveal_handle = None
        self.advance()
