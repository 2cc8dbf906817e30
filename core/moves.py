"""
core/moves.py — Move and Outcome enums for RPSrush.

The beats-relation is cyclic: every move has exactly one move that
defeats it and exactly one move it defeats.

    winning_counter_to(m) — the move that defeats m
    losing_counter_to(m)  — the move that m defeats

Member order (Paper, Rock, Scissor) is also the on-screen button order.
"""

from __future__ import annotations
from enum import Enum


class Move(Enum):
    """A Rock/Paper/Scissor move. Value is the display symbol."""
    PAPER   = "✋"
    ROCK    = "✊"
    SCISSOR = "✌️"

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_key(cls, digit: int) -> Move | None:
        """Map a 1-based button position to a move, or None if out of range."""
        members = list(cls)
        if 1 <= digit <= len(members):
            return members[digit - 1]
        return None


class Outcome(Enum):
    """Target relationship the player must achieve against the opposing move."""
    WIN  = "😎"
    LOSE = "😵‍💫"

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return self.value

    def toggled(self) -> Outcome:
        return Outcome.LOSE if self is Outcome.WIN else Outcome.WIN


# move -> the move that defeats it
_WINNING_COUNTER: dict[Move, Move] = {
    Move.PAPER:   Move.SCISSOR,
    Move.ROCK:    Move.PAPER,
    Move.SCISSOR: Move.ROCK,
}

# move -> the move it defeats
_LOSING_COUNTER: dict[Move, Move] = {
    counter: move for move, counter in _WINNING_COUNTER.items()
}


def winning_counter_to(move: Move) -> Move:
    """Return the move that defeats `move`."""
    return _WINNING_COUNTER[move]


def losing_counter_to(move: Move) -> Move:
    """Return the move that `move` defeats."""
    return _LOSING_COUNTER[move]


def counter_for(move: Move, outcome: Outcome) -> Move:
    """Return the move that achieves `outcome` against `move`.

    Args:
        move:    The opposing move.
        outcome: WIN to beat it, LOSE to lose to it.

    Returns:
        The single move judged correct for this combination.
    """
    if outcome is Outcome.WIN:
        return winning_counter_to(move)
    return losing_counter_to(move)
