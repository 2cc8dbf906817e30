"""
core/clock.py — Scheduling abstraction for RPSrush.

The engine never reads wall time. It asks a Clock for two kinds of
callbacks (a repeating countdown tick and a one-shot reveal delay) and
keeps the returned handles so it can cancel them.

LogicalClock implements the interface on logical time that only moves
when advance() is called. main.py advances it by the frame delta every
frame; tests advance it by whole seconds without any real waiting.

Usage:
    clock = LogicalClock()
    handle = clock.schedule_repeating(1.0, on_tick)
    clock.schedule_once(3.0, on_reveal_done)

    # each frame:
    clock.advance(dt)

    # on teardown:
    clock.cancel(handle)
"""

from __future__ import annotations
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class Clock(Protocol):
    """Capability set the engine needs from a scheduler."""

    def schedule_repeating(self, interval: float, callback: Callback) -> int: ...

    def schedule_once(self, delay: float, callback: Callback) -> int: ...

    def cancel(self, handle: int) -> None: ...


@dataclass
class _Scheduled:
    due:      float
    interval: float | None   # None for one-shot entries
    callback: Callback


class LogicalClock:
    """Clock driven by explicit advance() calls.

    Attributes:
        _now:     Logical time in seconds since construction.
        _entries: Live scheduled callbacks keyed by handle.
        _ids:     Handle generator. Handles are never reused.
    """

    def __init__(self) -> None:
        self._now: float = 0.0
        self._entries: dict[int, _Scheduled] = {}
        self._ids = itertools.count(1)

    def now(self) -> float:
        return self._now

    def pending(self) -> int:
        """Return the number of live handles."""
        return len(self._entries)

    # ── Scheduling ────────────────────────────────────────────────────────────

    def schedule_repeating(self, interval: float, callback: Callback) -> int:
        """Call `callback` every `interval` seconds until cancelled.

        The first call happens one full interval from now.

        Raises:
            ValueError: If interval is not positive.
        """
        if interval <= 0:
            raise ValueError(f"repeating interval must be positive, got {interval!r}")
        return self._add(_Scheduled(self._now + interval, interval, callback))

    def schedule_once(self, delay: float, callback: Callback) -> int:
        """Call `callback` once after `delay` seconds.

        Raises:
            ValueError: If delay is negative.
        """
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay!r}")
        return self._add(_Scheduled(self._now + delay, None, callback))

    def cancel(self, handle: int) -> None:
        """Cancel a handle. Unknown or already-fired handles are ignored."""
        if self._entries.pop(handle, None) is not None:
            logger.debug("cancelled handle %d", handle)

    def cancel_all(self) -> None:
        self._entries.clear()

    def _add(self, entry: _Scheduled) -> int:
        handle = next(self._ids)
        self._entries[handle] = entry
        return handle

    # ── Time ──────────────────────────────────────────────────────────────────

    def advance(self, dt: float) -> None:
        """Move logical time forward by `dt` seconds, firing due callbacks.

        Callbacks fire in due order; equal due times fire in scheduling
        order. A repeating callback fires once per elapsed interval, so a
        large dt catches up rather than skipping ticks. Callbacks may
        schedule or cancel handles; new entries that fall due before the
        target time fire within the same call.

        Args:
            dt: Seconds to advance. Typically the clamped frame delta.

        Raises:
            ValueError: If dt is negative.
        """
        if dt < 0:
            raise ValueError(f"cannot advance by a negative delta {dt!r}")

        target = self._now + dt
        while True:
            due = [(e.due, h) for h, e in self._entries.items() if e.due <= target]
            if not due:
                break
            _, handle = min(due)
            entry = self._entries[handle]
            self._now = entry.due

            if entry.interval is None:
                del self._entries[handle]
            else:
                entry.due += entry.interval

            entry.callback()

        self._now = target
