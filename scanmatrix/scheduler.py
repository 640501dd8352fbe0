"""Cooperative timer queue driven by the frame loop.

Nothing here runs on its own: the caller moves time forward with
advance_to() and every task that has come due fires on the caller's thread,
in due-time order (ties broken by scheduling order). Times are milliseconds.

Repeating tasks run at a fixed rate: the k-th firing is due at
start + k * interval, so the cadence never drifts. After a slow frame a
repeating task either replays every missed firing (catch_up=True, the
default) or fires once and skips ahead to its next slot after the current
time.
"""

import heapq
import itertools
from typing import Callable

Callback = Callable[[], None]


class TaskHandle:
    """Handle to a scheduled task. cancel() may be called any number of times."""

    def __init__(self, scheduler: "Scheduler", fn: Callback, start: float,
                 interval: float | None = None, catch_up: bool = True):
        self._scheduler = scheduler
        self.fn = fn
        self.start = start
        self.interval = interval
        self.catch_up = catch_up
        self.runs = 0
        self.cancelled = False
        self.done = False

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    @property
    def active(self) -> bool:
        """True while the task can still fire."""
        return not (self.cancelled or self.done)

    def next_due(self) -> float:
        if self.interval is None:
            return self.start
        return self.start + (self.runs + 1) * self.interval

    def cancel(self) -> None:
        if self.active:
            self.cancelled = True
            self._scheduler._live.discard(self)


class Scheduler:
    """Single-threaded scheduler with repeating and one-shot tasks."""

    def __init__(self, now: float = 0.0):
        self.now = now
        self._queue: list[tuple[float, int, TaskHandle]] = []
        self._seq = itertools.count()
        self._live: set[TaskHandle] = set()

    def call_later(self, delay: float, fn: Callback) -> TaskHandle:
        """Run fn once, delay ms from now."""
        handle = TaskHandle(self, fn, self.now + max(0.0, delay))
        self._push(handle)
        return handle

    def call_every(self, interval: float, fn: Callback, catch_up: bool = True) -> TaskHandle:
        """Run fn every interval ms, first firing one interval from now."""
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        handle = TaskHandle(self, fn, self.now, interval, catch_up)
        self._push(handle)
        return handle

    def _push(self, handle: TaskHandle) -> None:
        self._live.add(handle)
        heapq.heappush(self._queue, (handle.next_due(), next(self._seq), handle))

    def advance(self, delta: float) -> int:
        return self.advance_to(self.now + delta)

    def advance_to(self, t: float) -> int:
        """Fire every task due at or before t. Returns how many callbacks ran."""
        fired = 0
        while self._queue and self._queue[0][0] <= t:
            due, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self.now = max(self.now, due)
            handle.runs += 1
            if handle.repeating:
                if not handle.catch_up:
                    while handle.next_due() <= t:
                        handle.runs += 1
                heapq.heappush(self._queue, (handle.next_due(), next(self._seq), handle))
            else:
                handle.done = True
                self._live.discard(handle)
            handle.fn()
            fired += 1
        self.now = max(self.now, t)
        return fired

    def pending(self) -> int:
        """Number of tasks that can still fire."""
        return len(self._live)

    def cancel_all(self) -> None:
        for handle in list(self._live):
            handle.cancel()
        self._queue.clear()
