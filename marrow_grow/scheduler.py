"""TaskScheduler - virtual clock with cancellable one-shot and repeating tasks."""
from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)

# Absorbs float drift when a due time lands on an advance boundary.
_EPSILON = 1e-9


@dataclass(eq=False)
class TaskHandle:
    """A scheduled callback. Repeating tasks carry an ``interval``."""

    name: str
    due: float
    callback: Callable[[], None]
    interval: float | None = None
    cancelled: bool = False
    fired: int = 0
    _origin: float = field(default=0.0, repr=False)

    @property
    def active(self) -> bool:
        if self.cancelled:
            return False
        return self.interval is not None or self.fired == 0

    def cancel(self) -> None:
        self.cancelled = True


class TaskScheduler:
    """Runs callbacks at virtual times, strictly one at a time.

    Time only moves through :meth:`advance`. Due tasks run in time order;
    ties run in scheduling order. Callbacks may schedule or cancel tasks,
    including themselves.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[tuple[float, int, TaskHandle]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> TaskHandle:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        handle = TaskHandle(name=name, due=self._now + delay, callback=callback)
        self._push(handle)
        logger.debug("scheduled %s at %.3f", name or "task", handle.due)
        return handle

    def every(self, interval: float, callback: Callable[[], None], name: str = "") -> TaskHandle:
        """Repeat *callback* every *interval* seconds, first run one interval from now."""
        if interval <= 0:
            raise ValueError("interval must be positive")
        handle = TaskHandle(
            name=name,
            due=self._now + interval,
            callback=callback,
            interval=interval,
            _origin=self._now,
        )
        self._push(handle)
        logger.debug("scheduled %s every %.3fs", name or "task", interval)
        return handle

    def cancel(self, handle: TaskHandle | None) -> None:
        """Cancel *handle*. Cancelling twice, or after it fired, is a no-op."""
        if handle is None or handle.cancelled:
            return
        handle.cancel()
        logger.debug("cancelled %s", handle.name or "task")

    def cancel_all(self) -> None:
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()

    def pending(self) -> list[TaskHandle]:
        return [h for _, _, h in sorted(self._queue, key=lambda e: e[:2]) if not h.cancelled]

    def next_due(self) -> float | None:
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)
        return self._queue[0][0] if self._queue else None

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every task that falls due. Returns tasks run."""
        if seconds < 0:
            raise ValueError("cannot advance backwards")
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target + _EPSILON:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = max(self._now, due)
            handle.fired += 1
            handle.callback()
            ran += 1
            if handle.interval is not None and not handle.cancelled:
                handle.due = handle._origin + (handle.fired + 1) * handle.interval
                self._push(handle)
        self._now = max(self._now, target)
        return ran

    def run_realtime(
        self,
        stop: Callable[[], bool],
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        max_sleep: float = 0.05,
    ) -> None:
        """Drive the virtual clock from *clock* until *stop* returns True."""
        last = clock()
        while not stop():
            current = clock()
            self.advance(max(0.0, current - last))
            last = current
            if stop():
                break
            due = self.next_due()
            wait = max_sleep if due is None else min(max_sleep, due - self._now)
            if wait > 0:
                sleep(wait)

    def _push(self, handle: TaskHandle) -> None:
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
