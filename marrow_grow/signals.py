"""Grow-room notifications: a fixed set of named signals with read-only payloads."""
from __future__ import annotations

import logging
from collections import deque
from types import MappingProxyType
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

Handler = Callable[[str, Mapping[str, Any]], None]

# Subscribing under this name receives every signal.
ALL = "*"

SIGNALS = frozenset({
    "tick",             # tick
    "stage",            # stage, name
    "lights",           # on
    "hazard",           # kind, name, blocked, stage
    "hazard_resolved",  # kind, blocked
    "speed",            # speed
    "pause",            # paused
    "harvest",          # potency, yield
    "died",             # tick
    "complete",         # potency, yield
})


def _check(signal_name: str) -> None:
    if signal_name != ALL and signal_name not in SIGNALS:
        raise KeyError(f"unknown signal: {signal_name!r}")


class SignalBus:
    """Holds engine signals until :meth:`flush` so handlers see settled state.

    Payloads are frozen at publish time; handlers receive a read-only view.
    Wildcard (:data:`ALL`) handlers run after the named handlers of each
    signal.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {ALL: []}
        self._pending: deque[tuple[str, Mapping[str, Any]]] = deque()

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        _check(signal_name)
        self._handlers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        """Drop *handler*; unknown names and handlers are ignored."""
        handlers = self._handlers.get(signal_name, [])
        if handler in handlers:
            handlers.remove(handler)

    def subscribers(self, signal_name: str) -> int:
        return len(self._handlers.get(signal_name, ()))

    def publish(self, signal_name: str, **data: Any) -> None:
        _check(signal_name)
        self._pending.append((signal_name, MappingProxyType(dict(data))))

    def flush(self) -> int:
        """Deliver what was pending on entry, in publish order.

        Signals published by handlers wait for the next flush. Returns the
        number of signals delivered.
        """
        due = len(self._pending)
        delivered = 0
        # A handler may clear() the queue mid-flush.
        while delivered < due and self._pending:
            signal_name, payload = self._pending.popleft()
            handlers = [*self._handlers.get(signal_name, ()), *self._handlers[ALL]]
            logger.debug("signal %s -> %d handler(s)", signal_name, len(handlers))
            for handler in handlers:
                handler(signal_name, payload)
            delivered += 1
        return delivered

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
