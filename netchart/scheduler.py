"""Deadline-based tick loop that also waits on keyboard input."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

log = logging.getLogger(__name__)

TICK_INTERVAL_S = 1.0
QUIT_KEY = "q"


class TickScheduler:
    """Render, wait for a key or the next tick, sample, repeat.

    One wait covers both conditions: ``wait_for_key(timeout)`` blocks for at
    most the time left until the next tick and returns a key or None. A
    non-quit key wakes the loop early but does not move the tick deadline.
    """

    def __init__(self, render: Callable[[], None],
                 wait_for_key: Callable[[float], str | None],
                 on_tick: Callable[[], object], *,
                 interval: float = TICK_INTERVAL_S,
                 clock: Callable[[], float] = time.monotonic,
                 quit_keys: Iterable[str] = (QUIT_KEY,)):
        self._render = render
        self._wait_for_key = wait_for_key
        self._on_tick = on_tick
        self.interval = interval
        self._clock = clock
        self.quit_keys = frozenset(quit_keys)
        self.ticks = 0

    def run(self) -> int:
        """Blocking loop. Returns the number of ticks once a quit key arrives."""
        last_tick = self._clock()
        while True:
            self._render()

            timeout = max(0.0, self.interval - (self._clock() - last_tick))
            key = self._wait_for_key(timeout)
            if key is not None:
                if key in self.quit_keys:
                    log.info("quit key %r after %d ticks", key, self.ticks)
                    return self.ticks
                log.debug("ignoring key %r", key)

            if self._clock() - last_tick >= self.interval:
                self._on_tick()
                self.ticks += 1
                last_tick = self._clock()
