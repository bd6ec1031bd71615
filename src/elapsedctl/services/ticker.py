"""Ticker — the cancellable periodic driver that samples "now".

The counter itself never reads the clock. Ticker owns that: it samples
the clock once per interval and hands the instant to a callback until
cancelled.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from elapsedctl.domain.instants import Instant

logger = logging.getLogger(__name__)


class Ticker:
    """Invoke a callback with the current instant once per *interval* seconds.

    Parameters:
        interval: Seconds between ticks. Must be positive.
        clock: Returns the current instant (default: naive local ``datetime.now``).

    ``cancel()`` is safe to call from any thread, including from inside the
    callback; the loop stops before the next tick. Cancellation is final: a
    ticker cancelled before ``run()`` ticks zero times. Build a new Ticker
    to start again.
    """

    def __init__(
        self,
        interval: float = 1.0,
        *,
        clock: Callable[[], Instant] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Ticker interval must be positive, got {interval!r}")
        self.interval = interval
        self._clock: Callable[[], Instant] = clock or datetime.now
        self._stop = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def cancel(self) -> None:
        self._stop.set()

    def run(
        self,
        on_tick: Callable[[Instant], None],
        *,
        max_ticks: int | None = None,
    ) -> int:
        """Tick until cancelled or *max_ticks* is reached. Returns the tick count.

        The first tick fires immediately unless the ticker is already
        cancelled. Exceptions raised by *on_tick* end the loop and propagate
        to the caller.
        """
        ticks = 0
        while not self._stop.is_set():
            on_tick(self._clock())
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            # Event.wait returns early on cancel().
            if self._stop.wait(self.interval):
                break
        logger.debug("Ticker stopped after %d tick(s)", ticks)
        return ticks
