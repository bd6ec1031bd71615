"""CounterService — validated elapsed-time snapshots.

Pipeline: PARSE → GUARD → DECOMPOSE → REPORT

The domain functions accept any instants; this service is where inputs
are validated and negative spans are refused.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from elapsedctl.domain.elapsed import decompose, render_breakdown, render_segments
from elapsedctl.domain.instants import (
    Instant,
    InvalidInstantError,
    elapsed_ms,
    parse_instant,
)
from elapsedctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from elapsedctl.config.settings import ElapsedSettings

logger = logging.getLogger(__name__)

Clock = Callable[[], Instant]


def _is_naive(instant: Instant) -> bool:
    return isinstance(instant, datetime) and instant.tzinfo is None


def _serialize(instant: Instant) -> str | int:
    if isinstance(instant, datetime):
        return instant.isoformat()
    return instant


class CounterService:
    """Produces counter snapshots from the configured start instant.

    *clock* supplies "now" when a snapshot is taken without an explicit
    instant. It defaults to naive local wall-clock time, which lines up
    with the naive default start.
    """

    def __init__(self, settings: ElapsedSettings, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock: Clock = clock or datetime.now

    @property
    def start(self) -> Instant:
        return self._settings.counter.start

    def snapshot(
        self,
        now: object | None = None,
        *,
        start: object | None = None,
    ) -> ServiceResult:
        """Decompose the span from the start instant to *now*.

        Both arguments may be anything :func:`parse_instant` accepts. A
        missing *start* falls back to ``[counter] start``; a missing *now*
        reads the clock.
        """
        op = "snapshot"

        try:
            start_at = parse_instant(self.start if start is None else start)
            now_at = parse_instant(self._clock() if now is None else now)
        except InvalidInstantError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="INVALID_INSTANT", message=str(exc)),
            )

        span = elapsed_ms(start_at, now_at)
        if span < 0:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="START_AFTER_NOW",
                    message="Start instant is after the current instant",
                    detail={"start": _serialize(start_at), "now": _serialize(now_at)},
                ),
            )

        warnings: list[str] = []
        if _is_naive(start_at) != _is_naive(now_at):
            warnings.append(
                "Compared a naive datetime with a zone-anchored instant; the naive one was read as UTC"
            )

        breakdown = decompose(start_at, now_at)
        display = render_breakdown(breakdown)
        logger.debug("Counter snapshot %s (elapsed_ms=%d)", display, span)

        data: dict[str, Any] = {
            "label": self._settings.counter.label,
            "display": display,
            "months": breakdown.months,
            "days": breakdown.days,
            "hours": breakdown.hours,
            "minutes": breakdown.minutes,
            "seconds": breakdown.seconds,
            "total_days": breakdown.total_days,
            "start": _serialize(breakdown.start_instant),
            "now": _serialize(now_at),
            "segments": render_segments(breakdown),
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
