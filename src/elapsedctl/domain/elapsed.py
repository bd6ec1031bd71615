"""Elapsed-time decomposition and the MONTHS / DAYS / HH:MM:SS display.

A "month" here is a synthetic unit of exactly 30 days, not a calendar
month. Outputs depend on that divisor, so it must never change.

INVARIANT: decompose() and format_elapsed() are pure functions of their
two instants. They never read the clock.
"""

from __future__ import annotations

from dataclasses import dataclass

from elapsedctl.domain.instants import Instant, elapsed_ms

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
SYNTHETIC_MONTH_DAYS = 30
MS_PER_SYNTHETIC_MONTH = SYNTHETIC_MONTH_DAYS * MS_PER_DAY

SEGMENT_IDS = ("months", "days", "time")


@dataclass(frozen=True)
class TimeBreakdown:
    """Elapsed duration split into synthetic months, days and clock time.

    ``total_days`` is counted independently of the month split, so it can
    differ from ``months * 30 + days`` only through rounding at a boundary.
    """

    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    total_days: int
    start_instant: Instant


def _rem(value: int, modulus: int) -> int:
    # Truncating remainder: the sign follows the dividend, not the divisor.
    r = abs(value) % modulus
    return -r if value < 0 else r


def decompose(start: Instant, current: Instant) -> TimeBreakdown:
    """Break the span from *start* to *current* into display components.

    Negative spans (``current`` before ``start``) are decomposed by the same
    rules: ``months`` and ``total_days`` floor towards negative infinity and
    the remainders take the sign of the span.
    """
    ms = elapsed_ms(start, current)
    return TimeBreakdown(
        months=ms // MS_PER_SYNTHETIC_MONTH,
        days=_rem(ms, MS_PER_SYNTHETIC_MONTH) // MS_PER_DAY,
        hours=_rem(ms, MS_PER_DAY) // MS_PER_HOUR,
        minutes=_rem(ms, MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=_rem(ms, MS_PER_MINUTE) // MS_PER_SECOND,
        total_days=ms // MS_PER_DAY,
        start_instant=start,
    )


def render_segments(breakdown: TimeBreakdown) -> dict[str, str]:
    """Return the text for each display element, keyed by element id."""
    b = breakdown
    return {
        "months": f"{b.months:02d}",
        "days": f"{b.days:02d}",
        "time": f"{b.hours:02d}:{b.minutes:02d}:{b.seconds:02d}",
    }


def render_breakdown(breakdown: TimeBreakdown) -> str:
    """Render a breakdown as ``"NN MONTHS / NN DAYS / HH:MM:SS"``."""
    seg = render_segments(breakdown)
    return f"{seg['months']} MONTHS / {seg['days']} DAYS / {seg['time']}"


def format_elapsed(start: Instant, current: Instant) -> str:
    """Decompose and render the span from *start* to *current*."""
    return render_breakdown(decompose(start, current))
