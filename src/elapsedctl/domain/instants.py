"""Instant parsing and millisecond arithmetic.

An instant is either a ``datetime`` or an integer count of milliseconds
since the Unix epoch. Naive datetimes are read as UTC when they have to be
placed on the epoch timeline; two naive datetimes compare directly.

Validation lives here, upstream of the decomposition: anything that is
not a finite instant is rejected with :class:`InvalidInstantError`.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta

Instant = datetime | int

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class InvalidInstantError(ValueError):
    """Raised when a value cannot be read as a finite instant."""


def to_epoch_ms(instant: Instant) -> int:
    """Return *instant* as whole milliseconds since the Unix epoch."""
    if isinstance(instant, datetime):
        aware = instant if instant.tzinfo is not None else instant.replace(tzinfo=UTC)
        return (aware - EPOCH) // _ONE_MS
    return instant


def elapsed_ms(start: Instant, current: Instant) -> int:
    """Signed whole milliseconds from *start* to *current*."""
    return to_epoch_ms(current) - to_epoch_ms(start)


def parse_instant(value: object) -> Instant:
    """Coerce *value* into an :data:`Instant`.

    Accepts datetimes, integer or finite float epoch milliseconds (floats are
    floored) and ISO-8601 strings. A string of digits with an optional sign
    is always epoch milliseconds, so ``"20220224"`` is 20,220,224 ms after
    the epoch rather than a compact date.
    """
    if isinstance(value, bool):
        raise InvalidInstantError(f"Not an instant: {value!r}")
    if isinstance(value, datetime):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidInstantError(f"Instant must be finite, got {value!r}")
        return math.floor(value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.match(text):
            return int(text)
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidInstantError(f"Unparseable instant: {value!r}") from exc
    raise InvalidInstantError(f"Unsupported instant type: {type(value).__name__}")
