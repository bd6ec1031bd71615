"""Rich Console factory and theme for elapsedctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from elapsedctl.domain.elapsed import SEGMENT_IDS

ELAPSED_THEME = Theme(
    {
        "elapsed.ok": "bold green",
        "elapsed.error": "bold red",
        "elapsed.op": "bold cyan",
        "elapsed.key": "dim",
        "elapsed.display": "bold cyan",
        "elapsed.label": "bold",
        "elapsed.segment.months": "cyan",
        "elapsed.segment.days": "cyan",
        "elapsed.segment.time": "bold white",
    }
)

_SEGMENT_STYLES: dict[str, str] = {seg: f"elapsed.segment.{seg}" for seg in SEGMENT_IDS}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ELAPSED_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_segment(segment_id: str) -> str:
    """Return the Rich style name for a display segment id."""
    return _SEGMENT_STYLES.get(segment_id, "")


def create_terminal_console() -> Console:
    """Create a themed Console that writes straight to stdout.

    Used for live redraws, where output cannot be buffered and returned.
    """
    return Console(theme=ELAPSED_THEME, highlight=False)
