"""Rich renderers for counter snapshots.

:func:`render_result` writes to a StringIO-backed Console and returns the
text. :func:`counter_panel` builds the renderable that ``watch`` redraws on
the terminal; print it on a console carrying ``ELAPSED_THEME``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from elapsedctl.output.console import create_console, get_output, style_for_segment

if TYPE_CHECKING:
    from rich.console import Console

    from elapsedctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_snapshot(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    return str(result.data.get("display", f"OK: {result.op}"))


def counter_panel(data: dict[str, Any]) -> Panel:
    """Build the live counter panel from snapshot data.

    One styled span per display segment, so the months, days and time
    elements can be told apart on screen.
    """
    segments: dict[str, str] = data.get("segments", {})
    line = Text(justify="center")
    line.append(segments.get("months", "00"), style=style_for_segment("months"))
    line.append(" MONTHS / ")
    line.append(segments.get("days", "00"), style=style_for_segment("days"))
    line.append(" DAYS / ")
    line.append(segments.get("time", "00:00:00"), style=style_for_segment("time"))
    title = str(data.get("label", ""))
    subtitle = f"{data.get('total_days', 0)} days since {data.get('start', '?')}"
    # Wide enough that the border titles are never cropped.
    width = max(line.cell_len, len(title), len(subtitle)) + 6
    return Panel(
        line,
        title=Text(title, style="elapsed.label"),
        subtitle=subtitle,
        width=width,
    )


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="elapsed.ok")
    op = Text(f"  {result.op}", style="elapsed.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    value_style = "elapsed.display" if key == "display" else ""
    console.print(Text.assemble((f"  {key}: ", "elapsed.key"), (str(value), value_style)))

# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="elapsed.error")
    op = Text(f"  {result.op}", style="elapsed.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Snapshot renderer ─────────────────────────────────────────────────


def _render_snapshot(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a counter snapshot: display line, then the component table."""
    _status_line(console, result)
    data = result.data
    for key in ("label", "display", "start", "now", "total_days"):
        if key in data:
            _field(console, key, data[key])

    components = ("months", "days", "hours", "minutes", "seconds")
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    for name in components:
        table.add_column(name.upper(), justify="right")
    table.add_row(*(str(data.get(name, "")) for name in components))
    console.print()
    console.print(table)

    if verbose:
        console.print()
        console.print(Text("  segments:", style="dim"))
        for seg_id, text in data.get("segments", {}).items():
            console.print(Text.assemble(f"    {seg_id}: ", (text, style_for_segment(seg_id))))

