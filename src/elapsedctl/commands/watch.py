"""Command: keep the counter on screen, re-rendered once per interval."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from elapsedctl.commands._base import ElapsedCommand

if TYPE_CHECKING:
    from elapsedctl.commands._context import AppContext
    from elapsedctl.domain.instants import Instant
    from elapsedctl.services.counter import CounterService
    from elapsedctl.services.ticker import Ticker


@click.command(
    cls=ElapsedCommand,
    examples="""\
  elapsedctl watch
  elapsedctl watch --interval 0.5
  elapsedctl watch --ticks 10
  elapsedctl -q watch --start 2024-01-01T00:00:00
  elapsedctl --json watch --ticks 3""",
)
@click.option(
    "--start",
    default=None,
    help="Start instant, overriding config. ISO-8601, or epoch milliseconds"
    " when all digits (20220224 is epoch ms, not a date).",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds between refreshes. Overrides [watch] interval.",
)
@click.option(
    "--ticks",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many refreshes (default: run until Ctrl-C).",
)
@click.pass_obj
def watch(app: AppContext, start: str | None, interval: float | None, ticks: int | None) -> None:
    """Re-render the counter every interval until interrupted.

    Human mode redraws a single live panel. With --quiet or --json each
    tick is written as its own line so the output can be piped.
    """
    from elapsedctl.services.counter import CounterService
    from elapsedctl.services.ticker import Ticker

    app.bind_start(start)
    svc = CounterService(app.settings)
    ticker = Ticker(interval or app.settings.watch.interval)
    streaming = app.settings.quiet or app.settings.json_output

    try:
        if streaming:

            def emit_line(now: Instant) -> None:
                app.emit(svc.snapshot(now, start=start), compact=True)

            ticker.run(emit_line, max_ticks=ticks)
        else:
            _watch_live(app, svc, ticker, start=start, max_ticks=ticks)
    except KeyboardInterrupt:
        ticker.cancel()


def _watch_live(
    app: AppContext,
    svc: CounterService,
    ticker: Ticker,
    *,
    start: str | None,
    max_ticks: int | None,
) -> None:
    """Redraw one Rich Live panel per tick."""
    from rich.live import Live

    from elapsedctl.output.console import create_terminal_console
    from elapsedctl.output.renderers import counter_panel

    console = create_terminal_console()
    with Live(console=console, auto_refresh=False) as live:

        def redraw(now: Instant) -> None:
            result = svc.snapshot(now, start=start)
            if not result.ok:
                ticker.cancel()
                live.stop()
                app.emit(result)
            live.update(counter_panel(result.data), refresh=True)

        ticker.run(redraw, max_ticks=max_ticks)
