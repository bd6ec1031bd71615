"""Command: print the counter once."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from elapsedctl.commands._base import ElapsedCommand

if TYPE_CHECKING:
    from elapsedctl.commands._context import AppContext


@click.command(
    cls=ElapsedCommand,
    examples="""\
  elapsedctl show
  elapsedctl show --now 2023-06-15T14:30:45
  elapsedctl show --start 2022-02-24T00:00:00 --now 1700000000000
  elapsedctl -q show
  elapsedctl --json show""",
)
@click.option(
    "--start",
    default=None,
    help="Start instant, overriding config. ISO-8601, or epoch milliseconds"
    " when all digits (20220224 is epoch ms, not a date).",
)
@click.option(
    "--now",
    default=None,
    help="Current instant (default: the clock). ISO-8601, or epoch milliseconds"
    " when all digits.",
)
@click.pass_obj
def show(app: AppContext, start: str | None, now: str | None) -> None:
    """Show the time elapsed since the start instant."""
    from elapsedctl.services.counter import CounterService

    app.bind_start(start)
    app.emit(CounterService(app.settings).snapshot(now, start=start))
