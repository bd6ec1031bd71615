"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from elapsedctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from elapsedctl.config.settings import ElapsedSettings
    from elapsedctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: ElapsedSettings) -> None:
        self.settings = settings

        from elapsedctl.config.logging import bind_run_context, configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        bind_run_context(config=str(settings.config_path) if settings.config_path else None)

    def bind_start(self, start: str | None) -> None:
        """Tag later log lines with the start instant this command counts from."""
        import structlog

        structlog.contextvars.bind_contextvars(
            start=start if start is not None else self.settings.counter.start.isoformat()
        )

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult, *, compact: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings, compact=compact)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
