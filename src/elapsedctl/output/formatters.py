"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested
output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from elapsedctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from elapsedctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, taken from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    compact: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable Rich output.
        compact: In JSON mode, emit a single line (one object per tick).
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=None if compact else 2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
