"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich tables and panels), for
machines (``--json``), or minimally (``--quiet``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from postctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from postctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags derived from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
