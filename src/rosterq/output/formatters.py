"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich tables), for scripts
(``--quiet``), or for machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rosterq.domain.employee import EFFICIENCY_THRESHOLD
from rosterq.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from rosterq.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a ServiceResult should be presented."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None
    rating_threshold: int = EFFICIENCY_THRESHOLD


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        width=settings.width,
        threshold=settings.rating_threshold,
    )
