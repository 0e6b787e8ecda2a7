"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy roster loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterq.config.logging import configure_logging
from rosterq.output.formatters import OutputSettings, format_result
from rosterq.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from rosterq.config.settings import RosterSettings
    from rosterq.domain.roster import Roster
    from rosterq.services.query import QueryService
    from rosterq.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The roster is built on first use so ``--help`` and ``--version`` stay
    free of any data setup.
    """

    def __init__(self, settings: RosterSettings) -> None:
        self.settings = settings
        self._roster: Roster | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def roster(self) -> Roster:
        """The roster every command queries (created lazily on first access)."""
        if self._roster is None:
            from rosterq.infrastructure.sample import build_sample_roster

            self._roster = build_sample_roster()
        return self._roster

    def query_service(self) -> QueryService:
        """A QueryService bound to the roster and ``[engine]`` config."""
        from rosterq.services.query import QueryService

        return QueryService(self.roster, self.settings.engine)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
            rating_threshold=self.settings.engine.efficiency_threshold,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
