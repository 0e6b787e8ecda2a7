"""Command group: the fixed roster queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterq.commands._base import RosterGroup

if TYPE_CHECKING:
    from rosterq.commands._context import AppContext

_QUERY_EXAMPLES = """\
  rosterq query efficient
  rosterq query average
  rosterq query page 2 --size 3
  rosterq --json query by-position
  rosterq -q query efficiency-names"""


@click.group(cls=RosterGroup, examples=_QUERY_EXAMPLES)
@click.pass_obj
def query(app: AppContext) -> None:
    """Run read-only queries against the roster."""


@query.command(
    examples="""\
  rosterq query efficient
  rosterq -q query efficient"""
)
@click.pass_obj
def efficient(app: AppContext) -> None:
    """Unique employees rated above the efficiency threshold."""
    app.emit(app.query_service().efficient())


@query.command(
    examples="""\
  rosterq query underperformers
  rosterq --json query underperformers"""
)
@click.pass_obj
def underperformers(app: AppContext) -> None:
    """name=rating for unique employees rated below the threshold."""
    app.emit(app.query_service().underperformers())


@query.command(examples="  rosterq query average")
@click.pass_obj
def average(app: AppContext) -> None:
    """Mean rating over every roster entry."""
    app.emit(app.query_service().average())


@query.command(
    examples="""\
  rosterq query merged
  rosterq -v query merged"""
)
@click.pass_obj
def merged(app: AppContext) -> None:
    """All departments merged without duplicates, best rating first."""
    app.emit(app.query_service().merged())


@query.command(
    examples="""\
  rosterq query page 1
  rosterq query page 2 --size 3
  rosterq --json query page 1 --size 5""",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("number", type=int)
@click.option("--size", default=None, type=int, help="Page length (default: [engine] page_size).")
@click.pass_obj
def page(app: AppContext, number: int, size: int | None) -> None:
    """Show one 1-based page of the roster."""
    app.emit(app.query_service().page(number, size=size))


@query.command(examples="  rosterq query names")
@click.pass_obj
def names(app: AppContext) -> None:
    """All names as a bracketed, comma-separated string."""
    app.emit(app.query_service().names())


@query.command(
    examples="""\
  rosterq query duplicates
  rosterq -q query duplicates"""
)
@click.pass_obj
def duplicates(app: AppContext) -> None:
    """Check whether any name appears more than once."""
    app.emit(app.query_service().duplicates())


@query.command(name="by-position", examples="  rosterq query by-position")
@click.pass_obj
def by_position(app: AppContext) -> None:
    """Mean rating per position type."""
    app.emit(app.query_service().by_position())


@query.command(name="efficiency-counts", examples="  rosterq query efficiency-counts")
@click.pass_obj
def efficiency_counts(app: AppContext) -> None:
    """Employee count for efficient and non-efficient partitions."""
    app.emit(app.query_service().efficiency_counts())


@query.command(name="efficiency-names", examples="  rosterq query efficiency-names")
@click.pass_obj
def efficiency_names(app: AppContext) -> None:
    """Comma-joined names for efficient and non-efficient partitions."""
    app.emit(app.query_service().efficiency_names())
