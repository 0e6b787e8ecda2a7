"""Roster query engine: ten pure, read-only queries.

Every function takes one or more employee collections and returns a new
value. Inputs are never mutated and no state survives between calls; any
tracking set lives only for the duration of a single call.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from itertools import chain, islice
from typing import TypeVar

from rosterq.domain.employee import EFFICIENCY_THRESHOLD, Employee
from rosterq.domain.errors import InvalidArgumentError
from rosterq.domain.types import PositionType

EMPTY_NAMES = "empty list"
NAME_SEPARATOR = ", "

_K = TypeVar("_K", bound=Hashable)
_V = TypeVar("_V")


# ── Helpers ───────────────────────────────────────────────────────────


def distinct(employees: Iterable[Employee]) -> list[Employee]:
    """Drop value-duplicates, keeping the first occurrence of each."""
    return list(dict.fromkeys(employees))


def _group_by(
    employees: Iterable[Employee],
    key: Callable[[Employee], _K],
    reduce: Callable[[list[Employee]], _V],
) -> dict[_K, _V]:
    """Group by *key*, then fold each group with *reduce*.

    A key exists in the result only when at least one employee maps to it.
    """
    groups: dict[_K, list[Employee]] = {}
    for employee in employees:
        groups.setdefault(key(employee), []).append(employee)
    return {k: reduce(members) for k, members in groups.items()}


def _mean(members: list[Employee]) -> float:
    return sum(e.rating for e in members) / len(members)


# ── Filtering ─────────────────────────────────────────────────────────


def deduplicated_filter(
    employees: Iterable[Employee],
    *,
    above: int | None = None,
    below: int | None = None,
) -> list[Employee]:
    """Deduplicate, then keep employees whose rating passes both bounds.

    Args:
        employees: Input collection, possibly with value-duplicates.
        above: Keep only ``rating > above`` when given.
        below: Keep only ``rating < below`` when given.
    """
    return [
        e
        for e in distinct(employees)
        if (above is None or e.rating > above) and (below is None or e.rating < below)
    ]


def efficient_employees(
    employees: Iterable[Employee],
    *,
    threshold: int = EFFICIENCY_THRESHOLD,
) -> list[Employee]:
    """Unique employees rated above *threshold*, in input order."""
    return deduplicated_filter(employees, above=threshold)


def underperformer_labels(
    employees: Iterable[Employee],
    *,
    threshold: int = EFFICIENCY_THRESHOLD,
) -> list[str]:
    """``"<name>=<rating>"`` for each unique employee rated below *threshold*."""
    return [e.label() for e in deduplicated_filter(employees, below=threshold)]


# ── Aggregates ────────────────────────────────────────────────────────


def average_rating(employees: Iterable[Employee]) -> float:
    """Mean rating over every element, duplicates included. 0 when empty."""
    members = list(employees)
    if not members:
        return 0.0
    return _mean(members)


def average_rating_by_position(employees: Iterable[Employee]) -> dict[PositionType, float]:
    """Mean rating per position type present in the input."""
    return _group_by(employees, lambda e: e.position_type, _mean)


# ── Ordering and paging ───────────────────────────────────────────────


def merge_distinct_by_rating(groups: Iterable[Iterable[Employee]]) -> list[Employee]:
    """Flatten *groups*, deduplicate, and sort by rating, highest first.

    Ties keep their flattened order (group order, then position in group).
    """
    return sort_by_rating(distinct(chain.from_iterable(groups)))


def sort_by_rating(employees: Iterable[Employee]) -> list[Employee]:
    """Highest rating first; equal ratings keep their input order."""
    return sorted(employees, key=lambda e: e.rating, reverse=True)


def paginate(employees: Iterable[Employee], page_number: int, page_size: int) -> list[Employee]:
    """Return the 1-based *page_number* page of *page_size* employees.

    Raises:
        InvalidArgumentError: If *page_size* or *page_number* is not positive.
    """
    if page_size <= 0:
        raise InvalidArgumentError("page_size", page_size)
    if page_number <= 0:
        raise InvalidArgumentError("page_number", page_number)
    offset = (page_number - 1) * page_size
    return list(islice(employees, offset, offset + page_size))


# ── Names ─────────────────────────────────────────────────────────────


def join_names(employees: Iterable[Employee]) -> str:
    """Bracketed, comma-separated names, e.g. ``"[Ivan, Olga, John]"``.

    An empty input yields ``"[empty list]"``.
    """
    names = [e.name for e in employees]
    joined = NAME_SEPARATOR.join(names) if names else EMPTY_NAMES
    return f"[{joined}]"


def has_duplicate_names(employees: Iterable[Employee]) -> bool:
    """Whether any name occurs more than once."""
    seen: set[str] = set()
    for employee in employees:
        if employee.name in seen:
            return True
        seen.add(employee.name)
    return False


# ── Efficiency partitions ─────────────────────────────────────────────


def count_by_efficiency(
    employees: Iterable[Employee],
    *,
    threshold: int = EFFICIENCY_THRESHOLD,
) -> dict[bool, int]:
    """Employee count per efficiency partition; empty partitions are absent."""
    return _group_by(employees, lambda e: e.is_efficient(threshold), len)


def names_by_efficiency(
    employees: Iterable[Employee],
    *,
    threshold: int = EFFICIENCY_THRESHOLD,
) -> dict[bool, str]:
    """Comma-joined names per efficiency partition; empty partitions are absent."""
    return _group_by(
        employees,
        lambda e: e.is_efficient(threshold),
        lambda members: NAME_SEPARATOR.join(e.name for e in members),
    )
