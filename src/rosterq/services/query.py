"""QueryService: the ten roster queries behind a ServiceResult contract.

Every method is read-only: it hands the roster's collections to a pure
function in :mod:`rosterq.domain.queries` and packages the answer.

- efficient / underperformers: deduplicated rating filters
- average / by_position: rating means, overall and per position
- merged: departments flattened, deduplicated, best rating first
- page: 1-based pagination over the flat roster
- names / duplicates: name joining and repeated-name detection
- efficiency_counts / efficiency_names: efficient vs. not partitions
"""

from __future__ import annotations

import logging
from itertools import chain
from typing import Any

from rosterq.domain import queries
from rosterq.domain.employee import Employee
from rosterq.domain.errors import InvalidArgumentError
from rosterq.services.base import BaseService
from rosterq.services.result import ErrorCode, ServiceResult
from rosterq.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _employee_dicts(employees: list[Employee]) -> list[dict[str, Any]]:
    return [e.model_dump(mode="json") for e in employees]


def _partition_keys(partitions: dict[bool, Any]) -> dict[str, Any]:
    """Render boolean partition keys as ``"true"`` / ``"false"``."""
    return {str(key).lower(): value for key, value in partitions.items()}


class QueryService(BaseService):
    """Answers the fixed roster queries."""

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    @traced
    def efficient(self) -> ServiceResult:
        """Unique employees rated above the efficiency threshold."""
        items = queries.efficient_employees(
            self._roster.employees,
            threshold=self._config.efficiency_threshold,
        )
        return ServiceResult.success(
            "efficient", {"count": len(items), "items": _employee_dicts(items)}
        )

    @traced
    def underperformers(self) -> ServiceResult:
        """``name=rating`` labels for unique employees below the threshold."""
        labels = queries.underperformer_labels(
            self._roster.employees,
            threshold=self._config.efficiency_threshold,
        )
        return ServiceResult.success("underperformers", {"count": len(labels), "labels": labels})

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    @traced
    def average(self) -> ServiceResult:
        """Mean rating across every roster entry, duplicates included."""
        employees = self._roster.employees
        return ServiceResult.success(
            "average", {"count": len(employees), "average": queries.average_rating(employees)}
        )

    @traced
    def by_position(self) -> ServiceResult:
        """Mean rating per position type present in the roster."""
        averages = queries.average_rating_by_position(self._roster.employees)
        return ServiceResult.success(
            "by_position",
            {"averages": {position.value: avg for position, avg in averages.items()}},
        )

    # ------------------------------------------------------------------
    # Ordering and paging
    # ------------------------------------------------------------------

    @traced
    def merged(self) -> ServiceResult:
        """All departments merged into one unique list, best rating first."""
        departments = self._roster.departments
        with trace_span("dedupe") as span:
            unique = queries.distinct(chain.from_iterable(departments))
            if span is not None:
                span.annotate("departments", len(departments))
                span.annotate("input", sum(len(d) for d in departments))
                span.annotate("unique", len(unique))
        with trace_span("sort"):
            items = queries.sort_by_rating(unique)
        return ServiceResult.success(
            "merged", {"count": len(items), "items": _employee_dicts(items)}
        )

    @traced
    def page(self, number: int, size: int | None = None) -> ServiceResult:
        """Return one page of the flat roster.

        Args:
            number: 1-based page number.
            size: Page length; defaults to ``[engine] page_size``.
        """
        page_size = self._config.page_size if size is None else size
        try:
            items = queries.paginate(self._roster.employees, number, page_size)
        except InvalidArgumentError as exc:
            logger.debug("Rejected page request: %s=%r", exc.argument, exc.value)
            return ServiceResult.failure(
                "page",
                ErrorCode.INVALID_ARGUMENT,
                str(exc),
                argument=exc.argument,
                value=exc.value,
            )

        warnings = [] if items else [f"Page {number} is past the end of the roster"]
        return ServiceResult.success(
            "page",
            {
                "page": number,
                "size": page_size,
                "count": len(items),
                "items": _employee_dicts(items),
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    @traced
    def names(self) -> ServiceResult:
        """All roster names as one bracketed string."""
        return ServiceResult.success("names", {"names": queries.join_names(self._roster.employees)})

    @traced
    def duplicates(self) -> ServiceResult:
        """Whether any name appears more than once."""
        return ServiceResult.success(
            "duplicates",
            {"has_duplicates": queries.has_duplicate_names(self._roster.employees)},
        )

    # ------------------------------------------------------------------
    # Efficiency partitions
    # ------------------------------------------------------------------

    @traced
    def efficiency_counts(self) -> ServiceResult:
        """Employee counts for the efficient and non-efficient partitions."""
        counts = queries.count_by_efficiency(
            self._roster.employees,
            threshold=self._config.efficiency_threshold,
        )
        return ServiceResult.success("efficiency_counts", {"counts": _partition_keys(counts)})

    @traced
    def efficiency_names(self) -> ServiceResult:
        """Comma-joined names for the efficient and non-efficient partitions."""
        names = queries.names_by_efficiency(
            self._roster.employees,
            threshold=self._config.efficiency_threshold,
        )
        return ServiceResult.success("efficiency_names", {"names": _partition_keys(names)})
