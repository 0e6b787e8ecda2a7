"""Roster: the already-materialized collections a caller queries."""

from __future__ import annotations

from pydantic import BaseModel, Field

from rosterq.domain.employee import Employee


class Roster(BaseModel):
    """Flat employee list plus per-department groups.

    The flat list may contain value-duplicates; the same employee may also
    appear in several departments.
    """

    model_config = {"frozen": True}

    employees: tuple[Employee, ...] = Field(default_factory=tuple)
    departments: tuple[tuple[Employee, ...], ...] = Field(default_factory=tuple)
