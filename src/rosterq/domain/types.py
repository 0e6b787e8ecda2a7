"""Classification enums for employee records."""

from __future__ import annotations

from enum import StrEnum


class PositionType(StrEnum):
    """Job categories an employee can hold."""

    DEVELOPER = "developer"
    TESTER = "tester"
    ANALYST = "analyst"
    MANAGER = "manager"
