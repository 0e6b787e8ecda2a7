"""Bundled demonstration roster.

The CLI has no record source of its own; every command runs against this
fixed roster. It deliberately contains a value-duplicate, a repeated name,
and an employee listed in two departments so each query has something to do.
"""

from __future__ import annotations

from rosterq.domain.employee import Employee
from rosterq.domain.roster import Roster
from rosterq.domain.types import PositionType

_IVAN = Employee(id=1, name="Ivan", rating=72, position_type=PositionType.DEVELOPER)
_OLGA = Employee(id=2, name="Olga", rating=45, position_type=PositionType.TESTER)
_JOHN = Employee(id=3, name="John", rating=88, position_type=PositionType.DEVELOPER)
_MARIA = Employee(id=4, name="Maria", rating=50, position_type=PositionType.ANALYST)
_PETR = Employee(id=5, name="Petr", rating=31, position_type=PositionType.MANAGER)
_ANNA = Employee(id=6, name="Anna", rating=64, position_type=PositionType.ANALYST)
_OLGA_MANAGER = Employee(id=7, name="Olga", rating=57, position_type=PositionType.MANAGER)


def build_sample_roster() -> Roster:
    """Return the demonstration roster."""
    return Roster(
        employees=(_IVAN, _OLGA, _JOHN, _IVAN, _MARIA, _PETR, _ANNA, _OLGA_MANAGER),
        departments=(
            (_IVAN, _JOHN, _OLGA),
            (_MARIA, _ANNA, _IVAN),
            (_PETR, _OLGA_MANAGER),
        ),
    )
