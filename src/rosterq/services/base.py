"""BaseService: shared foundation for rosterq services.

Every service receives the :class:`Roster` it reads from and the engine
configuration at construction time. Services never mutate the roster.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rosterq.config.models import EngineConfig

if TYPE_CHECKING:
    from rosterq.domain.roster import Roster


class BaseService:
    """Base for service-layer classes.

    Usage::

        class QueryService(BaseService):
            def average(self) -> ServiceResult:
                value = average_rating(self._roster.employees)
                ...
    """

    def __init__(self, roster: Roster, config: EngineConfig | None = None) -> None:
        self._roster = roster
        self._config = config or EngineConfig()
