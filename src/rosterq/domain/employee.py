"""Employee value entity.

Frozen pydantic models compare and hash field-wise, so two employees with
identical attributes are the same value regardless of object identity.
Every deduplicating query relies on that contract.
"""

from __future__ import annotations

from pydantic import BaseModel

from rosterq.domain.types import PositionType

EFFICIENCY_THRESHOLD = 50


class Employee(BaseModel):
    """A single employee record.

    Attributes:
        id: Integer identifier.
        name: Display name.
        rating: Integer performance score.
        position_type: Job category, used as a grouping key.
    """

    model_config = {"frozen": True}

    id: int
    name: str
    rating: int
    position_type: PositionType

    def is_efficient(self, threshold: int = EFFICIENCY_THRESHOLD) -> bool:
        """Whether the rating is strictly above *threshold*."""
        return self.rating > threshold

    def label(self) -> str:
        """Format as ``"<name>=<rating>"``.

        Examples:
            >>> Employee(id=1, name="Ivan", rating=42, position_type="tester").label()
            'Ivan=42'
        """
        return f"{self.name}={self.rating}"
