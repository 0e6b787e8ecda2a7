"""Domain exceptions."""

from __future__ import annotations

from typing import Any


class InvalidArgumentError(ValueError):
    """A query received an argument outside its accepted range.

    Attributes:
        argument: Name of the offending parameter.
        value: The rejected value, kept for diagnostics.
    """

    def __init__(self, argument: str, value: Any) -> None:
        super().__init__(f"Invalid {argument}: {value}")
        self.argument = argument
        self.value = value
