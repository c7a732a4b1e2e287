"""UseCaseException hierarchy for fatal faults."""

from __future__ import annotations

from typing import Any


class UseCaseException(Exception):
    """Base for all engine exceptions."""


class InvalidDefinition(UseCaseException):
    """A use case tree was declared with a malformed node."""


class InvalidStepReturn(UseCaseException):
    """A step or authorization predicate returned something other than a Result."""

    def __init__(self, description: str, returned: Any) -> None:
        super().__init__(
            f"{description!r} must return Ok or Err, got {type(returned).__name__}"
        )
        self.description = description
        self.returned = returned
