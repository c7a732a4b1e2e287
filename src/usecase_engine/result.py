"""Ok and Err — the two-variant outcome every node produces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying an optional payload."""

    value: T | None = None

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Ok", "value": self.value}


@dataclass(frozen=True)
class Err(Generic[E]):
    """Business failure carrying an optional detail."""

    detail: E | None = None

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Err", "detail": self.detail}


# Generic alias: Result[int, str] is Ok[int] | Err[str]
Result = Union[Ok[T], Err[E]]


def is_result(value: object) -> bool:
    return isinstance(value, (Ok, Err))
