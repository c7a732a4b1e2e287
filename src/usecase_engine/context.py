"""ExecutionContext — per-run state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

ReqT = TypeVar("ReqT")
DiT = TypeVar("DiT")


@dataclass
class ExecutionContext(Generic[ReqT, DiT]):
    """Carrier threaded through every node of a single run.

    ``req`` is the request payload and is read-only by convention.
    ``ret`` is where steps publish values for later steps. ``di`` holds the
    dependencies built for this run and completed by the use case's setup.
    """

    req: ReqT
    di: DiT
    user: Any | None = None
    ret: dict[str, Any] = field(default_factory=dict)
