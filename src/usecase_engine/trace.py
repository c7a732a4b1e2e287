"""Tracer, AuditTrace and TraceEntry — audit execution recording."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal

from pydantic_core import to_jsonable_python

from usecase_engine.node import Node, NodeKind
from usecase_engine.result import Result

Side = Literal["then", "else"]


@dataclass(frozen=True)
class TraceEntry:
    """Single node execution record.

    Steps fill ``result``. Branches also fill the ``if_*``/``side*`` fields and
    ``steps`` with the entries of the side that ran. Nested use cases carry
    their own ``audit``. Durations are monotonic nanoseconds.
    """

    kind: NodeKind
    description: str
    elapsed_ns: int
    result: Result[Any, Any]
    return_if: Result[Any, Any] | None = None
    if_elapsed_ns: int | None = None
    side: Side | None = None
    side_elapsed_ns: int | None = None
    steps: tuple[TraceEntry, ...] = ()
    audit: AuditTrace | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.kind.value,
            "description": self.description,
        }
        if self.kind is NodeKind.IF_ELSE and self.side is not None:
            label = self.side.capitalize()
            data["returnIf"] = _result_dict(self.return_if)
            data["elapsedTimeIf"] = self.if_elapsed_ns
            data[f"return{label}"] = self.result.to_dict()
            data[f"elapsedTime{label}"] = self.side_elapsed_ns
            data[self.side] = [entry.to_dict() for entry in self.steps]
        elif self.kind is NodeKind.USE_CASE and self.audit is not None:
            nested = self.audit.to_dict()
            data["transactionId"] = nested["transactionId"]
            data["authorized"] = nested["authorized"]
            data["return"] = nested["return"]
            data["steps"] = nested["steps"]
        else:
            data["return"] = self.result.to_dict()
        data["elapsedTime"] = self.elapsed_ns
        return data


@dataclass(frozen=True)
class AuditTrace:
    """Structured record of one audited use case execution.

    ``user`` is the primitive snapshot taken by :func:`snapshot_user`.
    """

    transaction_id: str
    user: Any
    authorized: bool
    result: Result[Any, Any]
    steps: tuple[TraceEntry, ...]
    elapsed_ns: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "transactionId": self.transaction_id,
            "user": self.user,
            "authorized": self.authorized,
            "return": self.result.to_dict(),
            "steps": [entry.to_dict() for entry in self.steps],
            "elapsedTime": self.elapsed_ns,
        }


def snapshot_user(user: Any) -> Any:
    """Copy ``user`` into JSON-ready primitives for the audit record.

    Dataclasses, pydantic models and mappings become dicts; values pydantic
    cannot serialize fall back to their ``repr``.
    """
    return to_jsonable_python(user, fallback=repr)


def _result_dict(result: Result[Any, Any] | None) -> dict[str, Any] | None:
    return result.to_dict() if result is not None else None


class Tracer:
    """Collects trace entries for one audit scope."""

    def __init__(self, user: Any, *, transaction_id: str | None = None) -> None:
        self.transaction_id = transaction_id or str(uuid.uuid4())
        self.user = snapshot_user(user)
        self.authorized = False
        self.entries: list[TraceEntry] = []

    def child(self) -> Tracer:
        """Tracer for a nested sequence sharing this scope's transaction."""
        child = Tracer(None, transaction_id=self.transaction_id)
        child.user = self.user
        return child

    def record_step(
        self, node: Node, result: Result[Any, Any], elapsed_ns: int
    ) -> None:
        self.entries.append(
            TraceEntry(
                kind=node.kind,
                description=node.description,
                elapsed_ns=elapsed_ns,
                result=result,
            )
        )

    def record_branch(
        self,
        node: Node,
        *,
        return_if: Result[Any, Any],
        if_elapsed_ns: int,
        side: Side,
        result: Result[Any, Any],
        side_elapsed_ns: int,
        steps: Sequence[TraceEntry],
        elapsed_ns: int,
    ) -> None:
        self.entries.append(
            TraceEntry(
                kind=node.kind,
                description=node.description,
                elapsed_ns=elapsed_ns,
                result=result,
                return_if=return_if,
                if_elapsed_ns=if_elapsed_ns,
                side=side,
                side_elapsed_ns=side_elapsed_ns,
                steps=tuple(steps),
            )
        )

    def record_use_case(self, node: Node, audit: AuditTrace, elapsed_ns: int) -> None:
        self.entries.append(
            TraceEntry(
                kind=node.kind,
                description=node.description,
                elapsed_ns=elapsed_ns,
                result=audit.result,
                audit=audit,
            )
        )

    def finish(self, result: Result[Any, Any], elapsed_ns: int) -> AuditTrace:
        return AuditTrace(
            transaction_id=self.transaction_id,
            user=self.user,
            authorized=self.authorized,
            result=result,
            steps=tuple(self.entries),
            elapsed_ns=elapsed_ns,
        )
