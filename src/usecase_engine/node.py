"""Node abstract base, NodeKind enum, Step and Branch."""

from __future__ import annotations

import inspect
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from usecase_engine.context import ExecutionContext
from usecase_engine.exceptions import InvalidDefinition, InvalidStepReturn
from usecase_engine.result import Result, is_result

if TYPE_CHECKING:
    from usecase_engine._types import StepAction
    from usecase_engine.trace import Tracer


class NodeKind(Enum):
    """Node variants, valued with the labels used in doc and audit output."""

    USE_CASE = "use case"
    STEP = "step"
    IF_ELSE = "if else"


class Node(ABC):
    """Base abstraction for every element of a use case tree."""

    kind: ClassVar[NodeKind]

    def __init__(self, description: str) -> None:
        if not isinstance(description, str) or not description.strip():
            raise InvalidDefinition(
                f"{type(self).__name__} requires a non-empty description"
            )
        self.description = description

    @abstractmethod
    async def execute(
        self, ctx: ExecutionContext[Any, Any], tracer: Tracer | None = None
    ) -> Result[Any, Any]:
        """Run the node against ``ctx``, recording into ``tracer`` when given."""

    @abstractmethod
    def doc(self) -> dict[str, Any]: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


async def resolve_result(description: str, returned: Any) -> Result[Any, Any]:
    """Await ``returned`` if needed and check it is a Result."""
    if inspect.isawaitable(returned):
        returned = await returned
    if not is_result(returned):
        raise InvalidStepReturn(description, returned)
    return returned


class Step(Node):
    """Atomic unit of work: a named function from context to Result.

    Pass ``action`` or subclass and override :meth:`run`.
    """

    kind = NodeKind.STEP

    def __init__(self, description: str, action: StepAction | None = None) -> None:
        super().__init__(description)
        if action is None and type(self).run is Step.run:
            raise InvalidDefinition(
                f"{description!r}: a Step needs an action or a run() override"
            )
        self.action = action

    async def run(self, ctx: ExecutionContext[Any, Any]) -> Result[Any, Any]:
        if self.action is None:
            raise InvalidDefinition(f"{self.description!r} has no action")
        return await resolve_result(self.description, self.action(ctx))

    async def execute(
        self, ctx: ExecutionContext[Any, Any], tracer: Tracer | None = None
    ) -> Result[Any, Any]:
        start = time.perf_counter_ns()
        result = await self.run(ctx)
        if not is_result(result):
            raise InvalidStepReturn(self.description, result)
        if tracer is not None:
            tracer.record_step(self, result, time.perf_counter_ns() - start)
        return result

    def doc(self) -> dict[str, Any]:
        return {"type": self.kind.value, "description": self.description}


class Branch(Node):
    """If/else node choosing a sub-tree from its condition's Result."""

    kind = NodeKind.IF_ELSE

    def __init__(
        self,
        description: str,
        condition: Step,
        then_branch: Node,
        else_branch: Node,
    ) -> None:
        super().__init__(description)
        if not isinstance(condition, Step):
            raise InvalidDefinition(f"{description!r}: condition must be a Step")
        for side in (then_branch, else_branch):
            if not isinstance(side, Node):
                raise InvalidDefinition(
                    f"{description!r}: branches must be nodes, got {side!r}"
                )
        self.condition = condition
        self.then_branch = then_branch
        self.else_branch = else_branch

    async def execute(
        self, ctx: ExecutionContext[Any, Any], tracer: Tracer | None = None
    ) -> Result[Any, Any]:
        start = time.perf_counter_ns()
        condition = await self.condition.run(ctx)
        if not is_result(condition):
            raise InvalidStepReturn(self.condition.description, condition)
        if_elapsed = time.perf_counter_ns() - start

        if condition.is_ok():
            side, node = "then", self.then_branch
        else:
            side, node = "else", self.else_branch
        side_tracer = tracer.child() if tracer is not None else None
        side_start = time.perf_counter_ns()
        result = await node.execute(ctx, side_tracer)
        end = time.perf_counter_ns()

        if tracer is not None and side_tracer is not None:
            tracer.record_branch(
                self,
                return_if=condition,
                if_elapsed_ns=if_elapsed,
                side=side,
                result=result,
                side_elapsed_ns=end - side_start,
                steps=side_tracer.entries,
                elapsed_ns=end - start,
            )
        return result

    def doc(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "description": self.description,
            "if": self.condition.doc(),
            "then": self.then_branch.doc(),
            "else": self.else_branch.doc(),
        }
