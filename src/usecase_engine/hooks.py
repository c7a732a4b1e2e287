"""UseCaseHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from usecase_engine.context import ExecutionContext
from usecase_engine.node import Node
from usecase_engine.result import Result


class UseCaseHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default.

    Hooks fire after authorization and setup, identically for ``run`` and
    ``audit``. ``on_step`` fires once per top-level node of the use case.
    """

    async def on_run_start(self, ctx: ExecutionContext[Any, Any]) -> None:
        pass

    async def on_step(
        self,
        ctx: ExecutionContext[Any, Any],
        node: Node,
        result: Result[Any, Any],
    ) -> None:
        pass

    async def on_run_end(
        self, ctx: ExecutionContext[Any, Any], result: Result[Any, Any]
    ) -> None:
        pass


class BeforeRun(UseCaseHook):
    """Convenience hook that only fires once the context is set up."""

    def __init__(
        self, callback: Callable[[ExecutionContext[Any, Any]], Awaitable[None]]
    ) -> None:
        self._callback = callback

    async def on_run_start(self, ctx: ExecutionContext[Any, Any]) -> None:
        await self._callback(ctx)


class AfterRun(UseCaseHook):
    """Convenience hook that only fires with the aggregate Result."""

    def __init__(
        self,
        callback: Callable[
            [ExecutionContext[Any, Any], Result[Any, Any]], Awaitable[None]
        ],
    ) -> None:
        self._callback = callback

    async def on_run_end(
        self, ctx: ExecutionContext[Any, Any], result: Result[Any, Any]
    ) -> None:
        await self._callback(ctx, result)


class AfterStep(UseCaseHook):
    """Convenience hook that fires after each top-level node."""

    def __init__(
        self,
        callback: Callable[
            [ExecutionContext[Any, Any], Node, Result[Any, Any]], Awaitable[None]
        ],
    ) -> None:
        self._callback = callback

    async def on_step(
        self,
        ctx: ExecutionContext[Any, Any],
        node: Node,
        result: Result[Any, Any],
    ) -> None:
        await self._callback(ctx, node, result)
