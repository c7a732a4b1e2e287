"""UseCase — root node and execution engine for a tree of steps."""

from __future__ import annotations

import asyncio
import inspect
import time
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import structlog

from usecase_engine.config import get_settings
from usecase_engine.context import ExecutionContext
from usecase_engine.doc import RequestShape, describe_shape
from usecase_engine.exceptions import InvalidDefinition
from usecase_engine.node import Node, NodeKind, resolve_result
from usecase_engine.result import Ok, Result
from usecase_engine.trace import AuditTrace, Tracer

if TYPE_CHECKING:
    from usecase_engine._types import (
        AuthorizeCallback,
        DependencyFactory,
        SetupCallback,
    )
    from usecase_engine.hooks import UseCaseHook

logger = structlog.get_logger(__name__)


class UseCase(Node):
    """Named business operation: an ordered sequence of steps and branches.

    ``request`` declares the request shape for documentation only; add a
    :class:`~usecase_engine.components.ValidateRequest` step to enforce it.
    ``dependencies`` builds the ``ctx.di`` object for each run (a
    ``SimpleNamespace`` when omitted) before ``setup`` completes it.

    Used as a child of another use case, it gets a fresh context with the
    parent's request and user but always builds its own ``di`` from its own
    ``dependencies`` factory: a ``di=`` passed to the parent's ``run`` or
    ``audit`` is not forwarded. Inject test doubles through the nested use
    case's factory.
    """

    kind = NodeKind.USE_CASE

    def __init__(
        self,
        description: str,
        *children: Node,
        request: RequestShape | None = None,
        authorize: AuthorizeCallback | None = None,
        setup: SetupCallback | None = None,
        dependencies: DependencyFactory | None = None,
        hooks: tuple[UseCaseHook, ...] = (),
    ) -> None:
        super().__init__(description)
        self.request = request
        self._authorize = authorize
        self._setup = setup
        self._dependencies = dependencies
        self._children: list[Node] = []
        self._hooks: list[UseCaseHook] = list(hooks)
        self.add(*children)

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    def add(self, *children: Node) -> UseCase:
        for child in children:
            if not isinstance(child, Node):
                raise InvalidDefinition(
                    f"{self.description!r}: children must be nodes, got {child!r}"
                )
            if child is self:
                raise InvalidDefinition(f"{self.description!r} cannot contain itself")
        self._children.extend(children)
        return self

    def add_hook(self, hook: UseCaseHook) -> UseCase:
        self._hooks.append(hook)
        return self

    async def run(
        self, request: Any = None, user: Any = None, *, di: Any = None
    ) -> Result[Any, Any]:
        """Authorize, set up and execute the use case, returning its Result."""
        return await self._execute(request, user, di, None)

    def run_sync(
        self, request: Any = None, user: Any = None, *, di: Any = None
    ) -> Result[Any, Any]:
        """Drive :meth:`run` to completion from synchronous code."""
        return asyncio.run(self.run(request, user, di=di))

    async def audit(
        self, request: Any = None, user: Any = None, *, di: Any = None
    ) -> tuple[Result[Any, Any], AuditTrace]:
        """Execute exactly as :meth:`run` does, also returning the trace.

        A fatal fault propagates and the partial trace is dropped.
        """
        tracer = Tracer(user)
        start = time.perf_counter_ns()
        result = await self._execute(request, user, di, tracer)
        trace = tracer.finish(result, time.perf_counter_ns() - start)

        if get_settings().log_audits:
            logger.info(
                "use_case.audited",
                use_case=self.description,
                transaction_id=trace.transaction_id,
                authorized=trace.authorized,
                ok=result.is_ok(),
                steps=len(trace.steps),
                elapsed_ns=trace.elapsed_ns,
            )
        return result, trace

    async def execute(
        self, ctx: ExecutionContext[Any, Any], tracer: Tracer | None = None
    ) -> Result[Any, Any]:
        # Nested use case: own context and, when audited, own transaction
        if tracer is None:
            return await self.run(ctx.req, ctx.user)
        start = time.perf_counter_ns()
        result, trace = await self.audit(ctx.req, ctx.user)
        tracer.record_use_case(self, trace, time.perf_counter_ns() - start)
        return result

    def doc(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "description": self.description,
            "request": describe_shape(self.request),
            "steps": [child.doc() for child in self._children],
        }

    async def _execute(
        self, request: Any, user: Any, di: Any, tracer: Tracer | None
    ) -> Result[Any, Any]:
        log = logger.bind(use_case=self.description)
        try:
            authorized = await self._check_authorization(user)
            if tracer is not None:
                tracer.authorized = authorized.is_ok()
            if authorized.is_err():
                log.info("use_case.denied", detail=authorized.detail)
                return authorized

            ctx: ExecutionContext[Any, Any] = ExecutionContext(
                req=request,
                di=di if di is not None else self._make_dependencies(),
                user=user,
            )
            if self._setup is not None:
                returned = self._setup(ctx)
                if inspect.isawaitable(returned):
                    await returned

            for hook in self._hooks:
                await hook.on_run_start(ctx)
            result = await self._run_children(ctx, tracer)
            for hook in self._hooks:
                await hook.on_run_end(ctx, result)
        except Exception as exc:
            log.error("use_case.fault", error_type=type(exc).__name__, error=str(exc))
            raise

        log.debug("use_case.completed", ok=result.is_ok())
        return result

    async def _check_authorization(self, user: Any) -> Result[Any, Any]:
        if self._authorize is None:
            return Ok()
        return await resolve_result(
            f"{self.description} (authorize)", self._authorize(user)
        )

    def _make_dependencies(self) -> Any:
        if self._dependencies is None:
            return SimpleNamespace()
        return self._dependencies()

    async def _run_children(
        self, ctx: ExecutionContext[Any, Any], tracer: Tracer | None
    ) -> Result[Any, Any]:
        result: Result[Any, Any] = Ok()
        for child in self._children:
            result = await child.execute(ctx, tracer)
            for hook in self._hooks:
                await hook.on_step(ctx, child, result)
            if result.is_err():
                break
        return result
