"""Shared type aliases for user-supplied callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Union

from usecase_engine.context import ExecutionContext
from usecase_engine.result import Result

# Callables may be plain functions or coroutine functions
StepAction = Callable[
    [ExecutionContext[Any, Any]],
    Union[Result[Any, Any], Awaitable[Result[Any, Any]]],
]
AuthorizeCallback = Callable[
    [Any], Union[Result[Any, Any], Awaitable[Result[Any, Any]]]
]
SetupCallback = Callable[[ExecutionContext[Any, Any]], Union[None, Awaitable[None]]]
DependencyFactory = Callable[[], Any]
