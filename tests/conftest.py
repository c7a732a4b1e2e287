"""Shared pytest fixtures for usecase-engine tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest

from usecase_engine.config import get_settings
from usecase_engine.context import ExecutionContext
from usecase_engine.node import Step
from usecase_engine.result import Err, Ok


@pytest.fixture
def make_context() -> Callable[..., ExecutionContext[Any, Any]]:
    """Factory for creating ExecutionContext objects."""

    def _make(
        req: Any = None, di: Any = None, user: Any = None
    ) -> ExecutionContext[Any, Any]:
        return ExecutionContext(req=req if req is not None else {}, di=di, user=user)

    return _make


@pytest.fixture
def calls() -> list[str]:
    """Records step descriptions in execution order."""
    return []


@pytest.fixture
def ok_step(calls: list[str]) -> Callable[..., Step]:
    """Factory for steps that record their call and return Ok(value)."""

    def _make(description: str, value: Any = None) -> Step:
        def action(ctx: ExecutionContext[Any, Any]) -> Ok[Any]:
            calls.append(description)
            return Ok(value)

        return Step(description, action)

    return _make


@pytest.fixture
def err_step(calls: list[str]) -> Callable[..., Step]:
    """Factory for steps that record their call and return Err(detail)."""

    def _make(description: str, detail: Any = None) -> Step:
        def action(ctx: ExecutionContext[Any, Any]) -> Err[Any]:
            calls.append(description)
            return Err(detail)

        return Step(description, action)

    return _make


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Sample user dict for testing."""
    return {
        "id": "user-123",
        "roles": ["admin", "user"],
        "permissions": ["items.read", "items.write"],
    }


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch]:
    """Clear the settings cache so USECASE_* env changes are picked up."""
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()
