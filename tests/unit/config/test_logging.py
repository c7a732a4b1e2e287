"""Tests for structlog configuration and engine log events."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from usecase_engine.config import Settings, configure_logging
from usecase_engine.node import Step
from usecase_engine.result import Err, Ok
from usecase_engine.usecase import UseCase


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logging state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    engine = logging.getLogger("usecase_engine")
    engine_level = engine.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    engine.setLevel(engine_level)
    structlog.reset_defaults()


def _json_lines(err: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(Settings(verbose=True))
        assert logging.getLogger("usecase_engine").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_level_is_info(self) -> None:
        configure_logging(Settings())
        assert logging.getLogger("usecase_engine").level == logging.INFO

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(Settings(verbose=True, log_json=True))
        structlog.get_logger("usecase_engine.test").warning("json test", answer=42)
        parsed = _json_lines(capfd.readouterr().err)[-1]
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "usecase_engine.test"
        assert "timestamp" in parsed


class TestEngineEvents:
    async def test_denial_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(Settings(log_json=True))
        uc = UseCase("Delete list", authorize=lambda user: Err("not owner"))
        await uc.run({}, None)
        events = _json_lines(capfd.readouterr().err)
        denied = [e for e in events if e["event"] == "use_case.denied"]
        assert denied[0]["use_case"] == "Delete list"
        assert denied[0]["detail"] == "not owner"

    async def test_fault_logged_before_reraise(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        def boom(ctx: object) -> Ok[None]:
            raise RuntimeError("boom")

        configure_logging(Settings(log_json=True))
        with pytest.raises(RuntimeError):
            await UseCase("uc", Step("boom", boom)).run({})
        events = _json_lines(capfd.readouterr().err)
        fault = [e for e in events if e["event"] == "use_case.fault"][0]
        assert fault["level"] == "error"
        assert fault["error_type"] == "RuntimeError"

    async def test_audit_summary_when_enabled(
        self,
        fresh_settings: pytest.MonkeyPatch,
        capfd: pytest.CaptureFixture[str],
    ) -> None:
        fresh_settings.setenv("USECASE_LOG_AUDITS", "true")
        configure_logging(Settings(log_json=True))
        _, trace = await UseCase("uc", Step("s", lambda ctx: Ok())).audit({})
        events = _json_lines(capfd.readouterr().err)
        audited = [e for e in events if e["event"] == "use_case.audited"][0]
        assert audited["transaction_id"] == trace.transaction_id
        assert audited["ok"] is True
        assert audited["steps"] == 1

    async def test_no_audit_summary_by_default(
        self,
        fresh_settings: pytest.MonkeyPatch,
        capfd: pytest.CaptureFixture[str],
    ) -> None:
        fresh_settings.delenv("USECASE_LOG_AUDITS", raising=False)
        configure_logging(Settings(log_json=True))
        await UseCase("uc").audit({})
        events = _json_lines(capfd.readouterr().err)
        assert not [e for e in events if e["event"] == "use_case.audited"]
