"""Contract tests — verify all public symbols are importable from top-level."""

from __future__ import annotations

import usecase_engine

PUBLIC_SYMBOLS = [
    # Core
    "UseCase",
    "Step",
    "Branch",
    "Node",
    "NodeKind",
    "ExecutionContext",
    # Result
    "Ok",
    "Err",
    "Result",
    # Exceptions
    "UseCaseException",
    "InvalidDefinition",
    "InvalidStepReturn",
    # Trace
    "Tracer",
    "AuditTrace",
    "TraceEntry",
    # Hooks
    "UseCaseHook",
    "BeforeRun",
    "AfterRun",
    "AfterStep",
    # Built-in components
    "ValidateRequest",
    "allow_all",
    "authenticated",
    "has_role",
    "has_permission",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
]


class TestPublicAPI:
    def test_all_symbols_importable(self) -> None:
        for name in PUBLIC_SYMBOLS:
            assert hasattr(usecase_engine, name), f"{name} not exported"

    def test_all_matches_public_symbols(self) -> None:
        assert set(usecase_engine.__all__) == set(PUBLIC_SYMBOLS)

    def test_no_extra_exports(self) -> None:
        for name in usecase_engine.__all__:
            assert name in PUBLIC_SYMBOLS, f"Unexpected export: {name}"
