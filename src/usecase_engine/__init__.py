"""usecase-engine - declarative use cases with documentation and audit trails."""

from usecase_engine.components.permissions import (
    allow_all,
    authenticated,
    has_permission,
    has_role,
)
from usecase_engine.components.validation import ValidateRequest
from usecase_engine.config import Settings, configure_logging, get_settings
from usecase_engine.context import ExecutionContext
from usecase_engine.exceptions import (
    InvalidDefinition,
    InvalidStepReturn,
    UseCaseException,
)
from usecase_engine.hooks import AfterRun, AfterStep, BeforeRun, UseCaseHook
from usecase_engine.node import Branch, Node, NodeKind, Step
from usecase_engine.result import Err, Ok, Result
from usecase_engine.trace import AuditTrace, TraceEntry, Tracer
from usecase_engine.usecase import UseCase

__all__ = [
    "AfterRun",
    "AfterStep",
    "AuditTrace",
    "BeforeRun",
    "Branch",
    "Err",
    "ExecutionContext",
    "InvalidDefinition",
    "InvalidStepReturn",
    "Node",
    "NodeKind",
    "Ok",
    "Result",
    "Settings",
    "Step",
    "TraceEntry",
    "Tracer",
    "UseCase",
    "UseCaseException",
    "UseCaseHook",
    "ValidateRequest",
    "allow_all",
    "authenticated",
    "configure_logging",
    "get_settings",
    "has_permission",
    "has_role",
]
