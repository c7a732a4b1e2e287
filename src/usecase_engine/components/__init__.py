"""Built-in steps and authorization predicates."""

from usecase_engine.components.permissions import (
    allow_all,
    authenticated,
    has_permission,
    has_role,
)
from usecase_engine.components.validation import ValidateRequest, build_model

__all__ = [
    "ValidateRequest",
    "allow_all",
    "authenticated",
    "build_model",
    "has_permission",
    "has_role",
]
