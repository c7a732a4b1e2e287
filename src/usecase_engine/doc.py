"""Doc tree generation — request shape labels for use case documentation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, get_origin

from pydantic import BaseModel

RequestShape = Mapping[str, Any] | type[BaseModel]


def type_label(declared: Any) -> str:
    """Human-readable label for a declared type or validator."""
    if isinstance(declared, str):
        return declared
    if get_origin(declared) is not None:
        return repr(declared).replace("typing.", "")
    if isinstance(declared, type):
        return declared.__name__
    if callable(declared) and hasattr(declared, "__name__"):
        return str(declared.__name__)
    return repr(declared).replace("typing.", "")


def describe_shape(shape: RequestShape | None) -> dict[str, str]:
    """Map each declared request field to its label, preserving order."""
    if shape is None:
        return {}
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return {
            name: type_label(info.annotation)
            for name, info in shape.model_fields.items()
        }
    return {name: type_label(declared) for name, declared in shape.items()}
