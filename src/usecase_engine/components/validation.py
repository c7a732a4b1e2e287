"""ValidateRequest — a step enforcing a declared request shape with pydantic."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, get_origin

from pydantic import AfterValidator, BaseModel, ValidationError, create_model

from usecase_engine.context import ExecutionContext
from usecase_engine.doc import RequestShape
from usecase_engine.exceptions import InvalidDefinition
from usecase_engine.node import Step
from usecase_engine.result import Err, Ok, Result


def _field_type(declared: Any) -> Any:
    """Turn a declared type or validator callable into a pydantic field type."""
    if isinstance(declared, type) or get_origin(declared) is not None:
        return declared
    if callable(declared):
        return Annotated[Any, AfterValidator(declared)]
    raise InvalidDefinition(f"Cannot validate against {declared!r}")


def build_model(shape: RequestShape, name: str = "Request") -> type[BaseModel]:
    """Return a pydantic model class for a request shape."""
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return shape
    if not isinstance(shape, Mapping):
        raise InvalidDefinition(f"Unsupported request shape: {shape!r}")
    fields: dict[str, Any] = {
        field_name: (_field_type(declared), ...)
        for field_name, declared in shape.items()
    }
    return create_model(name, **fields)


class ValidateRequest(Step):
    """Validate ``ctx.req`` against ``shape``.

    Uses the same notation as ``UseCase(request=...)``: a mapping of field
    name to type or validator callable, or a pydantic model class. Validator
    callables follow pydantic's convention: return the value or raise
    ``ValueError``. The validated model is published as ``ctx.ret[key]``.
    """

    def __init__(
        self,
        shape: RequestShape,
        description: str = "Validate request",
        *,
        key: str = "request",
    ) -> None:
        super().__init__(description)
        self.shape = shape
        self.key = key
        self._model = build_model(shape)

    async def run(self, ctx: ExecutionContext[Any, Any]) -> Result[Any, Any]:
        try:
            validated = self._model.model_validate(ctx.req)
        except ValidationError as exc:
            return Err(exc.errors(include_url=False, include_context=False))
        ctx.ret[self.key] = validated
        return Ok(validated)
