"""Build pydantic capture models from declarative field specs."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, create_model

from .capture_fields import CaptureField

FIELD_TYPES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "decimal": Decimal,
}
EXTRA_MODES = ("ignore", "forbid")


class CaptureSchemaError(Exception):
    """Raised when capture field declarations cannot form a model."""


def build_capture_model(
    fields: Sequence[CaptureField],
    *,
    extra: str = "ignore",
    model_name: str = "Captures",
) -> type[BaseModel]:
    """Return a pydantic model with one attribute per declared capture field."""
    if not fields:
        raise CaptureSchemaError("At least one capture field must be declared.")
    if extra not in EXTRA_MODES:
        raise CaptureSchemaError(
            f"Unsupported extra mode '{extra}'. Expected one of: {', '.join(EXTRA_MODES)}."
        )

    definitions: dict[str, Any] = {}
    for field in fields:
        if not field.name.isidentifier() or field.name.startswith("_"):
            raise CaptureSchemaError(f"Invalid capture field name '{field.name}'.")
        if field.name in definitions:
            raise CaptureSchemaError(f"Duplicate capture field '{field.name}'.")
        definitions[field.name] = _field_definition(field)

    return create_model(  # type: ignore[call-overload, no-any-return]
        model_name,
        __config__=ConfigDict(extra=extra, frozen=True),  # type: ignore[typeddict-item]
        **definitions,
    )


def _field_definition(field: CaptureField) -> tuple[Any, Any]:
    field_type = FIELD_TYPES.get(field.type_name)
    if field_type is None:
        raise CaptureSchemaError(
            f"Capture field '{field.name}' has unsupported type '{field.type_name}'."
        )
    if field.required:
        if field.default is not None:
            raise CaptureSchemaError(
                f"Capture field '{field.name}' is required and cannot declare a default."
            )
        return field_type, ...
    return field_type | None, coerce_default(field)


def coerce_default(field: CaptureField) -> Any:
    """Validate an optional field's default against its declared type."""
    if field.default is None:
        return None
    field_type = FIELD_TYPES.get(field.type_name)
    if field_type is None:
        raise CaptureSchemaError(
            f"Capture field '{field.name}' has unsupported type '{field.type_name}'."
        )
    try:
        return TypeAdapter(field_type).validate_python(field.default)
    except ValidationError as exc:
        raise CaptureSchemaError(
            f"Default {field.default!r} of capture field '{field.name}' is not a valid "
            f"{field.type_name}."
        ) from exc
