"""Capture schema exports."""

from .capture_fields import CaptureField
from .model_builder import (
    EXTRA_MODES,
    FIELD_TYPES,
    CaptureSchemaError,
    build_capture_model,
    coerce_default,
)

__all__ = [
    "CaptureField",
    "CaptureSchemaError",
    "EXTRA_MODES",
    "FIELD_TYPES",
    "build_capture_model",
    "coerce_default",
]
