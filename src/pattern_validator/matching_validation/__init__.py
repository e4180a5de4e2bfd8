"""Matching and validation domain exports."""

from .pattern_checker import PatternChecker, PatternConfigurationError, build_checker
from .validation_outcomes import (
    CaptureMap,
    CaptureValidator,
    ParseFailure,
    ParseSuccess,
    ValidationOutcome,
)
from .validator_adapters import FunctionValidator, PydanticValidator

__all__ = [
    "CaptureMap",
    "CaptureValidator",
    "ParseSuccess",
    "ParseFailure",
    "ValidationOutcome",
    "PatternChecker",
    "PatternConfigurationError",
    "build_checker",
    "PydanticValidator",
    "FunctionValidator",
]
