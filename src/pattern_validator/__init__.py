"""Match text against regular expressions and validate the named captures."""

import logging

from .matching_validation import (
    CaptureValidator,
    FunctionValidator,
    ParseFailure,
    ParseSuccess,
    PatternChecker,
    PatternConfigurationError,
    PydanticValidator,
    build_checker,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CaptureValidator",
    "FunctionValidator",
    "ParseFailure",
    "ParseSuccess",
    "PatternChecker",
    "PatternConfigurationError",
    "PydanticValidator",
    "build_checker",
]
