"""Configuration domain entities."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from pattern_validator.capture_schema.capture_fields import CaptureField


@dataclass(frozen=True)
class CheckerConfiguration:
    """Top-level checker configuration aggregate."""

    path: Path
    patterns: tuple[re.Pattern[str], ...]
    fields: tuple[CaptureField, ...]
    extra: str
