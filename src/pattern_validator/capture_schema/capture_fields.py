"""Capture schema entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CaptureField:
    """Declared type of one named capture group."""

    name: str
    type_name: str
    required: bool = True
    default: Any = None
