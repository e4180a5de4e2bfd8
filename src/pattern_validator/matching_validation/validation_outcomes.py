"""Capture validation contracts and outcome entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol, TypeAlias, runtime_checkable

CaptureMap: TypeAlias = Mapping[str, str]


@dataclass(frozen=True)
class ParseSuccess:
    """Captures were accepted and coerced into ``value``."""

    value: Any

    @property
    def success(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class ParseFailure:
    """Captures were rejected; ``errors`` holds human readable reasons."""

    errors: tuple[str, ...] = ()

    @property
    def success(self) -> Literal[False]:
        return False


ValidationOutcome: TypeAlias = ParseSuccess | ParseFailure


@runtime_checkable
class CaptureValidator(Protocol):
    """Anything that can turn raw named captures into a typed value.

    Implementations must report expected shape or coercion mismatches as a
    ``ParseFailure`` instead of raising. Outcomes are read through their
    ``success`` flag, and successful ones through ``value``.
    """

    def safe_parse(self, captures: CaptureMap) -> ValidationOutcome:
        """Validate and coerce one capture mapping."""
        ...
