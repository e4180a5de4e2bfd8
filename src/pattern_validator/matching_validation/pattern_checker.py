"""Regex capture extraction followed by validation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, cast

from .validation_outcomes import CaptureMap, CaptureValidator, ParseSuccess


class PatternConfigurationError(ValueError):
    """Raised when a checker is built from unusable patterns."""


@dataclass(frozen=True)
class PatternChecker:
    """Callable returned by :func:`build_checker`.

    Patterns are tried in order and the first one that matches decides the
    captures handed to the validator. Returns ``None`` when nothing matched,
    the matching pattern has no named groups, or validation failed.
    """

    validator: CaptureValidator
    patterns: tuple[re.Pattern[str], ...]

    def __call__(self, text: str) -> Any | None:
        match = _first_match(self.patterns, text)
        if match is None:
            return None

        if not match.re.groupindex:
            return None

        outcome = self.validator.safe_parse(_extract_captures(match))
        if outcome.success:
            return cast(ParseSuccess, outcome).value
        return None


def build_checker(
    validator: CaptureValidator,
    pattern: re.Pattern[str] | str,
    *alternate_patterns: re.Pattern[str] | str,
) -> PatternChecker:
    """Build a checker that matches ``pattern`` (then alternates) and validates captures."""
    patterns = tuple(_compile(candidate) for candidate in (pattern, *alternate_patterns))
    return PatternChecker(validator=validator, patterns=patterns)


def _first_match(patterns: tuple[re.Pattern[str], ...], text: str) -> re.Match[str] | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match is not None:
            return match
    return None


def _extract_captures(match: re.Match[str]) -> CaptureMap:
    # Groups that did not take part in the match are reported as missing.
    return {name: value for name, value in match.groupdict().items() if value is not None}


def _compile(candidate: object) -> re.Pattern[str]:
    if isinstance(candidate, re.Pattern):
        if not isinstance(candidate.pattern, str):
            raise PatternConfigurationError("Byte patterns cannot be matched against text.")
        return candidate
    if isinstance(candidate, str):
        try:
            return re.compile(candidate)
        except re.error as exc:
            raise PatternConfigurationError(f"Invalid pattern {candidate!r}: {exc}") from exc
    raise PatternConfigurationError(
        f"Patterns must be compiled regular expressions or strings, got {type(candidate).__name__}."
    )
