"""Stock validator adapter tests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import pytest
from pattern_validator.matching_validation.validation_outcomes import (
    CaptureValidator,
    ParseFailure,
    ParseSuccess,
)
from pattern_validator.matching_validation.validator_adapters import (
    FunctionValidator,
    PydanticValidator,
)
from pydantic import BaseModel, ConfigDict


class _Time(BaseModel):
    hours: int
    minutes: int


class _StrictTime(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hours: int
    minutes: int


@dataclass
class _Flag:
    name: str
    enabled: bool


def test_pydantic_validator_coerces_numeric_strings() -> None:
    outcome = PydanticValidator(_Time).safe_parse({"hours": "12", "minutes": "05"})

    assert isinstance(outcome, ParseSuccess)
    assert outcome.success is True
    assert outcome.value == _Time(hours=12, minutes=5)


def test_pydantic_validator_reports_coercion_failures_without_raising() -> None:
    outcome = PydanticValidator(_Time).safe_parse({"hours": "ab", "minutes": "05"})

    assert isinstance(outcome, ParseFailure)
    assert outcome.success is False
    assert len(outcome.errors) == 1
    assert outcome.errors[0].startswith("hours:")


def test_pydantic_validator_reports_missing_fields() -> None:
    outcome = PydanticValidator(_Time).safe_parse({"hours": "12"})

    assert isinstance(outcome, ParseFailure)
    assert any(error.startswith("minutes:") for error in outcome.errors)


def test_pydantic_validator_honors_forbidden_extra_fields() -> None:
    captures = {"hours": "12", "minutes": "30", "seconds": "15"}

    assert isinstance(PydanticValidator(_Time).safe_parse(captures), ParseSuccess)
    assert isinstance(PydanticValidator(_StrictTime).safe_parse(captures), ParseFailure)


def test_pydantic_validator_accepts_dataclass_and_mapping_targets() -> None:
    flag = PydanticValidator(_Flag).safe_parse({"name": "beta", "enabled": "true"})
    counts = PydanticValidator(dict[str, int]).safe_parse({"a": "1", "b": "2"})

    assert isinstance(flag, ParseSuccess)
    assert flag.value == _Flag(name="beta", enabled=True)
    assert isinstance(counts, ParseSuccess)
    assert counts.value == {"a": 1, "b": 2}


def test_function_validator_wraps_expected_errors() -> None:
    def _parse(captures: Mapping[str, str]) -> int:
        return int(captures["value"])

    validator = FunctionValidator(_parse)

    assert validator.safe_parse({"value": "7"}) == ParseSuccess(value=7)
    failure = validator.safe_parse({"value": "seven"})
    assert isinstance(failure, ParseFailure)
    assert failure.errors[0].startswith("ValueError:")
    assert isinstance(validator.safe_parse({}), ParseFailure)


def test_function_validator_propagates_unexpected_errors() -> None:
    def _broken(captures: Mapping[str, str]) -> int:
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError, match="bug"):
        FunctionValidator(_broken).safe_parse({"value": "1"})


def test_adapters_satisfy_capture_validator_protocol() -> None:
    assert isinstance(PydanticValidator(_Time), CaptureValidator)
    assert isinstance(FunctionValidator(dict), CaptureValidator)
    assert not isinstance(object(), CaptureValidator)
