"""Configuration loader service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from functools import reduce
from pathlib import Path
from typing import Any

import yaml

from pattern_validator.capture_schema import (
    EXTRA_MODES,
    FIELD_TYPES,
    CaptureField,
    CaptureSchemaError,
    build_capture_model,
    coerce_default,
)
from pattern_validator.matching_validation import (
    PatternChecker,
    PydanticValidator,
    build_checker,
)

from .runtime_settings import CheckerConfiguration

logger = logging.getLogger(__name__)

_UNSUPPORTED_FLAGS = frozenset({"DEBUG", "TEMPLATE", "T"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> CheckerConfiguration:
    """Load and validate the checker configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    flags = _parse_flags(parsed.get("flags"))
    patterns = _parse_patterns(parsed.get("patterns"), flags)
    fields = _parse_fields(parsed.get("fields"))
    extra = _parse_extra(parsed.get("extra", "ignore"))

    logger.debug(
        "Loaded %d pattern(s) and %d field(s) from %s", len(patterns), len(fields), path
    )
    return CheckerConfiguration(path=path, patterns=patterns, fields=fields, extra=extra)


def build_configured_checker(configuration: CheckerConfiguration) -> PatternChecker:
    """Build the checker described by a loaded configuration."""
    try:
        model = build_capture_model(configuration.fields, extra=configuration.extra)
    except CaptureSchemaError as exc:
        raise ConfigurationError(str(exc)) from exc
    first, *alternates = configuration.patterns
    return build_checker(PydanticValidator(model), first, *alternates)


def _parse_flags(value: Any) -> re.RegexFlag:
    if value is None:
        return re.RegexFlag(0)
    names = [value] if isinstance(value, str) else value
    if not isinstance(names, Sequence):
        raise ConfigurationError("flags must be a string or list of strings.")
    flags: list[re.RegexFlag] = []
    for name in names:
        normalized = _require_non_empty_string(name, "flags entry").upper()
        if normalized in _UNSUPPORTED_FLAGS:
            raise ConfigurationError(f"Unsupported regular expression flag: {name}")
        flag = re.RegexFlag.__members__.get(normalized)
        if flag is None:
            raise ConfigurationError(f"Unknown regular expression flag: {name}")
        flags.append(flag)
    return reduce(lambda combined, flag: combined | flag, flags, re.RegexFlag(0))


def _parse_patterns(value: Any, flags: re.RegexFlag) -> tuple[re.Pattern[str], ...]:
    if value is None:
        raise ConfigurationError("Configuration section 'patterns' is required.")
    raw_patterns = [value] if isinstance(value, str) else value
    if not isinstance(raw_patterns, Sequence):
        raise ConfigurationError("patterns must be a string or list of strings.")
    if not raw_patterns:
        raise ConfigurationError("patterns must contain at least one pattern.")

    compiled: list[re.Pattern[str]] = []
    for index, raw in enumerate(raw_patterns):
        label = f"patterns[{index}]"
        if not isinstance(raw, str) or not raw:
            raise ConfigurationError(f"{label} must be a non-empty string.")
        try:
            compiled.append(re.compile(raw, flags))
        except (re.error, ValueError) as exc:
            raise ConfigurationError(f"{label} is not a valid regular expression: {exc}") from exc
    return tuple(compiled)


def _parse_fields(value: Any) -> tuple[CaptureField, ...]:
    section = _require_mapping(value, "fields")
    if not section:
        raise ConfigurationError("fields must declare at least one capture field.")
    return tuple(_parse_field(name, spec) for name, spec in section.items())


def _parse_field(name: Any, spec: Any) -> CaptureField:
    field_name = _require_non_empty_string(name, "fields key")
    label = f"fields.{field_name}"
    if isinstance(spec, str):
        return CaptureField(name=field_name, type_name=_require_type_name(spec, label))

    mapping = _require_mapping(spec, label)
    type_name = _require_type_name(mapping.get("type"), f"{label}.type")
    required = mapping.get("required", "default" not in mapping)
    if not isinstance(required, bool):
        raise ConfigurationError(f"{label}.required must be a boolean.")
    if required and "default" in mapping:
        raise ConfigurationError(f"{label} is required and cannot declare a default.")
    field = CaptureField(
        name=field_name,
        type_name=type_name,
        required=required,
        default=mapping.get("default"),
    )
    try:
        coerce_default(field)
    except CaptureSchemaError as exc:
        raise ConfigurationError(str(exc)) from exc
    return field


def _parse_extra(value: Any) -> str:
    extra = _require_non_empty_string(value, "extra").lower()
    if extra not in EXTRA_MODES:
        raise ConfigurationError(f"extra must be one of: {', '.join(EXTRA_MODES)}.")
    return extra


def _require_type_name(value: Any, field_name: str) -> str:
    type_name = _require_non_empty_string(value, field_name).lower()
    if type_name not in FIELD_TYPES:
        raise ConfigurationError(
            f"{field_name} '{type_name}' is not supported. "
            f"Expected one of: {', '.join(FIELD_TYPES)}."
        )
    return type_name


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
