"""Stock capture validators."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .validation_outcomes import CaptureMap, ParseFailure, ParseSuccess, ValidationOutcome


class PydanticValidator:
    """Validate captures against any type pydantic understands.

    ``target`` may be a ``BaseModel`` subclass, a ``TypedDict``, a dataclass
    or any other annotation accepted by ``pydantic.TypeAdapter``. Validation
    runs in lax mode, so numeric and boolean strings are coerced.
    """

    def __init__(self, target: Any) -> None:
        self.target = target
        self._adapter: TypeAdapter[Any] = TypeAdapter(target)

    def safe_parse(self, captures: CaptureMap) -> ValidationOutcome:
        try:
            value = self._adapter.validate_python(dict(captures))
        except ValidationError as exc:
            return ParseFailure(errors=tuple(_format_error(error) for error in exc.errors()))
        return ParseSuccess(value=value)

    def __repr__(self) -> str:
        return f"PydanticValidator({getattr(self.target, '__name__', self.target)!r})"


class FunctionValidator:
    """Adapt a plain coercion function into a capture validator.

    The listed ``expected_errors`` become a ``ParseFailure``; anything else
    is a bug in ``func`` and propagates.
    """

    def __init__(
        self,
        func: Callable[[CaptureMap], Any],
        *,
        expected_errors: tuple[type[Exception], ...] = (ValueError, TypeError, KeyError),
    ) -> None:
        self.func = func
        self.expected_errors = expected_errors

    def safe_parse(self, captures: CaptureMap) -> ValidationOutcome:
        try:
            value = self.func(captures)
        except self.expected_errors as exc:
            return ParseFailure(errors=(f"{type(exc).__name__}: {exc}",))
        return ParseSuccess(value=value)


def _format_error(error: Any) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
