"""Exceptions raised by the alert counter and its adapters."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base exception for application specific errors."""

    status_code = 500
    error_code = "app_error"
    default_detail = "An unexpected error occurred."

    def __init__(self, detail: Optional[str] = None, *, extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail
        self.extra = extra or {}


class DomainError(AppError):
    """Normalized domain error surfaced to the CLI and API handlers."""


class BadRequestError(DomainError):
    status_code = 400
    error_code = "bad_request"
    default_detail = "Invalid request."


class Bound(str, Enum):
    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"


class OutOfRangeError(BadRequestError):
    """An input fell outside its allowed bounds."""

    error_code = "out_of_range"
    default_detail = "Value out of range."

    def __init__(self, field: str, bound: Bound, value: int, limit: int, *, index: Optional[int] = None) -> None:
        self.field = field
        self.bound = bound
        self.value = value
        self.limit = limit
        self.index = index

        name = field if index is None else f"{field}[{index}]"
        relation = "less than minimum" if bound is Bound.TOO_SMALL else "greater than maximum"
        payload: Dict[str, Any] = {"field": field, "bound": bound.value, "value": value, "limit": limit}
        if index is not None:
            payload["index"] = index
        super().__init__(f"{name}={value} {relation} {limit}", extra=payload)


class SampleParseError(BadRequestError):
    error_code = "invalid_samples"
    default_detail = "Could not parse call volume samples."

    def __init__(self, line_no: int, token: str) -> None:
        self.line_no = line_no
        self.token = token
        super().__init__(
            f"line {line_no}: {token!r} is not an integer call count",
            extra={"line": line_no, "token": token},
        )


class UnreadableSamplesError(BadRequestError):
    """The samples could not be read or decoded as UTF-8 text."""

    error_code = "invalid_samples"
    default_detail = "Could not read call volume samples."
