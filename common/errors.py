"""Common error types and helpers for API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping


@dataclass(slots=True)
class AppError(Exception):
    """Base application error with a JSON friendly payload."""

    message: str
    code: str = "error"
    status_code: int = 400
    details: Mapping[str, Any] | None = None

    def to_dict(self) -> Mapping[str, Any]:
        payload: MutableMapping[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details or {}),
        }
        return payload


@dataclass(slots=True)
class ValidationAppError(AppError):
    """Error raised for invalid user input."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class NotFoundAppError(AppError):
    """Error raised when a resource is missing."""

    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class InternalAppError(AppError):
    """Generic internal error wrapper to avoid leaking implementation details."""

    code: str = "internal_error"
    status_code: int = 500


def as_validation_error(error: Exception, *, fallback_code: str = "validation_error") -> AppError:
    """Wrap a domain error exposing ``message``/``code`` as a 400 response error."""

    if isinstance(error, AppError):
        return error
    message = getattr(error, "message", None) or str(error)
    code = getattr(error, "code", None) or fallback_code
    return ValidationAppError(message=message, code=code)


__all__ = [
    "AppError",
    "ValidationAppError",
    "NotFoundAppError",
    "InternalAppError",
    "as_validation_error",
]
