"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

from .errors import AppError, as_validation_error


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    response = jsonify({"success": True, "data": data})
    response.status_code = status
    return response


def fail(error: AppError | Exception, *, status: int | None = None) -> Response:
    """Return a failure envelope; domain errors are reported as validation errors."""

    app_error = as_validation_error(error)
    response = jsonify({"success": False, "error": app_error.to_dict()})
    response.status_code = status or app_error.status_code
    return response


__all__ = ["ok", "fail"]
