"""Raw input checks applied before the engine sees a formula."""

from __future__ import annotations

import re

from .errors import ValidationError
from .outcome import Err, Ok, Outcome
from .settings import ZERO_SNAP_EPSILON

_DISALLOWED_OPERATORS = ("++", "--", "**", "//", "==")
_MARKUP = re.compile(r"[<>]")
_LINE_SEPARATORS = re.compile("[\u2028\u2029]")


def sanitize_input(text: str) -> str:
    """Strip markup brackets and normalize unicode line separators."""

    text = _MARKUP.sub("", text)
    text = _LINE_SEPARATORS.sub("\n", text)
    return text.strip()


def validate_expression(text: str) -> Outcome[str]:
    if not text or not text.strip():
        return Err(ValidationError("Expression cannot be empty"))

    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return Err(ValidationError("Unmatched closing parenthesis"))
            depth -= 1
    if depth > 0:
        return Err(ValidationError("Unmatched opening parenthesis"))

    for operator in _DISALLOWED_OPERATORS:
        if operator in text:
            return Err(ValidationError(f"Invalid operator: {operator}"))
    return Ok(text)


def snap_to_zero(value: float, epsilon: float = ZERO_SNAP_EPSILON) -> float:
    """Report floating-point noise below ``epsilon`` as an exact zero."""

    return 0.0 if abs(value) < epsilon else value


__all__ = ["sanitize_input", "validate_expression", "snap_to_zero"]
