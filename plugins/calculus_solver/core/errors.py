"""Error taxonomy for the calculus engine."""

from __future__ import annotations


class CalculatorError(ValueError):
    """Base class for engine failures surfaced to callers."""

    code = "calc.error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class ValidationError(CalculatorError):
    """Raw input rejected before any numeric work."""

    code = "calc.invalid_input"


class ParseError(CalculatorError):
    """Integral notation could not be extracted."""

    code = "calc.invalid_integral"


class EvaluationError(CalculatorError):
    """An expression could not be evaluated to a finite real number."""

    code = "calc.invalid_expression"


__all__ = ["CalculatorError", "ValidationError", "ParseError", "EvaluationError"]
