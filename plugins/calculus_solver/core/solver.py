"""The "solve" action: dispatch on the notation found in the input."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .expression import evaluate, format_number
from .integral_notation import has_integral
from .nested_integral import FactorResult, solve_integral_expression
from .ode import Point, has_differential_equation, parse_differential_equation, solve_differential_equation
from .outcome import Ok, Outcome
from .settings import DEFAULT_MAX_EXPRESSION_LENGTH, DEFAULT_MAX_INTEGRAL_ORDER, QUADRATURE_SUBDIVISIONS
from .validation import snap_to_zero

SolveKind = Literal["integral", "differential_equation", "expression"]


@dataclass(frozen=True, slots=True)
class SolveResult:
    kind: SolveKind
    text: str
    value: float | None = None
    factors: tuple[FactorResult, ...] = field(default_factory=tuple)
    points: tuple[Point, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind,
            "text": self.text,
            "value": self.value,
            "factors": [item.to_dict() for item in self.factors],
            "points": [item.to_dict() for item in self.points],
        }


def solve(
    text: str,
    *,
    subdivisions: int = QUADRATURE_SUBDIVISIONS,
    max_length: int = DEFAULT_MAX_EXPRESSION_LENGTH,
    max_order: int = DEFAULT_MAX_INTEGRAL_ORDER,
) -> Outcome[SolveResult]:
    """Solve an integral, a first-order ODE or a plain expression."""

    if has_integral(text):
        report = solve_integral_expression(
            text, subdivisions=subdivisions, max_length=max_length, max_order=max_order
        )
        if not report.ok:
            return report
        return Ok(
            SolveResult(
                kind="integral",
                text=report.value.to_text(),
                value=report.value.total,
                factors=report.value.factors,
            )
        )

    if has_differential_equation(text):
        solved = solve_differential_equation(parse_differential_equation(text), max_length=max_length)
        if not solved.ok:
            return solved
        lines = "\n".join(f"x = {format_number(p.x)}, y = {format_number(p.y)}" for p in solved.value)
        return Ok(SolveResult(kind="differential_equation", text=lines, points=solved.value))

    evaluated = evaluate(text, max_length=max_length)
    if not evaluated.ok:
        return evaluated
    value = snap_to_zero(evaluated.value)
    return Ok(SolveResult(kind="expression", text=format_number(value), value=value))


__all__ = ["SolveKind", "SolveResult", "solve"]
