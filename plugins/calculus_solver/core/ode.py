"""Forward Euler stepping for ``dy/dx = f(x, y)``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .expression import compile_expression
from .outcome import Err, Ok, Outcome
from .settings import (
    DEFAULT_MAX_EXPRESSION_LENGTH,
    ODE_INITIAL_X,
    ODE_INITIAL_Y,
    ODE_STEP,
    ODE_STEPS,
)

DERIVATIVE_MARKER = "dy/dx"

_DERIVATIVE_PATTERN = re.compile(re.escape(DERIVATIVE_MARKER), re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class DifferentialEquationSpec:
    rhs: str
    x0: float = ODE_INITIAL_X
    y0: float = ODE_INITIAL_Y
    step: float = ODE_STEP
    steps: int = ODE_STEPS


def has_differential_equation(text: str) -> bool:
    return DERIVATIVE_MARKER in text.lower()


def parse_differential_equation(text: str) -> DifferentialEquationSpec:
    """Drop the first ``dy/dx`` and the first ``=``; the rest is ``f(x, y)``."""

    rhs = _DERIVATIVE_PATTERN.sub("", text, count=1)
    rhs = rhs.replace("=", "", 1).strip()
    return DifferentialEquationSpec(rhs=rhs)


def solve_differential_equation(
    spec: DifferentialEquationSpec,
    *,
    max_length: int = DEFAULT_MAX_EXPRESSION_LENGTH,
) -> Outcome[tuple[Point, ...]]:
    """Return ``spec.steps + 1`` samples starting at ``(x0, y0)``.

    ``x`` is advanced by repeated addition, so later abscissae carry the
    accumulated rounding of ``step``. The slope is evaluated after each
    sample is recorded, including the last one.
    """

    compiled = compile_expression(spec.rhs, max_length=max_length)
    if not compiled.ok:
        return compiled
    rhs = compiled.value

    points: list[Point] = []
    x, y = spec.x0, spec.y0
    for _ in range(spec.steps + 1):
        points.append(Point(x=x, y=y))
        slope = rhs.evaluate({"x": x, "y": y})
        if not slope.ok:
            return Err(slope.error)
        y += spec.step * slope.value
        x += spec.step
    return Ok(tuple(points))


__all__ = [
    "DERIVATIVE_MARKER",
    "Point",
    "DifferentialEquationSpec",
    "has_differential_equation",
    "parse_differential_equation",
    "solve_differential_equation",
]
