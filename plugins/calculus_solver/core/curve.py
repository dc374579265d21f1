"""Sampling of plain, integral and differential-equation input for graphs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from .expression import compile_expression
from .integral_notation import has_integral, parse_integral
from .ode import Point, has_differential_equation, parse_differential_equation, solve_differential_equation
from .settings import (
    DEFAULT_MAX_EXPRESSION_LENGTH,
    GRAPH_ODE_TOLERANCE,
    GRAPH_X_START,
    GRAPH_X_STEP,
    GRAPH_X_STOP,
)

# Bare tokens rewritten to their ``math.`` qualified spelling before plotting.
_QUALIFY_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"(?<![\w.]){name}\("), f"math.{name}(")
    for name in ("sin", "cos", "tan", "cot", "sec", "csc")
) + (
    (re.compile(r"(?<![\w.])pi(?![\w])"), "math.pi"),
    (re.compile(r"(?<![\w.])e(?![a-zA-Z0-9_])"), "math.e"),
)


@dataclass(frozen=True, slots=True)
class Sample:
    x: float
    y: float | None

    def to_dict(self) -> dict[str, float | None]:
        return {"x": self.x, "y": self.y}


Curve = tuple[Sample, ...]


def graph_grid(
    start: float = GRAPH_X_START,
    stop: float = GRAPH_X_STOP,
    step: float = GRAPH_X_STEP,
) -> list[float]:
    """Abscissae ``start + i * step``; indexing keeps ``x = 0`` exact."""

    count = int(round((stop - start) / step)) + 1
    return [start + i * step for i in range(count)]


def qualify_tokens(text: str) -> str:
    for pattern, replacement in _QUALIFY_RULES:
        text = pattern.sub(replacement, text)
    return text


def _sample_function(fn: Callable[[float], float | None], xs: Sequence[float]) -> Curve:
    return tuple(Sample(x=x, y=fn(x)) for x in xs)


def _absent(_: float) -> None:
    return None


def _expression_sampler(expression: str, max_length: int) -> Callable[[float], float | None]:
    compiled = compile_expression(expression, max_length=max_length)
    if not compiled.ok:
        return _absent
    function = compiled.value

    def sample_at(x: float) -> float | None:
        outcome = function.evaluate({"x": x})
        return outcome.value if outcome.ok else None

    return sample_at


def _nearest_sampler(points: Sequence[Point], tolerance: float) -> Callable[[float], float | None]:
    def sample_at(x: float) -> float | None:
        nearest = min(points, key=lambda point: abs(point.x - x), default=None)
        if nearest is None or abs(nearest.x - x) >= tolerance:
            return None
        return nearest.y

    return sample_at


def sample_curve(
    text: str,
    *,
    max_length: int = DEFAULT_MAX_EXPRESSION_LENGTH,
) -> Curve:
    """Sample ``text`` over the graph grid; failed points have ``y=None``.

    Integral input plots its integrand at each x rather than an accumulated
    integral. Differential-equation input is solved once and each grid x
    reuses the nearest Euler sample closer than the tolerance.
    """

    xs = graph_grid()
    if has_integral(text):
        parsed = parse_integral(text)
        if not parsed.ok:
            return _sample_function(_absent, xs)
        return _sample_function(_expression_sampler(parsed.value.integrand, max_length), xs)

    if has_differential_equation(text):
        solved = solve_differential_equation(parse_differential_equation(text), max_length=max_length)
        if not solved.ok:
            return _sample_function(_absent, xs)
        return _sample_function(_nearest_sampler(solved.value, GRAPH_ODE_TOLERANCE), xs)

    return _sample_function(_expression_sampler(qualify_tokens(text), max_length), xs)


__all__ = ["Sample", "Curve", "graph_grid", "qualify_tokens", "sample_curve"]
