"""Multi-fold integrals solved one variable at a time."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from .errors import EvaluationError
from .expression import compile_expression
from .integral_notation import IntegralSpec, parse_integral, split_factors
from .outcome import Err, Ok, Outcome
from .quadrature import integrate
from .settings import (
    DEFAULT_MAX_EXPRESSION_LENGTH,
    DEFAULT_MAX_INTEGRAL_ORDER,
    INTEGRAL_LOWER_BOUND,
    INTEGRAL_UPPER_BOUND,
    QUADRATURE_SUBDIVISIONS,
)


@dataclass(frozen=True, slots=True)
class FactorResult:
    part: str
    result: float
    order: int

    def to_dict(self) -> dict[str, object]:
        return {"part": self.part, "result": self.result, "order": self.order}


@dataclass(frozen=True, slots=True)
class IntegralReport:
    """Product of independently solved integral factors."""

    total: float
    factors: tuple[FactorResult, ...]

    def to_text(self) -> str:
        details = "\n".join(
            f"{item.part} ({item.order}-fold integral) = {item.result:.6f}" for item in self.factors
        )
        return f"Result = {self.total:.6f}\n\nDetails:\n{details}"

    def to_dict(self) -> dict[str, object]:
        return {
            "total": self.total,
            "factors": [item.to_dict() for item in self.factors],
            "text": self.to_text(),
        }


def solve_nested_integral(
    spec: IntegralSpec,
    *,
    subdivisions: int = QUADRATURE_SUBDIVISIONS,
    max_length: int = DEFAULT_MAX_EXPRESSION_LENGTH,
) -> Outcome[float]:
    """Integrate ``spec.integrand`` over the unit interval once per variable.

    Depth ``d`` integrates over ``spec.variables[d]`` with every outer
    variable already bound; the innermost level evaluates the integrand.
    Any evaluation failure fails the whole integral.
    """

    compiled = compile_expression(spec.integrand, max_length=max_length)
    if not compiled.ok:
        return compiled
    integrand = compiled.value
    depth_limit = len(spec.variables)

    def solve_level(depth: int, bindings: Mapping[str, float]) -> float:
        if depth == depth_limit:
            return integrand.evaluate(bindings).unwrap()
        variable = spec.variables[depth]
        return integrate(
            lambda value: solve_level(depth + 1, {**bindings, variable: value}),
            INTEGRAL_LOWER_BOUND,
            INTEGRAL_UPPER_BOUND,
            subdivisions,
        )

    try:
        result = solve_level(0, {})
    except EvaluationError as exc:
        return Err(exc)
    if not math.isfinite(result):
        return Err(EvaluationError("Integral is not finite"))
    return Ok(result)


def solve_integral_expression(
    text: str,
    *,
    subdivisions: int = QUADRATURE_SUBDIVISIONS,
    max_length: int = DEFAULT_MAX_EXPRESSION_LENGTH,
    max_order: int = DEFAULT_MAX_INTEGRAL_ORDER,
) -> Outcome[IntegralReport]:
    """Solve every ``*``-separated integral factor and multiply the results.

    Every factor is parsed and checked against ``max_order`` before any
    quadrature runs; each extra fold multiplies the work by ``2 * subdivisions``.
    """

    parts: list[tuple[str, IntegralSpec]] = []
    for part in split_factors(text):
        parsed = parse_integral(part)
        if not parsed.ok:
            return parsed
        if parsed.value.order > max_order:
            return Err(
                EvaluationError(
                    f"Integral order {parsed.value.order} exceeds the limit of {max_order}"
                )
            )
        parts.append((part, parsed.value))

    factors: list[FactorResult] = []
    for part, spec in parts:
        solved = solve_nested_integral(spec, subdivisions=subdivisions, max_length=max_length)
        if not solved.ok:
            return solved
        factors.append(FactorResult(part=part, result=solved.value, order=spec.order))
    total = math.prod((item.result for item in factors), start=1.0)
    return Ok(IntegralReport(total=total, factors=tuple(factors)))


__all__ = [
    "FactorResult",
    "IntegralReport",
    "solve_nested_integral",
    "solve_integral_expression",
]
