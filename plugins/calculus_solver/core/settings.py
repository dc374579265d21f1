"""Numeric constants and configuration helpers for the calculus solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

# Integration domain applied to every variable of an integral.
INTEGRAL_LOWER_BOUND: Final[float] = 0.0
INTEGRAL_UPPER_BOUND: Final[float] = 1.0

# Composite quadrature subdivisions.
QUADRATURE_SUBDIVISIONS: Final[int] = 1000

# Explicit Euler stepping for dy/dx = f(x, y).
ODE_INITIAL_X: Final[float] = 0.0
ODE_INITIAL_Y: Final[float] = 1.0
ODE_STEP: Final[float] = 0.1
ODE_STEPS: Final[int] = 100

# Results with a smaller magnitude are displayed as exactly zero.
ZERO_SNAP_EPSILON: Final[float] = 1e-10

# Graph sampling grid.
GRAPH_X_START: Final[float] = -10.0
GRAPH_X_STOP: Final[float] = 10.0
GRAPH_X_STEP: Final[float] = 0.1

# Maximum |x_graph - x_ode| for reusing an ODE sample on the graph grid.
GRAPH_ODE_TOLERANCE: Final[float] = 0.1

DEFAULT_MAX_EXPRESSION_LENGTH: Final[int] = 1024

# Each fold multiplies quadrature work by 2 * QUADRATURE_SUBDIVISIONS.
DEFAULT_MAX_INTEGRAL_ORDER: Final[int] = 2


@dataclass(frozen=True)
class SolverSettings:
    max_expression_length: int = DEFAULT_MAX_EXPRESSION_LENGTH
    max_integral_order: int = DEFAULT_MAX_INTEGRAL_ORDER


def _positive_int(raw: Mapping[str, object], key: str, default: int) -> int:
    value = raw.get(key, default)
    try:
        value = int(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        value = default
    return max(value, 1)


def load_settings(raw: Mapping[str, object] | None) -> SolverSettings:
    """Build :class:`SolverSettings` from the ``plugins.calculus_solver`` block.

    Malformed values fall back to defaults so a bad ``config.yml`` never
    prevents the plugin from serving requests.
    """

    raw = raw or {}
    return SolverSettings(
        max_expression_length=_positive_int(
            raw, "max_expression_length", DEFAULT_MAX_EXPRESSION_LENGTH
        ),
        max_integral_order=_positive_int(raw, "max_integral_order", DEFAULT_MAX_INTEGRAL_ORDER),
    )


__all__ = [
    "INTEGRAL_LOWER_BOUND",
    "INTEGRAL_UPPER_BOUND",
    "QUADRATURE_SUBDIVISIONS",
    "ODE_INITIAL_X",
    "ODE_INITIAL_Y",
    "ODE_STEP",
    "ODE_STEPS",
    "ZERO_SNAP_EPSILON",
    "GRAPH_X_START",
    "GRAPH_X_STOP",
    "GRAPH_X_STEP",
    "GRAPH_ODE_TOLERANCE",
    "DEFAULT_MAX_EXPRESSION_LENGTH",
    "DEFAULT_MAX_INTEGRAL_ORDER",
    "SolverSettings",
    "load_settings",
]
