"""Exports for the calculus solver core."""

from .curve import Curve, Sample, graph_grid, qualify_tokens, sample_curve
from .errors import CalculatorError, EvaluationError, ParseError, ValidationError
from .expression import CompiledExpression, compile_expression, evaluate, format_number
from .integral_notation import IntegralSpec, has_integral, parse_integral, split_factors
from .nested_integral import FactorResult, IntegralReport, solve_integral_expression, solve_nested_integral
from .ode import (
    DifferentialEquationSpec,
    Point,
    has_differential_equation,
    parse_differential_equation,
    solve_differential_equation,
)
from .outcome import Err, Ok, Outcome
from .quadrature import integrate
from .settings import SolverSettings, load_settings
from .solver import SolveResult, solve
from .validation import sanitize_input, snap_to_zero, validate_expression

__all__ = [
    "CalculatorError",
    "EvaluationError",
    "ParseError",
    "ValidationError",
    "Ok",
    "Err",
    "Outcome",
    "SolverSettings",
    "load_settings",
    "CompiledExpression",
    "compile_expression",
    "evaluate",
    "format_number",
    "sanitize_input",
    "snap_to_zero",
    "validate_expression",
    "IntegralSpec",
    "has_integral",
    "parse_integral",
    "split_factors",
    "integrate",
    "FactorResult",
    "IntegralReport",
    "solve_nested_integral",
    "solve_integral_expression",
    "DifferentialEquationSpec",
    "Point",
    "has_differential_equation",
    "parse_differential_equation",
    "solve_differential_equation",
    "Curve",
    "Sample",
    "graph_grid",
    "qualify_tokens",
    "sample_curve",
    "SolveResult",
    "solve",
]
