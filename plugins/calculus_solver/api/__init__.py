"""API routes for the Calculus Solver plugin."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from common.errors import ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    CalculatorError,
    Outcome,
    SolverSettings,
    evaluate,
    format_number,
    has_differential_equation,
    has_integral,
    load_settings,
    parse_differential_equation,
    sample_curve,
    sanitize_input,
    snap_to_zero,
    solve,
    solve_differential_equation,
    solve_integral_expression,
    validate_expression,
)

logger = get_logger(__name__)


class ExpressionPayload(SchemaModel):
    expression: str


class EvaluatePayload(ExpressionPayload):
    variables: dict[str, float | int] | None = None


api_bp = Blueprint("calculus_solver_api", __name__, url_prefix="/api/calculus_solver")


def _settings() -> SolverSettings:
    raw = current_app.config.get("PLUGIN_SETTINGS", {}).get("calculus_solver", {})
    return load_settings(raw)


def _load_payload(model: type[ExpressionPayload]) -> ExpressionPayload | Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        return parse_model(model, raw_payload)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="calc.invalid_request",
                details=getattr(exc, "details", None),
            )
        )


def _engine_failure(error: CalculatorError) -> Response:
    logger.info("rejected expression: %s (%s)", error.message, error.code)
    return fail(error)


def _checked(expression: str) -> Outcome[str]:
    return validate_expression(sanitize_input(expression))


@api_bp.post("/validate")
def validate() -> Response:
    payload = _load_payload(ExpressionPayload)
    if isinstance(payload, Response):
        return payload
    checked = _checked(payload.expression)
    if not checked.ok:
        return _engine_failure(checked.error)
    return ok({"valid": True, "expression": checked.value})


@api_bp.post("/evaluate")
def evaluate_endpoint() -> Response:
    payload = _load_payload(EvaluatePayload)
    if isinstance(payload, Response):
        return payload
    checked = _checked(payload.expression)
    if not checked.ok:
        return _engine_failure(checked.error)
    bindings = dict(payload.variables or {})
    result = evaluate(checked.value, bindings, max_length=_settings().max_expression_length)
    if not result.ok:
        return _engine_failure(result.error)
    value = snap_to_zero(result.value)
    return ok({"result": value, "formatted": format_number(value)})


@api_bp.post("/solve")
def solve_endpoint() -> Response:
    payload = _load_payload(ExpressionPayload)
    if isinstance(payload, Response):
        return payload
    checked = _checked(payload.expression)
    if not checked.ok:
        return _engine_failure(checked.error)
    settings = _settings()
    result = solve(
        checked.value,
        max_length=settings.max_expression_length,
        max_order=settings.max_integral_order,
    )
    if not result.ok:
        return _engine_failure(result.error)
    return ok(result.value.to_dict())


@api_bp.post("/integrate")
def integrate_endpoint() -> Response:
    payload = _load_payload(ExpressionPayload)
    if isinstance(payload, Response):
        return payload
    checked = _checked(payload.expression)
    if not checked.ok:
        return _engine_failure(checked.error)
    if not has_integral(checked.value):
        return fail(ValidationAppError(message="No valid integral found", code="calc.invalid_integral"))
    settings = _settings()
    report = solve_integral_expression(
        checked.value,
        max_length=settings.max_expression_length,
        max_order=settings.max_integral_order,
    )
    if not report.ok:
        return _engine_failure(report.error)
    return ok(report.value.to_dict())


@api_bp.post("/differential")
def differential_endpoint() -> Response:
    payload = _load_payload(ExpressionPayload)
    if isinstance(payload, Response):
        return payload
    checked = _checked(payload.expression)
    if not checked.ok:
        return _engine_failure(checked.error)
    if not has_differential_equation(checked.value):
        return fail(
            ValidationAppError(message="Equation must contain dy/dx", code="calc.invalid_equation")
        )
    spec = parse_differential_equation(checked.value)
    points = solve_differential_equation(spec, max_length=_settings().max_expression_length)
    if not points.ok:
        return _engine_failure(points.error)
    return ok({"rhs": spec.rhs, "points": [point.to_dict() for point in points.value]})


@api_bp.post("/sample")
def sample_endpoint() -> Response:
    payload = _load_payload(ExpressionPayload)
    if isinstance(payload, Response):
        return payload
    # Sampling never fails as a whole; unevaluable points come back as null.
    curve = sample_curve(
        sanitize_input(payload.expression),
        max_length=_settings().max_expression_length,
    )
    return ok({"count": len(curve), "points": [sample.to_dict() for sample in curve]})


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "validate",
    "evaluate_endpoint",
    "solve_endpoint",
    "integrate_endpoint",
    "differential_endpoint",
    "sample_endpoint",
]
