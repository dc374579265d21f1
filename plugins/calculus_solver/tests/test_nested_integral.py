import pytest

from plugins.calculus_solver.core import (
    EvaluationError,
    IntegralSpec,
    ParseError,
    integrate,
    solve_integral_expression,
    solve_nested_integral,
)


def test_single_variable():
    outcome = solve_nested_integral(IntegralSpec(integrand="x", variables=("x",)))
    assert outcome.value == pytest.approx(integrate(lambda v: v, 0.0, 1.0), rel=1e-12)
    assert outcome.value == pytest.approx(2996.002 / 6000, rel=1e-9)


def test_two_fold_binds_outer_variable_for_inner_integral():
    spec = IntegralSpec(integrand="x*y^2", variables=("x", "y"))
    outcome = solve_nested_integral(spec, subdivisions=20)
    expected = integrate(
        lambda a: integrate(lambda b: a * b**2, 0.0, 1.0, 20),
        0.0,
        1.0,
        20,
    )
    assert outcome.value == pytest.approx(expected, rel=1e-12)


def test_unbound_symbol_fails_whole_integral():
    outcome = solve_nested_integral(IntegralSpec(integrand="x*z", variables=("x",)))
    assert not outcome.ok
    assert isinstance(outcome.error, EvaluationError)


def test_failure_at_a_sample_point_fails_whole_integral():
    outcome = solve_nested_integral(IntegralSpec(integrand="1/x", variables=("x",)))
    assert not outcome.ok


def test_factors_are_multiplied():
    outcome = solve_integral_expression("∫ x dx * ∫ 2 dy")
    report = outcome.value
    assert [item.order for item in report.factors] == [1, 1]
    first, second = (item.result for item in report.factors)
    assert report.total == pytest.approx(first * second, rel=1e-12)


def test_report_text():
    report = solve_integral_expression("∫ x dx").value
    text = report.to_text()
    assert text.startswith("Result = 0.499334\n\nDetails:\n")
    assert text.endswith("∫ x dx (1-fold integral) = 0.499334")


def test_star_inside_integrand_splits_factor():
    outcome = solve_integral_expression("∫ x*y dx")
    assert isinstance(outcome.error, ParseError)


def test_adjacent_markers_leave_unevaluable_integrand():
    outcome = solve_integral_expression("∫∫ x dx dy")
    assert isinstance(outcome.error, EvaluationError)


def test_integral_order_limit_rejects_before_solving():
    outcome = solve_integral_expression("∫ a dx ∫ b dy ∫ c dz")
    assert isinstance(outcome.error, EvaluationError)
    assert outcome.message == "Integral order 3 exceeds the limit of 2"


def test_order_limit_applies_to_every_factor():
    outcome = solve_integral_expression("∫ x dx * ∫ a dx ∫ b dy", max_order=1)
    assert outcome.message == "Integral order 2 exceeds the limit of 1"
