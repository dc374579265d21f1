import math

import pytest

from plugins.calculus_solver.core import (
    EvaluationError,
    compile_expression,
    evaluate,
    format_number,
)


def test_basic_arithmetic():
    assert evaluate("2+2").value == 4
    assert evaluate("sin(0)").value == 0


def test_operator_precedence_and_caret_power():
    assert evaluate("2+3*4^2").value == 50.0
    assert evaluate("-2^2").value == -4.0
    assert evaluate("(2+3)*4").value == 20.0


def test_bindings_and_constants():
    assert evaluate("x*y", {"x": 2, "y": 3}).value == 6.0
    assert evaluate("pi").value == math.pi
    assert evaluate("e").value == math.e


def test_bindings_cannot_shadow_constants():
    assert evaluate("pi", {"pi": 3.0}).value == math.pi


def test_reciprocal_trig_functions():
    assert evaluate("cot(pi/4)").value == pytest.approx(1.0)
    assert evaluate("sec(0)").value == 1.0
    assert evaluate("csc(pi/2)").value == pytest.approx(1.0)
    assert evaluate("ln(e)").value == pytest.approx(1.0)
    assert evaluate("sqrt(16)").value == 4.0


def test_qualified_names_resolve_to_table_entries():
    assert evaluate("math.sin(0) + math.pi").value == pytest.approx(math.pi)


@pytest.mark.parametrize(
    "expression",
    ["z + 1", "2+", "1/0", "sqrt(-1)", "ln(0)", "foo(1)", "x.real", "__import__('os')", "'a'"],
)
def test_failures_are_evaluation_errors(expression):
    outcome = evaluate(expression, {"x": 1.0})
    assert not outcome.ok
    assert isinstance(outcome.error, EvaluationError)


def test_unbound_symbol_is_named_in_message():
    outcome = evaluate("x + z", {"x": 1.0})
    assert "'z'" in outcome.message


def test_expression_length_limit():
    outcome = evaluate("1+1+1", max_length=3)
    assert not outcome.ok
    assert outcome.message == "Expression is too long"


def test_compiled_expression_is_reusable_and_pure():
    compiled = compile_expression("x^2 + 1").value
    assert compiled.evaluate({"x": 2}).value == 5.0
    assert compiled.evaluate({"x": 3}).value == 10.0
    first = evaluate("sin(x)/x", {"x": 0.7}).value
    second = evaluate("sin(x)/x", {"x": 0.7}).value
    assert first == second


def test_unwrap_raises_carried_error():
    with pytest.raises(EvaluationError):
        evaluate("1/0").unwrap()


def test_format_number():
    assert format_number(4.0) == "4"
    assert format_number(0.1 + 0.2) == "0.3"
    assert format_number(7) == "7"


def test_literal_too_large_for_float_is_evaluation_error():
    outcome = evaluate("1" + "0" * 400)
    assert not outcome.ok
    assert isinstance(outcome.error, EvaluationError)
    assert outcome.message == "Result is not finite"


def test_binding_too_large_for_float_is_evaluation_error():
    outcome = evaluate("x + 1", {"x": 10**400})
    assert isinstance(outcome.error, EvaluationError)
