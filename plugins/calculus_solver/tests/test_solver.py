import pytest

from plugins.calculus_solver.core import EvaluationError, ParseError, solve


def test_plain_expression():
    result = solve("2+2").value
    assert result.kind == "expression"
    assert result.value == 4.0
    assert result.text == "4"


def test_floating_noise_is_snapped_to_zero():
    result = solve("sin(pi)").value
    assert result.value == 0.0
    assert result.text == "0"


def test_integral_dispatch():
    result = solve("∫ x dx").value
    assert result.kind == "integral"
    assert result.value == pytest.approx(0.4993336667, abs=1e-9)
    assert result.text.startswith("Result = 0.499334")
    assert len(result.factors) == 1


def test_differential_equation_dispatch():
    result = solve("dy/dx = y").value
    assert result.kind == "differential_equation"
    assert len(result.points) == 101
    assert result.text.splitlines()[0] == "x = 0, y = 1"


def test_failures():
    assert isinstance(solve("foo + 1").error, EvaluationError)
    assert isinstance(solve("∫ x").error, ParseError)


def test_to_dict():
    payload = solve("∫ x dx").value.to_dict()
    assert set(payload) == {"kind", "text", "value", "factors", "points"}
    assert payload["factors"][0]["order"] == 1
