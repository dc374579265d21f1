import pytest

from plugins.calculus_solver.core import IntegralSpec, ParseError, parse_integral, split_factors


def test_single_integral():
    assert parse_integral("∫ x dx").value == IntegralSpec(integrand="x", variables=("x",))
    assert parse_integral("∫ x^2 dx").value.integrand == "x^2"


def test_variable_letter_is_case_insensitive_and_lowered():
    spec = parse_integral("∫ x DX").value
    assert spec.variables == ("x",)
    assert spec.integrand == "x"


def test_whitespace_is_tolerated():
    spec = parse_integral("∫x   dy").value
    assert spec == IntegralSpec(integrand="x", variables=("y",))


@pytest.mark.parametrize("text", ["x^2 dx", "∫ x", ""])
def test_missing_integral_fails(text):
    outcome = parse_integral(text)
    assert not outcome.ok
    assert isinstance(outcome.error, ParseError)
    assert outcome.message == "No valid integral found"


def test_repeated_markers_collect_variables_outer_first():
    # First pass drops "∫ x dx" leaving "x ∫ y dy", whose integrand wins.
    spec = parse_integral("∫ x dx ∫ y dy").value
    assert spec.variables == ("x", "y")
    assert spec.integrand == "y"
    assert spec.order == 2


def test_three_markers():
    spec = parse_integral("∫ a dx ∫ b dy ∫ c dz").value
    assert spec.variables == ("x", "y", "z")
    assert spec.integrand == "c"


def test_adjacent_markers_are_swallowed_by_first_integrand():
    # The integrand group stops only at the first "d", so it eats the second marker.
    spec = parse_integral("∫∫ x*y dx dy").value
    assert spec == IntegralSpec(integrand="∫ x*y", variables=("x",))


def test_split_factors_is_purely_syntactic():
    assert split_factors("∫ x dx * ∫ y dy") == ["∫ x dx", "∫ y dy"]
    assert split_factors("∫ x*y dx") == ["∫ x", "y dx"]
