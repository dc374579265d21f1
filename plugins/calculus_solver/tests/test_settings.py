from plugins.calculus_solver.core import SolverSettings, load_settings


def test_defaults_when_missing():
    assert load_settings(None) == SolverSettings(max_expression_length=1024)


def test_malformed_values_fall_back():
    assert load_settings({"max_expression_length": "bad"}).max_expression_length == 1024


def test_values_are_coerced_and_clamped():
    assert load_settings({"max_expression_length": "64"}).max_expression_length == 64
    assert load_settings({"max_expression_length": 0}).max_expression_length == 1


def test_integral_order_setting():
    assert load_settings(None).max_integral_order == 2
    assert load_settings({"max_integral_order": "3"}).max_integral_order == 3
    assert load_settings({"max_integral_order": "inf"}).max_integral_order == 2
    assert load_settings({"max_integral_order": -4}).max_integral_order == 1
