"""Smoke tests for the Calculus Solver CLI."""

from __future__ import annotations

import json
from contextlib import redirect_stdout
from io import StringIO

from plugins.calculus_solver import cli


def _run_cli(args: list[str]) -> tuple[int, dict[str, object]]:
    buffer = StringIO()
    with redirect_stdout(buffer):
        code = cli.main(args)
    return code, json.loads(buffer.getvalue().strip())


def test_solve_expression():
    code, payload = _run_cli(["solve", "3*4+5"])
    assert code == 0
    assert payload["value"] == 17.0


def test_solve_reports_errors():
    code, payload = _run_cli(["solve", "(1+2"])
    assert code == 1
    assert payload["error"]["code"] == "calc.invalid_input"


def test_validate_and_sample():
    code, payload = _run_cli(["validate", "sin(x)"])
    assert code == 0 and payload["valid"] is True
    code, payload = _run_cli(["sample", "x"])
    assert code == 0
    assert payload["count"] == 201


def test_solve_reports_oversized_literal():
    code, payload = _run_cli(["solve", "1" + "0" * 400])
    assert code == 1
    assert payload["error"]["code"] == "calc.invalid_expression"
