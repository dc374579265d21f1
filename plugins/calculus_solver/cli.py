"""Command line interface for the Calculus Solver plugin."""

from __future__ import annotations

import argparse
import json
from typing import Any

from .core import CalculatorError, sample_curve, sanitize_input, solve, validate_expression


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _fail(error: CalculatorError) -> int:
    _print({"error": error.to_dict()})
    return 1


def command_validate(args: argparse.Namespace) -> int:
    checked = validate_expression(sanitize_input(args.expression))
    if not checked.ok:
        return _fail(checked.error)
    _print({"valid": True, "expression": checked.value})
    return 0


def command_solve(args: argparse.Namespace) -> int:
    checked = validate_expression(sanitize_input(args.expression))
    if not checked.ok:
        return _fail(checked.error)
    result = solve(checked.value)
    if not result.ok:
        return _fail(result.error)
    _print(result.value.to_dict())
    return 0


def command_sample(args: argparse.Namespace) -> int:
    curve = sample_curve(sanitize_input(args.expression))
    _print({"count": len(curve), "points": [sample.to_dict() for sample in curve]})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculus Solver CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Check an expression for syntax problems")
    validate_parser.add_argument("expression", help="Expression text")
    validate_parser.set_defaults(func=command_validate)

    solve_parser = subparsers.add_parser("solve", help="Evaluate, integrate or step an ODE")
    solve_parser.add_argument("expression", help="Expression, integral or dy/dx equation")
    solve_parser.set_defaults(func=command_solve)

    sample_parser = subparsers.add_parser("sample", help="Sample the plotting curve over [-10, 10]")
    sample_parser.add_argument("expression", help="Expression, integral or dy/dx equation")
    sample_parser.set_defaults(func=command_sample)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
