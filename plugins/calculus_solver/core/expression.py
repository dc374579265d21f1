"""Safe evaluation of infix arithmetic expressions."""

from __future__ import annotations

import ast
import math
from dataclasses import dataclass
from typing import Callable, Mapping

from .errors import EvaluationError
from .outcome import Err, Ok, Outcome
from .settings import DEFAULT_MAX_EXPRESSION_LENGTH

BindingSet = Mapping[str, float]

CONSTANTS: dict[str, float] = {"pi": math.pi, "e": math.e}

# ``math.<name>`` is accepted as a qualified spelling of a table entry.
_QUALIFIER = "math"

_ALLOWED_BINOPS = (ast.Add, ast.Sub, ast.Mult, ast.Div, ast.Mod, ast.Pow)
_ARITHMETIC_ERRORS = (ZeroDivisionError, OverflowError, ValueError, TypeError)


def _cot(value: float) -> float:
    return 1.0 / math.tan(value)


def _sec(value: float) -> float:
    return 1.0 / math.cos(value)


def _csc(value: float) -> float:
    return 1.0 / math.sin(value)


FUNCTIONS: dict[str, Callable[..., float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "cot": _cot,
    "sec": _sec,
    "csc": _csc,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "sqrt": math.sqrt,
    "ln": math.log,
    "log": lambda x, base=math.e: math.log(x, base),
    "log10": math.log10,
    "exp": math.exp,
    "abs": abs,
    "floor": math.floor,
    "ceil": math.ceil,
    "min": min,
    "max": max,
}


def _normalize_expression(expression: str, max_length: int) -> str:
    if not expression or not isinstance(expression, str):
        raise EvaluationError("Expression is required")
    expression = expression.strip()
    if not expression:
        raise EvaluationError("Expression is required")
    if len(expression) > max_length:
        raise EvaluationError("Expression is too long")
    # Interpret caret as exponent.
    return expression.replace("^", "**")


def _qualified_name(node: ast.AST) -> str | None:
    if (
        isinstance(node, ast.Attribute)
        and isinstance(node.value, ast.Name)
        and node.value.id == _QUALIFIER
    ):
        return node.attr
    return None


def _validate_ast(node: ast.AST) -> None:
    if isinstance(node, ast.Expression):
        _validate_ast(node.body)
        return
    if isinstance(node, ast.BinOp):
        if not isinstance(node.op, _ALLOWED_BINOPS):
            raise EvaluationError("Operator not permitted")
        _validate_ast(node.left)
        _validate_ast(node.right)
        return
    if isinstance(node, ast.UnaryOp):
        if not isinstance(node.op, (ast.UAdd, ast.USub)):
            raise EvaluationError("Unary operator not permitted")
        _validate_ast(node.operand)
        return
    if isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name) and _qualified_name(node.func) is None:
            raise EvaluationError("Only named functions are permitted")
        if node.keywords:
            raise EvaluationError("Keyword arguments are not supported")
        for arg in node.args:
            _validate_ast(arg)
        return
    if isinstance(node, ast.Attribute):
        if _qualified_name(node) is None:
            raise EvaluationError("Attribute access is not permitted")
        return
    if isinstance(node, ast.Name):
        return
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise EvaluationError("Only numeric literals are allowed")
        return
    raise EvaluationError("Unsupported syntax")


def _lookup(name: str, context: Mapping[str, float]) -> float:
    if name in context:
        return context[name]
    raise EvaluationError(f"Undefined symbol '{name}'")


def _apply_binop(op: ast.operator, left: float, right: float) -> float:
    if isinstance(op, ast.Add):
        return left + right
    if isinstance(op, ast.Sub):
        return left - right
    if isinstance(op, ast.Mult):
        return left * right
    if isinstance(op, ast.Div):
        return left / right
    if isinstance(op, ast.Mod):
        return left % right
    return left ** right


def _eval_node(node: ast.AST, context: Mapping[str, float]) -> float:
    if isinstance(node, ast.Constant):
        value = node.value
    elif isinstance(node, ast.Name):
        value = _lookup(node.id, context)
    elif isinstance(node, ast.Attribute):
        value = _lookup(node.attr, CONSTANTS)
    elif isinstance(node, ast.UnaryOp):
        operand = _eval_node(node.operand, context)
        value = +operand if isinstance(node.op, ast.UAdd) else -operand
    elif isinstance(node, ast.BinOp):
        left = _eval_node(node.left, context)
        right = _eval_node(node.right, context)
        try:
            value = _apply_binop(node.op, left, right)
        except _ARITHMETIC_ERRORS as exc:
            raise EvaluationError(f"Arithmetic error: {exc}") from exc
    elif isinstance(node, ast.Call):
        func_name = node.func.id if isinstance(node.func, ast.Name) else _qualified_name(node.func)
        func = FUNCTIONS.get(func_name or "")
        if func is None:
            raise EvaluationError(f"Function '{func_name}' is not allowed")
        args = [_eval_node(arg, context) for arg in node.args]
        try:
            value = func(*args)
        except _ARITHMETIC_ERRORS as exc:
            raise EvaluationError(f"Cannot evaluate {func_name}: {exc}") from exc
    else:  # pragma: no cover - guarded by _validate_ast
        raise EvaluationError("Unsupported syntax")

    if isinstance(value, complex):
        raise EvaluationError("Complex results are not supported")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EvaluationError("Expression returned a non-numeric value")
    try:
        value = float(value)
    except OverflowError as exc:
        raise EvaluationError("Result is not finite") from exc
    if not math.isfinite(value):
        raise EvaluationError("Result is not finite")
    return value


@dataclass(frozen=True, slots=True)
class CompiledExpression:
    """A parsed and whitelisted expression, reusable across bindings."""

    source: str
    tree: ast.Expression

    def evaluate(self, bindings: BindingSet | None = None) -> Outcome[float]:
        # Constants are merged last so bindings cannot shadow pi or e.
        context = {**(bindings or {}), **CONSTANTS}
        try:
            return Ok(_eval_node(self.tree.body, context))
        except EvaluationError as exc:
            return Err(exc)


def compile_expression(
    expression: str,
    *,
    max_length: int = DEFAULT_MAX_EXPRESSION_LENGTH,
) -> Outcome[CompiledExpression]:
    """Parse ``expression`` once so it can be evaluated many times."""

    try:
        normalized = _normalize_expression(expression, max_length)
        try:
            parsed = ast.parse(normalized, mode="eval")
        except SyntaxError as exc:
            raise EvaluationError(f"Could not parse expression: {exc.msg}") from exc
        _validate_ast(parsed)
    except EvaluationError as exc:
        return Err(exc)
    return Ok(CompiledExpression(source=expression, tree=parsed))


def evaluate(
    expression: str,
    bindings: BindingSet | None = None,
    *,
    max_length: int = DEFAULT_MAX_EXPRESSION_LENGTH,
) -> Outcome[float]:
    """Evaluate ``expression`` against ``bindings`` plus the constants pi and e."""

    compiled = compile_expression(expression, max_length=max_length)
    if not compiled.ok:
        return compiled
    return compiled.value.evaluate(bindings)


def format_number(value: float | int) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return f"{value:.12g}"


__all__ = [
    "BindingSet",
    "CONSTANTS",
    "FUNCTIONS",
    "CompiledExpression",
    "compile_expression",
    "evaluate",
    "format_number",
]
