"""
Expression evaluator for reckon arithmetic expressions.

Evaluates an AST to an IEEE-754 double. Pure evaluation: no I/O, no side
effects, no Python eval(). Infinite and NaN results are rejected, so a
successful evaluation always yields a finite float.
"""

from __future__ import annotations

import math

from reckon.core.errors import ErrorKind, EvalError
from reckon.core.expressions import BinaryOp, Expr, Literal, Operator, UnaryMinus


def evaluate(expr: Expr) -> float:
    """Evaluate an expression AST.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed, finite value.

    Raises:
        EvalError: On division by zero or a non-finite result.
    """
    result = _interpret(expr)
    # Hand-built trees can carry non-finite literals the tokenizer never emits
    if not math.isfinite(result):
        raise EvalError(ErrorKind.NUMERIC_OVERFLOW, "Result is out of range", expr.pos)
    return result


def _interpret(expr: Expr) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, UnaryMinus):
        return -_interpret(expr.operand)

    if isinstance(expr, BinaryOp):
        return _interpret_chain(expr)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_chain(expr: BinaryOp) -> float:
    """Evaluate a left-associative chain like ``a - b - c``.

    Long chains nest on the left, so the left spine is walked with a loop
    instead of recursion. Operands are still evaluated left to right.
    """
    spine: list[BinaryOp] = []
    node: Expr = expr
    while isinstance(node, BinaryOp):
        spine.append(node)
        node = node.left

    acc = _interpret(node)
    for op_node in reversed(spine):
        right = _interpret(op_node.right)
        acc = _apply(op_node, acc, right)
    return acc


def _apply(node: BinaryOp, left: float, right: float) -> float:
    """Apply one binary operator and check the result is finite."""
    if node.op == Operator.ADD:
        result = left + right
    elif node.op == Operator.SUB:
        result = left - right
    elif node.op == Operator.MUL:
        result = left * right
    elif node.op == Operator.DIV:
        # -0.0 == 0.0 as well
        if right == 0.0:
            raise EvalError(ErrorKind.DIVISION_BY_ZERO, "Division by zero", node.pos)
        result = left / right
    else:
        raise TypeError(f"Unknown binary op: {node.op}")

    if not math.isfinite(result):
        raise EvalError(
            ErrorKind.NUMERIC_OVERFLOW,
            f"Result of '{node.op.value}' is out of range",
            node.pos,
        )
    return result
