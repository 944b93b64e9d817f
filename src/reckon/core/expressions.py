"""
Arithmetic expression AST for reckon.

The parser builds one of these trees per expression and the evaluator
consumes it. Precedence and associativity are fully resolved by the tree
shape, so nothing downstream of the parser reasons about them.

Supports:
- Numeric literals: 3, 3.5
- Unary minus: -x, --x
- Binary arithmetic: +, -, *, /
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A finite, non-negative numeric literal."""

    value: float = Field(description="The literal value")
    pos: int = Field(default=0, description="Offset of the literal in the source")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class UnaryMinus(BaseModel):
    """Negation: -operand."""

    operand: Expr
    pos: int = Field(default=0, description="Offset of the '-' in the source")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class BinaryOp(BaseModel):
    """Binary operation: left op right."""

    op: Operator
    left: Expr
    right: Expr
    pos: int = Field(default=0, description="Offset of the operator in the source")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | UnaryMinus | BinaryOp

# Rebuild models for recursive forward references
UnaryMinus.model_rebuild()
BinaryOp.model_rebuild()


def render(expr: Expr) -> str:
    """Render a tree in fully parenthesised form, e.g. ``((8.0 - 4.0) - 2.0)``.

    Works from an explicit stack so arbitrarily long operator chains
    render without recursion.
    """
    parts: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(repr(item.value))
        elif isinstance(item, UnaryMinus):
            stack.extend([")", item.operand, "(-"])
        else:
            stack.extend([")", item.right, f" {item.op.value} ", item.left, "("])
    return "".join(parts)
