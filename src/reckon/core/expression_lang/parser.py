"""
Recursive descent parser for reckon arithmetic expressions.

Grammar (precedence low to high):
    expression  → term (("+"|"-") term)*
    term        → unary (("*"|"/") unary)*
    unary       → "-" unary | primary
    primary     → NUMBER | "(" expression ")"

The binary rules loop instead of recursing on the right, which keeps
``8 - 4 - 2`` left-associative. Unary minus recurses, so ``--2`` is
``-(-2)`` and ``-2 * 3`` is ``(-2) * 3``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from reckon.core.errors import ErrorKind, ParseError
from reckon.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from reckon.core.expressions import BinaryOp, Expr, Literal, Operator, UnaryMinus

# Parentheses plus unary minus; keeps recursion well inside the interpreter stack
MAX_NESTING_DEPTH = 100

_ADDITIVE: dict[TokenKind, Operator] = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUB,
}

_MULTIPLICATIVE: dict[TokenKind, Operator] = {
    TokenKind.STAR: Operator.MUL,
    TokenKind.SLASH: Operator.DIV,
}


class _Parser:
    """Recursive descent parser with a single token of lookahead."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self.current: Token = self._next(0)
        self.depth = 0

    def _next(self, end: int) -> Token:
        # A sequence missing its EOF is treated as ending right after the last token
        return next(self._tokens, None) or Token(TokenKind.EOF, "", end, end)

    def advance(self) -> Token:
        tok = self.current
        if tok.kind != TokenKind.EOF:
            self.current = self._next(tok.end)
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.current.kind in kinds:
            return self.advance()
        return None

    def _enter(self, tok: Token) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise ParseError(
                ErrorKind.NESTING_TOO_DEEP,
                f"Expression nested deeper than {MAX_NESTING_DEPTH} levels",
                tok.start,
            )

    def _leave(self) -> None:
        self.depth -= 1

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current.kind in _ADDITIVE:
            op_tok = self.advance()
            right = self.parse_term()
            left = BinaryOp(
                op=_ADDITIVE[op_tok.kind], left=left, right=right, pos=op_tok.start
            )
        return left

    def parse_term(self) -> Expr:
        """unary (('*' | '/') unary)*"""
        left = self.parse_unary()
        while self.current.kind in _MULTIPLICATIVE:
            op_tok = self.advance()
            right = self.parse_unary()
            left = BinaryOp(
                op=_MULTIPLICATIVE[op_tok.kind], left=left, right=right, pos=op_tok.start
            )
        return left

    def parse_unary(self) -> Expr:
        """'-' unary | primary"""
        minus = self.match(TokenKind.MINUS)
        if minus is None:
            return self.parse_primary()

        self._enter(minus)
        operand = self.parse_unary()
        self._leave()
        return UnaryMinus(operand=operand, pos=minus.start)

    def parse_primary(self) -> Expr:
        """NUMBER | '(' expression ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            if tok.value is None:
                raise ParseError(
                    ErrorKind.INVALID_NUMBER,
                    f"Number token without a value: {tok.text!r}",
                    tok.start,
                )
            return Literal(value=tok.value, pos=tok.start)

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            self._enter(tok)
            expr = self.parse_expression()
            self._leave()
            if self.current.kind != TokenKind.RPAREN:
                found = self.current.describe()
                raise ParseError(
                    ErrorKind.UNMATCHED_PAREN,
                    f"Unmatched '(': expected ')' but found {found}",
                    tok.start,
                )
            self.advance()
            return expr

        if tok.kind == TokenKind.EOF:
            raise ParseError(
                ErrorKind.UNEXPECTED_END_OF_INPUT,
                "Unexpected end of input: expected a number or '('",
                tok.start,
            )

        raise ParseError(
            ErrorKind.EXPECTED_EXPRESSION,
            f"Expected a number or '(' but found {tok.describe()}",
            tok.start,
        )

    def parse_all(self) -> Expr:
        """A complete expression followed by end of input."""
        expr = self.parse_expression()

        tok = self.current
        if tok.kind == TokenKind.RPAREN:
            raise ParseError(ErrorKind.UNMATCHED_PAREN, "Unmatched ')'", tok.start)
        if tok.kind != TokenKind.EOF:
            raise ParseError(
                ErrorKind.TRAILING_INPUT,
                f"Unexpected token after expression: {tok.describe()}",
                tok.start,
            )
        return expr


def parse(tokens: Iterable[Token]) -> Expr:
    """Parse a token sequence ending in ``EOF`` into an AST.

    Raises:
        ParseError: If the tokens do not form exactly one expression.
        LexError: If a lazily scanned token turns out to be malformed.
    """
    return _Parser(tokens).parse_all()


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the expression is invalid.
        LexError: If tokenization fails.
    """
    return parse(tokenize(source))
