"""Shape predicates over expressions.

Every expression falls into exactly one shape, checked in a fixed order:
constant, symbol, quote, if, lambda, call. Anything else is malformed.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from sublisp import SExpression
from sublisp.errors import MalformedExpression
from sublisp.types.primitive import Primitive
from sublisp.types.symbol import Symbol

# bool is covered through int
ATOM_TYPES = (int, float, complex, str)


class Shape(Enum):
    CONSTANT = "constant"
    SYMBOL = "symbol"
    QUOTE = "quote"
    IF = "if"
    LAMBDA = "lambda"
    CALL = "call"


def is_atom(expr: SExpression) -> bool:
    return isinstance(expr, ATOM_TYPES)


def is_constant(expr: SExpression) -> bool:
    return is_atom(expr) or isinstance(expr, Primitive)


def is_symbol(expr: SExpression) -> bool:
    return isinstance(expr, Symbol)


def is_sequence(expr: SExpression) -> bool:
    return isinstance(expr, list)


def tagged_form(tag: str) -> Callable[[SExpression], bool]:
    """Build a predicate for special forms headed by `tag`."""
    head = Symbol(tag)

    def predicate(expr: SExpression) -> bool:
        return isinstance(expr, list) and len(expr) > 0 and expr[0] == head

    predicate.__name__ = f"is_{tag}_form"
    return predicate


is_quote_form = tagged_form("quote")
is_if_form = tagged_form("if")
is_lambda_form = tagged_form("lambda")


def is_procedure(value: SExpression) -> bool:
    return isinstance(value, Primitive) or is_lambda_form(value)


def classify(expr: SExpression) -> Shape:
    if is_constant(expr):
        return Shape.CONSTANT
    if is_symbol(expr):
        return Shape.SYMBOL
    if is_quote_form(expr):
        return Shape.QUOTE
    if is_if_form(expr):
        return Shape.IF
    if is_lambda_form(expr):
        return Shape.LAMBDA
    if is_sequence(expr):
        return Shape.CALL
    raise MalformedExpression(f"Not an expression: {expr!r}")


def lambda_parts(fn: list) -> tuple[list, SExpression]:
    """Split `(lambda (p ...) body)` into its parameter list and body."""
    if len(fn) != 3:
        raise MalformedExpression(
            f"lambda expects a parameter list and one body, got {len(fn) - 1} parts"
        )
    _, params, body = fn
    if not isinstance(params, list) or not all(is_symbol(p) for p in params):
        raise MalformedExpression(f"lambda parameters must be a list of symbols: {params!r}")
    return params, body
