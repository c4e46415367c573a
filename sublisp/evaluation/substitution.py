"""Substitution of argument values for formal parameters.

`substitute` rebuilds a procedure body with every free occurrence of a
parameter replaced by the corresponding argument value. Quoted data is left
alone, and parameters re-declared by a nested lambda are shadowed below it.
"""

from __future__ import annotations

from typing import AbstractSet, Sequence

from sublisp import SExpression, LispValue
from sublisp.evaluation.classifier import Shape, classify, is_constant, is_lambda_form, lambda_parts
from sublisp.types.symbol import Symbol

QUOTE = Symbol("quote")


def quote_if_needed(value: LispValue) -> SExpression:
    """Turn an evaluated value into an expression that evaluates back to it."""
    if is_constant(value) or is_lambda_form(value):
        return value
    return [QUOTE, value]


def lookup(symbol: Symbol, params: Sequence[Symbol], args: Sequence[LispValue]) -> SExpression:
    for param, arg in zip(params, args):
        if param == symbol:
            return quote_if_needed(arg)
    # Not a parameter: a global, resolved by the host when evaluated
    return symbol


def substitute(
    expr: SExpression,
    params: Sequence[Symbol],
    args: Sequence[LispValue],
    bound: AbstractSet[Symbol],
) -> SExpression:
    match classify(expr):
        case Shape.CONSTANT | Shape.QUOTE:
            return expr

        case Shape.SYMBOL:
            if expr in bound:
                return expr
            return lookup(expr, params, args)

        case Shape.LAMBDA:
            inner_params, body = lambda_parts(expr)
            return [expr[0], inner_params, substitute(body, params, args, bound | set(inner_params))]

        case Shape.IF | Shape.CALL:
            return [substitute(item, params, args, bound) for item in expr]
