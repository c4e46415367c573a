"""Core evaluator for sublisp.

Dispatches on expression shape. Symbols are resolved by the host, special
forms are handled inline, and calls are handed to the applier, which
re-enters `evaluate` after substituting arguments into a lambda body.
"""

from __future__ import annotations

import logging

from sublisp import SExpression, LispValue
from sublisp.config import Settings, load_settings
from sublisp.errors import MalformedExpression, RecursionLimitExceeded
from sublisp.evaluation.apply import apply
from sublisp.evaluation.classifier import Shape, classify
from sublisp.host import Host

logger = logging.getLogger(__name__)


def is_true(value: LispValue) -> bool:
    # Only the boolean false constant is false
    return value is not False


def evaluate(
    expr: SExpression,
    host: Host,
    settings: Settings | None = None,
    depth: int = 0,
) -> LispValue:
    """
    Evaluate `expr` to a value.

    `depth` counts nested evaluations of the current top-level expression and
    is bounded by `settings.max_depth`.
    """
    if settings is None:
        settings = load_settings()
    if depth > settings.max_depth:
        raise RecursionLimitExceeded(
            f"Evaluation nested deeper than {settings.max_depth} levels"
        )

    logger.debug("eval[%d] %r", depth, expr)

    match classify(expr):
        case Shape.CONSTANT | Shape.LAMBDA:
            return expr

        case Shape.SYMBOL:
            return host.resolve_global(expr)

        case Shape.QUOTE:
            if len(expr) != 2:
                raise MalformedExpression("quote expects exactly 1 argument")
            return expr[1]

        case Shape.IF:
            if len(expr) != 4:
                raise MalformedExpression(
                    "if requires a condition, a consequent and an alternative"
                )
            _, condition, consequent, alternative = expr
            if is_true(evaluate(condition, host, settings, depth + 1)):
                return evaluate(consequent, host, settings, depth + 1)
            return evaluate(alternative, host, settings, depth + 1)

        case Shape.CALL:
            if not expr:
                raise MalformedExpression("Empty list in call position")
            head, *operands = expr
            proc = evaluate(head, host, settings, depth + 1)
            args = [evaluate(arg, host, settings, depth + 1) for arg in operands]
            return apply(proc, args, host, settings, depth + 1)
