"""Application engine for sublisp.

Primitives are handed to the host. Lambda-forms are applied by substituting
the argument values into the body and evaluating the rewritten body; there
is no environment and nothing is captured.
"""

from __future__ import annotations

import logging

from sublisp import LispValue
from sublisp.config import Settings, load_settings
from sublisp.errors import ArityError, NotAProcedure
from sublisp.evaluation.classifier import is_lambda_form, lambda_parts
from sublisp.evaluation.substitution import substitute
from sublisp.host import Host
from sublisp.types.primitive import Primitive

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: list,
    args: list[LispValue],
    host: Host,
    settings: Settings,
    depth: int,
) -> LispValue:
    """Apply a lambda-form by rewriting its body and evaluating the result.

    With `settings.strict_arity` a count mismatch raises ArityError. Without it,
    extra arguments are ignored and unmatched parameters stay free symbols.
    """
    # Imported here: the evaluator imports this module at load time.
    from sublisp.evaluation.evaluator import evaluate

    params, body = lambda_parts(fn)
    if settings.strict_arity and len(params) != len(args):
        raise ArityError(f"Expected {len(params)} arguments, got {len(args)}")

    rewritten = substitute(body, params, args, frozenset())
    logger.debug("substituted %r := %r -> %r", params, args, rewritten)
    return evaluate(rewritten, host, settings, depth)


def apply(
    proc: LispValue,
    args: list[LispValue],
    host: Host,
    settings: Settings | None = None,
    depth: int = 0,
) -> LispValue:
    """Apply a procedure value to already-evaluated arguments.

    - Primitive: delegated to the host; its failures propagate unchanged.
    - Lambda-form: substitution followed by evaluation.
    - Anything else raises NotAProcedure.
    """
    if settings is None:
        settings = load_settings()
    if isinstance(proc, Primitive):
        return host.invoke_native(proc, args)
    if is_lambda_form(proc):
        return apply_lambda(proc, args, host, settings, depth)
    raise NotAProcedure(f"Cannot apply non-procedure {proc!r}")
