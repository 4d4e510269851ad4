"""Application engine for Nora.

Primitives receive the evaluated arguments and the caller's environment.
Closures bind their parameters in a fresh child of the environment they
captured and evaluate their single body expression there.
"""

from __future__ import annotations

import logging

from nora import LispValue, EvaluatorFn
from nora.errors import NoraApplicationError
from nora.printer import to_repr
from nora.types.environment import Environment
from nora.types.function import Closure, Primitive

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    Raises NoraArityError when the argument count differs from the parameter
    count; nothing is bound in that case.
    """
    new_env = fn.extend_env(args)
    logger.debug("calling %r with %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, new_env)


def apply(
    head: object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive.

    - For Closure, defer to apply_closure.
    - For Primitive, invoke with the caller's env and the list of args.
    - Otherwise, raise an application error.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Primitive):
        return head(env, args)
    raise NoraApplicationError(f"Cannot apply non-function {to_repr(head)}")
