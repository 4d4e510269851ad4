"""Core evaluator for the Nora interpreter.

Depth-first recursive evaluation over Nora values: symbols are looked up,
numbers and Nil evaluate to themselves, and a Cons is either a special form
(dispatched through SPECIAL_FORMS) or a function application.
"""

from __future__ import annotations

from nora import SExpression, LispValue
from nora.errors import NoraApplicationError, NoraFormError, NoraRecursionError
from nora.evaluation.apply import apply
from nora.evaluation.special_forms import SPECIAL_FORMS
from nora.printer import to_repr
from nora.types.cons import Cons, to_list
from nora.types.environment import Environment
from nora.types.function import Function
from nora.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env`. Exhausting the host stack surfaces as
    NoraRecursionError; there is no tail-call elimination.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise NoraRecursionError("Recursion too deep") from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """Core evaluator: one recursive step, used by special forms and apply."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Cons(car=head, cdr=rest):
            # The whole form must be a proper list before anything is evaluated.
            try:
                tail_args = to_list(rest)
            except ValueError:
                raise NoraFormError(f"Malformed form: {to_repr(expr)}") from None

            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate0)

            fn = evaluate0(head, env)
            if not isinstance(fn, Function):
                raise NoraApplicationError(f"First element is not a function: {to_repr(fn)}")

            # Strictly left-to-right, fully eager.
            args = [evaluate0(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate0)

    # --- Atoms (numbers, Nil) return as-is ---
    return expr
