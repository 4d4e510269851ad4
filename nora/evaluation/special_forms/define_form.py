import logging

from nora import EvaluatorFn
from nora import SExpression, LispValue
from nora.errors import NoraFormError
from nora.types.environment import Environment
from nora.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost frame and returns the name. A failure while
    evaluating `value` leaves the frame untouched.
    """
    if len(tail) != 2:
        raise NoraFormError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise NoraFormError("define: first argument must be a symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("defined %s", name)
    return name
