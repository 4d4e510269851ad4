import logging

from nora import EvaluatorFn
from nora import SExpression, LispValue
from nora.errors import NoraFormError
from nora.types.environment import Environment
from nora.types.function import Closure
from nora.types.symbol import Symbol

logger = logging.getLogger(__name__)


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params) body)
    Same as (define name (lambda (params) body)); returns the name.
    """
    if len(tail) != 3:
        raise NoraFormError("defun requires a name, a parameter list and a single body expression")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise NoraFormError("defun: first argument must be a symbol")
    env.define(name, Closure(params, body, env))
    logger.debug("defined function %s", name)
    return name
