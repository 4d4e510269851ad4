from nora import EvaluatorFn
from nora import SExpression, LispValue
from nora.errors import NoraFormError
from nora.types.environment import Environment
from nora.types.function import Closure


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression, use begin to sequence.
    # The parameter list is validated when the closure is called.
    if len(tail) != 2:
        raise NoraFormError("lambda requires a parameter list and a single body expression")

    params, body = tail
    return Closure(params, body, env)
