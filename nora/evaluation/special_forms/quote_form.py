from nora import SExpression, LispValue, EvaluatorFn
from nora.errors import NoraFormError
from nora.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise NoraFormError("quote expects exactly 1 argument")
    return tail[0]
