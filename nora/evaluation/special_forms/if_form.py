from nora import EvaluatorFn
from nora import SExpression, LispValue
from nora.errors import NoraFormError
from nora.types.environment import Environment
from nora.types.nil import Nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test then else)
    Only the chosen branch is evaluated. Anything other than Nil is true.
    """
    if len(tail) != 3:
        raise NoraFormError("if requires a test, a then-expression and an else-expression")

    test, then_expr, else_expr = tail
    if evaluate_fn(test, env) is not Nil:
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
