from nora import EvaluatorFn
from nora import SExpression, LispValue
from nora.errors import NoraFormError, NoraTypeError
from nora.printer import to_repr
from nora.types.environment import Environment
from nora.types.function import Function


def function_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(function f): evaluate f and insist that the result is a function."""
    if len(tail) != 1:
        raise NoraFormError("function requires exactly one argument")

    value = evaluate_fn(tail[0], env)
    if not isinstance(value, Function):
        raise NoraTypeError(f"function: argument must evaluate to a function, got {to_repr(value)}")
    return value
