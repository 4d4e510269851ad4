"""Built-in functions for the Nora runtime environment.

This module defines core arithmetic, comparison, list processing and predicate
primitives, plus the registration helpers that build the global environment.
Every primitive receives the caller's environment and a Python list of
already-evaluated arguments, validates arity and types itself, and names
itself in any error it raises.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from nora import LispValue
from nora.errors import NoraArityError, NoraTypeError
from nora.printer import to_repr
from nora.types.cons import Cons, from_iterable, iter_proper
from nora.types.environment import Environment
from nora.types.function import Primitive
from nora.types.nil import Nil
from nora.types.symbol import Symbol, T


def truth(flag: bool) -> LispValue:
    return T if flag else Nil


def as_number(op: str, value: LispValue) -> float:
    """Return `value` as a float or raise a type error naming `op`."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NoraTypeError(f"{op}: expected number, but got {to_repr(value)}")
    return float(value)


def check_arity(op: str, args: list[LispValue], exactly: int | None = None, at_least: int | None = None) -> None:
    if exactly is not None and len(args) != exactly:
        noun = "argument" if exactly == 1 else "arguments"
        raise NoraArityError(f"{op} requires exactly {exactly} {noun}, got {len(args)}")
    if at_least is not None and len(args) < at_least:
        noun = "argument" if at_least == 1 else "arguments"
        raise NoraArityError(f"{op} requires at least {at_least} {noun}, got {len(args)}")


def list_elements(op: str, value: LispValue) -> list[LispValue]:
    """Elements of a proper list (or Nil); anything else is a type error."""
    if value is not Nil and not isinstance(value, Cons):
        raise NoraTypeError(f"{op}: expected a list, got {to_repr(value)}")
    try:
        return list(iter_proper(value))
    except ValueError:
        raise NoraTypeError(f"{op}: expected a proper list, got {to_repr(value)}") from None


# -------------------------------
# Arithmetic
# -------------------------------
def divide(a: float, b: float) -> float:
    """IEEE-754 division: dividing by zero yields an infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; (+) is 0."""
    return sum((as_number("+", x) for x in args), 0.0)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    check_arity("-", args, at_least=1)
    nums = [as_number("-", x) for x in args]
    if len(nums) == 1:
        return -nums[0]
    return reduce(operator.sub, nums)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    result = 1.0
    for x in args:
        result *= as_number("*", x)
    return result


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    check_arity("/", args, at_least=1)
    nums = [as_number("/", x) for x in args]
    if len(nums) == 1:
        return divide(1.0, nums[0])
    return reduce(divide, nums)


# -------------------------------
# Comparison
# -------------------------------
def _chain(op: str, test: Callable[[float, float], bool]):
    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        check_arity(op, args, at_least=2)
        nums = [as_number(op, x) for x in args]
        return truth(all(test(a, b) for a, b in zip(nums, nums[1:])))

    compare.__name__ = f"compare_{test.__name__}"
    compare.__doc__ = f"({op} a b ...): T if every adjacent pair satisfies {op}, else NIL."
    return compare


def num_eq(env: Environment, args: list[LispValue]) -> LispValue:
    """(= a b ...): T if every argument equals the first."""
    check_arity("=", args, at_least=2)
    nums = [as_number("=", x) for x in args]
    return truth(all(x == nums[0] for x in nums[1:]))


lt = _chain("<", operator.lt)
gt = _chain(">", operator.gt)
lte = _chain("<=", operator.le)
gte = _chain(">=", operator.ge)


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity("cons", args, exactly=2)
    head, tail = args
    return Cons(head, tail)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity("car", args, exactly=1)
    value = args[0]
    if value is Nil:
        return Nil
    if isinstance(value, Cons):
        return value.car
    raise NoraTypeError(f"car: expected a list, got {to_repr(value)}")


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity("cdr", args, exactly=1)
    value = args[0]
    if value is Nil:
        return Nil
    if isinstance(value, Cons):
        return value.cdr
    raise NoraTypeError(f"cdr: expected a list, got {to_repr(value)}")


def append(env: Environment, args: list[LispValue]) -> LispValue:
    """Concatenate lists into a fresh chain; the arguments are never mutated."""
    items: list[LispValue] = []
    for lst in args:
        items.extend(list_elements("append", lst))
    return from_iterable(items)


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return from_iterable(args)


def length(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity("length", args, exactly=1)
    return float(len(list_elements("length", args[0])))


# -------------------------------
# Equality and basic predicates
# -------------------------------
def is_eq(a: LispValue, b: LispValue) -> bool:
    """Numbers by value, Symbols by name, Nil with Nil. Never true for Cons or functions."""
    if a is Nil or b is Nil:
        return a is b
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        if isinstance(a, bool) or isinstance(b, bool):
            return False
        return float(a) == float(b)
    return False


def eq(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity("eq", args, exactly=2)
    return truth(is_eq(*args))


def is_atom(env: Environment, args: list[LispValue]) -> LispValue:
    """Predicate: T if the single argument is Nil, a Number or a Symbol."""
    check_arity("atom?", args, exactly=1)
    value = args[0]
    if value is Nil or isinstance(value, Symbol):
        return T
    return truth(isinstance(value, (int, float)) and not isinstance(value, bool))


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': num_eq,
    '<': lt,
    '>': gt,
    '<=': lte,
    '>=': gte,
    'cons': cons,
    'car': car,
    'cdr': cdr,
    'append': append,
    'list': list_builtin,
    'length': length,
    'eq': eq,
    'atom?': is_atom,
}


def register(env: Environment) -> None:
    """Bind nil/NIL and every primitive into `env`."""
    env.update({
        Symbol('nil'): Nil,
        Symbol('NIL'): Nil,
    })
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})


def create_global_environment() -> Environment:
    env = Environment()
    register(env)
    return env
