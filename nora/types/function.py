"""Function values: native primitives and user-defined closures."""

from __future__ import annotations

import logging
from typing import Callable

from nora import SExpression, LispValue
from nora.errors import NoraArityError, NoraFormError
from nora.types.cons import iter_proper
from nora.types.environment import Environment
from nora.types.nil import Nil
from nora.types.symbol import Symbol

logger = logging.getLogger(__name__)

PrimitiveFn = Callable[[Environment, list[LispValue]], LispValue]


class Function:
    """Common base of the two callable variants."""

    __slots__ = ()


class Primitive(Function):
    """A native operation. Receives the caller's env and the evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"


class Closure(Function):
    """A first-class lambda with parameter list, a single body, and closure env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        # Captured by reference: later defines in this chain stay visible
        self.env: Environment = env
        logger.debug("closure created: params=%s", params)

    def __repr__(self) -> str:
        from nora.printer import to_repr
        params = "()" if self.params is Nil else to_repr(self.params)
        return f"<closure {params}>"

    def formals(self) -> list[Symbol]:
        """Validate and return the parameter symbols.

        The parameter list is only checked when the closure is called, so a
        malformed lambda can be created and passed around freely.
        """
        try:
            params = list(iter_proper(self.params, "parameter list"))
        except ValueError as e:
            raise NoraFormError(f"lambda: {e}: {self.params}") from None
        for p in params:
            if not isinstance(p, Symbol):
                raise NoraFormError(f"lambda: parameter must be a symbol, got {p}")
        return params

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the argument values to this closure's parameters in a fresh child
        of the captured environment and return that child.
        """
        formals = self.formals()
        if len(formals) != len(args):
            raise NoraArityError(
                f"Parameter/argument count mismatch: expected {len(formals)}, got {len(args)}"
            )
        local_env = self.env.child()
        for name, value in zip(formals, args):
            local_env.define(name, value)
        return local_env
