from __future__ import annotations

from dataclasses import dataclass, field

from nora import LispValue
from nora.builtin.env_builtin import create_global_environment
from nora.errors import ErrorKind, NoraError
from nora.evaluation.evaluator import evaluate
from nora.printer import to_repr
from nora.reader.parser import parse, parse_all
from nora.types.environment import Environment
from nora.types.nil import Nil

__all__ = [
    "Interpreter",
    "Outcome",
    "parse",
    "parse_all",
    "evaluate",
    "create_global_environment",
    "to_repr",
]


@dataclass
class Outcome:
    """Result of feeding one line: the values produced, and the error that stopped it, if any."""

    values: list[LispValue] = field(default_factory=list)
    error: NoraError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def value(self) -> LispValue:
        """Value of the last expression that completed, Nil if none did."""
        return self.values[-1] if self.values else Nil


class Interpreter:
    """
    Orchestrates reading and evaluating Nora code.
    Maintains one global Environment across calls, so definitions persist.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else create_global_environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order and return the last value."""
        result: LispValue = Nil
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result

    def feed(self, line: str) -> Outcome:
        """Like eval, but never raises a NoraError.

        Expressions are read and evaluated one at a time; the first failure
        stops the line. Anything defined before the failure stays defined.
        """
        outcome = Outcome()
        try:
            for expr in parse_all(line):
                outcome.values.append(evaluate(expr, self.env))
        except NoraError as e:
            outcome.error = e
        return outcome
