"""Error taxonomy for Nora.

Every failure raised by the reader, the evaluator or a primitive derives from
NoraError. Each class carries an ErrorKind so the shell (and any other caller)
can branch on the kind of failure without matching on class names.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    SYNTAX = "syntax"
    BINDING = "binding"
    FORM = "form"
    TYPE = "type"
    APPLICATION = "application"
    RECURSION = "recursion"


class NoraError(Exception):
    """ Base class for all Nora errors"""
    kind: ErrorKind | None = None


class NoraSyntaxError(NoraError):
    """ Raised by the reader on malformed input"""
    kind = ErrorKind.SYNTAX


class NoraUnboundSymbol(NoraError):
    """ Raised when a symbol is used before it is bound"""
    kind = ErrorKind.BINDING

    def __init__(self, name):
        super().__init__(f"Unbound symbol: {name}")
        self.name = name


class NoraFormError(NoraError):
    """ Raised when a special form or call form has the wrong shape"""
    kind = ErrorKind.FORM


class NoraArityError(NoraFormError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class NoraTypeError(NoraError):
    """ Raised when the types of arguments passed to a function are incorrect"""
    kind = ErrorKind.TYPE


class NoraApplicationError(NoraError):
    """ Raised when the head of a call form is not a function"""
    kind = ErrorKind.APPLICATION


class NoraRecursionError(NoraError):
    """ Raised when evaluation exhausts the host call stack"""
    kind = ErrorKind.RECURSION
