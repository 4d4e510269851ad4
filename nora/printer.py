"""Printed form of Nora values.

    Nil          -> NIL
    Symbol       -> its name
    Number       -> canonical decimal text, integral values without ".0"
    proper list  -> (a b c)
    dotted list  -> (a b . c)
    Primitive    -> <primitive NAME>
    Closure      -> <closure (PARAMS)>
"""

from __future__ import annotations

from io import StringIO

from nora import LispValue
from nora.types.cons import Cons
from nora.types.nil import Nil
from nora.types.symbol import Symbol


def format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def to_repr(value: LispValue) -> str:
    if value is Nil:
        return "NIL"
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    if isinstance(value, Cons):
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(to_repr(value.car))
            rest = value.cdr
            while isinstance(rest, Cons):
                buffer.write(" ")
                buffer.write(to_repr(rest.car))
                rest = rest.cdr
            if rest is not Nil:
                buffer.write(" . ")
                buffer.write(to_repr(rest))
            buffer.write(")")
            return buffer.getvalue()
    return repr(value)
