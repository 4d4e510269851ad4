"""Cons cells and proper-list helpers.

A Cons is a mutable pair. Lists are chains of Cons cells ending in Nil; any
other tail makes the chain an improper (dotted) list. Cells are shared by
reference, so mutating one through any alias is visible through all of them.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from nora import LispValue
from nora.types.nil import Nil


class Cons:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    def __eq__(self, other: object) -> bool:
        # Structural comparison, walking the cdr chain iteratively
        a, b = self, other
        while isinstance(a, Cons):
            if not isinstance(b, Cons):
                return False
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return not isinstance(b, Cons) and a == b

    __hash__ = None  # mutable

    def __iter__(self) -> Iterator[LispValue]:
        return iter_proper(self)

    def __str__(self) -> str:
        from nora.printer import to_repr
        return to_repr(self)

    def __repr__(self) -> str:
        return f"Cons<{self}>"


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a fresh list holding `items` in order and ending in `tail`."""
    items = list(items)
    result = tail
    for item in reversed(items):
        result = Cons(item, result)
    return result


def iter_proper(value: LispValue, what: str = "list") -> Iterator[LispValue]:
    """Yield the elements of a proper list.

    Raises ValueError when the chain ends in anything other than Nil; callers
    translate that into the error kind that fits their context.
    """
    while isinstance(value, Cons):
        yield value.car
        value = value.cdr
    if value is not Nil:
        raise ValueError(f"improper {what}")


def to_list(value: LispValue) -> list[LispValue]:
    return list(iter_proper(value))


def is_proper_list(value: LispValue) -> bool:
    while isinstance(value, Cons):
        value = value.cdr
    return value is Nil
