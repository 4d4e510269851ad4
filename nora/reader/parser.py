"""
  Lisp Reader: tokenizer and recursive-descent parser

- Pure text -> tree: never consults an environment, never evaluates
- Emits Nora values directly, so code and data share one representation:

    - numbers -> float
    - lists -> Cons chains ending in Nil, () -> Nil
    - dotted lists -> Cons chains ending in the dotted tail
    - everything else -> Symbol (including `nil`, which is only bound to Nil
      by the global environment)
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from nora import SExpression
from nora.errors import NoraRecursionError, NoraSyntaxError
from nora.types.cons import Cons, from_iterable
from nora.types.nil import Nil
from nora.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<paren>[()])"  # ( and ) are always single tokens
    r"|(?P<quote>')"  # quote shorthand, also delimits atoms
    r"|(?P<atom>[^\s()']+)"  # maximal run of anything else
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

QUOTE = Symbol("quote")
DOT = "."


def tokenize(source: str) -> list[str]:
    """Split source text into token strings. Whitespace only separates."""
    return [m.group() for m in TOKEN_RE.finditer(source)]


def read_atom(token: str) -> SExpression:
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise NoraSyntaxError("Unexpected end of input")

        # 'E -> (quote E)
        if tok == "'":
            return Cons(QUOTE, Cons(self.parse_expr(), Nil))

        if tok == "(":
            return self.parse_list()

        if tok == ")":
            raise NoraSyntaxError(f"Unexpected closing paren at token {self.pos - 1}")

        return read_atom(tok)

    def parse_list(self) -> SExpression:
        # The opening paren has already been consumed.
        items = []
        while True:
            tok = self.peek()
            if tok is None:
                raise NoraSyntaxError("Unclosed list: missing ')'")
            if tok == ")":
                self.advance()
                return from_iterable(items)
            if tok == DOT:
                self.advance()
                return from_iterable(items, self.parse_dotted_tail(items))
            items.append(self.parse_expr())

    def parse_dotted_tail(self, items: list[SExpression]) -> SExpression:
        if not items:
            raise NoraSyntaxError("Malformed dotted list: nothing before '.'")
        if self.peek() is None:
            raise NoraSyntaxError("Unclosed list: missing ')'")
        if self.peek() == ")":
            raise NoraSyntaxError("Malformed dotted list: nothing after '.'")
        tail = self.parse_expr()
        tok = self.advance()
        if tok is None:
            raise NoraSyntaxError("Unclosed list: missing ')'")
        if tok != ")":
            raise NoraSyntaxError("Malformed dotted list: more than one expression after '.'")
        return tail

    def read_expr(self) -> SExpression:
        """Read one top-level expression. Nesting deeper than the host stack
        allows surfaces as NoraRecursionError."""
        try:
            return self.parse_expr()
        except RecursionError:
            raise NoraRecursionError("Recursion too deep: input is nested too deeply") from None

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.read_expr()


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(tokenize(source))
    expr = stream.read_expr()
    if not stream.at_end():
        raise NoraSyntaxError(f"Unexpected trailing input: {stream.peek()!r}")
    return expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Lazily read every top-level expression in `source`, in order."""
    return TokenStream(tokenize(source)).parse_all()
