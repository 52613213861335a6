"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing over a token generator
- Tokens are `(`, `)`, the quote marker `'`, or an atom: a maximal run of
  characters that are neither whitespace nor parentheses
- Emits the runtime value types directly:

    - lists -> LispList
    - atoms starting with a digit (or `-` and a digit) -> Number
    - every other atom -> Symbol
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from lisple.errors import ParseError
from lisple.types import FALSE, LispList, Number, Symbol, Value

QUOTE = Symbol("quote")

TOKEN_RE = re.compile(
    r"[ \t\r\n]*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # leading quote marker
    r"|(?P<atom>[^ \t\r\n()]+)"  # anything else up to whitespace or a paren
    r")"
)

WHITESPACE = " \t\r\n"


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace (or an unexpected separator) is left
            if source[pos:].strip(WHITESPACE) == "":
                break
            raise ParseError(f"Unexpected char at {pos}: {source[pos]!r}")
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def atom(token: str) -> Value:
    """Numbers become Numbers; every other token is a Symbol."""
    if not token:
        raise ParseError("empty atom")
    if _is_digit(token[0]) or (token[0] == "-" and _is_digit(token[1:2])):
        return Number(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Value]:
        """Parse the next expression, or return None when the stream is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "quote":
            expr = self.parse_expr()
            if expr is None:
                raise ParseError("quote marker at end of input")
            return LispList((QUOTE, expr))

        if tok_type == "lparen":
            items: list[Value] = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise ParseError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return LispList(items)
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise ParseError("Unexpected ')'")

        return atom(tok_val)

    def parse_all(self) -> Iterator[Value]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> Value:
    """Parse one expression from `source`.

    Blank input reads as FALSE. Tokens after the first expression are ignored.
    """
    expr = TokenStream(lex(source)).parse_expr()
    return FALSE if expr is None else expr


def read_all(source: str) -> Iterator[Value]:
    """Lazily parse every expression in `source`."""
    return TokenStream(lex(source)).parse_all()
