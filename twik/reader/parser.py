"""
  Twik Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits plain Python objects:

    - lists -> Python list
    - symbols -> Symbol (true, false and nil included; the root scope binds them)
    - strings -> str
    - numbers -> fractions.Fraction (integers, exact decimals and ratios)
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Iterator, Optional, Iterable

from twik import SExpression
from twik.errors import TwikSyntaxError
from twik.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote with no closing quote
    r'|(?P<symbol>[^\s()";]+)',  # fallback: symbols and numbers
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\d+/\d+)")

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise TwikSyntaxError(f"Unexpected character {source[pos]!r}", pos)
        kind = m.lastgroup
        if kind == "unterminated":
            raise TwikSyntaxError("Unterminated string", pos)
        if kind != "comment":
            yield kind, m.group(kind), pos
        pos = m.end()


def _unescape(text: str, pos: int) -> str:
    out = []
    i = 0
    while i < len(text):
        c = text[i]
        if c == "\\":
            i += 1
            esc = text[i]
            if esc not in ESCAPES:
                raise TwikSyntaxError(f"Unknown escape sequence \\{esc}", pos + i - 1)
            out.append(ESCAPES[esc])
        else:
            out.append(c)
        i += 1
    return "".join(out)


def _atom(text: str, pos: int) -> SExpression:
    if NUMBER_RE.fullmatch(text):
        # Fraction parses "3", "-2.5" and "1/3" exactly
        try:
            return Fraction(text)
        except ZeroDivisionError:
            raise TwikSyntaxError(f"Zero denominator in {text}", pos) from None
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def parse_expr(self) -> SExpression:
        """Parse the next node, or return None at end of input."""
        tok_type, tok_val, pos = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return _atom(tok_val, pos)

        if tok_type == "string":
            return _unescape(tok_val[1:-1], pos + 1)

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type is None:
                    raise TwikSyntaxError("Unmatched '('", pos)
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        raise TwikSyntaxError("Unexpected ')'", pos)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _, pos = self.peek()
            if tok_type is None:
                break
            try:
                expr = self.parse_expr()
            except RecursionError:
                raise TwikSyntaxError("Nesting too deep", pos) from None
            yield expr


def read(source: str) -> list[SExpression]:
    """Parse every top-level node in `source`."""
    return list(TokenStream(lex(source)).parse_all())
