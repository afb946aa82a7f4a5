"""
  Scheme Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives:

    - lists -> Python list (compound forms)
    - symbols -> Symbol
    - strings -> str
    - numbers -> float
    - #t / #f -> True / False
    - 'x -> [Symbol("quote"), x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from sable import SExpression
from sable.errors import SableSyntaxError
from sable.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)',  # fallback: atoms
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#true": True,
    "#f": False,
    "#false": False,
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments dropped."""
    pos = 0
    n = len(source)
    while True:
        while pos < n and source[pos].isspace():
            pos += 1
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SableSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def decode_string(token: str) -> str:
    """Strip the quotes from a string token and resolve backslash escapes."""
    return re.sub(
        r"\\(.)",
        lambda m: STRING_ESCAPES.get(m.group(1), m.group(1)),
        token[1:-1],
        flags=re.DOTALL,
    )


def parse_atom(token: str) -> SExpression:
    if token in BOOLEANS:
        return BOOLEANS[token]
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
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

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return decode_string(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise SableSyntaxError("Unexpected EOF after quote")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SableSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SableSyntaxError("Unexpected ')'")

        raise SableSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
