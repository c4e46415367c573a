"""
  Lisp reader: lexer and parser.

- Streaming, lazy parsing
- Emits plain Python values:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / #f -> True / False
    - 'x -> [quote, x]
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from sublisp import SExpression
from sublisp.errors import IncompleteInput, SublispSyntaxError
from sublisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ml_start>#\|)"  # multi-line comment start
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")

BOOLEANS: dict[str, bool] = {"#t": True, "#f": False}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise IncompleteInput(f"Unterminated string at {pos}")
            raise SublispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")

        if m.group("comment"):
            pos = m.end()
            continue

        if m.group("ml_start"):
            pos = m.end()
            depth = 1
            while depth > 0:
                if pos >= n:
                    raise IncompleteInput("Unterminated multi-line comment")
                if source.startswith("#|", pos):
                    depth += 1
                    pos += 2
                elif source.startswith("|#", pos):
                    depth -= 1
                    pos += 2
                else:
                    pos += 1
            continue

        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break
        pos = m.end()


def parse_atom(token: str) -> SExpression:
    if token in BOOLEANS:
        return BOOLEANS[token]
    if INTEGER_RE.match(token):
        return int(token)
    if NUMBER_RE.match(token):
        return float(token)
    return Symbol(token)


def parse_string(token: str) -> str:
    """Decode a double-quoted string token. Raw line breaks are kept as is."""
    escaped = token.replace("\r", "\\r").replace("\n", "\\n")
    try:
        return ast.literal_eval(escaped)
    except (SyntaxError, ValueError) as exc:
        raise SublispSyntaxError(f"Invalid string literal {token!r}") from exc


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
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return parse_string(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise IncompleteInput("Expected an expression after '")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise IncompleteInput("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SublispSyntaxError("Unexpected ')'")

        raise SublispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
