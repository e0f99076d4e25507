"""
  Qb Script Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of dedicated AST nodes:

    - atoms -> Symbol
    - strings -> str (contents verbatim, no escape sequences)
    - numbers -> int / float
    - literal lists [a b] -> Python list
    - calls (f a b) -> Call (a list subclass)
    - quote #x -> Call([Symbol('quote'), x])

  The same shapes serve as code and as data: a literal list is an expression
  tree that `cond` and `quote` consumers can evaluate later.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from qbscript import SExpression
from qbscript.errors import QbSyntaxError, SourcePosition
from qbscript.types.call import Call
from qbscript.types.symbol import Symbol, QUOTE


TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<quote>\#)"  # #x quote sugar
    r'|(?P<string>"[^"]*")'  # double-quoted strings, verbatim
    r'|(?P<open_string>"[^"]*\Z)'  # string running off the end of input
    r'|(?P<atom>[^\s()\[\]"\#][^\s()\[\]"]*)'  # atoms and numbers; '#' may follow the first character
)
WHITESPACE_RE = re.compile(r"\s+")

NUMBER_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?\Z")
NUMERIC_PREFIX_RE = re.compile(r"[+-]?[0-9]")

# opening token kind -> (closing token kind, closing text)
OPENERS: dict[str, tuple[str, str]] = {
    "lparen": ("rparen", ")"),
    "lbracket": ("rbracket", "]"),
}
CLOSERS = frozenset(kind for kind, _ in OPENERS.values())

Token = tuple[Optional[str], Optional[str], Optional[int]]


def position_at(source: str, offset: int) -> SourcePosition:
    """Translate a character offset into a line/column position."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return SourcePosition(offset, line, column)


def lex(source: str) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        ws = WHITESPACE_RE.match(source, pos)
        if ws:
            pos = ws.end()
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise QbSyntaxError(f"unexpected character {source[pos]!r}", position_at(source, pos))
        kind = m.lastgroup
        if kind == "open_string":
            raise QbSyntaxError("unterminated string", position_at(source, pos))
        yield kind, m.group(kind), pos
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str, int]], source: str = ""):
        self.tokens = iter(token_iter)
        self.source = source
        self.buffer: list[tuple[str, str, int]] = []
        # start offset of every top-level form produced by parse_all
        self.form_offsets: list[int] = []

    def peek(self) -> Token:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, None
        return self.buffer[0]

    def advance(self) -> Token:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, None))

    def position(self, offset: Optional[int]) -> SourcePosition:
        if offset is None:
            offset = len(self.source)
        return position_at(self.source, offset)

    def parse_expr(self) -> SExpression:
        tok_type, tok_val, offset = self.advance()
        if tok_type is None:
            raise QbSyntaxError("unexpected end of input", self.position(None))

        if tok_type == "atom":
            return self._parse_atom(tok_val, offset)

        # String: contents taken verbatim
        if tok_type == "string":
            return tok_val[1:-1]

        # Quote sugar binds to exactly one following expression
        if tok_type == "quote":
            next_type = self.peek()[0]
            if next_type is None or next_type in CLOSERS:
                raise QbSyntaxError("'#' must be followed by an expression", self.position(offset))
            return Call([QUOTE, self.parse_expr()])

        # Literal list or call
        if tok_type in OPENERS:
            closer, closer_text = OPENERS[tok_type]
            items = []
            while True:
                next_type, next_val, next_offset = self.peek()
                if next_type is None:
                    raise QbSyntaxError(f"unbalanced {tok_val!r}: missing {closer_text!r}", self.position(offset))
                if next_type == closer:
                    self.advance()
                    break
                if next_type in CLOSERS:
                    raise QbSyntaxError(
                        f"mismatched {next_val!r}: expected {closer_text!r} to close {tok_val!r}",
                        self.position(next_offset),
                    )
                items.append(self.parse_expr())
            return Call(items) if tok_type == "lparen" else items

        raise QbSyntaxError(f"unexpected {tok_val!r}", self.position(offset))

    def _parse_atom(self, text: str, offset: int) -> SExpression:
        if NUMBER_RE.match(text):
            return float(text) if "." in text else int(text)
        if NUMERIC_PREFIX_RE.match(text):
            raise QbSyntaxError(f"invalid number literal {text!r}", self.position(offset))
        return Symbol(text)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _, offset = self.peek()
            if tok_type is None:
                break
            self.form_offsets.append(offset)
            yield self.parse_expr()


def read_program(source: str) -> tuple[list[SExpression], list[SourcePosition]]:
    """Read every top-level form in `source` along with where each one starts.

    Raises QbSyntaxError on malformed input; nothing is returned for a partially
    readable source.
    """
    stream = TokenStream(lex(source), source)
    try:
        forms = list(stream.parse_all())
    except RecursionError:
        raise QbSyntaxError("forms nested too deeply", stream.position(0)) from None
    return forms, [stream.position(offset) for offset in stream.form_offsets]


def parse(source: str) -> list[SExpression]:
    return read_program(source)[0]