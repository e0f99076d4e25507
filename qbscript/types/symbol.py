"""Atoms: immutable, case-sensitive names compared by their exact text."""

from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Interned so that atom identity is cheap to compare and hash
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


# Canonical truthy atom, written `#t` in source
T = Symbol("t")

QUOTE = Symbol("quote")
LET = Symbol("let")
FUN = Symbol("fun")
IF = Symbol("if")
COND = Symbol("cond")
