"""Parenthesised call forms.

The reader emits a `Call` for `( ... )` and a plain Python list for `[ ... ]`.
Both are lists, so quoted calls behave as list-shaped (false-like) data, but a
`Call` only ever compares equal to another `Call`: `(a b)` and `[a b]` stay
distinct when they are embedded in quoted data and re-evaluated by `cond`.
"""

from __future__ import annotations


class Call(list):
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Call) and list.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Call({list.__repr__(self)})"
