"""Closure representation for Qb Script."""

from __future__ import annotations

from qbscript import SExpression, LispValue
from qbscript.types.environment import Environment
from qbscript.types.symbol import Symbol


class Lambda:
    """A first-class closure with formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: SExpression = body
        # Captured by reference: later `let`s in the defining frame are visible
        self.env: Environment = env

    def __str__(self) -> str:
        from qbscript.types.values import to_source
        return to_source(self)

    def __repr__(self) -> str:
        return f"<Lambda {self}>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return the new call frame for evaluating the body.

        Delegates to qbscript.types.bind to keep a single source of truth
        for parameter binding.
        """
        from qbscript.types.bind import bind_arguments
        return bind_arguments(list(self.formals), list(args), self.env)
