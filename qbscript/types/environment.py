"""Runtime environment for Qb Script.

An Environment is one frame: a mutable mapping of Symbols to evaluated values
plus an `outer` link to the enclosing frame. Frames are shared by reference,
so a closure keeps its defining frame alive for as long as the closure itself
is reachable. A frame never references its children.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from qbscript import LispValue
from qbscript.errors import QbEvalError, QbUnboundNameError
from qbscript.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Qb values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any existing binding.

        Raises QbEvalError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise QbEvalError(f"cannot bind {name!r}: not an atom")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises QbUnboundNameError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise QbUnboundNameError(str(name))
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        frames = []
        for env in self.chain():
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                frames.append(env_buf.getvalue())
        return f"<Environment chain: {' -> '.join(frames)}>"
