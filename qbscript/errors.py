from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SourcePosition:
    """Location in source text: 0-based offset, 1-based line and column."""
    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class QbError(Exception):
    """ Base class for all Qb Script errors"""
    kind = "Error"

    def __init__(self, message: str, position: Optional[SourcePosition] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def with_position(self, position: Optional[SourcePosition]) -> QbError:
        """Attach `position` unless the error already carries one."""
        if self.position is None:
            self.position = position
        return self

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind, "message": self.message, "position": None}
        if self.position is not None:
            data["position"] = {
                "offset": self.position.offset,
                "line": self.position.line,
                "column": self.position.column,
            }
        return data

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} ({self.position})"


class QbSyntaxError(QbError):
    """ Raised when source text cannot be read"""
    kind = "SyntaxError"


class QbUnboundNameError(QbError):
    """ Raised when an atom is not bound anywhere in the environment chain"""
    kind = "UnboundNameError"

    def __init__(self, name: str, position: Optional[SourcePosition] = None):
        super().__init__(f"unbound name {name}", position)
        self.name = name

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["name"] = self.name
        return data


class QbTypeError(QbError):
    """ Raised when a primitive receives a value of the wrong shape"""
    kind = "TypeError"


class QbEmptyListError(QbTypeError):
    """ Raised when head or tail is applied to an empty list"""
    kind = "EmptyListError"


class QbArityError(QbError):
    """ Raised when a function or special form receives the wrong number of operands"""
    kind = "ArityError"

    def __init__(self, message: str, expected: int, got: int, position: Optional[SourcePosition] = None):
        super().__init__(message, position)
        self.expected = expected
        self.got = got

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["expected"] = self.expected
        data["got"] = self.got
        return data


class QbEvalError(QbError):
    """ Raised for any other violation of an evaluation rule"""
    kind = "EvalError"
