"""Value-level helpers: shape predicates, structural truthiness, quoting and rendering.

Truthiness is not a separate boolean type. A value is true-like iff it is not
a list (atoms, numbers, strings and functions all qualify) and false-like iff
it is a list, the empty list included.
"""

from __future__ import annotations

from io import StringIO

from qbscript import LispValue, SExpression
from qbscript.types.call import Call
from qbscript.types.lambda_fn import Lambda
from qbscript.types.symbol import Symbol, T


def is_atomic(value: LispValue) -> bool:
    return not isinstance(value, list)


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def truth(flag: bool) -> LispValue:
    """Map a Python condition onto the language's truthy atom or a fresh empty list."""
    return T if flag else []


def to_value(expr: SExpression) -> LispValue:
    """Convert an unevaluated form into data without evaluating anything.

    Lists and calls are copied recursively so that results never alias the
    literal they came from.
    """
    if isinstance(expr, Call):
        return Call(to_value(x) for x in expr)
    if isinstance(expr, list):
        return [to_value(x) for x in expr]
    return expr


def kind_of(value: LispValue) -> str:
    """Name of the value's variant, for error messages."""
    if isinstance(value, Symbol):
        return "atom"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Call):
        return "call"
    if isinstance(value, list):
        return "list"
    if isinstance(value, Lambda):
        return "closure"
    if callable(value):
        return "builtin"
    return type(value).__name__


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, (Call, list)):
        opening, closing = ("(", ")") if isinstance(value, Call) else ("[", "]")
        buffer.write(opening)
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(closing)
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, str):
        buffer.write(f'"{value}"')
    elif isinstance(value, Lambda):
        buffer.write("(fun ")
        _write(list(value.formals), buffer)
        buffer.write(" ")
        _write(value.body, buffer)
        buffer.write(")")
    elif is_number(value):
        buffer.write(repr(value))
    elif callable(value):
        buffer.write(f"<builtin {getattr(value, 'qb_name', getattr(value, '__name__', '?'))}>")
    else:
        buffer.write(repr(value))


def to_source(value: LispValue) -> str:
    """Render a value in reader syntax."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
