"""Built-in functions for the Qb Script runtime environment.

This module defines the primitive library (list construction and access,
shape predicates, atomic comparison, arithmetic) and the registration helper
that binds them in a global environment.

Every builtin receives the calling environment and its already-evaluated
operands, and returns the truthy atom `t` or a fresh empty list wherever a
boolean answer is expected.
"""
from __future__ import annotations

from typing import Callable

from qbscript import BuiltinFn, LispValue
from qbscript.errors import QbArityError, QbEmptyListError, QbTypeError
from qbscript.types.environment import Environment
from qbscript.types.symbol import Symbol
from qbscript.types.values import is_atomic, is_number, kind_of, to_source, truth


def _describe(value: LispValue) -> str:
    # lists are reported by kind only; they can be arbitrarily large or deep
    if is_atomic(value):
        return f"{kind_of(value)} {to_source(value)}"
    return kind_of(value)


def _expect_arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise QbArityError(
            f"{name} expects exactly {count} operand(s), got {len(args)}", expected=count, got=len(args)
        )


def _expect_list(name: str, value: LispValue) -> list:
    if not isinstance(value, list):
        raise QbTypeError(f"{name}: expected a list, got {_describe(value)}")
    return value


def _expect_non_empty(name: str, value: LispValue) -> list:
    _expect_list(name, value)
    if not value:
        raise QbEmptyListError(f"{name}: empty list")
    return value


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> list:
    """(cons a b) => a new list with a prepended to list b."""
    _expect_arity("cons", args, 2)
    first, rest = args
    return [first, *_expect_list("cons", rest)]


def append(env: Environment, args: list[LispValue]) -> list:
    """(append a b) => a new list holding the elements of a followed by those of b."""
    _expect_arity("append", args, 2)
    left, right = args
    return [*_expect_list("append", left), *_expect_list("append", right)]


def list_builtin(env: Environment, args: list[LispValue]) -> list:
    return list(args)


def head(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("head", args, 1)
    return _expect_non_empty("head", args[0])[0]


def tail(env: Environment, args: list[LispValue]) -> list:
    _expect_arity("tail", args, 1)
    return list(_expect_non_empty("tail", args[0])[1:])


# -------------------------------
# Predicates
# -------------------------------
def atom(env: Environment, args: list[LispValue]) -> LispValue:
    """Truthy for anything that is not a list."""
    _expect_arity("atom", args, 1)
    return truth(is_atomic(args[0]))


def logical_not(env: Environment, args: list[LispValue]) -> LispValue:
    """Truthy only for the empty list; every other value, atoms included, gives []."""
    _expect_arity("not", args, 1)
    value = args[0]
    return truth(isinstance(value, list) and not value)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Equality over atomic values.

    Numbers compare numerically (1 equals 1.0); atoms and strings compare by
    exact text within their own kind; functions compare by identity.
    """
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return a is b


def _atomic_pair(name: str, args: list[LispValue]) -> tuple[LispValue, LispValue]:
    _expect_arity(name, args, 2)
    for value in args:
        if not is_atomic(value):
            raise QbTypeError(f"{name}: operands must be atomic, got {_describe(value)}")
    return args[0], args[1]


def equals(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _atomic_pair("eq", args)
    return truth(is_equal(a, b))


def not_equals(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _atomic_pair("ne", args)
    return truth(not is_equal(a, b))


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, test: Callable[[float, float], bool]) -> BuiltinFn:
    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        _expect_arity(name, args, 2)
        for value in args:
            if not is_number(value):
                raise QbTypeError(f"{name}: operands must be numbers, got {_describe(value)}")
        return truth(test(args[0], args[1]))

    compare.__name__ = name
    return compare


lt = _compare("lt", lambda a, b: a < b)
gt = _compare("gt", lambda a, b: a > b)
le = _compare("le", lambda a, b: a <= b)
ge = _compare("ge", lambda a, b: a >= b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Left-to-right sum; integer unless some operand is a float. (add) is 0."""
    total: int | float = 0
    for value in args:
        if not is_number(value):
            raise QbTypeError(f"add: operands must be numbers, got {_describe(value)}")
        total += value
    return total


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "cons": cons,
    "append": append,
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "atom": atom,
    "not": logical_not,
    "eq": equals,
    "ne": not_equals,
    "lt": lt,
    "gt": gt,
    "le": le,
    "ge": ge,
    "add": add,
}

for _name, _fn in BUILTINS.items():
    _fn.qb_name = _name  # type: ignore[attr-defined]


def register(env: Environment) -> None:
    env.update({Symbol(name): fn for name, fn in BUILTINS.items()})
