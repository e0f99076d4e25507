from __future__ import annotations

from typing import List

from qbscript import LispValue
from qbscript.errors import QbArityError
from qbscript.types.environment import Environment
from qbscript.types.symbol import Symbol


def bind_arguments(
    formals: List[Symbol],
    supplied_args: List[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding in Qb Script.

    Parameters are strictly positional: the number of supplied arguments must
    equal the number of formals. Returns a new Environment whose outer is the
    closure_env (never the caller's frame), populated with one binding per formal.
    """
    if len(supplied_args) != len(formals):
        raise QbArityError(
            f"expected {len(formals)} argument(s), got {len(supplied_args)}",
            expected=len(formals),
            got=len(supplied_args),
        )

    local_env = Environment(outer=closure_env)
    for formal, value in zip(formals, supplied_args):
        local_env.define(formal, value)
    return local_env
