"""Core evaluator for the Qb Script interpreter.

Dispatches each expression by shape: self-evaluating literals, atom lookup,
literal lists (quoted data), special forms, and ordinary calls.
"""

from __future__ import annotations

from qbscript import SExpression, LispValue
from qbscript.errors import QbEvalError
from qbscript.evaluation.apply import apply
from qbscript.evaluation.special_forms import SPECIAL_FORMS
from qbscript.types.call import Call
from qbscript.types.environment import Environment
from qbscript.types.symbol import Symbol
from qbscript.types.values import to_value


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Entry point: evaluate one expression in `env`.

    Python's recursion limit is the language's stack limit; running out of it
    is reported as a QbEvalError like any other evaluation failure.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise QbEvalError("maximum recursion depth exceeded") from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """
    Core evaluator: one recursive step per expression tree node.
    """
    match expr:
        case Call():
            if not expr:
                raise QbEvalError("empty call has no operator")
            head, *tail_args = expr
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate0)

            fn = evaluate0(head, env)
            # Operands are evaluated left to right in the caller's environment
            args = [evaluate0(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate0)

        case Symbol():
            return env.lookup(expr)

        # Literal list: data, never evaluated
        case list():
            return to_value(expr)

    # --- Numbers, strings and function values return as-is ---
    return expr
