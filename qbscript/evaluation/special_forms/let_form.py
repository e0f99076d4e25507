from qbscript import EvaluatorFn
from qbscript import SExpression, LispValue
from qbscript.errors import QbArityError, QbEvalError
from qbscript.types.environment import Environment
from qbscript.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value)
    Binds in the current frame, overwriting silently, and returns the bound value.
    """
    if len(tail) != 2:
        raise QbArityError(f"let expects exactly 2 operands, got {len(tail)}", expected=2, got=len(tail))

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise QbEvalError(f"let: binding name must be an atom, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
