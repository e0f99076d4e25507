from qbscript import EvaluatorFn
from qbscript import SExpression, LispValue
from qbscript.errors import QbArityError
from qbscript.types.environment import Environment
from qbscript.types.values import is_atomic


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise QbArityError(
            f"if expects a condition and two branches, got {len(tail)} operand(s)", expected=3, got=len(tail)
        )

    test, then_expr, else_expr = tail
    # Structural truthiness: atom-shaped is true, any list is false
    if is_atomic(evaluate_fn(test, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
