from qbscript import SExpression, LispValue, EvaluatorFn
from qbscript.errors import QbArityError
from qbscript.types.environment import Environment
from qbscript.types.values import to_value


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote A), also written #A: A as data, nothing inside it evaluated."""
    if len(tail) != 1:
        raise QbArityError(f"quote expects exactly 1 operand, got {len(tail)}", expected=1, got=len(tail))
    return to_value(tail[0])
