"""Special form: cond, the multi-branch conditional."""

from qbscript import SExpression, LispValue, EvaluatorFn
from qbscript.errors import QbEvalError
from qbscript.types.call import Call
from qbscript.types.environment import Environment
from qbscript.types.values import is_atomic


def cond_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate (cond [test expr] ...).

    Every clause is a literal two-element list whose elements are still
    unevaluated expression trees. Clauses are all checked for shape up front,
    then tried in order: the first test whose value is atom-shaped has its
    expression evaluated and returned, and no later test is evaluated.
    If no clause matches, QbEvalError is raised.
    """
    for idx, clause in enumerate(tail, start=1):
        if not isinstance(clause, list) or isinstance(clause, Call) or len(clause) != 2:
            raise QbEvalError(f"cond: clause {idx} must be a literal list of a test and an expression")

    for test, expr in tail:
        if is_atomic(evaluate_fn(test, env)):
            return evaluate_fn(expr, env)

    raise QbEvalError("cond: no matching clause")
