import logging

from qbscript import EvaluatorFn
from qbscript import SExpression, LispValue
from qbscript.errors import QbArityError, QbEvalError
from qbscript.types.call import Call
from qbscript.types.environment import Environment
from qbscript.types.lambda_fn import Lambda
from qbscript.types.symbol import Symbol

logger = logging.getLogger(__name__)


def fun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fun [params] body): exactly one body expression, evaluated at call time.
    if len(tail) != 2:
        raise QbArityError(f"fun expects exactly 2 operands, got {len(tail)}", expected=2, got=len(tail))

    params, body = tail
    if not isinstance(params, list) or isinstance(params, Call):
        raise QbEvalError(f"fun: parameters must be a literal list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise QbEvalError(f"fun: parameter {p!r} is not an atom")

    fn = Lambda(params, body, env)
    logger.debug("closure created: %s", fn)
    return fn
