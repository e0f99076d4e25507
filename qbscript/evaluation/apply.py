"""Application engine for Qb Script.

Centralizes function application for the interpreter:
- Closures (Lambda): strict positional arity, fresh call frame whose parent is
  the closure's captured environment (lexical scoping).
- Builtins: Python callables registered in the environment, invoked as
  fn(env, args) with already-evaluated operands.
"""

from __future__ import annotations

from qbscript import BuiltinFn, LispValue, EvaluatorFn
from qbscript.errors import QbTypeError
from qbscript.types.environment import Environment
from qbscript.types.lambda_fn import Lambda
from qbscript.types.values import kind_of, to_source


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    The call frame is discarded once nothing references it; a closure created
    inside the body keeps it alive.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Lambda | BuiltinFn | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a builtin.

    - For Lambda, defer to apply_lambda.
    - For Python callables (builtins), invoke with the calling env and list of args.
    - Otherwise, raise QbTypeError.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise QbTypeError(f"cannot apply {kind_of(head)} {to_source(head)}")
