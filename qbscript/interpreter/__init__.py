from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Sequence

from qbscript import SExpression, LispValue
from qbscript.builtin.env_builtin import register
from qbscript.config import get_recursion_limit
from qbscript.errors import QbError, QbSyntaxError, SourcePosition
from qbscript.evaluation.evaluator import evaluate
from qbscript.reader.parser import read_program
from qbscript.types.environment import Environment

logger = logging.getLogger(__name__)


def new_global_environment() -> Environment:
    """Create a root frame with every builtin bound under its name."""
    env = Environment()
    register(env)
    return env


def evaluate_program(
    forms: Sequence[SExpression],
    env: Environment,
    *,
    positions: Optional[Sequence[SourcePosition]] = None,
    stop_on_error: bool = False,
    eval_fn: Callable[[SExpression, Environment], LispValue] = evaluate,
) -> list[LispValue | QbError]:
    """Evaluate top-level forms in order, one result per form.

    A form that fails contributes its QbError (tagged with the form's position
    when `positions` is given) instead of a value. Later forms still run unless
    `stop_on_error` is set, in which case the failing form's error is the last
    entry.
    """
    results: list[LispValue | QbError] = []
    for index, form in enumerate(forms):
        try:
            results.append(eval_fn(form, env))
        except QbError as err:
            if positions is not None:
                err.with_position(positions[index])
            logger.debug("top-level form %d failed: %s", index, err)
            results.append(err)
            if stop_on_error:
                break
    return results


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise Python's recursion limit to `limit` for the duration of the block."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        logger.debug("raising recursion limit from %d to %d", previous, limit)
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    Orchestrates reading and evaluating Qb Script code.
    Maintains one global Environment across calls, so bindings made by one
    call are visible to the next.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
        env: Environment | None = None,
    ):
        self.eval_fn = eval_fn if eval_fn is not None else evaluate
        self.env: Environment = env if env is not None else new_global_environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the value of the last one.

        The first error is raised, carrying the position of the form that failed.
        Empty input evaluates to the empty list.
        """
        result: LispValue = []
        with recursion_limit(get_recursion_limit()):
            forms, positions = read_program(code)
            for form, position in zip(forms, positions):
                try:
                    result = self.eval_fn(form, self.env)
                except QbError as err:
                    err.with_position(position)
                    raise
        return result

    def run(self, code: str) -> list[LispValue | QbError]:
        """Evaluate every form in `code`, collecting one value or error per form.

        Unreadable source yields a single QbSyntaxError and evaluates nothing.
        """
        with recursion_limit(get_recursion_limit()):
            try:
                forms, positions = read_program(code)
            except QbSyntaxError as err:
                return [err]
            return evaluate_program(forms, self.env, positions=positions, eval_fn=self.eval_fn)
