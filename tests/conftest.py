import pytest

from qbscript.evaluation.evaluator import evaluate
from qbscript.interpreter import Interpreter, new_global_environment
from qbscript.reader.parser import parse


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return new_global_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`; return the last value."""
    def _run(source):
        result = None
        for expr in parse(source):
            result = evaluate(expr, env)
        return result
    return _run
