import pytest

from twik.builtin.env_builtin import register
from twik.evaluation.evaluator import evaluate
from twik.interpreter import Interpreter
from twik.reader.parser import read
from twik.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`, returning the last value."""
    def _run(source):
        result = None
        for expr in read(source):
            result = evaluate(expr, env)
        return result
    return _run
