import pytest

from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import evaluate
from lispy.interpreter import Interpreter
from lispy.printer import render
from lispy.reader.reader import read_source
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp(monkeypatch):
    """Interpreter with no prelude, whatever the host environment says."""
    monkeypatch.delenv("LISPY_PRELUDE", raising=False)
    return Interpreter(prelude=None)


@pytest.fixture
def run(env):
    """Evaluate source text in the shared `env` and render the result."""
    def _run(source: str) -> str:
        return render(evaluate(env, read_source(source)))
    return _run
