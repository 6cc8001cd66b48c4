import pytest

from bsl.evaluation.evaluator import builtin_environment
from bsl.interpreter import Interpreter

# Configuration is read from the environment; clear it so every test sees
# the defaults unless it sets a variable itself.
_CONFIG_VARS = ("BSL_RECURSION_LIMIT", "BSL_LOG_LEVEL", "BSL_CHECK_SUCCESS_MARKER")


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    for var in _CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh top-level environment with builtins loaded."""
    return builtin_environment()


@pytest.fixture
def run():
    """Evaluate a program and return its display text; passing checks print PASS."""
    interp = Interpreter(success_marker="PASS")
    return interp.evaluate_and_print


@pytest.fixture
def lines(run):
    """Evaluate a program and return its output lines."""
    return lambda source: run(source).splitlines()
