import pytest

from lisple.builtin.primitives import register
from lisple.interpreter import Interpreter
from lisple.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
