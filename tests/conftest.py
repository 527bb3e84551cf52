import pytest

from lispy.builtin import register
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter with builtins only, no prelude."""
    return Interpreter(prelude=None)


@pytest.fixture(scope="module")
def std():
    """Interpreter with the packaged standard prelude loaded."""
    return Interpreter()
