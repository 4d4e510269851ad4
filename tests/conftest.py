import pytest

from nora.builtin.env_builtin import create_global_environment
from nora.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global environment with nil/NIL and all primitives."""
    return create_global_environment()


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist across calls within one test."""
    return Interpreter()
