import pytest

from sable.builtin.env_builtin import register
from sable.runtime_context import set_source_opener
from sable.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture(autouse=True)
def _restore_source_opener():
    # Tests may inject an in-memory opener for load; always put the default back.
    yield
    set_source_opener(None)
