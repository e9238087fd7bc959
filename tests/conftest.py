import pytest

from backend_helpers import FakeBackend


@pytest.fixture
def backend():
    return FakeBackend()
