"""Root conftest: shared JokeProvider fixtures and settings isolation.

Invariants:
    - Every test gets fresh doubles (function scope), no shared call counts
    - get_settings() cache cleared around every test
"""

import pytest

from greeter.config import get_settings

from tests.joke_doubles import FailingJokeProvider, FakeJokeProvider


@pytest.fixture
def fake_provider():
    return FakeJokeProvider()


@pytest.fixture
def failing_provider():
    return FailingJokeProvider()


@pytest.fixture
def null_provider():
    return FakeJokeProvider(joke=None)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
