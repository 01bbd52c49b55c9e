"""API test fixtures: one fresh app per test, wired with a JokeProvider double.

Invariants:
    - Every client fixture builds its own app via create_app(); no shared app state
    - Requests go through httpx ASGITransport (in-process, no sockets)
"""

import pytest

from tests.api.asgi_client import client_for


@pytest.fixture
async def client(fake_provider):
    async with client_for(fake_provider) as c:
        yield c


@pytest.fixture
async def failing_client(failing_provider):
    async with client_for(failing_provider) as c:
        yield c


@pytest.fixture
async def null_client(null_provider):
    async with client_for(null_provider) as c:
        yield c
