"""Liveness probe tests."""

from greeter import __version__


async def test_health_returns_200(client):
    response = await client.get("/api/v1/health/")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": "dadjoke-greeter",
        "version": __version__,
    }


async def test_health_does_not_fetch_a_joke(client, fake_provider):
    await client.get("/api/v1/health/")
    assert fake_provider.calls == 0


async def test_health_is_up_when_provider_is_down(failing_client):
    response = await failing_client.get("/api/v1/health/")
    assert response.status_code == 200
