"""Route Dependencies: resolve per-app collaborators for request handlers."""

from fastapi import Request

from greeter.core.provider_protocols import JokeProvider


def get_joke_provider(request: Request) -> JokeProvider:
    """JokeProvider wired into this app instance by create_app()."""
    return request.app.state.joke_provider
