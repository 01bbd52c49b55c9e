"""Greeter API: FastAPI application factory and module-level app.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GreeterError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Each app instance owns exactly one JokeProvider, set at construction

Design Decisions:
    - create_app() factory: tests build a fresh app per fixture with a fake or
      real provider, so no process-wide provider state leaks between tests
    - Provider stored on app.state before startup: ASGITransport test clients
      never run the lifespan, so wiring cannot depend on it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from greeter import __version__
from greeter.api.error_handlers import register_error_handlers
from greeter.api.routes import health, hello
from greeter.config import Settings, get_settings
from greeter.core.provider_protocols import JokeProvider
from greeter.infrastructure.dadjoke_client import DadJokeClient
from greeter.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    joke_provider: JokeProvider | None = None,
) -> FastAPI:
    """Build the API. Without joke_provider, the real icanhazdadjoke client is wired."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Greeter API started")
        yield
        logger.info("Greeter API shutting down")

    app = FastAPI(
        title="Dad-Joke Greeter API", version=__version__, lifespan=lifespan,
    )
    app.state.joke_provider = joke_provider or DadJokeClient.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(hello.router)
    register_error_handlers(app)
    return app


app = create_app()
