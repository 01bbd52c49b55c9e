"""icanhazdadjoke Client: network-backed JokeProvider over httpx.

Invariants:
    - Exactly one outbound GET per fetch_joke() call: no retry, no cache
    - Every call bounded by a total deadline of timeout_seconds (asyncio.timeout);
      httpx.Timeout applies the same value to each connect/read/write/pool phase
    - All failures mapped to ProviderError (core/errors.py) with a failure tag
    - No state survives a call: a fresh AsyncClient is opened and closed each time

Design Decisions:
    - Optional transport argument: tests inject httpx.MockTransport instead of
      patching httpx internals
"""

import asyncio
import logging
import time
from typing import NoReturn

import httpx
from pydantic import ValidationError

from greeter.config import Settings
from greeter.core.errors import ErrorContext, ProviderError
from greeter.schemas.joke import DadJokePayload

logger = logging.getLogger(__name__)


class DadJokeClient:
    """Fetches one random joke from icanhazdadjoke.com per call."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.headers = {"Accept": "application/json"}
        if user_agent:
            self.headers["User-Agent"] = user_agent
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "DadJokeClient":
        return cls(
            settings.joke_api_url,
            timeout_seconds=settings.joke_api_timeout_seconds,
            user_agent=settings.joke_api_user_agent,
        )

    async def fetch_joke(self) -> str:
        """GET one joke. Raises ProviderError on transport, status or payload failure."""
        started = time.perf_counter()
        async with self._build_client() as client:
            try:
                async with asyncio.timeout(self.timeout_seconds):
                    response = await client.get(self.url)
                response.raise_for_status()
            except (httpx.TimeoutException, TimeoutError):
                self._fail(
                    f"no response within {self.timeout_seconds}s",
                    ProviderError.TIMEOUT,
                )
            except httpx.HTTPStatusError as e:
                self._fail(
                    f"HTTP {e.response.status_code}", ProviderError.HTTP_STATUS,
                )
            except httpx.HTTPError as e:
                self._fail(
                    f"{type(e).__name__}: {e}", ProviderError.TRANSPORT,
                )

        payload = self._parse(response)
        logger.debug(
            "Fetched dad joke",
            extra={
                "joke_id": payload.id,
                "status_code": response.status_code,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return payload.joke

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout_seconds),
            headers=self.headers,
            transport=self._transport,
        )

    def _parse(self, response: httpx.Response) -> DadJokePayload:
        """Validate the JSON body. Invalid JSON and missing fields are both malformed."""
        try:
            return DadJokePayload.model_validate_json(response.content)
        except ValidationError as e:
            self._fail(
                f"{e.error_count()} validation error(s) in payload",
                ProviderError.MALFORMED_PAYLOAD,
            )

    def _fail(self, message: str, failure: str) -> NoReturn:
        logger.warning(
            f"Joke provider call failed: {message}",
            extra={"failure": failure, "error_code": "JOKE_PROVIDER_ERROR"},
        )
        raise ProviderError(
            message, failure, context=ErrorContext(provider_url=self.url),
        )
