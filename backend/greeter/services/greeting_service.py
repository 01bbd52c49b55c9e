"""Greeting Service: one joke fetch, one composition.

Invariants:
    - provider.fetch_joke() awaited exactly once per call
    - ProviderError propagates unchanged to the caller (no retry, no fallback)
    - A None or blank joke is a ProviderError, never a composed greeting
"""

import logging

from greeter.core.errors import ProviderError
from greeter.core.greeting import compose_greeting
from greeter.core.provider_protocols import JokeProvider

logger = logging.getLogger(__name__)


async def greet(name: str, provider: JokeProvider) -> str:
    """Fetch a joke and compose the greeting for an already-resolved name."""
    joke = await provider.fetch_joke()
    if joke is None or not joke.strip():
        raise ProviderError("provider returned no joke", ProviderError.EMPTY_JOKE)
    logger.info("Composed greeting", extra={"target_name": name})
    return compose_greeting(name, joke)
