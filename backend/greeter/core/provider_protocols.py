"""Boundary Protocols: contracts between the greeting core and its joke source.

Invariants:
    - Core NEVER imports from the shell; implementations arrive by injection
    - fetch_joke() performs one independent fetch per call (no cache, no retry)
    - Failures surface as ProviderError (core/errors.py), never as None

Design Decisions:
    - Protocol over ABC: structural subtyping lets test doubles stay plain classes
"""

from typing import Protocol


class JokeProvider(Protocol):
    """Capability: fetch one joke string, or raise ProviderError."""

    async def fetch_joke(self) -> str: ...
