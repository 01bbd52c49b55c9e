"""JokeProvider test doubles: deterministic stand-ins for DadJokeClient.

Invariants:
    - Doubles satisfy JokeProvider structurally; none of them touch the network
    - Each double counts its fetch_joke() calls
"""

from greeter.core.errors import ProviderError

FIXED_JOKE = "I'm reading a book about anti-gravity. It's impossible to put down."


class FakeJokeProvider:
    """Returns a fixed joke (or None) and counts calls."""

    def __init__(self, joke: str | None = FIXED_JOKE):
        self.joke = joke
        self.calls = 0

    async def fetch_joke(self):
        self.calls += 1
        return self.joke


class FailingJokeProvider:
    """Raises ProviderError on every call."""

    def __init__(self, failure: str = ProviderError.TRANSPORT):
        self.failure = failure
        self.calls = 0

    async def fetch_joke(self) -> str:
        self.calls += 1
        raise ProviderError("connection refused", self.failure)
