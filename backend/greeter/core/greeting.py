"""Greeting Composer: (name, joke) -> greeting string.

Invariants:
    - Output is byte-identical for equal (name, joke) pairs
    - No defaulting here: the routing layer resolves DEFAULT_TARGET_NAME first
    - A missing joke still yields a greeting, embedding NO_JOKE_TEXT
"""

DEFAULT_TARGET_NAME = "Stephanie"

# Rendered in place of an absent joke
NO_JOKE_TEXT = "null"


def compose_greeting(name: str, joke: str | None) -> str:
    """Combine the resolved target name and a joke into the response body."""
    if joke is None:
        joke = NO_JOKE_TEXT
    return f"Hello {name}<br/>Dad joke of the moment: {joke}"
