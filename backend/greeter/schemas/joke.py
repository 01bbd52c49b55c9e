"""Joke Schemas: payload returned by icanhazdadjoke.com.

Invariants:
    - DadJokePayload.joke is non-empty after stripping; it is the only required field
    - Unknown fields are ignored (the provider may add more)
"""

from pydantic import BaseModel, Field, field_validator


class DadJokePayload(BaseModel):
    """`GET /` with Accept: application/json -> {"id", "joke", "status"}.

    Only `joke` is required; `id` is informational and may be absent.
    """
    id: str | None = None
    joke: str = Field(min_length=1)
    status: int = 200

    @field_validator("joke")
    @classmethod
    def strip_joke(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("joke cannot be empty or whitespace")
        return v
