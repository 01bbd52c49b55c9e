"""Hello Route: GET /hello?targetName=<name> -> greeting plus a dad joke.

Invariants:
    - Absent, empty or whitespace-only targetName resolves to DEFAULT_TARGET_NAME
    - One JokeProvider call per request
    - ProviderError propagates to the global handler (503), never a 200 body
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse

from greeter.api.dependencies import get_joke_provider
from greeter.core.greeting import DEFAULT_TARGET_NAME
from greeter.core.provider_protocols import JokeProvider
from greeter.services.greeting_service import greet

logger = logging.getLogger(__name__)
router = APIRouter(tags=["hello"])


def resolve_target_name(target_name: str | None) -> str:
    if target_name is None or not target_name.strip():
        return DEFAULT_TARGET_NAME
    return target_name


@router.get(
    "/hello", response_class=HTMLResponse, status_code=status.HTTP_200_OK,
)
async def hello(
    target_name: str | None = Query(
        DEFAULT_TARGET_NAME, alias="targetName", max_length=200,
    ),
    provider: JokeProvider = Depends(get_joke_provider),
):
    """Greet targetName with the dad joke of the moment."""
    body = await greet(resolve_target_name(target_name), provider)
    return HTMLResponse(content=body)
