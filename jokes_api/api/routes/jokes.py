"""Joke Routes: forward upstream joke payloads under route-specific keys.

Invariants:
    - Exactly one upstream call per request
    - Upstream 'value' forwarded verbatim
    - Upstream failures propagate as JokesApiError (mapped to 502/504 by error_handlers)

Design Decisions:
    - Path parameters passed to the client as plain strings; encoding happens in httpx
"""

import logging

from fastapi import APIRouter, Depends

from jokes_api.api.dependencies import get_joke_source
from jokes_api.core.protocols import JokeSource
from jokes_api.schemas.jokes import (
    JokesResponse,
    PersonalJokeResponse,
    RandomJokeResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["jokes"])


@router.get("/jokes", response_model=JokesResponse)
async def list_jokes(source: JokeSource = Depends(get_joke_source)):
    """All jokes known to the upstream API."""
    return JokesResponse(jokes=await source.list_jokes())


@router.get("/joke/random", response_model=RandomJokeResponse)
async def random_joke(source: JokeSource = Depends(get_joke_source)):
    """One random joke, explicit categories excluded."""
    return RandomJokeResponse(random_joke=await source.random_joke())


@router.get(
    "/joke/random/personal/{first}/{last}",
    response_model=PersonalJokeResponse,
)
async def personal_joke(
    first: str, last: str, source: JokeSource = Depends(get_joke_source),
):
    """One random joke starring the given first and last name."""
    logger.debug(f"Personal joke requested for {first} {last}")
    return PersonalJokeResponse(
        personal_joke=await source.personal_joke(first, last),
    )
