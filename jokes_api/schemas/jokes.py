"""Joke Schemas: one single-key response model per route.

Invariants:
    - Wire keys are message, jokes, randomJoke, personalJoke (camelCase kept for clients)
    - Forwarded values typed Any: upstream content passed through verbatim

Design Decisions:
    - snake_case attributes with camelCase aliases; FastAPI serializes by alias
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

WELCOME_MESSAGE = "Welcome to the Jokes API"


class WelcomeResponse(BaseModel):
    """Static greeting for GET /."""
    message: str = WELCOME_MESSAGE


class JokesResponse(BaseModel):
    """Full joke list forwarded from upstream."""
    jokes: Any


class RandomJokeResponse(BaseModel):
    """Random joke forwarded from upstream."""
    model_config = ConfigDict(populate_by_name=True)

    random_joke: Any = Field(alias="randomJoke")


class PersonalJokeResponse(BaseModel):
    """Random joke with the caller's name substituted upstream."""
    model_config = ConfigDict(populate_by_name=True)

    personal_joke: Any = Field(alias="personalJoke")
