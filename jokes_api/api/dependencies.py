"""Route Dependencies: resolve the JokeSource attached to the running app."""

from fastapi import Request

from jokes_api.core.protocols import JokeSource


def get_joke_source(request: Request) -> JokeSource:
    """Return the JokeSource stored on app.state by create_app or the lifespan."""
    return request.app.state.joke_source
