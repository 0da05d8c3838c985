"""Jokes API: FastAPI application factory.

Invariants:
    - No module-level app: every app comes from create_app()
    - Routes registered explicitly (no auto-discovery)
    - app.state.joke_source set before the first request is served
    - An upstream client opened by the lifespan is closed by the lifespan

Design Decisions:
    - Factory with injectable JokeSource: tests pass a stub, production gets
      JokesUpstreamClient built from settings
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Two error handler layers (domain, catch-all) registered by api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jokes_api.api.error_handlers import register_error_handlers
from jokes_api.api.routes import jokes, welcome
from jokes_api.config import Settings, get_settings
from jokes_api.core.protocols import JokeSource
from jokes_api.infrastructure.jokes_client import JokesUpstreamClient
from jokes_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    joke_source: JokeSource | None = None,
) -> FastAPI:
    """Build a Jokes API application.

    When joke_source is given, the caller owns its lifecycle. Otherwise the
    lifespan opens a JokesUpstreamClient on startup and closes it on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        owned = None
        if getattr(app.state, "joke_source", None) is None:
            owned = JokesUpstreamClient.from_settings(settings)
            app.state.joke_source = owned
        logger.info(
            f"Jokes API started (upstream {settings.upstream_base_url})",
        )
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()
                app.state.joke_source = None
            logger.info("Jokes API shutting down")

    app = FastAPI(title="Jokes API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.joke_source = joke_source

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(welcome.router)
    app.include_router(jokes.router)

    register_error_handlers(app)
    return app
