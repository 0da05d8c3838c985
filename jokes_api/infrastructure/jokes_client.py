"""Upstream Joke Client: wraps httpx.AsyncClient with timeout and error mapping.

Invariants:
    - One outbound GET per call, no retries
    - Timeouts -> UpstreamTimeoutError (504)
    - Connection failures and non-2xx statuses -> UpstreamUnavailableError (502)
    - Non-JSON, undecodable (bad content-encoding) or value-less body -> MalformedUpstreamBodyError (502)
    - Query strings built from typed mappings (core/upstream_query.py), encoded by httpx

Design Decisions:
    - Wrapper over raw client: isolates error mapping from route handlers
    - httpx.AsyncClient injectable: tests plug in httpx.MockTransport as the upstream
    - Shared pooled client per process, closed in the app lifespan
"""

import logging
import time
from collections.abc import Iterable
from typing import Any

import httpx

from jokes_api.config import Settings
from jokes_api.core.errors import (
    ErrorContext,
    MalformedUpstreamBodyError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from jokes_api.core.upstream_payload import extract_value
from jokes_api.core.upstream_query import (
    JOKES_PATH,
    RANDOM_JOKE_PATH,
    build_random_query,
)

logger = logging.getLogger(__name__)


class JokesUpstreamClient:
    """Fetches jokes from an ICNDb-compatible API and returns the 'value' field."""

    def __init__(
        self,
        base_url: str,
        exclude_categories: Iterable[str] = ("explicit",),
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.client = client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds,
        )
        self.exclude_categories = list(exclude_categories)
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "JokesUpstreamClient":
        return cls(
            base_url=settings.upstream_base_url,
            exclude_categories=settings.upstream_exclude_categories,
            timeout_seconds=settings.upstream_timeout_seconds,
        )

    async def list_jokes(self) -> Any:
        """Full joke list (upstream GET /jokes)."""
        return await self._fetch_value(JOKES_PATH)

    async def random_joke(self) -> Any:
        """Random joke with the exclusion filter applied."""
        return await self._fetch_value(
            RANDOM_JOKE_PATH, build_random_query(self.exclude_categories),
        )

    async def personal_joke(self, first_name: str, last_name: str) -> Any:
        """Random joke with the main character renamed to first/last."""
        return await self._fetch_value(
            RANDOM_JOKE_PATH,
            build_random_query(
                self.exclude_categories,
                first_name=first_name,
                last_name=last_name,
            ),
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _fetch_value(
        self, path: str, params: dict[str, str] | None = None,
    ) -> Any:
        """GET path, decode JSON, return the 'value' field or raise a mapped error."""
        context = ErrorContext(upstream_path=path)
        started = time.perf_counter()
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(
                f"Upstream timeout on {path}: {e!r}",
                extra={"upstream_path": path},
            )
            raise UpstreamTimeoutError(
                self.timeout_seconds, context=context,
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            context.upstream_status = status_code
            logger.warning(
                f"Upstream returned {status_code} on {path}",
                extra={"upstream_path": path, "status_code": status_code},
            )
            raise UpstreamUnavailableError(
                f"status {status_code}", context=context,
            ) from e
        except httpx.DecodingError as e:
            logger.warning(
                f"Upstream body on {path} could not be decoded: {e!r}",
                extra={"upstream_path": path},
            )
            raise MalformedUpstreamBodyError(
                "body could not be decoded", context=context,
            ) from e
        except httpx.TransportError as e:
            logger.warning(
                f"Upstream unreachable on {path}: {e!r}",
                extra={"upstream_path": path},
            )
            raise UpstreamUnavailableError(
                type(e).__name__, context=context,
            ) from e

        context.upstream_status = response.status_code
        try:
            body = response.json()
        except ValueError as e:
            logger.warning(
                f"Upstream body on {path} is not valid JSON",
                extra={"upstream_path": path, "status_code": response.status_code},
            )
            raise MalformedUpstreamBodyError(
                "body is not valid JSON", context=context,
            ) from e

        value = extract_value(body, context=context)
        self._log_success(path, response.status_code, started)
        return value

    def _log_success(self, path: str, status_code: int, started: float) -> None:
        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "Upstream joke API success",
            extra={
                "upstream_path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )
