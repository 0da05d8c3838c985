"""Root conftest: stubbed upstream joke API shared by all test layers.

Invariants:
    - No test reaches the real joke API (UPSTREAM_BASE_URL points at a fake host)
    - StubUpstream records every outgoing httpx.Request for assertions
    - upstream_client is a real JokesUpstreamClient over httpx.MockTransport

Design Decisions:
    - MockTransport over monkeypatching httpx: the client code path runs unchanged,
      only the socket layer is replaced
"""

import os

import httpx
import pytest

os.environ.setdefault("UPSTREAM_BASE_URL", "http://upstream.test")
os.environ.setdefault("LOG_FORMAT", "text")

from jokes_api.config import Settings  # noqa: E402
from jokes_api.infrastructure.jokes_client import JokesUpstreamClient  # noqa: E402

UPSTREAM_URL = "http://upstream.test"

ALL_JOKES = [
    {"id": 1, "joke": "Chuck Norris counted to infinity. Twice.", "categories": []},
    {"id": 2, "joke": "Chuck Norris can divide by zero.", "categories": ["nerdy"]},
]


def _icndb_handler(request: httpx.Request) -> httpx.Response:
    """Mimic ICNDb: /jokes returns the list, /jokes/random one joke with names applied."""
    if request.url.path == "/jokes":
        return httpx.Response(200, json={"type": "success", "value": ALL_JOKES})
    if request.url.path == "/jokes/random":
        first = request.url.params.get("firstName", "Chuck")
        last = request.url.params.get("lastName", "Norris")
        return httpx.Response(200, json={
            "type": "success",
            "value": {
                "id": 2,
                "joke": f"{first} {last} can divide by zero.",
                "categories": ["nerdy"],
            },
        })
    return httpx.Response(404, json={"type": "NoSuchQuoteException", "value": "unknown"})


class StubUpstream:
    """Programmable upstream: records requests, answers via a swappable handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = _icndb_handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def stub_upstream():
    return StubUpstream()


@pytest.fixture
def all_jokes():
    return ALL_JOKES


@pytest.fixture
def settings():
    return Settings(
        upstream_base_url=UPSTREAM_URL,
        upstream_timeout_seconds=2.5,
        log_format="text",
    )


@pytest.fixture
async def upstream_client(stub_upstream, settings):
    """JokesUpstreamClient wired to the stub upstream through MockTransport."""
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(stub_upstream), base_url=UPSTREAM_URL,
    )
    client = JokesUpstreamClient(
        base_url=UPSTREAM_URL,
        exclude_categories=settings.upstream_exclude_categories,
        timeout_seconds=settings.upstream_timeout_seconds,
        client=http,
    )
    yield client
    await client.aclose()
