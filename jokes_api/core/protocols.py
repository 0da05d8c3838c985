"""Boundary Protocols: contract between route handlers and the upstream client.

Invariants:
    - Handlers depend on JokeSource, never on httpx directly
    - Implementations raise JokesApiError subclasses on failure, never return None

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Any, Protocol


class JokeSource(Protocol):
    """Contract for fetching joke payloads; returns the upstream 'value' field."""
    async def list_jokes(self) -> Any: ...
    async def random_joke(self) -> Any: ...
    async def personal_joke(self, first_name: str, last_name: str) -> Any: ...
    async def aclose(self) -> None: ...
