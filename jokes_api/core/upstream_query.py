"""Upstream Query Building: typed query parameters for the joke API.

Invariants:
    - Query parameters are returned as a mapping, never as a pre-encoded string
    - firstName/lastName present only together (personal jokes)
    - exclude always present on random-joke queries

Design Decisions:
    - Percent-encoding delegated to httpx at request time: names with spaces,
      '&' or '#' cannot break the outbound URL
"""

from collections.abc import Iterable

JOKES_PATH = "/jokes"
RANDOM_JOKE_PATH = "/jokes/random"


def render_exclude(categories: Iterable[str]) -> str:
    """Render categories in the upstream list syntax: ['a', 'b'] -> '[a,b]'."""
    cleaned = [c.strip() for c in categories if c and c.strip()]
    return "[" + ",".join(cleaned) + "]"


def build_random_query(
    exclude: Iterable[str],
    first_name: str | None = None,
    last_name: str | None = None,
) -> dict[str, str]:
    """Build the query mapping for GET /jokes/random.

    Personal jokes need both names; passing only one is a programming error.
    """
    if (first_name is None) != (last_name is None):
        raise ValueError("first_name and last_name must be given together")
    params: dict[str, str] = {}
    if first_name is not None and last_name is not None:
        params["firstName"] = first_name
        params["lastName"] = last_name
    params["exclude"] = render_exclude(exclude)
    return params
