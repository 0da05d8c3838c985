"""Routes: happy-path behavior of the four public endpoints.

Invariants:
    - GET / never touches the upstream
    - Each joke route makes exactly one upstream call and forwards 'value' verbatim
    - Response bodies carry exactly one documented key
    - first/last path params reach the upstream as firstName/lastName, properly encoded
"""

import httpx


async def test_welcome_returns_static_message(client, stub_upstream):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": "Welcome to the Jokes API"}
    assert stub_upstream.requests == []


async def test_welcome_served_even_when_upstream_is_down(client, stub_upstream):
    def _down(request):
        raise RuntimeError("should never be called")

    stub_upstream.handler = _down

    res = await client.get("/")

    assert res.status_code == 200
    assert res.json()["message"] == "Welcome to the Jokes API"


async def test_jokes_forwards_upstream_value(client, stub_upstream, all_jokes):
    res = await client.get("/jokes")

    assert res.status_code == 200
    assert res.json() == {"jokes": all_jokes}
    assert len(stub_upstream.requests) == 1
    assert stub_upstream.last_request.url.path == "/jokes"


async def test_random_joke_returns_random_joke_key(client, stub_upstream):
    res = await client.get("/joke/random")

    assert res.status_code == 200
    body = res.json()
    assert list(body) == ["randomJoke"]
    assert body["randomJoke"]["joke"] == "Chuck Norris can divide by zero."


async def test_random_joke_sends_exclusion_filter(client, stub_upstream):
    await client.get("/joke/random")

    sent = stub_upstream.last_request
    assert sent.url.path == "/jokes/random"
    assert sent.url.params.get("exclude") == "[explicit]"
    assert "firstName" not in sent.url.params
    assert "lastName" not in sent.url.params


async def test_personal_joke_returns_personal_joke_key(client):
    res = await client.get("/joke/random/personal/manchester/codes")

    assert res.status_code == 200
    body = res.json()
    assert list(body) == ["personalJoke"]
    assert body["personalJoke"]["joke"] == "manchester codes can divide by zero."


async def test_personal_joke_forwards_names_as_query(client, stub_upstream):
    await client.get("/joke/random/personal/Ada/Lovelace")

    params = stub_upstream.last_request.url.params
    assert params.get("firstName") == "Ada"
    assert params.get("lastName") == "Lovelace"
    assert params.get("exclude") == "[explicit]"


async def test_personal_joke_varies_with_path_params(client, stub_upstream):
    await client.get("/joke/random/personal/Grace/Hopper")
    await client.get("/joke/random/personal/Alan/Turing")

    sent = [
        (r.url.params.get("firstName"), r.url.params.get("lastName"))
        for r in stub_upstream.requests
    ]
    assert sent == [("Grace", "Hopper"), ("Alan", "Turing")]


async def test_personal_joke_encodes_special_characters(client, stub_upstream):
    """Names with spaces, '&' and '#' must not leak into other query params."""
    res = await client.get(
        "/joke/random/personal/Jean%20Luc/O%27Neil%20%26%20Co%23x",
    )

    assert res.status_code == 200
    params = stub_upstream.last_request.url.params
    assert params.get("firstName") == "Jean Luc"
    assert params.get("lastName") == "O'Neil & Co#x"
    assert params.get("exclude") == "[explicit]"
    assert len(params.multi_items()) == 3


async def test_null_upstream_value_forwarded_verbatim(client, stub_upstream):
    stub_upstream.handler = lambda request: httpx.Response(
        200, json={"type": "success", "value": None},
    )

    res = await client.get("/jokes")

    assert res.status_code == 200
    assert res.json() == {"jokes": None}


async def test_unknown_route_returns_404(client, stub_upstream):
    res = await client.get("/joke/unknown/route")
    assert res.status_code == 404
    assert stub_upstream.requests == []
