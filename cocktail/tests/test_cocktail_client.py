import httpx
import pytest

from cocktail.infra.cocktail_client import (
    CancellationToken, CocktailAPIError, CocktailDBClient, SearchCancelled, parse_drinks
)
from cocktail.tests.cocktail_fixtures import margarita_dict


def _client(handler):
    return CocktailDBClient(base_url="https://cocktails.test/api", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_search_sends_query_and_parses_drinks():
    seen = {}

    def handler(request: httpx.Request):
        seen["path"] = request.url.path
        seen["s"] = request.url.params["s"]
        return httpx.Response(200, json={"drinks": [margarita_dict()]})

    drinks = await _client(handler).search("blue margarita")

    assert seen == {"path": "/api/search.php", "s": "blue margarita"}
    assert [d.name for d in drinks] == ["Margarita"]


@pytest.mark.asyncio
async def test_null_drinks_is_empty():
    drinks = await _client(lambda request: httpx.Response(200, json={"drinks": None})).search("zzz")
    assert drinks == []


@pytest.mark.asyncio
async def test_http_error_status_raises():
    with pytest.raises(CocktailAPIError):
        await _client(lambda request: httpx.Response(500, text="down")).search("gin")


@pytest.mark.asyncio
async def test_network_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CocktailAPIError):
        await _client(handler).search("gin")


@pytest.mark.asyncio
async def test_invalid_json_raises():
    with pytest.raises(CocktailAPIError):
        await _client(lambda request: httpx.Response(200, content=b"<html>")).search("gin")


@pytest.mark.asyncio
async def test_cancelled_token_stops_before_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"drinks": None})

    token = CancellationToken()
    token.cancel()
    with pytest.raises(SearchCancelled):
        await _client(handler).search("gin", token)
    assert calls == []


def test_parse_drinks_rejects_malformed_payloads():
    with pytest.raises(CocktailAPIError):
        parse_drinks([])
    with pytest.raises(CocktailAPIError):
        parse_drinks({"drinks": "none"})
    with pytest.raises(CocktailAPIError):
        parse_drinks({"drinks": [1, 2]})
    assert parse_drinks({}) == []
