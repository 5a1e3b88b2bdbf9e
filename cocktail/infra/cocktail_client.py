"""HTTP client for TheCocktailDB text search.

The only contract the rest of the app relies on: given a query string,
asynchronously return zero or more DrinkRecord, or raise CocktailAPIError.
"""
from __future__ import annotations
import logging
from typing import List, Optional

import httpx

from cocktail.domain.Drink import DrinkRecord
from cocktail.utilities.config import COCKTAIL_API_BASE, COCKTAIL_API_TIMEOUT

logger = logging.getLogger(__name__)


class CocktailAPIError(Exception):
    """Network failure, bad status or a response that is not a drinks payload."""


class SearchCancelled(Exception):
    """Raised when the search's cancellation token was cancelled while it ran."""


class CancellationToken:
    def __init__(self):
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self):
        if self._cancelled:
            raise SearchCancelled()


def parse_drinks(data) -> List[DrinkRecord]:
    '''
    Turns a search.php response body into DrinkRecords. A missing or null
    "drinks" key means no results.
    '''
    if not isinstance(data, dict):
        raise CocktailAPIError(f"Unexpected response type: {type(data).__name__}")
    drinks = data.get("drinks")
    if drinks is None:
        return []
    if not isinstance(drinks, list):
        raise CocktailAPIError("'drinks' must be a list")
    records = []
    for d in drinks:
        if not isinstance(d, dict):
            raise CocktailAPIError("drink entries must be objects")
        records.append(DrinkRecord.from_dict(d))
    return records


class CocktailDBClient:
    def __init__(self, base_url: str = COCKTAIL_API_BASE, timeout: float = COCKTAIL_API_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def search(self, query: str, token: Optional[CancellationToken] = None) -> List[DrinkRecord]:
        token = token or CancellationToken()
        token.raise_if_cancelled()
        try:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout,
                                         transport=self._transport) as client:
                response = await client.get("/search.php", params={"s": query})
        except httpx.HTTPError as e:
            raise CocktailAPIError(f"Request for '{query}' failed: {e}") from e
        token.raise_if_cancelled()

        if response.status_code != 200:
            raise CocktailAPIError(f"HTTP {response.status_code}: {response.text[:200]}")
        try:
            data = response.json()
        except ValueError as e:
            raise CocktailAPIError(f"Invalid JSON from search endpoint: {e}") from e
        drinks = parse_drinks(data)
        logger.debug("Search '%s' returned %s drink(s)", query, len(drinks))
        return drinks
