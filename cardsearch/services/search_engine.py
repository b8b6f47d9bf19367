"""
Scryfall card search engine.

Owns the upstream search URL and a reusable httpx client. One engine is
built at startup and shared by every request; nothing on it is mutated
after construction.
"""

import logging
from types import TracebackType

import httpx

from cardsearch.config import settings
from cardsearch.models.card import Card
from cardsearch.models.failure import ParseError, UnknownSearchError
from cardsearch.parsers.scryfall import ScryfallError, parse_search_response, to_cards

logger = logging.getLogger(__name__)


def _parse_base_url(base_url: str) -> httpx.URL:
    """Parse the upstream base URL, rejecting anything that is not http(s) with a host."""
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise UnknownSearchError("Invalid Scryfall base URL", detail=str(e)) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise UnknownSearchError("Invalid Scryfall base URL", detail=base_url)

    return url


class ScryfallSearchEngine:
    """
    Searches Scryfall for cards by name.

    Safe to share across concurrent requests: the configuration is read-only
    and httpx.AsyncClient supports concurrent use.
    """

    def __init__(
        self,
        base_url: str | None = None,
        search_path: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Build the engine.

        Args:
            base_url: Scryfall API origin. Defaults to settings.scryfall_base_url.
            search_path: Path of the search endpoint, joined onto base_url.
                Defaults to settings.scryfall_search_path.
            transport: Optional httpx transport, mainly for tests.

        Raises:
            UnknownSearchError: If a URL cannot be parsed or the client cannot be built
        """
        self.base_url = _parse_base_url(base_url or settings.scryfall_base_url)

        try:
            self.search_url = self.base_url.join(search_path or settings.scryfall_search_path)
        except httpx.InvalidURL as e:
            raise UnknownSearchError("Invalid Scryfall search URL", detail=str(e)) from e

        try:
            self._client = httpx.AsyncClient(
                headers={
                    "User-Agent": settings.user_agent,
                    "Accept": "application/json",
                },
                transport=transport,
            )
        except (httpx.HTTPError, ValueError, TypeError) as e:
            raise UnknownSearchError("Could not build HTTP client", detail=str(e)) from e

    async def search_cards_by_name(self, name: str) -> list[Card]:
        """
        Search for cards whose name matches an exact phrase.

        The name is not validated here; Scryfall rejects bad queries
        with an error object, which surfaces as UnknownSearchError.

        Args:
            name: Card name, possibly empty

        Returns:
            Cards from the first result page, in Scryfall's order.
            Empty if Scryfall answers 404 (no matches).

        Raises:
            ParseError: If the response body cannot be decoded
            UnknownSearchError: On transport failure or a Scryfall error object
        """
        query = f'"{name}"'
        response = await self._search_cards(query)

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("No cards found for query %s", query)
            return []

        try:
            scryfall_object = parse_search_response(response.content)
        except ParseError as e:
            logger.warning(
                "Undecodable Scryfall response for query %s (HTTP %d): %s",
                query,
                response.status_code,
                e.detail,
            )
            raise

        if isinstance(scryfall_object, ScryfallError):
            logger.warning(
                "Scryfall returned error for query %s (status %s): %s",
                query,
                scryfall_object.status,
                scryfall_object.details,
            )
            raise UnknownSearchError(f"Received error from Scryfall '{scryfall_object.details}'")

        for warning in scryfall_object.warnings:
            logger.warning("Scryfall warning for query %s: %s", query, warning)

        if scryfall_object.has_more:
            logger.debug(
                "Query %s matched %s cards, using first page only",
                query,
                scryfall_object.total_cards,
            )

        return to_cards(scryfall_object)

    async def _search_cards(self, query: str) -> httpx.Response:
        """
        Send a fulltext query to Scryfall's /cards/search endpoint.

        Query syntax: https://scryfall.com/docs/syntax

        Raises:
            UnknownSearchError: If the request fails before a response arrives
        """
        logger.debug("Searching Scryfall: %s", query)

        try:
            return await self._client.get(self.search_url, params={"q": query})
        except httpx.HTTPError as e:
            logger.warning("Scryfall request failed for query %s: %s", query, e)
            raise UnknownSearchError("Scryfall request failed", detail=str(e)) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "ScryfallSearchEngine":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
