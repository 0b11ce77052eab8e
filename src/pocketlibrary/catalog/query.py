# ABOUTME: Remote catalog query against the Open Library search endpoint.
# ABOUTME: Turns free-text queries into normalized Book lists, surfacing typed errors.

import logging

from pocketlibrary.catalog.http import AsyncHttpClient, CatalogError
from pocketlibrary.catalog.openlibrary_parser import parse_search_response
from pocketlibrary.catalog.result import QueryResult
from pocketlibrary.catalog.types import Book
from pocketlibrary.config import CatalogConfig

logger = logging.getLogger(__name__)


class CatalogQuery:
    """Searches the remote catalog.

    Uses a dependency-injected AsyncHttpClient for testability. Network and
    schema failures are raised as NetworkError and DecodingError respectively;
    a search with zero matches is an ordinary empty list.
    """

    def __init__(self, http_client: AsyncHttpClient, config: CatalogConfig | None = None) -> None:
        self._http = http_client
        self._config = config or CatalogConfig()

    @property
    def name(self) -> str:
        return "openlibrary"

    async def search_books(self, query: str) -> list[Book]:
        """Search the remote catalog for books matching free text.

        A query that is empty after trimming returns an empty list without
        touching the network.

        Raises:
            NetworkError: On transport failure or a non-2xx status.
            DecodingError: If the response does not match the search schema.
        """
        trimmed = query.strip()
        if not trimmed:
            return []

        params = {"q": trimmed, "limit": str(self._config.search_limit)}
        data = await self._http.get(self._config.search_endpoint, params=params)
        books = parse_search_response(data)
        logger.debug("Remote search for %r returned %d book(s)", trimmed, len(books))
        return books

    async def try_search(self, query: str) -> QueryResult:
        """Like search_books, but returns catalog errors as a value instead of raising."""
        try:
            books = await self.search_books(query)
        except CatalogError as exc:
            return QueryResult(error=exc)
        return QueryResult(books=tuple(books))
