# ABOUTME: Integration tests for the full search pipeline over a faked HTTP transport.
# ABOUTME: Exercises CatalogHttpClient -> CatalogQuery -> CatalogFacade -> FallbackCatalog.

import asyncio

import httpx

from pocketlibrary.catalog.facade import CatalogFacade
from pocketlibrary.catalog.fallback import FallbackCatalog
from pocketlibrary.catalog.http import CatalogHttpClient
from pocketlibrary.catalog.query import CatalogQuery
from pocketlibrary.catalog.result import CatalogOrigin, FallbackReason, SearchOutcome
from pocketlibrary.catalog.sample_data import SAMPLE_BOOKS
from pocketlibrary.session import LibrarySession
from tests.fixtures.openlibrary_responses import SEARCH_RESPONSE_DUNE


def _search(transport: httpx.MockTransport, query: str) -> SearchOutcome:
    async def run() -> SearchOutcome:
        async with CatalogHttpClient(transport=transport, retry_delay=0.01) as http_client:
            facade = CatalogFacade(
                FallbackCatalog(LibrarySession()),
                CatalogQuery(http_client=http_client),
            )
            return await facade.search_books(query)

    return asyncio.run(run())


class TestSearchPipeline:
    """End-to-end search scenarios with a mocked Open Library."""

    def test_remote_dune(self) -> None:
        """One matching remote doc yields exactly that mapped Book and no advisory."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=SEARCH_RESPONSE_DUNE)

        outcome = _search(httpx.MockTransport(handler), "dune")

        assert len(outcome.books) == 1
        book = outcome.books[0]
        assert (book.title, book.author, book.isbn) == ("Dune", "Frank Herbert", "9780441172719")
        assert book.cover_url == "https://covers.openlibrary.org/b/id/12345-M.jpg"
        assert outcome.origin is CatalogOrigin.REMOTE
        assert outcome.advisory is None
        assert seen[0].url.path == "/search.json"
        assert seen[0].url.params["q"] == "dune"
        assert seen[0].url.params["limit"] == "20"

    def test_connection_failure_uses_samples(self) -> None:
        """A refused connection falls back to the sample Dune with an advisory."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        outcome = _search(httpx.MockTransport(handler), "dune")

        assert outcome.books == (SAMPLE_BOOKS[0],)
        assert outcome.fallback_reason is FallbackReason.NETWORK_ERROR
        assert outcome.advisory is not None

    def test_server_error_after_retry_uses_samples(self) -> None:
        """Persistent 503s are retried, then answered from sample data."""
        calls: list[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            return httpx.Response(503)

        outcome = _search(httpx.MockTransport(handler), "gibson")

        assert len(calls) == 2
        assert [b.title for b in outcome.books] == ["Neuromancer"]
        assert outcome.fallback_reason is FallbackReason.NETWORK_ERROR

    def test_html_body_uses_samples(self) -> None:
        """A non-JSON 200 body is a decoding failure and falls back."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        outcome = _search(httpx.MockTransport(handler), "orwell")

        assert [b.title for b in outcome.books] == ["1984"]
        assert outcome.fallback_reason is FallbackReason.DECODING_ERROR
