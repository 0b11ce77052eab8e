# ABOUTME: Builds the catalog facade used by CLI commands for one run.
# ABOUTME: Owns the HTTP client lifetime and the LibrarySession for the command.

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from pocketlibrary.catalog.facade import CatalogFacade
from pocketlibrary.catalog.fallback import FallbackCatalog
from pocketlibrary.catalog.http import CatalogHttpClient
from pocketlibrary.catalog.query import CatalogQuery
from pocketlibrary.config import CatalogConfig
from pocketlibrary.session import LibrarySession


def _create_http_client(config: CatalogConfig) -> CatalogHttpClient:
    """Create the default HTTP client for the remote catalog."""
    return CatalogHttpClient(timeout=config.timeout)


@asynccontextmanager
async def open_facade(
    *,
    offline: bool = False,
    config: CatalogConfig | None = None,
) -> AsyncIterator[CatalogFacade]:
    """Yield a facade over a fresh session, closing the HTTP client on exit."""
    config = config or CatalogConfig()
    fallback = FallbackCatalog(LibrarySession())
    if offline:
        yield CatalogFacade(fallback)
        return
    async with _create_http_client(config) as http_client:
        yield CatalogFacade(fallback, CatalogQuery(http_client, config))
