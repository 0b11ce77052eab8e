# ABOUTME: Catalog package: record types, remote query errors, and search result values.
# ABOUTME: Query, fallback, and facade classes are imported from their own modules.

from pocketlibrary.catalog.http import CatalogError, DecodingError, NetworkError
from pocketlibrary.catalog.result import (
    CatalogOrigin,
    FallbackReason,
    QueryResult,
    SearchOutcome,
)
from pocketlibrary.catalog.types import (
    Book,
    Branch,
    Coordinate,
    FineRecord,
    Reservation,
    Review,
)

__all__ = [
    "Book",
    "Branch",
    "CatalogError",
    "CatalogOrigin",
    "Coordinate",
    "DecodingError",
    "FallbackReason",
    "FineRecord",
    "NetworkError",
    "QueryResult",
    "Reservation",
    "Review",
    "SearchOutcome",
]
