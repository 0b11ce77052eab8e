# ABOUTME: Explicit result values for catalog searches.
# ABOUTME: QueryResult carries remote books or a typed error; SearchOutcome is what callers receive.

import enum
from dataclasses import dataclass

from pocketlibrary.catalog.http import CatalogError
from pocketlibrary.catalog.types import Book


class FallbackReason(enum.Enum):
    """Why a search was answered from sample data instead of the remote catalog."""

    NETWORK_ERROR = "network_error"
    DECODING_ERROR = "decoding_error"
    EMPTY_RESULT = "empty_result"
    OFFLINE = "offline"


class CatalogOrigin(enum.Enum):
    REMOTE = "remote"
    SAMPLE = "sample"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one remote query: either books (possibly none) or an error."""

    books: tuple[Book, ...] = ()
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SearchOutcome:
    """Books returned to the caller plus where they came from.

    advisory is a user-facing message, set whenever sample data stood in
    for the remote catalog.
    """

    books: tuple[Book, ...]
    origin: CatalogOrigin
    fallback_reason: FallbackReason | None = None
    advisory: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.origin is CatalogOrigin.SAMPLE
