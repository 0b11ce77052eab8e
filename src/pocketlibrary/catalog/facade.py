# ABOUTME: CatalogFacade is the single entry point for catalog operations.
# ABOUTME: Chooses remote results or sample data through an explicit fallback decision.

import dataclasses
import logging
import uuid
from collections.abc import Iterable

from pocketlibrary.catalog.fallback import FallbackCatalog
from pocketlibrary.catalog.http import DecodingError
from pocketlibrary.catalog.query import CatalogQuery
from pocketlibrary.catalog.result import CatalogOrigin, FallbackReason, QueryResult, SearchOutcome
from pocketlibrary.catalog.types import DEFAULT_GENRE, Book, Branch, Coordinate, Reservation, Review

logger = logging.getLogger(__name__)

ALL_FALLBACK_REASONS = frozenset(FallbackReason)

_ERROR_ADVISORY = "Could not reach the online catalog. Showing sample data."
_OFFLINE_ADVISORY = "Offline mode. Showing sample data."


def fallback_reason(result: QueryResult) -> FallbackReason | None:
    """Classify a remote query result. None means the remote books should be used as-is."""
    if result.error is not None:
        if isinstance(result.error, DecodingError):
            return FallbackReason.DECODING_ERROR
        return FallbackReason.NETWORK_ERROR
    if not result.books:
        return FallbackReason.EMPTY_RESULT
    return None


def _empty_advisory(query: str) -> str:
    if not query:
        return "Showing sample data."
    return f'No online results for "{query}". Showing sample data.'


class CatalogFacade:
    """Catalog contract consumed by the CLI and any other front end.

    Book search goes to the remote CatalogQuery first. Network errors,
    decoding errors, and empty results all fall back to the sample catalog
    by default, with a user-facing advisory on the outcome. Pass a narrower
    fallback_on set to have errors propagate or empty results returned as-is.

    Branch lookup, reservations, and reviews have no remote implementation
    and are always served by the FallbackCatalog. Without a CatalogQuery the
    facade runs offline and every search is answered from sample data.
    """

    def __init__(
        self,
        fallback: FallbackCatalog,
        query: CatalogQuery | None = None,
        *,
        fallback_on: Iterable[FallbackReason] = ALL_FALLBACK_REASONS,
    ) -> None:
        self._fallback = fallback
        self._query = query
        self._fallback_on = frozenset(fallback_on)

    @property
    def offline(self) -> bool:
        return self._query is None

    async def search_books(self, query: str) -> SearchOutcome:
        """Search for books, substituting sample data per the fallback policy.

        Raises:
            NetworkError, DecodingError: Only when that error's reason is not in fallback_on.
        """
        return await self._search(query, error_advisory=_ERROR_ADVISORY)

    async def browse_genre(self, genre: str, term: str = "") -> SearchOutcome:
        """Search by genre and label books with no real genre as the browsed one.

        Args:
            genre: Genre to search for.
            term: Optional text that must appear in a book's title or author,
                case-insensitively. Applied after the fallback decision.
        """
        genre = genre.strip()
        outcome = await self._search(
            genre,
            error_advisory=f"Could not load {genre} from Open Library. Showing sample data.",
        )
        books = outcome.books
        if genre:
            books = tuple(
                dataclasses.replace(book, genre=genre)
                if book.genre.strip() in ("", DEFAULT_GENRE)
                else book
                for book in books
            )
        needle = term.strip().casefold()
        if needle:
            books = tuple(
                book
                for book in books
                if needle in book.title.casefold() or needle in book.author.casefold()
            )
        return dataclasses.replace(outcome, books=books)

    async def _search(self, query: str, *, error_advisory: str) -> SearchOutcome:
        trimmed = query.strip()
        if self._query is None:
            return self._from_sample(query, FallbackReason.OFFLINE, _OFFLINE_ADVISORY)

        result = await self._query.try_search(query)
        reason = fallback_reason(result)
        if reason is None:
            return SearchOutcome(books=result.books, origin=CatalogOrigin.REMOTE)

        if reason not in self._fallback_on:
            if result.error is not None:
                raise result.error
            return SearchOutcome(books=(), origin=CatalogOrigin.REMOTE)

        if result.error is not None:
            logger.warning(
                "Remote search for %r failed, using sample data: %s", trimmed, result.error
            )
            return self._from_sample(query, reason, error_advisory)
        logger.info("Remote search for %r found nothing, using sample data", trimmed)
        return self._from_sample(query, reason, _empty_advisory(trimmed))

    def _from_sample(self, query: str, reason: FallbackReason, advisory: str) -> SearchOutcome:
        return SearchOutcome(
            books=tuple(self._fallback.search_books(query)),
            origin=CatalogOrigin.SAMPLE,
            fallback_reason=reason,
            advisory=advisory,
        )

    # Operations below are always served by the sample catalog.

    async def nearby_branches(self, origin: Coordinate, radius_km: float) -> list[Branch]:
        logger.debug("nearby_branches served by %s catalog", self._fallback.name)
        return self._fallback.nearby_branches(origin, radius_km)

    async def create_reservation(self, book: Book, branch_id: uuid.UUID) -> Reservation:
        logger.debug("create_reservation served by %s catalog", self._fallback.name)
        return self._fallback.create_reservation(book, branch_id)

    async def cancel_reservation(self, reservation_id: uuid.UUID) -> bool:
        return self._fallback.cancel_reservation(reservation_id)

    async def reservations(self) -> list[Reservation]:
        return self._fallback.reservations()

    async def seed_sample_reservations(self) -> list[Reservation]:
        """Seed demo holds when there are none, then return all current reservations."""
        self._fallback.seed_sample_reservations()
        return self._fallback.reservations()

    async def fetch_reviews(self, book_id: uuid.UUID) -> list[Review]:
        logger.debug("fetch_reviews served by %s catalog", self._fallback.name)
        return self._fallback.fetch_reviews(book_id)

    async def add_review(self, review: Review) -> None:
        self._fallback.add_review(review)
