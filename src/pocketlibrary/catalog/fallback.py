# ABOUTME: Offline catalog backed by static sample data and a LibrarySession.
# ABOUTME: Safety net for remote search failures; also serves branches, reservations, and reviews.

import dataclasses
import uuid
from collections.abc import Sequence

from pocketlibrary.catalog.geo import haversine_km
from pocketlibrary.catalog.sample_data import SAMPLE_BOOKS, SAMPLE_BRANCHES
from pocketlibrary.catalog.types import Book, Branch, Coordinate, Reservation, Review
from pocketlibrary.session import LibrarySession


class FallbackCatalog:
    """In-memory catalog over sample books and branches.

    Every operation works on local state only and never fails. Reservations
    and reviews live in the injected LibrarySession, so two catalogs built
    over different sessions do not see each other's mutations.
    """

    def __init__(
        self,
        session: LibrarySession,
        books: Sequence[Book] = SAMPLE_BOOKS,
        branches: Sequence[Branch] = SAMPLE_BRANCHES,
    ) -> None:
        self._session = session
        self._books = tuple(books)
        self._branches = tuple(branches)

    @property
    def name(self) -> str:
        return "sample"

    @property
    def books(self) -> tuple[Book, ...]:
        return self._books

    @property
    def session(self) -> LibrarySession:
        return self._session

    def search_books(self, query: str) -> list[Book]:
        """Case-insensitive substring search over title, author, genre, and ISBN.

        An empty (or whitespace-only) query browses the whole sample set.
        """
        term = query.strip().casefold()
        if not term:
            return list(self._books)
        return [
            book
            for book in self._books
            if any(
                term in value.casefold()
                for value in (book.title, book.author, book.genre, book.isbn)
            )
        ]

    def nearby_branches(self, origin: Coordinate, radius_km: float) -> list[Branch]:
        """Sample branches within radius_km of origin, each carrying its computed distance.

        Raises:
            ValueError: If radius_km is negative.
        """
        if radius_km < 0:
            msg = f"radius_km must be non-negative, got {radius_km}"
            raise ValueError(msg)
        nearby: list[Branch] = []
        for branch in self._branches:
            distance = haversine_km(origin, branch.coordinate)
            if distance <= radius_km:
                nearby.append(dataclasses.replace(branch, distance_km=distance))
        return nearby

    def create_reservation(self, book: Book, branch_id: uuid.UUID) -> Reservation:
        return self._session.create_reservation(book, branch_id)

    def cancel_reservation(self, reservation_id: uuid.UUID) -> bool:
        return self._session.cancel_reservation(reservation_id)

    def reservations(self) -> list[Reservation]:
        return self._session.reservations

    def seed_sample_reservations(self) -> None:
        """Give an empty session demo holds on the first two sample books at the first branch."""
        if not self._branches:
            return
        self._session.seed_sample_reservations(self._books[:2], self._branches[0].id)

    def fetch_reviews(self, book_id: uuid.UUID) -> list[Review]:
        return self._session.reviews_for(book_id)

    def add_review(self, review: Review) -> None:
        self._session.add_review(review)
