# ABOUTME: LibrarySession owns the mutable reservation and review collections for one run.
# ABOUTME: Built once per application run and passed to the catalog; there are no global singletons.

import logging
import random
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from pocketlibrary.catalog.sample_data import SEED_REVIEWS
from pocketlibrary.catalog.types import Book, Reservation, Review, utc_now

logger = logging.getLogger(__name__)

QUEUE_POSITION_RANGE = (1, 5)
_SEED_QUEUE_POSITION_RANGE = (1, 3)
_SEED_AGE_DAYS_RANGE = (1, 5)


class LibrarySession:
    """Per-run state: reservations in creation order, reviews newest first.

    Randomness and the clock are injectable so queue positions and
    timestamps can be pinned in tests.
    """

    def __init__(
        self,
        *,
        seed_reviews: Iterable[Review] = SEED_REVIEWS,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._reservations: list[Reservation] = []
        self._reviews: list[Review] = list(seed_reviews)
        self._rng = rng or random.Random()
        self._clock = clock

    @property
    def reservations(self) -> list[Reservation]:
        """Snapshot of current reservations, oldest first."""
        return list(self._reservations)

    def create_reservation(self, book: Book, branch_id: uuid.UUID) -> Reservation:
        """Place a hold on a book with a random queue position, expiring in 24 hours."""
        low, high = QUEUE_POSITION_RANGE
        reservation = Reservation(
            book=book,
            branch_id=branch_id,
            queue_position=self._rng.randint(low, high),
            created_at=self._clock(),
        )
        self._reservations.append(reservation)
        logger.debug(
            "Reserved %r at branch %s (queue position %d)",
            book.title,
            branch_id,
            reservation.queue_position,
        )
        return reservation

    def cancel_reservation(self, reservation_id: uuid.UUID) -> bool:
        """Remove a reservation. Returns False if it was not held by this session."""
        before = len(self._reservations)
        self._reservations = [r for r in self._reservations if r.id != reservation_id]
        return len(self._reservations) < before

    def seed_sample_reservations(self, books: Iterable[Book], branch_id: uuid.UUID) -> None:
        """Populate a few demo reservations created in the past few days.

        No-op if the session already holds reservations.
        """
        if self._reservations:
            return
        now = self._clock()
        for book in books:
            age = timedelta(days=self._rng.randint(*_SEED_AGE_DAYS_RANGE))
            self._reservations.append(
                Reservation(
                    book=book,
                    branch_id=branch_id,
                    queue_position=self._rng.randint(*_SEED_QUEUE_POSITION_RANGE),
                    created_at=now - age,
                )
            )

    def reviews_for(self, book_id: uuid.UUID) -> list[Review]:
        """Reviews of one book, newest submission first."""
        return [review for review in self._reviews if review.book_id == book_id]

    def add_review(self, review: Review) -> None:
        self._reviews.insert(0, review)
