# ABOUTME: Core record types for the library catalog: books, branches, reservations, reviews, fines.
# ABOUTME: All records are frozen; display-time changes rebuild them with dataclasses.replace.

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

DEFAULT_GENRE = "General"
UNKNOWN_AUTHOR = "Unknown Author"
DEFAULT_BRANCH_HOURS = "9 AM – 6 PM"
RESERVATION_HOLD = timedelta(hours=24)

MAX_REVIEW_NAME_LENGTH = 50
MAX_REVIEW_COMMENT_LENGTH = 500


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Book:
    """A catalog entry, either freshly mapped from a remote search or drawn from sample data.

    is_borrowed is an availability marker only; remote results always start
    out unborrowed since the search API has no circulation status.
    """

    title: str
    author: str
    genre: str = DEFAULT_GENRE
    isbn: str = ""
    is_borrowed: bool = False
    cover_url: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Branch:
    """A physical library location.

    distance_km is only populated on copies returned by a proximity query.
    """

    name: str
    coordinate: Coordinate
    hours: str = DEFAULT_BRANCH_HOURS
    available_copies: int = 0
    address: str | None = None
    distance_km: float | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if self.available_copies < 0:
            msg = f"available_copies must be non-negative, got {self.available_copies}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Reservation:
    """A hold on a book at a branch. The book is a snapshot taken at reservation time."""

    book: Book
    branch_id: uuid.UUID
    queue_position: int = 1
    created_at: datetime = field(default_factory=utc_now)
    expires_at: datetime | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if self.queue_position < 1:
            msg = f"queue_position must be positive, got {self.queue_position}"
            raise ValueError(msg)
        if self.expires_at is None:
            object.__setattr__(self, "expires_at", self.created_at + RESERVATION_HOLD)


@dataclass(frozen=True)
class Review:
    """A reader's rating and comment for a book."""

    book_id: uuid.UUID
    user_name: str
    rating: int
    comment: str
    created_at: datetime = field(default_factory=utc_now)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not 1 <= self.rating <= 5:
            msg = f"rating must be between 1 and 5, got {self.rating}"
            raise ValueError(msg)
        if len(self.user_name) > MAX_REVIEW_NAME_LENGTH:
            msg = f"user_name must be at most {MAX_REVIEW_NAME_LENGTH} characters"
            raise ValueError(msg)
        if len(self.comment) > MAX_REVIEW_COMMENT_LENGTH:
            msg = f"comment must be at most {MAX_REVIEW_COMMENT_LENGTH} characters"
            raise ValueError(msg)


@dataclass(frozen=True)
class FineRecord:
    """An overdue fine. book_title is copied in, not a reference to a Book."""

    book_title: str
    amount: float
    date: datetime = field(default_factory=utc_now)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if self.amount < 0:
            msg = f"amount must be non-negative, got {self.amount}"
            raise ValueError(msg)
