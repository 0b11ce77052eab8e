# ABOUTME: Static sample books, branches, and seed reviews for offline use and fallback.
# ABOUTME: Ids are derived with uuid5 so the same sample record has the same id in every run.

import uuid
from datetime import datetime, timezone

from pocketlibrary.catalog.types import Book, Branch, Coordinate, Review

_SAMPLE_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "https://pocketlibrary.app/sample")


def sample_id(kind: str, key: str) -> uuid.UUID:
    """Stable id for a sample record of the given kind."""
    return uuid.uuid5(_SAMPLE_NAMESPACE, f"{kind}:{key}")


def _book(title: str, author: str, genre: str, isbn: str, is_borrowed: bool = False) -> Book:
    return Book(
        id=sample_id("book", isbn),
        title=title,
        author=author,
        genre=genre,
        isbn=isbn,
        is_borrowed=is_borrowed,
    )


SAMPLE_BOOKS: tuple[Book, ...] = (
    _book("Dune", "Frank Herbert", "Sci-Fi", "9780441172719"),
    _book("Neuromancer", "William Gibson", "Sci-Fi", "9780441569595"),
    _book("Pride and Prejudice", "Jane Austen", "Romance", "9780141439518"),
    _book("Foundation", "Isaac Asimov", "Sci-Fi", "9780553293357", is_borrowed=True),
    _book("1984", "George Orwell", "Dystopian", "9780451524935", is_borrowed=True),
    _book("To Kill a Mockingbird", "Harper Lee", "Classic", "9780061120084"),
    _book("The Hobbit", "J.R.R. Tolkien", "Fantasy", "9780547928227"),
    _book("The Great Gatsby", "F. Scott Fitzgerald", "Classic", "9780743273565"),
    _book("Brave New World", "Aldous Huxley", "Dystopian", "9780060850524"),
    _book("Beloved", "Toni Morrison", "Historical Fiction", "9781400033416"),
    _book("The Left Hand of Darkness", "Ursula K. Le Guin", "Sci-Fi", "9780441478125"),
    _book("Sapiens", "Yuval Noah Harari", "Non-Fiction", "9780062316097"),
    _book("The Name of the Rose", "Umberto Eco", "Mystery", "9780156001311"),
    _book("Gone Girl", "Gillian Flynn", "Thriller", "9780307588371"),
    _book("The Hitchhiker's Guide to the Galaxy", "Douglas Adams", "Sci-Fi", "9780345391803"),
    _book("Jane Eyre", "Charlotte Brontë", "Romance", "9780141441146"),
    _book("The Road", "Cormac McCarthy", "Dystopian", "9780307387899", is_borrowed=True),
    _book("Educated", "Tara Westover", "Memoir", "9780399590504"),
    _book("A Brief History of Time", "Stephen Hawking", "Science", "9780553380163"),
    _book("The Da Vinci Code", "Dan Brown", "Thriller", "9780307474278"),
)


def _branch(
    name: str,
    latitude: float,
    longitude: float,
    available_copies: int,
    address: str,
    hours: str = "9 AM – 6 PM",
) -> Branch:
    return Branch(
        id=sample_id("branch", name),
        name=name,
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        hours=hours,
        available_copies=available_copies,
        address=address,
    )


SAMPLE_BRANCHES: tuple[Branch, ...] = (
    _branch(
        "Pollak Library (CSUF)",
        33.8816,
        -117.8854,
        4,
        "800 N State College Blvd, Fullerton, CA",
        hours="7 AM – 11 PM",
    ),
    _branch(
        "Fullerton Public Library", 33.8703, -117.9243, 3, "353 W Commonwealth Ave, Fullerton, CA"
    ),
    _branch("Placentia Library", 33.8722, -117.8703, 2, "411 E Chapman Ave, Placentia, CA"),
    _branch(
        "Yorba Linda Public Library", 33.8886, -117.8131, 1, "4852 Lakeview Ave, Yorba Linda, CA"
    ),
    _branch("Brea Library", 33.9167, -117.9001, 2, "1 Civic Center Cir, Brea, CA"),
    _branch(
        "Anaheim Central Library",
        33.8361,
        -117.9143,
        5,
        "500 W Broadway, Anaheim, CA",
        hours="10 AM – 8 PM",
    ),
    _branch("Orange Public Library", 33.7879, -117.8531, 0, "407 E Chapman Ave, Orange, CA"),
    _branch(
        "Santa Ana Public Library", 33.7486, -117.8656, 3, "26 Civic Center Plaza, Santa Ana, CA"
    ),
    _branch("Heritage Park Library", 33.7006, -117.7631, 1, "14361 Yale Ave, Irvine, CA"),
    _branch(
        "Los Angeles Central Library",
        34.0504,
        -118.2551,
        6,
        "630 W 5th St, Los Angeles, CA",
        hours="10 AM – 8 PM",
    ),
)


SEED_REVIEWS: tuple[Review, ...] = (
    Review(
        id=sample_id("review", "dune-alex"),
        book_id=SAMPLE_BOOKS[0].id,
        user_name="Alex",
        rating=5,
        comment="A masterpiece of world-building. The politics of Arrakis still feel fresh.",
        created_at=datetime(2025, 11, 1, 18, 30, tzinfo=timezone.utc),
    ),
    Review(
        id=sample_id("review", "pride-jordan"),
        book_id=SAMPLE_BOOKS[2].id,
        user_name="Jordan",
        rating=4,
        comment="Witty and sharp. Slow start, but Elizabeth Bennet carries it.",
        created_at=datetime(2025, 11, 3, 9, 15, tzinfo=timezone.utc),
    ),
)
