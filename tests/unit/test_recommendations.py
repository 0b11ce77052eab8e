# ABOUTME: Unit tests for genre-based recommendations.
# ABOUTME: Checks genre matching, borrowed filtering, and title ordering.

from pocketlibrary.catalog.sample_data import SAMPLE_BOOKS
from pocketlibrary.catalog.types import Book
from pocketlibrary.recommendations import recommend_books


class TestRecommendBooks:
    """Tests for recommend_books."""

    def test_nothing_viewed(self) -> None:
        """No viewing history means no recommendations."""
        assert recommend_books([], SAMPLE_BOOKS) == []

    def test_same_genre_unborrowed_sorted(self) -> None:
        """Sci-Fi history recommends available Sci-Fi titles alphabetically."""
        dune = SAMPLE_BOOKS[0]
        titles = [b.title for b in recommend_books([dune], SAMPLE_BOOKS)]
        assert titles == [
            "Dune",
            "Neuromancer",
            "The Hitchhiker's Guide to the Galaxy",
            "The Left Hand of Darkness",
        ]

    def test_borrowed_books_excluded(self) -> None:
        """Borrowed books are never recommended."""
        picks = recommend_books(SAMPLE_BOOKS, SAMPLE_BOOKS)
        assert all(not book.is_borrowed for book in picks)
        assert "Foundation" not in {b.title for b in picks}

    def test_case_insensitive_title_order(self) -> None:
        """Sorting ignores case."""
        books = [
            Book(title="beta", author="A", genre="Poetry"),
            Book(title="Alpha", author="B", genre="Poetry"),
        ]
        assert [b.title for b in recommend_books(books[:1], books)] == ["Alpha", "beta"]
