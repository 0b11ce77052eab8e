# ABOUTME: Genre-based book recommendations.
# ABOUTME: Suggests unborrowed books that share a genre with recently viewed ones.

from collections.abc import Iterable

from pocketlibrary.catalog.types import Book


def recommend_books(recently_viewed: Iterable[Book], all_books: Iterable[Book]) -> list[Book]:
    """Recommend available books in the genres the reader has been looking at.

    Returns books from all_books whose genre matches a recently viewed book
    and that are not currently borrowed, sorted by title ignoring case.
    Empty if nothing has been viewed.
    """
    genres = {book.genre for book in recently_viewed}
    if not genres:
        return []
    picks = [book for book in all_books if book.genre in genres and not book.is_borrowed]
    return sorted(picks, key=lambda book: book.title.casefold())
