# ABOUTME: Parsing functions for Open Library search API JSON responses.
# ABOUTME: Validates the response shape and converts search docs into Book records.

from typing import Any

from pocketlibrary.catalog.http import DecodingError
from pocketlibrary.catalog.types import DEFAULT_GENRE, UNKNOWN_AUTHOR, Book
from pocketlibrary.config import COVER_URL_TEMPLATE


def build_cover_url(cover_id: int) -> str:
    """Build an Open Library cover image URL for a numeric cover id."""
    return COVER_URL_TEMPLATE.format(cover_id=cover_id)


def _optional_str(doc: dict[str, Any], key: str) -> str | None:
    value = doc.get(key)
    if value is None or isinstance(value, str):
        return value
    raise DecodingError(f"Expected '{key}' to be a string, got {type(value).__name__}")


def _str_list(doc: dict[str, Any], key: str) -> list[str]:
    value = doc.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DecodingError(f"Expected '{key}' to be a list of strings")
    return value


def _optional_int(doc: dict[str, Any], key: str) -> int | None:
    value = doc.get(key)
    # bool is an int subclass but never a valid cover id
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    raise DecodingError(f"Expected '{key}' to be an integer, got {type(value).__name__}")


def parse_search_doc(doc: dict[str, Any]) -> Book | None:
    """Map a single search doc onto a Book.

    Returns None for docs without a usable title; the title is the only
    mandatory field. Everything else falls back to a default.
    """
    title = (_optional_str(doc, "title") or "").strip()
    authors = _str_list(doc, "author_name")
    subjects = _str_list(doc, "subject")
    isbns = _str_list(doc, "isbn")
    cover_id = _optional_int(doc, "cover_i")

    if not title:
        return None

    author = authors[0].strip() if authors and authors[0].strip() else UNKNOWN_AUTHOR
    genre = next((s.strip() for s in subjects if s.strip()), DEFAULT_GENRE)

    return Book(
        title=title,
        author=author,
        genre=genre,
        isbn=isbns[0] if isbns else "",
        is_borrowed=False,
        cover_url=build_cover_url(cover_id) if cover_id is not None else None,
    )


def parse_search_response(data: Any) -> list[Book]:
    """Parse an Open Library search response into Books, preserving response order.

    Raises:
        DecodingError: If the body is not an object with a ``docs`` list of objects,
            or a doc field has the wrong type.
    """
    if not isinstance(data, dict):
        raise DecodingError(f"Expected a JSON object, got {type(data).__name__}")
    docs = data.get("docs")
    if not isinstance(docs, list):
        raise DecodingError("Expected a 'docs' list in search response")

    books: list[Book] = []
    for doc in docs:
        if not isinstance(doc, dict):
            raise DecodingError(f"Expected search doc to be an object, got {type(doc).__name__}")
        book = parse_search_doc(doc)
        if book is not None:
            books.append(book)
    return books
