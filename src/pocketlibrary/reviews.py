# ABOUTME: Validation rules for user-submitted reviews.
# ABOUTME: Trims form input, enforces minimum lengths, and builds Review records.

import uuid

from pocketlibrary.catalog.types import (
    MAX_REVIEW_COMMENT_LENGTH,
    MAX_REVIEW_NAME_LENGTH,
    Review,
)

MIN_REVIEW_NAME_LENGTH = 2
MIN_REVIEW_COMMENT_LENGTH = 10


class ReviewValidationError(ValueError):
    """Raised when review form input breaks a submission rule. The message is user-facing."""


def validate_review_input(user_name: str, comment: str) -> tuple[str, str]:
    """Trim and check review form fields.

    Returns:
        The trimmed (user_name, comment) pair.

    Raises:
        ReviewValidationError: With the first rule the input breaks.
    """
    name = user_name.strip()
    text = comment.strip()

    if not name:
        raise ReviewValidationError("Please enter your name.")
    if len(name) < MIN_REVIEW_NAME_LENGTH:
        raise ReviewValidationError(
            f"Your name must be at least {MIN_REVIEW_NAME_LENGTH} characters long."
        )
    if len(name) > MAX_REVIEW_NAME_LENGTH:
        raise ReviewValidationError(
            f"Your name must be at most {MAX_REVIEW_NAME_LENGTH} characters long."
        )
    if not text:
        raise ReviewValidationError("Please enter a comment for your review.")
    if len(text) < MIN_REVIEW_COMMENT_LENGTH:
        raise ReviewValidationError(
            f"Your comment must be at least {MIN_REVIEW_COMMENT_LENGTH} characters long."
        )
    if len(text) > MAX_REVIEW_COMMENT_LENGTH:
        raise ReviewValidationError(
            f"Your comment must be at most {MAX_REVIEW_COMMENT_LENGTH} characters long."
        )
    return name, text


def build_review(book_id: uuid.UUID, user_name: str, rating: int, comment: str) -> Review:
    """Validate form input and construct a Review for submission."""
    name, text = validate_review_input(user_name, comment)
    if not 1 <= rating <= 5:
        raise ReviewValidationError("Rating must be between 1 and 5 stars.")
    return Review(book_id=book_id, user_name=name, rating=rating, comment=text)
