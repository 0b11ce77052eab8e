# ABOUTME: Fine tracking with JSON persistence in the preferences file.
# ABOUTME: FineHistoryStore reads/writes the "FineHistory" key; FineLedger saves on every change.

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

from pocketlibrary.catalog.types import FineRecord
from pocketlibrary.config import DEFAULT_PREFS_PATH

logger = logging.getLogger(__name__)

FINE_HISTORY_KEY = "FineHistory"


def fine_to_dict(fine: FineRecord) -> dict[str, Any]:
    """Convert a FineRecord to a JSON-serializable dict."""
    return {
        "id": str(fine.id),
        "bookTitle": fine.book_title,
        "amount": fine.amount,
        "date": fine.date.isoformat(),
    }


def _stored_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        msg = f"{key} must be a string, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def dict_to_fine(data: dict[str, Any]) -> FineRecord:
    """Convert a stored dict back to a FineRecord.

    Raises:
        KeyError, TypeError, ValueError: If the dict is missing fields or holds bad values.
    """
    if not isinstance(data, dict):
        msg = f"fine entry must be an object, got {type(data).__name__}"
        raise TypeError(msg)
    amount = data["amount"]
    if isinstance(amount, bool) or not isinstance(amount, int | float):
        msg = f"amount must be a number, got {type(amount).__name__}"
        raise TypeError(msg)
    return FineRecord(
        id=uuid.UUID(_stored_str(data, "id")),
        book_title=_stored_str(data, "bookTitle"),
        amount=float(amount),
        date=datetime.fromisoformat(_stored_str(data, "date")),
    )


class FineHistoryStore:
    """Persists the fine list under one key of a JSON preferences file.

    Other keys in the file are left untouched. An unreadable or malformed
    history loads as an empty list.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or DEFAULT_PREFS_PATH

    @property
    def path(self) -> Path:
        return self._path

    def _read_prefs(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            prefs = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read preferences %s: %s", self._path, exc)
            return {}
        if not isinstance(prefs, dict):
            logger.warning("Ignoring preferences %s: expected a JSON object", self._path)
            return {}
        return prefs

    def load(self) -> list[FineRecord]:
        entries = self._read_prefs().get(FINE_HISTORY_KEY, [])
        if not isinstance(entries, list):
            logger.warning("Ignoring malformed %s in %s", FINE_HISTORY_KEY, self._path)
            return []
        try:
            return [dict_to_fine(entry) for entry in entries]
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring malformed %s in %s: %s", FINE_HISTORY_KEY, self._path, exc)
            return []

    def save(self, fines: list[FineRecord]) -> None:
        prefs = self._read_prefs()
        prefs[FINE_HISTORY_KEY] = [fine_to_dict(fine) for fine in fines]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(prefs, indent=2), encoding="utf-8")


class FineLedger:
    """Outstanding fines for the user. Loads once at construction, saves after every mutation."""

    def __init__(self, store: FineHistoryStore) -> None:
        self._store = store
        self._fines = store.load()

    @property
    def fines(self) -> list[FineRecord]:
        return list(self._fines)

    @property
    def total_amount(self) -> float:
        return sum(fine.amount for fine in self._fines)

    @property
    def has_fines(self) -> bool:
        return bool(self._fines)

    def add_fine(self, book_title: str, amount: float) -> FineRecord:
        """Record a fine and persist the updated list.

        Raises:
            ValueError: If amount is negative.
        """
        fine = FineRecord(book_title=book_title, amount=amount)
        self._fines.append(fine)
        self._store.save(self._fines)
        return fine

    def pay_all(self) -> float:
        """Clear every fine, simulating a payment. Returns the amount paid."""
        paid = self.total_amount
        self._fines.clear()
        self._store.save(self._fines)
        return paid
