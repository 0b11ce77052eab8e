# ABOUTME: Unit tests for fine persistence and the fine ledger.
# ABOUTME: Verifies save-on-mutation, reload, corrupt-file handling, and preserved prefs keys.

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from pocketlibrary.catalog.types import FineRecord
from pocketlibrary.fines import (
    FINE_HISTORY_KEY,
    FineHistoryStore,
    FineLedger,
    dict_to_fine,
    fine_to_dict,
)


class TestFineMapping:
    """Tests for FineRecord <-> dict conversion."""

    def test_round_trip(self) -> None:
        """A fine survives conversion to a dict and back."""
        fine = FineRecord(book_title="1984", amount=3.5)
        assert dict_to_fine(fine_to_dict(fine)) == fine

    def test_dict_uses_stored_field_names(self) -> None:
        """Stored dicts use the bookTitle/amount/date/id keys."""
        data = fine_to_dict(FineRecord(book_title="1984", amount=3.5))
        assert set(data) == {"id", "bookTitle", "amount", "date"}


class TestFineHistoryStore:
    """Tests for FineHistoryStore."""

    def test_missing_file_loads_empty(self, prefs_path: Path) -> None:
        """No preferences file means no fines."""
        assert FineHistoryStore(prefs_path).load() == []

    def test_save_creates_parent_dirs(self, prefs_path: Path) -> None:
        """Saving creates the preferences directory."""
        FineHistoryStore(prefs_path).save([FineRecord(book_title="1984", amount=3.5)])
        assert prefs_path.exists()

    def test_save_then_load(self, prefs_path: Path) -> None:
        """Saved fines load back unchanged."""
        store = FineHistoryStore(prefs_path)
        fines = [FineRecord(book_title="1984", amount=3.5), FineRecord(book_title="Dune", amount=1)]
        store.save(fines)
        assert store.load() == fines

    def test_other_keys_preserved(self, prefs_path: Path) -> None:
        """Saving fines leaves unrelated preferences intact."""
        prefs_path.parent.mkdir(parents=True)
        prefs_path.write_text(json.dumps({"theme": "dark"}))
        FineHistoryStore(prefs_path).save([])
        prefs = json.loads(prefs_path.read_text())
        assert prefs["theme"] == "dark"
        assert prefs[FINE_HISTORY_KEY] == []

    def test_corrupt_file_loads_empty(self, prefs_path: Path, caplog: Any) -> None:
        """Unparseable JSON loads as no fines and logs a warning."""
        prefs_path.parent.mkdir(parents=True)
        prefs_path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            assert FineHistoryStore(prefs_path).load() == []
        assert caplog.records

    @pytest.mark.parametrize(
        "history",
        [
            "not a list",
            [{"bookTitle": "1984"}],
            [{"id": "nope", "bookTitle": "1984", "amount": 1, "date": "2025-11-14T12:00:00+00:00"}],
            [
                {
                    "id": "6f1c0a36-3d6c-4f63-9a43-9c1b2a3c4d5e",
                    "bookTitle": "1984",
                    "amount": -2,
                    "date": "2025-11-14T12:00:00+00:00",
                }
            ],
            [{"id": 123, "bookTitle": "1984", "amount": 1, "date": "2025-11-14T12:00:00+00:00"}],
            [
                {
                    "id": "6f1c0a36-3d6c-4f63-9a43-9c1b2a3c4d5e",
                    "bookTitle": 1984,
                    "amount": 1,
                    "date": "2025-11-14T12:00:00+00:00",
                }
            ],
            [
                {
                    "id": "6f1c0a36-3d6c-4f63-9a43-9c1b2a3c4d5e",
                    "bookTitle": "1984",
                    "amount": "1.50",
                    "date": "2025-11-14T12:00:00+00:00",
                }
            ],
            ["not an object"],
        ],
    )
    def test_malformed_history_loads_empty(self, prefs_path: Path, history: Any) -> None:
        """A history with the wrong shape or bad values loads as no fines."""
        prefs_path.parent.mkdir(parents=True)
        prefs_path.write_text(json.dumps({FINE_HISTORY_KEY: history}))
        assert FineHistoryStore(prefs_path).load() == []

    def test_non_object_prefs_warns(self, prefs_path: Path, caplog: Any) -> None:
        """A preferences file that is not a JSON object loads as no fines and logs a warning."""
        prefs_path.parent.mkdir(parents=True)
        prefs_path.write_text(json.dumps(["FineHistory"]))
        with caplog.at_level(logging.WARNING):
            assert FineHistoryStore(prefs_path).load() == []
        assert "expected a JSON object" in caplog.text


class TestFineLedger:
    """Tests for FineLedger."""

    def test_starts_empty(self, prefs_path: Path) -> None:
        """A fresh ledger has no fines."""
        ledger = FineLedger(FineHistoryStore(prefs_path))
        assert not ledger.has_fines
        assert ledger.total_amount == 0

    def test_add_fine_persists(self, prefs_path: Path) -> None:
        """Adding a fine is visible to a new ledger over the same file."""
        ledger = FineLedger(FineHistoryStore(prefs_path))
        fine = ledger.add_fine("1984", 3.5)
        reloaded = FineLedger(FineHistoryStore(prefs_path))
        assert reloaded.fines == [fine]

    def test_total_amount(self, prefs_path: Path) -> None:
        """The total sums every outstanding fine."""
        ledger = FineLedger(FineHistoryStore(prefs_path))
        ledger.add_fine("1984", 3.5)
        ledger.add_fine("Dune", 1.25)
        assert ledger.total_amount == pytest.approx(4.75)
        assert ledger.has_fines

    def test_pay_all_clears_and_persists(self, prefs_path: Path) -> None:
        """Paying clears fines in memory and on disk, returning the amount paid."""
        ledger = FineLedger(FineHistoryStore(prefs_path))
        ledger.add_fine("1984", 3.5)
        assert ledger.pay_all() == pytest.approx(3.5)
        assert ledger.fines == []
        assert FineLedger(FineHistoryStore(prefs_path)).fines == []

    def test_negative_amount_rejected(self, prefs_path: Path) -> None:
        """Negative fines are refused and nothing is saved."""
        ledger = FineLedger(FineHistoryStore(prefs_path))
        with pytest.raises(ValueError):
            ledger.add_fine("1984", -1.0)
        assert not prefs_path.exists()

    def test_loads_once(self, prefs_path: Path) -> None:
        """External changes after construction are not picked up."""
        ledger = FineLedger(FineHistoryStore(prefs_path))
        FineHistoryStore(prefs_path).save([FineRecord(book_title="Dune", amount=2.0)])
        assert ledger.fines == []
