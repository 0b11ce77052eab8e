# ABOUTME: Shared pytest fixtures for PocketLibrary tests.
# ABOUTME: Provides a seeded session, sample catalog, and temp preferences path.

import random
from datetime import datetime, timezone
from pathlib import Path

import pytest

from pocketlibrary.catalog.fallback import FallbackCatalog
from pocketlibrary.session import LibrarySession

FIXED_NOW = datetime(2025, 11, 14, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session() -> LibrarySession:
    """A session with a seeded random source and a frozen clock."""
    return LibrarySession(rng=random.Random(42), clock=lambda: FIXED_NOW)


@pytest.fixture
def fallback(session: LibrarySession) -> FallbackCatalog:
    """A sample-data catalog over the seeded session."""
    return FallbackCatalog(session)


@pytest.fixture
def prefs_path(tmp_path: Path) -> Path:
    """Path to a not-yet-existing preferences file."""
    return tmp_path / "prefs" / "preferences.json"


@pytest.fixture
def now() -> datetime:
    """The frozen clock value used by the session fixture."""
    return FIXED_NOW
