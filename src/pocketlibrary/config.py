# ABOUTME: Configuration defaults for the PocketLibrary catalog client.
# ABOUTME: Remote search settings, preferences file location, and default search area.

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SEARCH_ENDPOINT = "https://openlibrary.org/search.json"
DEFAULT_SEARCH_LIMIT = 20
DEFAULT_TIMEOUT = 10.0

COVER_URL_TEMPLATE = "https://covers.openlibrary.org/b/id/{cover_id}-M.jpg"

DEFAULT_PREFS_PATH = Path.home() / ".pocketlibrary" / "preferences.json"

# Cal State Fullerton campus.
DEFAULT_LATITUDE = 33.882
DEFAULT_LONGITUDE = -117.885
DEFAULT_RADIUS_KM = 25.0


@dataclass(frozen=True)
class CatalogConfig:
    """Settings for the remote catalog search."""

    search_endpoint: str = DEFAULT_SEARCH_ENDPOINT
    search_limit: int = DEFAULT_SEARCH_LIMIT
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.search_limit < 1:
            msg = f"search_limit must be at least 1, got {self.search_limit}"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout}"
            raise ValueError(msg)
