# ABOUTME: Async HTTP client abstraction for remote catalog API calls.
# ABOUTME: Provides timeout, retry with backoff, typed errors, and injectable transport for testing.

import asyncio
import json
import logging
from types import TracebackType
from typing import Any, Protocol, runtime_checkable

import httpx

from pocketlibrary.config import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class CatalogError(Exception):
    """Base class for failures talking to the remote catalog."""


class NetworkError(CatalogError):
    """Raised on transport failures, timeouts, and non-2xx responses."""


class DecodingError(CatalogError):
    """Raised when a 2xx response body does not match the expected schema."""


@runtime_checkable
class AsyncHttpClient(Protocol):
    """Protocol for async HTTP GET operations that return decoded JSON."""

    async def get(self, url: str, params: dict[str, str] | None = None) -> Any: ...


class CatalogHttpClient:
    """HTTP client with an explicit timeout and retry for catalog API calls.

    Wraps httpx.AsyncClient and retries transient failures (429, 5xx) with
    exponential backoff. Everything else is mapped onto NetworkError or
    DecodingError so callers never see raw httpx exceptions.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 1,
        retry_delay: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "pocketlibrary/0.1.0", "Accept": "application/json"},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    async def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """Send a GET request with retry and return the decoded JSON body.

        Args:
            url: The URL to request.
            params: Optional query parameters (percent-encoded by httpx).

        Returns:
            Parsed JSON response body.

        Raises:
            NetworkError: On transport errors, non-retryable statuses, or exhausted retries.
            DecodingError: If a successful response is not valid JSON.
        """
        attempts = 1 + self._max_retries
        last_status = 0
        for attempt in range(attempts):
            try:
                response = await self._client.get(url, params=params)
            except httpx.HTTPError as exc:
                raise NetworkError(f"Request failed: {url}: {exc}") from exc
            last_status = response.status_code
            logger.debug("GET %s -> %d", response.url, response.status_code)

            if response.is_success:
                try:
                    return response.json()
                except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                    raise DecodingError(f"Invalid JSON from {url}: {exc}") from exc

            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise NetworkError(f"HTTP {response.status_code} from {url}")

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "HTTP %d from %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code,
                    url,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                await asyncio.sleep(delay)

        raise NetworkError(f"HTTP {last_status} from {url} after {attempts} attempts")

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "CatalogHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
