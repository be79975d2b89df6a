"""Base connector infrastructure for read-only REST data stores.

Provides the BaseConnector abstract class with:
- Async HTTP client via httpx, opened by ``async with``
- Static credential headers supplied by subclasses
- Structured logging via structlog
- Translation of HTTP/network failures into TransportError

Requests are one-shot: no retry, no backoff, no caching. A failed call is
retried by the caller, never by the connector.

Exception hierarchy:
- ConnectorError: base for all connector errors
- TransportError: non-2xx response or network failure (status + body kept)
- DataParsingError: response data parse failure
"""

from __future__ import annotations

import abc
from typing import Any

import httpx
import structlog


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------
class ConnectorError(Exception):
    """Base exception for all connector errors."""


class TransportError(ConnectorError):
    """Raised when the backend cannot be reached or answers non-2xx.

    Attributes:
        status_code: HTTP status, or None for network-level failures.
        body: Raw response text (or the transport error message), kept
            as diagnostic text and never parsed.
    """

    def __init__(self, source: str, status_code: int | None, body: str) -> None:
        self.source = source
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"{source} network error - {body}"
        else:
            message = f"{source} HTTP {status_code} - {body}"
        super().__init__(message)


class DataParsingError(ConnectorError):
    """Raised when response data cannot be parsed into the expected format."""


# ---------------------------------------------------------------------------
# BaseConnector ABC
# ---------------------------------------------------------------------------
class BaseConnector(abc.ABC):
    """Abstract base class for REST data store connectors.

    Subclasses MUST override:
        SOURCE_NAME: str - identifier used in logs and error messages
        auth_headers() - static credential headers

    Usage::

        async with MyConnector(base_url="https://...") as conn:
            rows = await conn.get_json("/resource?select=*")
    """

    SOURCE_NAME: str = ""
    TIMEOUT_SECONDS: float = 30.0

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ConnectorError(f"{self.SOURCE_NAME}: base URL not configured")
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else self.TIMEOUT_SECONDS
        )
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self.log = structlog.get_logger().bind(connector=self.SOURCE_NAME)

    async def __aenter__(self) -> "BaseConnector":
        """Create the httpx async client."""
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.auth_headers(),
            timeout=httpx.Timeout(self.timeout_seconds),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        """Close the httpx async client if open."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the active httpx client.

        Raises:
            ConnectorError: If the client has not been initialized via __aenter__.
        """
        if self._client is None:
            raise ConnectorError(
                f"{self.SOURCE_NAME}: HTTP client not initialized. "
                "Use 'async with connector:' context manager."
            )
        return self._client

    @abc.abstractmethod
    def auth_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        ...

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Single HTTP request; any failure becomes a TransportError.

        Args:
            method: HTTP method (GET only in practice).
            url: URL path relative to base_url, query string included.

        Raises:
            TransportError: On network failure or a non-2xx status.
        """
        self.log.debug("http_request", method=method, url=url)
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            self.log.warning("http_unreachable", url=url, error=str(exc))
            raise TransportError(self.SOURCE_NAME, None, str(exc)) from exc

        if not response.is_success:
            body = response.text
            self.log.warning(
                "http_error", url=url, status=response.status_code, body=body[:200]
            )
            raise TransportError(self.SOURCE_NAME, response.status_code, body)
        return response

    async def get_json(self, url: str) -> Any:
        """GET ``url`` and decode the JSON body.

        Raises:
            TransportError: As for _request().
            DataParsingError: If the body is not valid JSON.
        """
        response = await self._request("GET", url)
        try:
            return response.json()
        except ValueError as exc:
            raise DataParsingError(
                f"{self.SOURCE_NAME}: response from {url} is not valid JSON"
            ) from exc
