"""Transport layer for talking to the spreadsheet endpoints.

Defines the Transport protocol and implementations:
- GoogleSheetsTransport: Production transport using httpx
- LocalFileTransport: Test transport reading from local golden files

Transports return HTTP statuses as data. Deciding whether a status is
fatal is left to the client.
"""

from __future__ import annotations

import ssl
import urllib.parse
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import certifi
import httpx
from loguru import logger

from gsheety.exceptions import TransportError

DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class TransportResponse:
    """A completed HTTP exchange."""

    status_code: int
    reason: str
    content: bytes
    encoding: str = "utf-8"

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding, errors="replace")


class Transport(ABC):
    """Abstract base class for fetching URLs.

    Implementations must provide a GET method and a way to release
    resources.
    """

    @abstractmethod
    async def get(self, url: str) -> TransportResponse:
        """Issue a GET request.

        Args:
            url: Absolute URL to fetch

        Returns:
            TransportResponse with status and body, whatever the status
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        ...


class GoogleSheetsTransport(Transport):
    """Production transport that fetches from docs.google.com.

    Handles SSL and HTTP communication. No credentials are sent, so only
    publicly shared spreadsheets are reachable.
    """

    def __init__(
        self,
        timeout: float | None = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds, None for no timeout
            user_agent: Optional User-Agent header value
        """
        self._timeout = timeout
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        headers = {"User-Agent": user_agent} if user_agent else None
        # Export URLs answer with a redirect to the file download host
        self._client = httpx.AsyncClient(
            timeout=timeout,
            verify=ssl_context,
            follow_redirects=True,
            headers=headers,
        )

    async def get(self, url: str) -> TransportResponse:
        """Make an unauthenticated GET request."""
        try:
            response = await self._client.get(url)
        except httpx.RequestError as e:
            raise TransportError(f"Network error: {e}") from e

        logger.debug("GET {} -> {}", url, response.status_code)
        return TransportResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            content=response.content,
            encoding=response.encoding or "utf-8",
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()


class LocalFileTransport(Transport):
    """Test transport that reads from local golden files.

    Expected directory structure:
        golden_dir/
            <spreadsheet_id>/
                gviz.txt            query response for any sheet
                gviz/<sheet>.txt    query response for one sheet
                export.<format>     export response

    The query string is not evaluated. Missing files produce a 404.
    """

    def __init__(self, golden_dir: Path) -> None:
        """Initialize the transport.

        Args:
            golden_dir: Directory containing golden test files
        """
        self._golden_dir = golden_dir

    async def get(self, url: str) -> TransportResponse:
        """Read the golden file matching a query or export URL."""
        path = self._resolve(url)
        if path is None or not path.is_file():
            return TransportResponse(status_code=404, reason="Not Found", content=b"")
        return TransportResponse(status_code=200, reason="OK", content=path.read_bytes())

    def _resolve(self, url: str) -> Path | None:
        parsed = urllib.parse.urlsplit(url)
        params = urllib.parse.parse_qs(parsed.query)
        parts = [p for p in parsed.path.split("/") if p]
        if "d" not in parts or parts.index("d") + 1 >= len(parts):
            return None
        spreadsheet_dir = self._golden_dir / parts[parts.index("d") + 1]

        if parsed.path.endswith("/gviz/tq"):
            sheet = params.get("sheet", [""])[0]
            per_sheet = spreadsheet_dir / "gviz" / f"{sheet}.txt"
            if sheet and per_sheet.is_file():
                return per_sheet
            return spreadsheet_dir / "gviz.txt"

        if parsed.path.endswith("/export"):
            fmt = params.get("format", [""])[0]
            return spreadsheet_dir / f"export.{fmt}"

        return None

    async def close(self) -> None:
        """No-op for local file transport."""
        pass
