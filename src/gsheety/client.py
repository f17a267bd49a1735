"""SheetClient - Main API for gsheety.

Provides `get`, `fetch_raw` and `get_exported_data` for reading public
Google Sheets.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from gsheety.config import Settings, get_settings
from gsheety.envelope import extract_payload, normalize
from gsheety.exceptions import ExportError
from gsheety.transport import GoogleSheetsTransport, Transport
from gsheety.types import ExportFormat, FetchResult, QueryOptions, RawFetchResult
from gsheety.urls import build_export_url, build_query_url, resolve_canonical_url

INVALID_QUERY_MSG = "Invalid query or empty response"


def _http_error_msg(status_code: int, reason: str) -> str:
    return f"HTTP Error {status_code}: {reason}"


class SheetClient:
    """Client for reading publicly shared Google Sheets.

    Failures of the query endpoint are reported through ``msg`` on the
    returned result. Bad input and failed exports raise.

    Example:
        >>> client = SheetClient()
        >>> result = await client.get(
        ...     "https://docs.google.com/spreadsheets/d/1BxiMVs0XRA5nFMdKvBdBZjgmUUqptlbs74OgvE2upms/edit",
        ...     {"sheet": "Class Data", "query": "SELECT A, B WHERE C = 'Male'"},
        ... )
        >>> if result.ok:
        ...     print([col.label for col in result.cols])
    """

    def __init__(
        self,
        transport: Transport | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Transport implementation; defaults to a
                GoogleSheetsTransport configured from settings
            settings: Settings to use instead of the environment
        """
        self._settings = settings or get_settings()
        self._transport = transport or GoogleSheetsTransport(
            timeout=self._settings.timeout,
            user_agent=self._settings.user_agent,
        )

    async def __aenter__(self) -> SheetClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()

    def resolve_canonical_url(self, url: str) -> str:
        """Normalize a share link to its canonical spreadsheet URL."""
        return resolve_canonical_url(url, self._settings.base_url)

    async def fetch_raw(
        self,
        url: str,
        options: QueryOptions | Mapping[str, Any] | None = None,
    ) -> RawFetchResult:
        """Run a visualization query and return the parsed response.

        Args:
            url: Any Google Sheets URL containing ``/d/<id>``
            options: Sheet name and query to run

        Returns:
            RawFetchResult with the response object and ``msg="ok"``, or
            ``data=None`` and a diagnostic message

        Raises:
            InvalidURLError: If the URL has no spreadsheet ID
            EnvelopeError: If a successful response holds no JSON object
            TransportError: If the request fails at the network level
        """
        opts = QueryOptions.coerce(options)
        query_url = build_query_url(
            self.resolve_canonical_url(url), opts.sheet, opts.query
        )
        logger.debug("Querying sheet {!r}: {}", opts.sheet, opts.query)

        response = await self._transport.get(query_url)
        if not response.ok:
            msg = _http_error_msg(response.status_code, response.reason)
            logger.warning("Query failed: {}", msg)
            return RawFetchResult(data=None, msg=msg)

        payload = extract_payload(response.text)
        if not isinstance(payload.get("table"), dict):
            logger.warning(
                "Query returned no table (status={})", payload.get("status")
            )
            return RawFetchResult(data=None, msg=INVALID_QUERY_MSG)

        return RawFetchResult(data=payload, msg="ok")

    async def get(
        self,
        url: str,
        options: QueryOptions | Mapping[str, Any] | None = None,
    ) -> FetchResult | RawFetchResult:
        """Fetch structured data from a sheet.

        Args:
            url: Any Google Sheets URL containing ``/d/<id>``
            options: QueryOptions or a mapping with ``sheet``, ``query``,
                ``raw`` and ``clear_null``/``clearNull`` keys

        Returns:
            FetchResult with columns and rows. When ``raw`` is set and the
            query succeeded, the RawFetchResult is returned untouched.

        Raises:
            InvalidOptionsError: If options is not a QueryOptions or mapping
            InvalidURLError: If the URL has no spreadsheet ID
        """
        opts = QueryOptions.coerce(options)

        res = await self.fetch_raw(url, opts)
        if res.data is None:
            return FetchResult(cols=[], rows=[], msg=res.msg)
        if opts.raw:
            return res

        cols, rows = normalize(res.data, clear_null=opts.clear_null)
        return FetchResult(cols=cols, rows=rows, msg=res.msg)

    async def get_exported_data(
        self, url: str, fmt: ExportFormat | str = ExportFormat.CSV
    ) -> str | bytes:
        """Export a spreadsheet in one of the supported formats.

        Args:
            url: Any Google Sheets URL containing ``/d/<id>``
            fmt: csv, tsv, pdf or xlsx

        Returns:
            bytes for pdf and xlsx, str for csv and tsv

        Raises:
            UnsupportedFormatError: If fmt is not supported (before any request)
            InvalidURLError: If the URL has no spreadsheet ID
            ExportError: If the export endpoint answers with an error status
        """
        export_format = ExportFormat.parse(fmt)
        export_url = build_export_url(
            self.resolve_canonical_url(url), export_format.value
        )

        response = await self._transport.get(export_url)
        if not response.ok:
            raise ExportError(response.status_code, response.reason)

        if export_format.is_binary:
            return response.content
        return response.text
