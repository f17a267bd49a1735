"""Custom exceptions for gsheety.

Only caller mistakes and unrecoverable request failures are raised.
Expected remote conditions (HTTP errors while querying, empty or rejected
queries) are reported through ``FetchResult.msg`` instead.
"""

from __future__ import annotations


class GsheetyError(Exception):
    """Base exception for gsheety errors."""


class InvalidURLError(GsheetyError, ValueError):
    """Raised when a URL has no ``/d/<spreadsheet_id>`` segment."""

    def __init__(self, url: object) -> None:
        self.url = url
        super().__init__(f"Invalid Google Sheets URL: {url!r}")


class InvalidOptionsError(GsheetyError, TypeError):
    """Raised when query options are not a QueryOptions or a mapping."""

    def __init__(self, options: object) -> None:
        self.options = options
        super().__init__(
            "Options parameter must be a QueryOptions or a mapping, "
            f"got {type(options).__name__}"
        )


class UnsupportedFormatError(GsheetyError, ValueError):
    """Raised when an export format is not csv, tsv, pdf or xlsx."""

    def __init__(self, fmt: object) -> None:
        self.fmt = fmt
        super().__init__(
            f"Unsupported format {fmt!r}. Use: csv, tsv, pdf, or xlsx."
        )


class InvalidDataError(GsheetyError, ValueError):
    """Raised when table generation gets anything but a successful result."""

    def __init__(self, reason: str = "Given data parameter is not valid or available.") -> None:
        super().__init__(reason)


class EnvelopeError(GsheetyError):
    """Raised when a query response holds no parseable JSON object."""

    def __init__(self, reason: str, text: str) -> None:
        self.reason = reason
        self.text = text
        super().__init__(f"Could not parse query response: {reason}")


class TransportError(GsheetyError):
    """Raised when a request cannot be completed at the network level."""


class ExportError(TransportError):
    """Raised when the export endpoint answers with a non-success status."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP Error {status_code}: {reason}")
