"""gsheety - Read public Google Sheets through the visualization query API.

Fetches a sheet (optionally filtered with a query language statement),
normalizes the response into columns and rows, exports whole spreadsheets
and renders results as HTML tables.
"""

__version__ = "0.1.0"

from loguru import logger

from gsheety.client import SheetClient
from gsheety.envelope import extract_payload, normalize
from gsheety.exceptions import (
    EnvelopeError,
    ExportError,
    GsheetyError,
    InvalidDataError,
    InvalidOptionsError,
    InvalidURLError,
    TransportError,
    UnsupportedFormatError,
)
from gsheety.table import TableOptions, generate_table_from_output, render_html
from gsheety.transport import (
    GoogleSheetsTransport,
    LocalFileTransport,
    Transport,
    TransportResponse,
)
from gsheety.types import (
    ColumnMeta,
    ExportFormat,
    FetchResult,
    QueryOptions,
    RawFetchResult,
)
from gsheety.urls import extract_spreadsheet_id, resolve_canonical_url

# Silent as a library until setup_logging() is called
logger.disable("gsheety")

__all__ = [
    "ColumnMeta",
    "EnvelopeError",
    "ExportError",
    "ExportFormat",
    "FetchResult",
    "GoogleSheetsTransport",
    "GsheetyError",
    "InvalidDataError",
    "InvalidOptionsError",
    "InvalidURLError",
    "LocalFileTransport",
    "QueryOptions",
    "RawFetchResult",
    "SheetClient",
    "TableOptions",
    "Transport",
    "TransportError",
    "TransportResponse",
    "UnsupportedFormatError",
    "__version__",
    "extract_payload",
    "extract_spreadsheet_id",
    "generate_table_from_output",
    "normalize",
    "render_html",
    "resolve_canonical_url",
]
