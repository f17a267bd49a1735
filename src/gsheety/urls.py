"""
URL helpers for gsheety.

Turns any share link into the canonical spreadsheet URL and builds the
query and export endpoint URLs from it.
"""

from __future__ import annotations

import re
import urllib.parse

from gsheety.exceptions import InvalidURLError

SPREADSHEETS_BASE = "https://docs.google.com/spreadsheets/d"

_ID_PATTERN = re.compile(r"/d/([^/]+)")

# Characters left alone by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def extract_spreadsheet_id(url: str) -> str:
    """Return the spreadsheet ID found after ``/d/`` in a URL.

    Examples:
        https://docs.google.com/spreadsheets/d/abc123/edit#gid=0 -> abc123

    Raises:
        InvalidURLError: If the URL has no ``/d/<id>`` segment
    """
    if not isinstance(url, str):
        raise InvalidURLError(url)
    match = _ID_PATTERN.search(url)
    if not match:
        raise InvalidURLError(url)
    return match.group(1)


def resolve_canonical_url(url: str, base_url: str = SPREADSHEETS_BASE) -> str:
    """Normalize a share link to ``https://docs.google.com/spreadsheets/d/<id>``."""
    return f"{base_url.rstrip('/')}/{extract_spreadsheet_id(url)}"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query parameter value the way browsers do."""
    return urllib.parse.quote(value, safe=_URI_COMPONENT_SAFE)


def build_query_url(canonical_url: str, sheet: str, query: str) -> str:
    """Build the visualization query endpoint URL."""
    return (
        f"{canonical_url}/gviz/tq"
        f"?sheet={encode_uri_component(sheet)}"
        f"&tq={encode_uri_component(query)}"
    )


def build_export_url(canonical_url: str, fmt: str) -> str:
    """Build the export endpoint URL for a format name."""
    return f"{canonical_url}/export?format={fmt}"
