"""Parsing and normalization of visualization query responses.

The endpoint answers with a JavaScript callback rather than plain JSON:

    /*O_o*/
    google.visualization.Query.setResponse({"version":"0.6", ..., "table":{...}});

The JSON object is recovered by slicing from the first ``{`` to the last
``}``. The table inside looks like:

    {"cols": [{"id": "A", "label": "Name", "type": "string"}, ...],
     "rows": [{"c": [{"v": "Adam"}, {"v": 23.0, "f": "23"}, null]}, ...]}
"""

from __future__ import annotations

import json
from typing import Any

from gsheety.exceptions import EnvelopeError
from gsheety.types import ColumnMeta, Row


def extract_payload(text: str) -> dict[str, Any]:
    """Extract the JSON object wrapped in a query response envelope.

    Args:
        text: Response body as returned by the endpoint

    Returns:
        The parsed response object

    Raises:
        EnvelopeError: If no ``{...}`` span exists or it is not valid JSON
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise EnvelopeError("no JSON object in response", text)

    try:
        payload = json.loads(text[start : end + 1])
    except json.JSONDecodeError as e:
        raise EnvelopeError(str(e), text) from e

    if not isinstance(payload, dict):
        raise EnvelopeError("response is not a JSON object", text)
    return payload


def normalize_columns(table: dict[str, Any]) -> list[ColumnMeta]:
    """Build column metadata, labelling unnamed columns ``Column <n>``."""
    cols: list[ColumnMeta] = []
    for index, col in enumerate(table.get("cols") or []):
        col = col or {}
        cols.append(
            ColumnMeta(
                label=col.get("label") or f"Column {index + 1}",
                column_id=col.get("id"),
                type=col.get("type"),
            )
        )
    return cols


def normalize_rows(table: dict[str, Any], column_count: int) -> list[Row]:
    """Map every row onto exactly ``column_count`` cell values.

    Cells missing from a short or sparse ``c`` array become None.
    """
    rows: list[Row] = []
    for row in table.get("rows") or []:
        cells = (row or {}).get("c") or []
        values: Row = []
        for i in range(column_count):
            cell = cells[i] if i < len(cells) else None
            values.append(cell.get("v") if cell else None)
        rows.append(values)
    return rows


def clear_nulls(rows: list[Row]) -> list[Row]:
    """Drop None cells from each row, keeping the order of the rest."""
    return [[cell for cell in row if cell is not None] for row in rows]


def normalize(
    payload: dict[str, Any], *, clear_null: bool = False
) -> tuple[list[ColumnMeta], list[Row]]:
    """Turn a parsed response into ``(cols, rows)``."""
    table = payload["table"]
    cols = normalize_columns(table)
    rows = normalize_rows(table, len(cols))
    if clear_null:
        rows = clear_nulls(rows)
    return cols, rows
