"""HTML table generation from query results.

Builds an ElementTree ``<table>`` with a ``<thead>`` holding one header
cell per column and a ``<tbody>`` holding one row per result row.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from gsheety.exceptions import InvalidDataError
from gsheety.types import ColumnMeta, FetchResult

CellHook = Callable[[ET.Element], None]


@dataclass(frozen=True)
class TableOptions:
    """Styling and customization for generated tables.

    Attributes:
        table_class: class attribute of the ``<table>`` element
        thead_class: class attribute of the ``<thead>`` element
        tbody_class: class attribute of the ``<tbody>`` element
        on_header_cell: called with each ``<th>`` once it is built
        on_body_cell: called with each ``<td>`` once it is built
    """

    table_class: str | None = None
    thead_class: str | None = None
    tbody_class: str | None = None
    on_header_cell: CellHook | None = None
    on_body_cell: CellHook | None = None


def generate_table_from_output(
    data: FetchResult | Mapping[str, Any],
    options: TableOptions | None = None,
) -> ET.Element:
    """Generate a table element from the output of ``SheetClient.get``.

    Hooks run in document order: every header cell first, then body
    cells row by row.

    Args:
        data: A successful FetchResult, or a mapping with cols/rows/msg
        options: Class names and cell hooks

    Returns:
        The ``<table>`` element

    Raises:
        InvalidDataError: If data is missing, not "ok", or has no lists
            of cols and rows
    """
    cols, rows = _validated(data)
    options = options or TableOptions()

    table = ET.Element("table")
    thead = ET.SubElement(table, "thead")
    tbody = ET.SubElement(table, "tbody")

    if options.table_class:
        table.set("class", options.table_class)
    if options.thead_class:
        thead.set("class", options.thead_class)
    if options.tbody_class:
        tbody.set("class", options.tbody_class)

    header_row = ET.SubElement(thead, "tr")
    for col in cols:
        th = ET.SubElement(header_row, "th")
        th.text = _column_label(col)
        if options.on_header_cell is not None:
            options.on_header_cell(th)

    for row in rows:
        tr = ET.SubElement(tbody, "tr")
        for cell in row:
            td = ET.SubElement(tr, "td")
            td.text = cell_text(cell)
            if options.on_body_cell is not None:
                options.on_body_cell(td)

    return table


def render_html(table: ET.Element) -> str:
    """Serialize a table element to an HTML string."""
    return ET.tostring(table, encoding="unicode", method="html")


def cell_text(value: Any) -> str:
    """Stringify a cell value the way a browser sets ``textContent``.

    Examples:
        None -> "", True -> "true", 23.0 -> "23", 2.5 -> "2.5"
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _validated(data: Any) -> tuple[list[Any] | tuple[Any, ...], list[Any] | tuple[Any, ...]]:
    if isinstance(data, FetchResult):
        cols, rows, msg = data.cols, data.rows, data.msg
    elif isinstance(data, Mapping):
        cols, rows, msg = data.get("cols"), data.get("rows"), data.get("msg")
    else:
        raise InvalidDataError()

    if msg != "ok" or not isinstance(cols, list | tuple) or not isinstance(rows, list | tuple):
        raise InvalidDataError()
    return cols, rows


def _column_label(col: ColumnMeta | Mapping[str, Any] | Any) -> str:
    if isinstance(col, ColumnMeta):
        return col.label
    if isinstance(col, Mapping):
        return cell_text(col.get("label"))
    return cell_text(col)
