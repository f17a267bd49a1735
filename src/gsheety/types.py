"""Data types shared by the client, the normalizer and the table renderer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gsheety.exceptions import InvalidOptionsError, UnsupportedFormatError

DEFAULT_SHEET = "Sheet1"
DEFAULT_QUERY = "SELECT *"
OK = "ok"

CellValue = str | int | float | bool | None
Row = list[CellValue]


@dataclass(frozen=True)
class QueryOptions:
    """Options for a visualization query.

    Attributes:
        sheet: Name of the sheet (tab) to query
        query: Query language statement sent as ``tq``
        raw: Return the parsed response untouched instead of normalizing it
        clear_null: Drop missing cells from each row. Surviving cells no
            longer line up with their columns.
    """

    sheet: str = DEFAULT_SHEET
    query: str = DEFAULT_QUERY
    raw: bool = False
    clear_null: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> QueryOptions:
        """Build options from a dict. Unknown keys are ignored."""
        clear_null = options.get("clear_null", options.get("clearNull"))
        return cls(
            sheet=_or_default(options.get("sheet"), DEFAULT_SHEET),
            query=_or_default(options.get("query"), DEFAULT_QUERY),
            raw=bool(options.get("raw", False)),
            clear_null=bool(clear_null),
        )

    @classmethod
    def coerce(cls, options: QueryOptions | Mapping[str, Any] | None) -> QueryOptions:
        """Accept None, a QueryOptions or a mapping; reject anything else."""
        if options is None:
            return cls()
        if isinstance(options, QueryOptions):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise InvalidOptionsError(options)


def _or_default(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


@dataclass(frozen=True)
class ColumnMeta:
    """A column as reported by the query endpoint."""

    label: str
    column_id: str | None = None
    type: str | None = None

    def to_dict(self) -> dict[str, str]:
        result = {"label": self.label}
        if self.column_id is not None:
            result["columnId"] = self.column_id
        if self.type is not None:
            result["type"] = self.type
        return result


@dataclass
class FetchResult:
    """Normalized query result.

    ``msg`` is ``"ok"`` on success. Otherwise it describes what went wrong
    and ``cols``/``rows`` are empty.
    """

    cols: list[ColumnMeta] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    msg: str = OK

    @property
    def ok(self) -> bool:
        return self.msg == OK

    def to_dict(self) -> dict[str, Any]:
        return {
            "cols": [col.to_dict() for col in self.cols],
            "rows": [list(row) for row in self.rows],
            "msg": self.msg,
        }


@dataclass
class RawFetchResult:
    """Parsed query response before normalization."""

    data: dict[str, Any] | None
    msg: str

    @property
    def ok(self) -> bool:
        return self.msg == OK

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data, "msg": self.msg}


class ExportFormat(str, Enum):
    """Formats offered by the spreadsheet export endpoint."""

    CSV = "csv"
    TSV = "tsv"
    PDF = "pdf"
    XLSX = "xlsx"

    @property
    def is_binary(self) -> bool:
        return self in (ExportFormat.PDF, ExportFormat.XLSX)

    @classmethod
    def parse(cls, value: ExportFormat | str) -> ExportFormat:
        """Look up a format by name, raising UnsupportedFormatError."""
        if isinstance(value, ExportFormat):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(value) from None
