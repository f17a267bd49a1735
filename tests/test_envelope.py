"""Tests for response envelope parsing and normalization."""

import pytest

from gsheety.envelope import (
    clear_nulls,
    extract_payload,
    normalize,
    normalize_columns,
    normalize_rows,
)
from gsheety.exceptions import EnvelopeError
from gsheety.types import ColumnMeta


class TestExtractPayload:
    """Tests for slicing the JSON object out of the envelope."""

    def test_callback_envelope(self) -> None:
        text = '/*O_o*/\ngoogle.visualization.Query.setResponse({"status":"ok","table":{"cols":[],"rows":[]}});'
        payload = extract_payload(text)
        assert payload["status"] == "ok"
        assert payload["table"] == {"cols": [], "rows": []}

    def test_plain_json(self) -> None:
        assert extract_payload('{"a": 1}') == {"a": 1}

    def test_uses_last_closing_brace(self) -> None:
        text = 'cb({"table":{"rows":[{"c":[{"v":"}"}]}]}})'
        payload = extract_payload(text)
        assert payload["table"]["rows"][0]["c"][0]["v"] == "}"

    def test_no_braces(self) -> None:
        with pytest.raises(EnvelopeError):
            extract_payload("<html>Sign in</html>")

    def test_invalid_json(self) -> None:
        with pytest.raises(EnvelopeError):
            extract_payload("cb({not json})")

    def test_closing_brace_before_opening(self) -> None:
        with pytest.raises(EnvelopeError):
            extract_payload("} nothing {")


class TestNormalizeColumns:
    """Tests for column metadata."""

    def test_carries_id_and_type(self) -> None:
        cols = normalize_columns(
            {"cols": [{"id": "A", "label": "Name", "type": "string"}]}
        )
        assert cols == [ColumnMeta(label="Name", column_id="A", type="string")]

    def test_default_labels(self) -> None:
        cols = normalize_columns(
            {"cols": [{"id": "A", "label": ""}, {"id": "B"}, None]}
        )
        assert [c.label for c in cols] == ["Column 1", "Column 2", "Column 3"]
        assert cols[2].column_id is None
        assert cols[2].type is None

    def test_no_cols(self) -> None:
        assert normalize_columns({}) == []


class TestNormalizeRows:
    """Tests for positional row mapping."""

    def test_full_rows(self) -> None:
        table = {"rows": [{"c": [{"v": "Adam"}, {"v": 23.0, "f": "23"}]}]}
        assert normalize_rows(table, 2) == [["Adam", 23.0]]

    def test_short_and_sparse_rows_are_padded(self) -> None:
        table = {
            "rows": [
                {"c": [{"v": "Adam"}, None, {"v": True}]},
                {"c": [{"v": "Ben"}]},
                {"c": []},
                {},
            ]
        }
        rows = normalize_rows(table, 3)
        assert rows == [
            ["Adam", None, True],
            ["Ben", None, None],
            [None, None, None],
            [None, None, None],
        ]
        assert all(len(row) == 3 for row in rows)

    def test_extra_cells_are_dropped(self) -> None:
        table = {"rows": [{"c": [{"v": 1}, {"v": 2}, {"v": 3}]}]}
        assert normalize_rows(table, 2) == [[1, 2]]

    def test_cell_without_value(self) -> None:
        table = {"rows": [{"c": [{"f": "formatted only"}]}]}
        assert normalize_rows(table, 1) == [[None]]


class TestClearNulls:
    def test_keeps_order_and_falsy_values(self) -> None:
        rows = [["a", None, 0, False, "", None, "z"]]
        assert clear_nulls(rows) == [["a", 0, False, "", "z"]]


class TestNormalize:
    def test_normalize_with_clear_null(self) -> None:
        payload = {
            "table": {
                "cols": [{"label": "Name"}, {"label": "Age"}],
                "rows": [{"c": [{"v": "Adam"}, None]}],
            }
        }
        cols, rows = normalize(payload, clear_null=True)
        assert [c.label for c in cols] == ["Name", "Age"]
        assert rows == [["Adam"]]
        assert len(rows[0]) < len(cols)
