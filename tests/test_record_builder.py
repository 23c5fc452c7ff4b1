"""
tests/test_record_builder.py

Pytest unit tests for dot-notation record reconstruction and type inference.
"""

from __future__ import annotations

import pytest

from app.mappers.record_builder import RecordBuilder, convert_value, split_header_path


@pytest.fixture()
def builder() -> RecordBuilder:
    return RecordBuilder()


# ---------------------------------------------------------------------------
# Type inference
# ---------------------------------------------------------------------------


class TestConvertValue:
    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_is_null(self, raw: str | None) -> None:
        assert convert_value(raw) is None

    def test_integer(self) -> None:
        value = convert_value("42")
        assert value == 42
        assert isinstance(value, int)

    def test_decimal(self) -> None:
        assert convert_value("3.14") == pytest.approx(3.14)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("-7", -7), ("1e3", 1000.0), ("2.5E-1", 0.25), (".5", 0.5), ("+8", 8)],
    )
    def test_numeric_forms(self, raw: str, expected: float) -> None:
        assert convert_value(raw) == pytest.approx(expected)

    def test_booleans_case_insensitive(self) -> None:
        assert convert_value("true") is True
        assert convert_value("False") is False
        assert convert_value("TRUE") is True

    @pytest.mark.parametrize("raw", ["12abc", "nan", "inf", "0x1A", "1_000", "truely"])
    def test_partial_or_special_forms_stay_strings(self, raw: str) -> None:
        assert convert_value(raw) == raw

    def test_string_is_trimmed(self) -> None:
        assert convert_value("  Pune ") == "Pune"

    @pytest.mark.parametrize(("raw", "expected"), [("3.0", 3), ("1e3", 1000), ("-2.50e1", -25)])
    def test_whole_decimals_become_int(self, raw: str, expected: int) -> None:
        value = convert_value(raw)
        assert value == expected
        assert isinstance(value, int)

    def test_huge_whole_value_keeps_float(self) -> None:
        assert isinstance(convert_value("1e21"), float)

    @pytest.mark.parametrize("raw", ["1e400", "-1e400"])
    def test_overflowing_literal_stays_string(self, raw: str) -> None:
        assert convert_value(raw) == raw


# ---------------------------------------------------------------------------
# Header paths
# ---------------------------------------------------------------------------


class TestSplitHeaderPath:
    def test_segments_are_trimmed(self) -> None:
        assert split_header_path(" name . firstName ") == ("name", "firstName")

    @pytest.mark.parametrize("header", ["", "   ", "a..b", ".a", "a."])
    def test_invalid_headers(self, header: str) -> None:
        assert split_header_path(header) is None


# ---------------------------------------------------------------------------
# Reconstruction
# ---------------------------------------------------------------------------


class TestRecordBuilder:
    def test_nested_reconstruction(self, builder: RecordBuilder) -> None:
        record = builder.build(
            ["name.firstName", "name.lastName", "age"],
            ["Rohit", "Prasad", "34"],
        )

        assert record == {"name": {"firstName": "Rohit", "lastName": "Prasad"}, "age": 34}

    def test_deep_nesting(self, builder: RecordBuilder) -> None:
        record = builder.build(["a.b.c", "a.b.d", "a.e"], ["1", "x", "true"])

        assert record == {"a": {"b": {"c": 1, "d": "x"}, "e": True}}

    def test_empty_header_is_skipped(self, builder: RecordBuilder) -> None:
        record = builder.build(["age", "", "gender"], ["20", "ignored", "male"])

        assert record == {"age": 20, "gender": "male"}

    def test_scalar_is_overwritten_by_nested_mapping(self, builder: RecordBuilder) -> None:
        record = builder.build(["address", "address.city"], ["plain", "Pune"])

        assert record == {"address": {"city": "Pune"}}

    def test_records_are_independent(self, builder: RecordBuilder) -> None:
        headers = ["name.firstName"]
        first, second = builder.build_all(headers, [["A"], ["B"]])

        assert first["name"] is not second["name"]
        assert first == {"name": {"firstName": "A"}}
        assert second == {"name": {"firstName": "B"}}

    def test_build_all_warns_on_empty_segment(self, builder: RecordBuilder, caplog) -> None:
        with caplog.at_level("WARNING"):
            records = builder.build_all(["a..b", "c"], [["1", "2"]])

        assert records == [{"c": 2}]
        assert "empty path segment" in caplog.text
