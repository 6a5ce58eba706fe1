"""
Tests for extension schema decoding and extraction.
"""

import pytest
from igc_decoder.data.schema import parse_extension_schema, extract_extensions, find_field
from igc_decoder.data.models import ExtensionField
from igc_decoder.data.errors import InvalidExtensionSchema, MalformedRecord


class TestParseExtensionSchema:
    """Test cases for I record decoding."""

    def test_parse_two_extensions(self):
        """Test a typical FXA + ENL declaration."""
        schema = parse_extension_schema("I023638FXA3941ENL", 4)

        assert schema == [
            ExtensionField(code="FXA", start_column=35, length=3),
            ExtensionField(code="ENL", start_column=38, length=3),
        ]

    def test_declaration_order_is_kept(self):
        """Test that fields keep the order of the I record."""
        schema = parse_extension_schema("I033638FXA3940SIU4143ENL", 4)

        assert [field.code for field in schema] == ["FXA", "SIU", "ENL"]
        assert schema[1].length == 2

    def test_zero_extensions(self):
        """Test an I record declaring nothing."""
        assert parse_extension_schema("I00", 4) == []

    def test_trailing_text_is_ignored(self):
        """Test that characters after the declared groups don't matter."""
        schema = parse_extension_schema("I013638FXAxyz", 4)

        assert schema == [ExtensionField(code="FXA", start_column=35, length=3)]

    @pytest.mark.parametrize("line", [
        "I",                    # no count
        "IXX3638FXA",           # count not numeric
        "I023638FXA",           # fewer groups than declared
        "I01AB38FXA",           # start column not numeric
        "I013836FXA",           # end before start
        "I010038FXA",           # start column zero
    ])
    def test_invalid_schema(self, line):
        """Test that malformed I records are rejected."""
        with pytest.raises(InvalidExtensionSchema) as exc_info:
            parse_extension_schema(line, 7)

        assert exc_info.value.line_number == 7
        assert exc_info.value.line == line


class TestExtractExtensions:
    """Test cases for slicing extensions out of B records."""

    def test_no_schema(self):
        """Test that fixes without a schema have no extensions."""
        assert extract_extensions("B1200005213123N00012456EA0000000123", None, 1) == ({}, None, None)

    def test_engine_noise_normalised_by_length(self):
        """Test that ENL digits 500 over three columns give 0.5."""
        schema = parse_extension_schema("I012628ENL", 1)
        line = "B1200005213123N00012456EA5000000123"

        extensions, enl, fxa = extract_extensions(line, schema, 2)

        assert extensions == {"ENL": "500"}
        assert enl == 0.5
        assert fxa is None

    def test_engine_noise_two_digits(self):
        """Test that a two-column ENL is divided by 100."""
        schema = parse_extension_schema("I013637ENL", 1)

        _, enl, _ = extract_extensions("B1200005213123N00012456EA000000012325", schema, 2)

        assert enl == 0.25

    def test_fix_accuracy_is_integer(self):
        """Test FXA decoding."""
        schema = parse_extension_schema("I013638FXA", 1)

        extensions, enl, fxa = extract_extensions("B1200005213123N00012456EA0000000123042", schema, 2)

        assert extensions == {"FXA": "042"}
        assert fxa == 42
        assert enl is None

    def test_other_extensions_stay_raw(self):
        """Test that unknown codes keep their raw text."""
        schema = parse_extension_schema("I013640TAS", 1)

        extensions, _, _ = extract_extensions("B1200005213123N00012456EA000000012301234", schema, 2)

        assert extensions == {"TAS": "01234"}

    def test_short_line_gives_empty_values(self):
        """Test a B record that ends before the declared columns."""
        schema = parse_extension_schema("I023638FXA3941ENL", 1)

        extensions, enl, fxa = extract_extensions("B1200005213123N00012456EA0000000123", schema, 2)

        assert extensions == {"FXA": "", "ENL": ""}
        assert enl is None
        assert fxa is None

    def test_non_numeric_engine_noise(self):
        """Test that ENL must be numeric."""
        schema = parse_extension_schema("I013941ENL", 1)

        with pytest.raises(MalformedRecord) as exc_info:
            extract_extensions("B1200005213123N00012456EA0000000123035x20", schema, 6)

        assert exc_info.value.record_type == "B"
        assert exc_info.value.line_number == 6

    def test_non_numeric_fix_accuracy(self):
        """Test that FXA must be numeric."""
        schema = parse_extension_schema("I013638FXA", 1)

        with pytest.raises(MalformedRecord):
            extract_extensions("B1200005213123N00012456EA0000000123-12", schema, 6)

    def test_find_field(self):
        """Test lookup of a field by code."""
        schema = parse_extension_schema("I023638FXA3941ENL", 1)

        assert find_field(schema, "ENL").start_column == 38
        assert find_field(schema, "SIU") is None

    def test_repeated_code_uses_last_declaration(self):
        """Test that the raw value and the engine noise come from the same field."""
        schema = parse_extension_schema("I023637ENL3840ENL", 1)

        extensions, enl, _ = extract_extensions("B1200005213123N00012456EA000000012399500", schema, 2)

        assert find_field(schema, "ENL").start_column == 37
        assert extensions == {"ENL": "500"}
        assert enl == 0.5

    def test_blank_values_are_absent(self):
        """Test that space-padded ENL and FXA values decode as absent."""
        schema = parse_extension_schema("I023638FXA3941ENL", 1)

        extensions, enl, fxa = extract_extensions("B1200005213123N00012456EA0000000123      ", schema, 2)

        assert extensions == {"FXA": "   ", "ENL": "   "}
        assert enl is None
        assert fxa is None
