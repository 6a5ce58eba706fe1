"""
Tests for IGC file reading utilities.
"""

import pytest
import datetime
from igc_decoder.io.files import read_igc_lines, read_flight, list_igc_files
from igc_decoder.data.errors import MalformedRecord


class TestReadIgcLines:
    """Test cases for read_igc_lines."""

    def test_crlf_lines_are_trimmed(self, sample_igc_file, sample_igc_lines):
        """Test that line endings and whitespace are removed."""
        assert read_igc_lines(str(sample_igc_file)) == sample_igc_lines

    def test_invalid_bytes_are_replaced(self, tmp_path):
        """Test that undecodable bytes don't stop the read."""
        path = tmp_path / "latin.igc"
        path.write_bytes(b"AXXXabc\r\nHFPLTPILOTINCHARGE:J\xf6rg\r\n")

        lines = read_igc_lines(str(path))

        assert lines[0] == "AXXXabc"
        assert lines[1].startswith("HFPLTPILOTINCHARGE:J")

    def test_explicit_encoding(self, tmp_path):
        """Test reading with a caller-supplied encoding."""
        path = tmp_path / "latin.igc"
        path.write_bytes(b"HFPLTPILOTINCHARGE:J\xf6rg\r\n")

        assert read_igc_lines(str(path), encoding="latin-1") == ["HFPLTPILOTINCHARGE:Jörg"]

    def test_missing_file(self, tmp_path):
        """Test that storage errors propagate."""
        with pytest.raises(OSError):
            read_igc_lines(str(tmp_path / "missing.igc"))


class TestReadFlight:
    """Test cases for read_flight."""

    def test_read_flight(self, sample_igc_file):
        """Test decoding a file from disk."""
        flight = read_flight(str(sample_igc_file))

        assert flight.date == datetime.date(2017, 7, 17)
        assert flight.pilot == "John Doe"
        assert len(flight.fixes) == 2

    def test_read_invalid_flight(self, tmp_path, sample_invalid_line):
        """Test that decode errors propagate."""
        path = tmp_path / "broken.igc"
        path.write_text("AXXXabc\nHFDTE170717\n" + sample_invalid_line + "\n")

        with pytest.raises(MalformedRecord) as exc_info:
            read_flight(str(path))

        assert exc_info.value.line_number == 3


class TestListIgcFiles:
    """Test cases for list_igc_files."""

    def test_lists_both_extension_cases(self, tmp_path):
        """Test that .igc and .IGC files are found and other files ignored."""
        (tmp_path / "b.igc").write_text("")
        (tmp_path / "a.IGC").write_text("")
        (tmp_path / "notes.txt").write_text("")

        files = list_igc_files(str(tmp_path))

        assert [f.rsplit("/", 1)[-1] for f in files] == ["a.IGC", "b.igc"]

    def test_missing_directory(self, tmp_path):
        """Test that a missing directory gives an empty list."""
        assert list_igc_files(str(tmp_path / "missing")) == []
