"""
Tests for the manufacturer lookup table.
"""

from igc_decoder.config.manufacturers import (
    MANUFACTURERS,
    get_manufacturer_codes,
    lookup_manufacturer,
    add_custom_manufacturer,
)


class TestManufacturers:
    """Test cases for the manufacturer lookup."""

    def test_lookup_known_codes(self):
        """Test resolution of IGC-approved codes."""
        assert lookup_manufacturer("LXN") == "LX Navigation"
        assert lookup_manufacturer("FLA") == "FLARM"
        assert lookup_manufacturer("XCS") == "XCSoar"

    def test_lookup_is_case_insensitive(self):
        """Test that lower-case codes resolve too."""
        assert lookup_manufacturer("lxn") == "LX Navigation"

    def test_unknown_code_returns_code(self):
        """Test the unknown-manufacturer policy."""
        assert lookup_manufacturer("XXX") == "XXX"

    def test_codes_are_sorted(self):
        """Test that the code list is sorted."""
        codes = get_manufacturer_codes()
        assert codes == sorted(codes)
        assert all(len(code) == 3 for code in codes)

    def test_add_custom_manufacturer(self):
        """Test registering an unofficial manufacturer."""
        try:
            assert add_custom_manufacturer("qqq", "Test Instruments") is True
            assert lookup_manufacturer("QQQ") == "Test Instruments"
            assert add_custom_manufacturer("QQQ", "Other") is False
        finally:
            MANUFACTURERS.pop("QQQ", None)
