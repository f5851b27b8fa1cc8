"""Tests for byte formatting."""

import pytest
from storkutil.utils import ByteFormatter


class TestFormatBytes:
    def test_hex(self):
        assert ByteFormatter.format_bytes(bytes([0x0A, 0xFF]), "%02x") == "0aff"

    def test_default_format_is_hex(self):
        assert ByteFormatter.format_bytes(b"\x00\x10") == "0010"

    def test_upper_hex(self):
        assert ByteFormatter.format_bytes(b"\xab\xcd", "%02X") == "ABCD"

    def test_format_spec_style(self):
        assert ByteFormatter.format_bytes(b"\x05", "08b") == "00000101"

    def test_signed_ints_masked(self):
        assert ByteFormatter.format_bytes([-1, 10], "%02x") == "ff0a"

    def test_empty(self):
        assert ByteFormatter.format_bytes(b"", "%02x") == ""
        assert ByteFormatter.format_bytes(None) == ""

    def test_separator_in_format(self):
        assert ByteFormatter.format_bytes(b"\x01\x02", "%02x:") == "01:02:"

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="Invalid byte format"):
            ByteFormatter.format_bytes(b"\x01", "%s %s")

    def test_none_format(self):
        with pytest.raises(ValueError, match="Invalid byte format"):
            ByteFormatter.format_bytes(b"\x01", None)

    def test_non_int_data(self):
        with pytest.raises(TypeError, match="Byte values must be ints"):
            ByteFormatter.format_bytes(["ab"], "%02x")
