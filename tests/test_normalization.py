"""
==============================================================================
Normalization Tests
==============================================================================

Tests for zero stripping and quantity parsing.

==============================================================================
"""

import math

import pytest

from label_inspector.utils import (
    parse_decimal,
    strip_leading_zeros,
    strip_or_default,
    strip_zeros,
)


class TestZeroStripping:
    """Tests for zero stripping helpers."""

    def test_leading(self):
        assert strip_leading_zeros("0004170") == "4170"
        assert strip_leading_zeros("0000") == ""

    def test_both_ends(self):
        assert strip_zeros("00417000") == "417"
        assert strip_zeros("000") == ""

    @pytest.mark.parametrize("code", ["0004170", "4170", "000", "", "1020"])
    def test_idempotent(self, code: str):
        """Test stripping an already-stripped code is a no-op."""
        assert strip_leading_zeros(strip_leading_zeros(code)) == strip_leading_zeros(code)
        assert strip_zeros(strip_zeros(code)) == strip_zeros(code)

    def test_default(self):
        """Test empty stripped fields fall back to '0'."""
        assert strip_or_default("000") == "0"
        assert strip_or_default("012") == "12"


class TestParseDecimal:
    """Tests for label quantity parsing."""

    def test_zero_padded(self):
        assert parse_decimal("00123") == 123.0
        assert parse_decimal("00000") == 0.0

    def test_numeric_prefix(self):
        """Test parsing stops at the first non-numeric character."""
        assert parse_decimal("12a45") == 12.0
        assert parse_decimal("1.5xx") == 1.5

    @pytest.mark.parametrize("text", ["", "abcde", "XXXXX", "-"])
    def test_no_number_is_nan(self, text: str):
        assert math.isnan(parse_decimal(text))
