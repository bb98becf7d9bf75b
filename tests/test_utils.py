"""Tests for size formatting and block rounding."""

import pytest

from scandisk.utils import ceil_to_block, format_size, round_half_up


class TestFormatSize:
    @pytest.mark.parametrize("num, expected", [
        (0, "0  B"),
        (1, "1  B"),
        (1023, "1023  B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (5000, "4.88 KB"),
        (8192, "8 KB"),
        (1048576, "1 MB"),
        (1073741824, "1 GB"),
        (3 * 1073741824 // 2, "1.5 GB"),
    ])
    def test_examples(self, num, expected):
        assert format_size(num) == expected

    def test_half_rounds_up_not_to_even(self):
        # 1152 / 1024 == 1.125 exactly; banker's rounding would give 1.12
        assert format_size(1152) == "1.13 KB"

    def test_largest_unit_is_gb(self):
        assert format_size(2048 * 1073741824) == "2048 GB"

    def test_byte_fallback_uses_two_spaces(self):
        assert format_size(512).endswith("  B")
        assert "  " not in format_size(2048)


class TestRoundHalfUp:
    def test_rounds_half_away_from_zero(self):
        assert round_half_up(0.125) == 0.13
        assert round_half_up(2.5, 0) == 3.0

    def test_rounds_down_below_half(self):
        assert round_half_up(4.8828125) == 4.88


class TestCeilToBlock:
    @pytest.mark.parametrize("num, expected", [
        (0, 0),
        (1, 4096),
        (4096, 4096),
        (4097, 8192),
        (5000, 8192),
    ])
    def test_block_4096(self, num, expected):
        assert ceil_to_block(num, 4096) == expected

    def test_other_block_size(self):
        assert ceil_to_block(1000, 512) == 1024
