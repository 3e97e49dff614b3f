"""Tests for IEC byte formatting."""

import re

import pytest

from treemirror import format_size
from treemirror.size import FIELD_WIDTH


def significant_digits(s):
    return len(re.sub(r"[^0-9]", "", s))


class TestFormatSize:
    @pytest.mark.parametrize("n", [0, 1, 512, 1023])
    def test_plain_bytes(self, n):
        assert format_size(n) == f"{n}  B"

    @pytest.mark.parametrize("n, unit", [
        (1024, "kiB"),
        (1024 ** 2 - 1, "kiB"),
        (1024 ** 2, "MiB"),
        (5 * 1024 ** 3, "GiB"),
        (1024 ** 4, "TiB"),
        (1024 ** 5, "PiB"),
        (1024 ** 6, "EiB"),
        (2 ** 64 - 1, "EiB"),
    ])
    def test_unit_selection(self, n, unit):
        s = format_size(n)
        assert s.endswith(unit)
        assert significant_digits(s) == 5

    def test_examples(self):
        assert format_size(1024) == "1.0000kiB"
        assert format_size(1536) == "1.5000kiB"
        assert format_size(1023 * 1024) == "1023.0kiB"
        assert format_size(10 * 1024 ** 2) == "10.000MiB"

    def test_truncates(self):
        # 1.99999... kiB is truncated, not rounded up to 2.0000kiB
        assert format_size(2047) == "1.9990kiB"

    def test_fits_field_width(self):
        for n in (1023, 1024, 999 * 1024, 1023 * 1024 ** 3):
            assert len(format_size(n)) <= FIELD_WIDTH

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_size(-1)
