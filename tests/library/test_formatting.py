"""
Unit tests for size and timestamp formatting.
"""

import pytest

from dirlist_library.listing import render_size
from dirlist_library.listing import render_timestamp


@pytest.mark.unit
class TestRenderSize:
    """Test kilobyte rendering with integer tenths."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0.0 kb"),
            (1, "0.1 kb"),
            (102, "0.1 kb"),
            (103, "0.1 kb"),
            (206, "0.2 kb"),
            (1023, "0.9 kb"),
            (1024, "1.0 kb"),
            (1536, "1.4 kb"),
            (10 * 1024 * 1024, "10240.0 kb"),
        ],
    )
    def test_render_size(self, size: int, expected: str) -> None:
        """Test tenths use (size % 1024) // 103, not rounding."""
        assert render_size(size) == expected

    def test_minimum_only_applies_below_one_kb(self) -> None:
        """Test exact kilobytes aren't bumped to .1."""
        assert render_size(2048) == "2.0 kb"


@pytest.mark.unit
class TestRenderTimestamp:
    """Test RFC 1123 timestamp rendering."""

    def test_epoch(self) -> None:
        """Test the epoch renders in GMT."""
        assert render_timestamp(0) == "Thu, 01 Jan 1970 00:00:00 GMT"

    def test_milliseconds_truncated(self) -> None:
        """Test sub-second milliseconds don't change the output."""
        assert render_timestamp(1_700_000_000_999) == "Tue, 14 Nov 2023 22:13:20 GMT"
