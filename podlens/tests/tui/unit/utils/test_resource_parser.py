"""Unit tests for resource parsing and formatting helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from podlens.utils.resource_parser import (
    format_age,
    format_cpu,
    format_memory,
    memory_str_to_bytes,
    parse_cpu,
    parse_timestamp,
)

# =============================================================================
# CPU / memory parsing
# =============================================================================


class TestParseCpu:
    """Test parse_cpu function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("100m", 0.1),
            ("1.5", 1.5),
            ("2", 2.0),
            ("500000000n", 0.5),
            ("250000u", 0.25),
        ],
    )
    def test_units(self, value: str, expected: float) -> None:
        assert parse_cpu(value) == pytest.approx(expected)

    def test_empty_and_invalid(self) -> None:
        assert parse_cpu("") == 0.0
        assert parse_cpu("lots") == 0.0


class TestMemoryStrToBytes:
    """Test memory_str_to_bytes function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1Ki", 1024),
            ("512Mi", 512 * 1024**2),
            ("1Gi", 1024**3),
            ("128M", 128 * 1000**2),
            ("1k", 1000),
            ("1048576", 1048576),
        ],
    )
    def test_suffixes(self, value: str, expected: float) -> None:
        assert memory_str_to_bytes(value) == expected

    def test_invalid(self) -> None:
        assert memory_str_to_bytes("") == 0.0
        assert memory_str_to_bytes("xMi") == 0.0


# =============================================================================
# Timestamps and ages
# =============================================================================


class TestParseTimestamp:
    """Test RFC 3339 parsing."""

    def test_zulu(self) -> None:
        assert parse_timestamp("2024-05-01T10:00:00Z") == datetime(
            2024, 5, 1, 10, 0, tzinfo=timezone.utc
        )

    def test_nanosecond_fraction_is_truncated(self) -> None:
        parsed = parse_timestamp("2024-05-01T10:00:00.123456789Z")
        assert parsed is not None
        assert parsed.microsecond == 123456

    def test_invalid(self) -> None:
        assert parse_timestamp("yesterday") is None
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None


class TestFormatAge:
    """Test age formatting buckets."""

    NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=42), "42s"),
            (timedelta(minutes=5, seconds=59), "5m"),
            (timedelta(hours=3), "3h"),
            (timedelta(days=9, hours=23), "9d"),
        ],
    )
    def test_buckets(self, delta: timedelta, expected: str) -> None:
        assert format_age(self.NOW - delta, now=self.NOW) == expected

    def test_missing_timestamp(self) -> None:
        assert format_age(None) == "Unknown"

    def test_future_timestamp_clamps_to_zero(self) -> None:
        assert format_age(self.NOW + timedelta(minutes=1), now=self.NOW) == "0s"


# =============================================================================
# Formatting
# =============================================================================


class TestFormatting:
    """Test format_cpu and format_memory."""

    def test_cpu_millicores(self) -> None:
        assert format_cpu(250) == "250m"

    def test_cpu_cores(self) -> None:
        assert format_cpu(1500) == "1.50"

    def test_memory(self) -> None:
        assert format_memory(512) == "512B"
        assert format_memory(2048) == "2.0Ki"
        assert format_memory(256 * 1024**2) == "256.0Mi"
        assert format_memory(3 * 1024**3) == "3.0Gi"
