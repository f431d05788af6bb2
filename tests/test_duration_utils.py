"""
Tests for ISO 8601 duration parsing and duration formatting.
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from utils.duration_utils import parse_duration_to_seconds, format_duration


class TestParseDuration:
    """Duration strings from the videos endpoint."""

    @pytest.mark.parametrize("iso, expected", [
        ("PT59S", 59),
        ("PT1M2S", 62),
        ("PT10M", 600),
        ("PT1H2M10S", 3730),
        ("PT0S", 0),
        ("PT2H", 7200),
    ])
    def test_known_durations(self, iso, expected):
        assert parse_duration_to_seconds(iso) == expected

    def test_unparseable_string_is_zero(self):
        assert parse_duration_to_seconds("not a duration") == 0

    def test_day_durations_without_time_part_are_zero(self):
        assert parse_duration_to_seconds("P1D") == 0

    def test_non_string_is_zero(self):
        assert parse_duration_to_seconds(None) == 0
        assert parse_duration_to_seconds(42) == 0

    def test_bare_pt_is_zero(self):
        assert parse_duration_to_seconds("PT") == 0


class TestFormatDuration:
    """Human-readable durations on video cards."""

    def test_seconds_only(self):
        assert format_duration(45) == "45s"

    def test_whole_minutes(self):
        assert format_duration(120) == "2m"

    def test_minutes_and_seconds(self):
        assert format_duration(125) == "2m 5s"

    def test_zero(self):
        assert format_duration(0) == "0s"

    def test_hours_stay_in_minutes(self):
        assert format_duration(3730) == "62m 10s"
