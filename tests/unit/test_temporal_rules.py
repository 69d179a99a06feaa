"""Unit tests for temporal risk."""

from datetime import UTC, datetime

import pytest

from src.domains.fraud.config import RiskConfig, TimeWindows
from src.domains.fraud.rules.temporal import day_of_week, is_night_hour, temporal_risk

WINDOWS = RiskConfig().time


class TestNightWindow:
    @pytest.mark.parametrize("hour", [23, 0, 1, 4, 5])
    def test_night_hours(self, hour):
        assert is_night_hour(hour, WINDOWS) is True

    @pytest.mark.parametrize("hour", [6, 9, 14, 22])
    def test_day_hours(self, hour):
        assert is_night_hour(hour, WINDOWS) is False

    def test_window_is_literal_or(self):
        # start <= end turns the OR into "every hour"
        windows = TimeWindows(night_start=2, night_end=4)
        assert all(is_night_hour(h, windows) for h in range(24))


class TestDayOfWeek:
    @pytest.mark.parametrize(
        ("moment", "expected"),
        [
            (datetime(2026, 1, 18, 12, tzinfo=UTC), 0),  # Sunday
            (datetime(2026, 1, 19, 12, tzinfo=UTC), 1),  # Monday
            (datetime(2026, 1, 15, 12, tzinfo=UTC), 4),  # Thursday
            (datetime(2026, 1, 17, 12, tzinfo=UTC), 6),  # Saturday
        ],
    )
    def test_sunday_is_zero(self, moment, expected):
        assert day_of_week(moment) == expected


class TestTemporalRisk:
    def test_weekday_afternoon(self):
        assert temporal_risk(14, 3, WINDOWS) == 0.0

    def test_night_only(self):
        assert temporal_risk(2, 3, WINDOWS) == pytest.approx(0.3)

    @pytest.mark.parametrize("day", [0, 6])
    def test_weekend_only(self, day):
        assert temporal_risk(14, day, WINDOWS) == pytest.approx(0.2)

    def test_night_and_weekend(self):
        assert temporal_risk(2, 6, WINDOWS) == pytest.approx(0.5)

    def test_maximum_is_half(self):
        scores = [temporal_risk(h, d, WINDOWS) for h in range(24) for d in range(7)]
        assert max(scores) == pytest.approx(0.5)
        assert min(scores) == 0.0
