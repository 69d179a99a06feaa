"""Time-of-day and day-of-week risk."""

from datetime import datetime

from ..config import RiskConfig, TimeWindows
from .base import DimensionContext, RiskDimension


def is_night_hour(hour: int, windows: TimeWindows) -> bool:
    # Inclusive OR across midnight, not a modular range.
    return hour >= windows.night_start or hour <= windows.night_end


def day_of_week(moment: datetime) -> int:
    """Day index with Sunday as 0 and Saturday as 6."""
    return moment.isoweekday() % 7


def temporal_risk(hour: int, weekday: int, windows: TimeWindows) -> float:
    risk = 0.0
    if is_night_hour(hour, windows):
        risk += windows.night_risk
    if weekday in windows.weekend_days:
        risk += windows.weekend_risk
    return min(risk, 1.0)


class TemporalRiskDimension(RiskDimension):
    """Night-time and weekend transactions carry extra risk."""

    name = "temporal"

    def score(self, context: DimensionContext, config: RiskConfig) -> float:
        return temporal_risk(context.hour, context.day_of_week, config.time)
