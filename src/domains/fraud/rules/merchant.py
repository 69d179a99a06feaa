"""Merchant classification and merchant-category risk."""

from ..config import MerchantProfile, RiskConfig, TimeWindows
from ..models import MerchantCategory
from .base import DimensionContext, RiskDimension
from .temporal import is_night_hour

# Checked in order; the first category with a matching keyword wins.
MERCHANT_KEYWORDS: tuple[tuple[MerchantCategory, tuple[str, ...]], ...] = (
    (MerchantCategory.GAMBLING, ("bet", "casino")),
    (MerchantCategory.TRAVEL, ("travel", "air")),
    (MerchantCategory.ONLINE_RETAIL, ("shop", "store")),
    (MerchantCategory.ELECTRONICS, ("tech", "electronics")),
)


def classify_merchant(merchant_name: str) -> MerchantCategory:
    """Map a merchant name to a category by substring match."""
    name = merchant_name.lower()
    for category, keywords in MERCHANT_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return MerchantCategory.UNKNOWN


def merchant_risk(
    profile: MerchantProfile,
    hour: int,
    weekday: int,
    windows: TimeWindows,
) -> float:
    """Category base risk plus the night surcharge, capped at 1.0.

    Takes the same hour and weekday inputs as ``temporal_risk``; the weekday
    does not change the merchant score.
    """
    risk = profile.base_risk
    if is_night_hour(hour, windows):
        risk += profile.night_surcharge
    return min(risk, 1.0)


class MerchantRiskDimension(RiskDimension):
    """Category base risk plus a night-time surcharge."""

    name = "merchant"

    def score(self, context: DimensionContext, config: RiskConfig) -> float:
        return merchant_risk(
            config.merchant_profile(context.category),
            context.hour,
            context.day_of_week,
            config.time,
        )
