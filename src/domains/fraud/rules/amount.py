"""Amount-based risk relative to the merchant category's thresholds."""

from ..config import AmountThresholds, RiskConfig
from .base import DimensionContext, RiskDimension


def amount_risk(amount: float, thresholds: AmountThresholds) -> float:
    """Piecewise linear risk in [0.2, 1.0], stepping from 0.2 to 0.3 just above low."""
    low, medium, high = thresholds.low, thresholds.medium, thresholds.high

    if amount > high:
        return 0.8 + min((amount - high) / (high * 2), 0.2)
    if amount > medium:
        return 0.5 + (amount - medium) / (high - medium) * 0.3
    if amount > low:
        return 0.3 + (amount - low) / (medium - low) * 0.2
    return 0.2


class AmountRiskDimension(RiskDimension):
    """Scores the amount against the thresholds for the merchant's category."""

    name = "amount"

    def score(self, context: DimensionContext, config: RiskConfig) -> float:
        return amount_risk(
            context.transaction.amount,
            config.amount_thresholds(context.category),
        )
