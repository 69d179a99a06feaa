"""Risk dimension package.

Exports ALL_DIMENSIONS (list of all dimension instances) and the pure
calculators behind each dimension for direct use.
"""

from .amount import AmountRiskDimension, amount_risk
from .base import DimensionContext, RiskDimension
from .card import CardRiskDimension, card_risk
from .merchant import MerchantRiskDimension, classify_merchant, merchant_risk
from .temporal import TemporalRiskDimension, day_of_week, is_night_hour, temporal_risk

# All dimension instances in combination order
ALL_DIMENSIONS: list[RiskDimension] = [
    MerchantRiskDimension(),
    AmountRiskDimension(),
    CardRiskDimension(),
    TemporalRiskDimension(),
]

__all__ = [
    "ALL_DIMENSIONS",
    "DimensionContext",
    "RiskDimension",
    # Merchant
    "MerchantRiskDimension",
    "classify_merchant",
    "merchant_risk",
    # Amount
    "AmountRiskDimension",
    "amount_risk",
    # Card
    "CardRiskDimension",
    "card_risk",
    # Temporal
    "TemporalRiskDimension",
    "day_of_week",
    "is_night_hour",
    "temporal_risk",
]
