"""Card-number pattern risk."""

from ..config import CardRules, RiskConfig
from ..models import CardFeatures
from .base import DimensionContext, RiskDimension


def card_risk(features: CardFeatures, rules: CardRules) -> float:
    """Each feature is a boolean gate; magnitudes beyond the gate do not matter."""
    risk = 0.0
    if features.length_score > rules.length_gate:
        risk += rules.length_risk
    if features.checksum_failed == 1:
        risk += rules.checksum_risk
    if features.repetition_score > rules.repetition_gate:
        risk += rules.repetition_risk
    return min(risk, 1.0)


class CardRiskDimension(RiskDimension):
    name = "card"

    def score(self, context: DimensionContext, config: RiskConfig) -> float:
        return card_risk(context.card_features, config.card)
