"""Abstract base class for the risk dimensions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..config import RiskConfig
from ..models import CardFeatures, MerchantCategory, RiskFactor, Transaction


@dataclass(frozen=True)
class DimensionContext:
    """Inputs shared by every dimension for one scoring call."""

    transaction: Transaction
    category: MerchantCategory
    card_features: CardFeatures
    hour: int
    day_of_week: int  # 0 = Sunday ... 6 = Saturday


class RiskDimension(ABC):
    """Base class for the four independently computed risk dimensions.

    Dimensions are synchronous and pure: they read the shared context and the
    injected config, and return a score in [0, 1].
    """

    name: str  # "merchant" | "amount" | "card" | "temporal"

    @abstractmethod
    def score(self, context: DimensionContext, config: RiskConfig) -> float:
        """Compute this dimension's risk score."""
        ...

    def factor(self, context: DimensionContext, config: RiskConfig) -> RiskFactor:
        """Convenience: score this dimension and attach its configured weight."""
        return RiskFactor(
            name=self.name,
            score=self.score(context, config),
            weight=config.weights.as_dict()[self.name],
        )
