"""Risk rule tables for the transaction scorer.

Every table is a frozen dataclass validated on construction, so a bad
configuration fails when it is built rather than on the first scoring call.
"""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .models import MerchantCategory


class ConfigurationError(ValueError):
    """Raised when a rule table violates one of its invariants."""


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be within [0, 1], got {value}")


@dataclass(frozen=True)
class MerchantProfile:
    base_risk: float
    night_surcharge: float

    def __post_init__(self) -> None:
        _check_probability("base_risk", self.base_risk)
        _check_probability("night_surcharge", self.night_surcharge)


@dataclass(frozen=True)
class AmountThresholds:
    low: float
    medium: float
    high: float

    def __post_init__(self) -> None:
        if not 0 < self.low < self.medium < self.high:
            raise ConfigurationError(
                "amount thresholds must be positive and strictly increasing, got "
                f"low={self.low}, medium={self.medium}, high={self.high}"
            )


def _default_merchants() -> dict[MerchantCategory, MerchantProfile]:
    return {
        MerchantCategory.ONLINE_RETAIL: MerchantProfile(base_risk=0.4, night_surcharge=0.1),
        MerchantCategory.GAMBLING: MerchantProfile(base_risk=0.8, night_surcharge=0.2),
        MerchantCategory.TRAVEL: MerchantProfile(base_risk=0.3, night_surcharge=0.1),
        MerchantCategory.ELECTRONICS: MerchantProfile(base_risk=0.5, night_surcharge=0.15),
        MerchantCategory.UNKNOWN: MerchantProfile(base_risk=0.6, night_surcharge=0.2),
    }


def _default_amounts() -> dict[MerchantCategory, AmountThresholds]:
    return {
        MerchantCategory.ONLINE_RETAIL: AmountThresholds(low=100, medium=500, high=1000),
        MerchantCategory.GAMBLING: AmountThresholds(low=50, medium=200, high=500),
        MerchantCategory.TRAVEL: AmountThresholds(low=200, medium=1000, high=3000),
        MerchantCategory.ELECTRONICS: AmountThresholds(low=300, medium=1000, high=2000),
        MerchantCategory.UNKNOWN: AmountThresholds(low=100, medium=500, high=1000),
    }


@dataclass(frozen=True)
class TimeWindows:
    # Night is hour >= night_start OR hour <= night_end, tested literally.
    night_start: int = 23
    night_end: int = 5
    weekend_days: tuple[int, ...] = (0, 6)  # Sunday = 0, Saturday = 6
    night_risk: float = 0.3
    weekend_risk: float = 0.2

    def __post_init__(self) -> None:
        for hour in (self.night_start, self.night_end):
            if not 0 <= hour <= 23:
                raise ConfigurationError(f"night window hour out of range: {hour}")
        if any(not 0 <= day <= 6 for day in self.weekend_days):
            raise ConfigurationError(f"weekend days must be within 0-6, got {self.weekend_days}")


@dataclass(frozen=True)
class CardRules:
    min_length: int = 13
    max_length: int = 19
    repetition_divisor: int = 5
    length_gate: float = 0.7
    repetition_gate: float = 0.5
    length_risk: float = 0.3
    checksum_risk: float = 0.4
    repetition_risk: float = 0.3

    def __post_init__(self) -> None:
        if self.max_length <= self.min_length:
            raise ConfigurationError(
                f"card max_length ({self.max_length}) must exceed min_length ({self.min_length})"
            )
        if self.repetition_divisor <= 0:
            raise ConfigurationError("repetition_divisor must be positive")


@dataclass(frozen=True)
class ScoringWeights:
    merchant: float = 0.25
    amount: float = 0.30
    card: float = 0.25
    temporal: float = 0.20

    def __post_init__(self) -> None:
        for name, weight in self.as_dict().items():
            _check_probability(f"{name} weight", weight)
        total = sum(self.as_dict().values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigurationError(f"dimension weights must sum to 1.0, got {total}")

    def as_dict(self) -> dict[str, float]:
        return {
            "merchant": self.merchant,
            "amount": self.amount,
            "card": self.card,
            "temporal": self.temporal,
        }


@dataclass(frozen=True)
class VerdictThresholds:
    fraud: float = 0.70
    critical: float = 0.80
    high: float = 0.70
    medium: float = 0.40
    confidence_floor: float = 0.5

    def __post_init__(self) -> None:
        if not 0.0 <= self.medium <= self.high <= self.critical <= 1.0:
            raise ConfigurationError(
                "risk level thresholds must satisfy 0 <= medium <= high <= critical <= 1"
            )
        _check_probability("fraud threshold", self.fraud)
        _check_probability("confidence_floor", self.confidence_floor)


@dataclass(frozen=True)
class ReasonThresholds:
    merchant: float = 0.6
    amount: float = 0.7
    repetition: float = 0.5
    temporal: float = 0.6


@dataclass(frozen=True)
class RiskConfig:
    merchants: Mapping[MerchantCategory, MerchantProfile] = field(default_factory=_default_merchants)
    amounts: Mapping[MerchantCategory, AmountThresholds] = field(default_factory=_default_amounts)
    time: TimeWindows = field(default_factory=TimeWindows)
    card: CardRules = field(default_factory=CardRules)
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    verdict: VerdictThresholds = field(default_factory=VerdictThresholds)
    reasons: ReasonThresholds = field(default_factory=ReasonThresholds)

    def __post_init__(self) -> None:
        for table_name, table in (("merchants", self.merchants), ("amounts", self.amounts)):
            missing = set(MerchantCategory) - set(table)
            if missing:
                names = ", ".join(sorted(c.value for c in missing))
                raise ConfigurationError(f"{table_name} table missing categories: {names}")

        # Read-only copies so the tables cannot change after validation
        object.__setattr__(self, "merchants", MappingProxyType(dict(self.merchants)))
        object.__setattr__(self, "amounts", MappingProxyType(dict(self.amounts)))

    def merchant_profile(self, category: MerchantCategory) -> MerchantProfile:
        return self.merchants[category]

    def amount_thresholds(self, category: MerchantCategory) -> AmountThresholds:
        return self.amounts[category]

    @classmethod
    def from_env(cls) -> "RiskConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        verdict = config.verdict
        if v := os.getenv("FRAUD_THRESHOLD"):
            verdict = replace(verdict, fraud=float(v))
        if v := os.getenv("FRAUD_CRITICAL_THRESHOLD"):
            verdict = replace(verdict, critical=float(v))
        if v := os.getenv("FRAUD_HIGH_THRESHOLD"):
            verdict = replace(verdict, high=float(v))
        if v := os.getenv("FRAUD_MEDIUM_THRESHOLD"):
            verdict = replace(verdict, medium=float(v))

        weights = config.weights
        if v := os.getenv("FRAUD_WEIGHTS"):
            # Comma separated: merchant,amount,card,temporal
            merchant, amount, card, temporal = (float(p) for p in v.split(","))
            weights = ScoringWeights(
                merchant=merchant, amount=amount, card=card, temporal=temporal
            )

        return replace(config, verdict=verdict, weights=weights)


# Module-level default instance
default_config = RiskConfig()
