"""Heuristic transaction risk scorer with weighted dimension aggregation."""

import math
import statistics
from datetime import datetime

import structlog

from .card_features import CardFeatureExtractor
from .config import RiskConfig, VerdictThresholds, default_config
from .models import CardFeatures, RiskAnalysis, RiskFactor, RiskLevel, Transaction, Verdict
from .rules import ALL_DIMENSIONS, DimensionContext, RiskDimension, classify_merchant, day_of_week

logger = structlog.get_logger()


def round_score(value: float) -> float:
    """Round to two decimals, halves up, after scaling by 100."""
    return math.floor(value * 100 + 0.5) / 100


def classify_risk_level(score: float, thresholds: VerdictThresholds) -> RiskLevel:
    if score >= thresholds.critical:
        return RiskLevel.CRITICAL
    if score >= thresholds.high:
        return RiskLevel.HIGH
    if score >= thresholds.medium:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def is_fraud_score(score: float, thresholds: VerdictThresholds) -> bool:
    return score >= thresholds.fraud


def compute_confidence(factors: list[RiskFactor], floor: float = 0.5) -> float:
    """One minus the population std-dev of the unweighted scores, floored.

    Dimensions that agree give a confidence near 1; disagreement bottoms out
    at ``floor``.
    """
    spread = statistics.pstdev(f.score for f in factors)
    return max(floor, 1 - spread)


def combine(factors: list[RiskFactor]) -> float:
    return sum(f.score * f.weight for f in factors)


class RiskScorer:
    """Scores a transaction across the merchant, amount, card and temporal dimensions.

    Scoring:
    1. Classify the merchant and extract card features
    2. Score every dimension against one shared evaluation timestamp
    3. Risk score = weighted sum of dimension scores
    4. Fraud flag and risk level from the configured thresholds
    5. Confidence = f(agreement between dimensions)

    The scorer holds only immutable config, so one instance is safe to share
    between concurrent callers.
    """

    def __init__(self, config: RiskConfig | None = None) -> None:
        self._config = config or default_config
        self._dimensions: list[RiskDimension] = list(ALL_DIMENSIONS)
        self._card_extractor = CardFeatureExtractor(self._config.card)

    @property
    def config(self) -> RiskConfig:
        return self._config

    def evaluate(self, transaction: Transaction, evaluated_at: datetime | None = None) -> Verdict:
        """Evaluate a validated transaction.

        Without ``evaluated_at`` the clock is read once, in the host's local
        timezone, and the night and weekend gates use that local hour and day.
        """
        cfg = self._config
        evaluated_at = evaluated_at or datetime.now().astimezone()

        category = classify_merchant(transaction.merchant_name)
        card_features = self._card_extractor.extract(transaction.card_number)
        context = DimensionContext(
            transaction=transaction,
            category=category,
            card_features=card_features,
            hour=evaluated_at.hour,
            day_of_week=day_of_week(evaluated_at),
        )

        factors = [dimension.factor(context, cfg) for dimension in self._dimensions]
        scores = {f.name: f.score for f in factors}

        risk_score = combine(factors)
        confidence = compute_confidence(factors, cfg.verdict.confidence_floor)
        risk_level = classify_risk_level(risk_score, cfg.verdict)
        is_fraudulent = is_fraud_score(risk_score, cfg.verdict)
        reasons = self._reasons(context, card_features, scores)

        logger.debug(
            "transaction_evaluated",
            merchant_category=category.value,
            card=transaction.masked_card_number,
            risk_score=risk_score,
            risk_level=risk_level.value,
            dimension_scores=scores,
        )

        return Verdict(
            is_fraudulent=is_fraudulent,
            risk_level=risk_level,
            risk_score=round_score(risk_score),
            confidence=round_score(confidence),
            reasons=reasons,
            analysis=RiskAnalysis(
                merchant_risk=round_score(scores["merchant"]),
                amount_risk=round_score(scores["amount"]),
                card_risk=round_score(scores["card"]),
                temporal_risk=round_score(scores["temporal"]),
            ),
            merchant_category=category,
            evaluated_at=evaluated_at,
        )

    def _reasons(
        self,
        context: DimensionContext,
        card_features: CardFeatures,
        scores: dict[str, float],
    ) -> list[str]:
        limits = self._config.reasons
        reasons: list[str] = []
        if scores["merchant"] > limits.merchant:
            reasons.append(f"High-risk merchant category: {context.category.value}")
        if scores["amount"] > limits.amount:
            reasons.append("Unusual transaction amount for this merchant type")
        if card_features.checksum_failed == 1:
            reasons.append("Invalid card number checksum")
        if card_features.repetition_score > limits.repetition:
            reasons.append("Suspicious digit patterns in card number")
        if scores["temporal"] > limits.temporal:
            reasons.append("Unusual transaction time")
        return reasons


def create_scorer(config: RiskConfig | None = None) -> RiskScorer:
    """Build an independent scorer; pass it explicitly to whatever calls it."""
    return RiskScorer(config=config)
