"""Fraud detection domain."""

from .card_features import CardFeatureExtractor
from .config import ConfigurationError, RiskConfig, default_config
from .models import (
    CardFeatures,
    FraudCheckRequest,
    FraudCheckResponse,
    MerchantCategory,
    RiskFactor,
    RiskLevel,
    Transaction,
    Verdict,
)
from .rules import ALL_DIMENSIONS
from .scorer import RiskScorer, create_scorer
from .service import FraudCheckService

__all__ = [
    "ALL_DIMENSIONS",
    "CardFeatureExtractor",
    "CardFeatures",
    "ConfigurationError",
    "FraudCheckRequest",
    "FraudCheckResponse",
    "FraudCheckService",
    "MerchantCategory",
    "RiskConfig",
    "RiskFactor",
    "RiskLevel",
    "RiskScorer",
    "Transaction",
    "Verdict",
    "create_scorer",
    "default_config",
]
