"""Pydantic models for the fraud domain."""

import math
import re
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NON_DIGIT = re.compile(r"[^0-9]")

CARD_MIN_DIGITS = 13
CARD_MAX_DIGITS = 19


class MerchantCategory(StrEnum):
    ONLINE_RETAIL = "online_retail"
    GAMBLING = "gambling"
    TRAVEL = "travel"
    ELECTRONICS = "electronics"
    UNKNOWN = "unknown"


class RiskLevel(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


def clean_card_number(card_number: str) -> str:
    """Strip every non-digit character from a raw card number."""
    return _NON_DIGIT.sub("", card_number)


def mask_card_number(card_number: str) -> str:
    digits = clean_card_number(card_number)
    return "*" * max(len(digits) - 4, 0) + digits[-4:]


class Transaction(BaseModel):
    """A proposed card payment, validated once at the service boundary."""

    model_config = ConfigDict(frozen=True)

    amount: float
    merchant_name: str = Field(min_length=1)
    card_number: str

    @field_validator("amount")
    @classmethod
    def _amount_positive(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError("amount must be a positive finite number")
        return value

    @field_validator("merchant_name")
    @classmethod
    def _merchant_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("merchant_name must not be blank")
        return value

    @field_validator("card_number")
    @classmethod
    def _card_digit_count(cls, value: str) -> str:
        digits = clean_card_number(value)
        if not CARD_MIN_DIGITS <= len(digits) <= CARD_MAX_DIGITS:
            raise ValueError(
                f"Invalid card number format: expected {CARD_MIN_DIGITS}-{CARD_MAX_DIGITS} digits"
            )
        return value

    @property
    def masked_card_number(self) -> str:
        return mask_card_number(self.card_number)


class CardFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    length_score: float
    checksum_failed: int = Field(ge=0, le=1)
    repetition_score: float = Field(ge=0.0, le=1.0)


class RiskFactor(BaseModel):
    name: str
    score: float = Field(ge=0.0, le=1.0)
    weight: float


class RiskAnalysis(BaseModel):
    merchant_risk: float
    amount_risk: float
    card_risk: float
    temporal_risk: float


class Verdict(BaseModel):
    is_fraudulent: bool
    risk_level: RiskLevel
    risk_score: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)
    reasons: list[str] = []
    analysis: RiskAnalysis
    merchant_category: MerchantCategory
    evaluated_at: datetime


class FraudCheckRequest(Transaction):
    user_id: str = Field(min_length=1)

    def to_transaction(self) -> Transaction:
        return Transaction(
            amount=self.amount,
            merchant_name=self.merchant_name,
            card_number=self.card_number,
        )


class FraudCheckResponse(BaseModel):
    transaction_id: str
    is_fraudulent: bool
    risk_level: RiskLevel
    risk_score: float
    confidence: float
    reasons: list[str] = []
    analysis: RiskAnalysis
    merchant_category: MerchantCategory
    evaluated_at: datetime


class TransactionSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    transaction_id: str
    user_id: str
    amount: float
    merchant_name: str
    card_number_masked: str
    merchant_category: str
    is_fraudulent: bool
    risk_level: RiskLevel
    risk_score: float
    confidence: float
    fraud_indicators: list[str] = []
    transaction_date: datetime
