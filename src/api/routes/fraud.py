"""Fraud check endpoints backed by the heuristic risk scorer."""

from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.database import get_session
from src.domains.fraud.config import RiskConfig
from src.domains.fraud.models import (
    FraudCheckRequest,
    FraudCheckResponse,
    MerchantCategory,
    TransactionSummary,
)
from src.domains.fraud.rules import ALL_DIMENSIONS
from src.domains.fraud.scorer import RiskScorer, create_scorer
from src.domains.fraud.service import FraudCheckService

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/fraud", tags=["fraud"])


@lru_cache
def get_risk_config() -> RiskConfig:
    """Rule tables for this process, loaded once with FRAUD_ env overrides."""
    return RiskConfig.from_env()


def get_scorer(config: RiskConfig = Depends(get_risk_config)) -> RiskScorer:  # noqa: B008
    return create_scorer(config)


def get_fraud_service(scorer: RiskScorer = Depends(get_scorer)) -> FraudCheckService:  # noqa: B008
    return FraudCheckService(scorer)


@router.post("/check", response_model=FraudCheckResponse)
async def check_transaction(
    request: FraudCheckRequest,
    service: FraudCheckService = Depends(get_fraud_service),  # noqa: B008
    session: AsyncSession = Depends(get_session),  # noqa: B008
) -> FraudCheckResponse:
    return await service.check(request, session)


@router.get("/transactions/{user_id}", response_model=list[TransactionSummary])
async def list_transactions(
    user_id: str,
    service: FraudCheckService = Depends(get_fraud_service),  # noqa: B008
    session: AsyncSession = Depends(get_session),  # noqa: B008
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> list[TransactionSummary]:
    return await service.list_transactions(user_id, session, limit=limit, offset=offset)


@router.get("/rules")
async def list_rules(config: RiskConfig = Depends(get_risk_config)) -> dict:  # noqa: B008
    """Return the active rule tables, dimension weights and verdict thresholds."""
    return {
        "dimensions": [d.name for d in ALL_DIMENSIONS],
        "weights": config.weights.as_dict(),
        "merchant_categories": {
            category.value: {
                "base_risk": config.merchant_profile(category).base_risk,
                "night_surcharge": config.merchant_profile(category).night_surcharge,
                "amount_thresholds": {
                    "low": config.amount_thresholds(category).low,
                    "medium": config.amount_thresholds(category).medium,
                    "high": config.amount_thresholds(category).high,
                },
            }
            for category in MerchantCategory
        },
        "time_windows": {
            "night_start": config.time.night_start,
            "night_end": config.time.night_end,
            "weekend_days": list(config.time.weekend_days),
        },
        "verdict_thresholds": {
            "fraud": config.verdict.fraud,
            "critical": config.verdict.critical,
            "high": config.verdict.high,
            "medium": config.verdict.medium,
            "confidence_floor": config.verdict.confidence_floor,
        },
    }
