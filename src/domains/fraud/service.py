"""Fraud check pipeline: validate -> score -> persist."""

import uuid
from datetime import datetime

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.models import TransactionRecord

from .models import FraudCheckRequest, FraudCheckResponse, TransactionSummary
from .scorer import RiskScorer

logger = structlog.get_logger()


class FraudCheckService:
    """Scores checked transactions and keeps a per-user history of verdicts."""

    def __init__(self, scorer: RiskScorer) -> None:
        self._scorer = scorer

    async def check(
        self,
        request: FraudCheckRequest,
        session: AsyncSession,
        evaluated_at: datetime | None = None,
    ) -> FraudCheckResponse:
        """Score a transaction, persist the verdict and return it."""
        transaction = request.to_transaction()
        verdict = self._scorer.evaluate(transaction, evaluated_at)

        transaction_id = str(uuid.uuid4())
        record = TransactionRecord(
            transaction_id=transaction_id,
            user_id=request.user_id,
            amount=transaction.amount,
            merchant_name=transaction.merchant_name,
            card_number_masked=transaction.masked_card_number,
            merchant_category=verdict.merchant_category.value,
            is_fraudulent=verdict.is_fraudulent,
            risk_level=verdict.risk_level.value,
            risk_score=verdict.risk_score,
            confidence=verdict.confidence,
            fraud_indicators=list(verdict.reasons),
            transaction_date=verdict.evaluated_at,
        )
        session.add(record)
        await session.commit()

        logger.info(
            "transaction_scored",
            transaction_id=transaction_id,
            user_id=request.user_id,
            card=transaction.masked_card_number,
            merchant_category=verdict.merchant_category.value,
            risk_score=verdict.risk_score,
            risk_level=verdict.risk_level.value,
            is_fraudulent=verdict.is_fraudulent,
            reason_count=len(verdict.reasons),
        )

        return FraudCheckResponse(
            transaction_id=transaction_id,
            **verdict.model_dump(),
        )

    async def list_transactions(
        self,
        user_id: str,
        session: AsyncSession,
        limit: int = 50,
        offset: int = 0,
    ) -> list[TransactionSummary]:
        """Return a user's checked transactions, newest first."""
        stmt = (
            select(TransactionRecord)
            .where(TransactionRecord.user_id == user_id)
            .order_by(TransactionRecord.transaction_date.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        records = result.scalars().all()
        return [TransactionSummary.model_validate(r) for r in records]
