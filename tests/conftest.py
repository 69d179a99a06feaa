"""Shared test fixtures for CardCheck tests."""

import os
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from src.domains.fraud.config import RiskConfig  # noqa: E402
from src.domains.fraud.models import Transaction  # noqa: E402
from src.domains.fraud.scorer import RiskScorer  # noqa: E402

# Thursday 2026-01-15, mid-afternoon: neither night nor weekend
WEEKDAY_AFTERNOON = datetime(2026, 1, 15, 14, 0, 0, tzinfo=UTC)
# Saturday 2026-01-17, 02:00: night and weekend
SATURDAY_NIGHT = datetime(2026, 1, 17, 2, 0, 0, tzinfo=UTC)

VALID_CARD = "4532015112830366"
INVALID_CARD = "1234567890123"


def override_get_session(session):
    """Build a get_session replacement that yields the given mock session."""

    async def _get_session():
        yield session

    return _get_session


def make_transaction(**kwargs) -> Transaction:
    defaults = {
        "amount": 150.0,
        "merchant_name": "Amazon Shop",
        "card_number": VALID_CARD,
    }
    defaults.update(kwargs)
    return Transaction(**defaults)


@pytest.fixture
def risk_config() -> RiskConfig:
    return RiskConfig()


@pytest.fixture
def scorer(risk_config) -> RiskScorer:
    return RiskScorer(config=risk_config)


@pytest.fixture
def mock_db_session():
    session = AsyncMock()
    session.add = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()

    mock_result = MagicMock()
    mock_result.scalars.return_value = MagicMock(all=MagicMock(return_value=[]))
    session.execute = AsyncMock(return_value=mock_result)
    return session
