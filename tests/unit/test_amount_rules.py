"""Unit tests for amount-based risk."""

import pytest

from src.domains.fraud.config import AmountThresholds, RiskConfig
from src.domains.fraud.models import MerchantCategory
from src.domains.fraud.rules.amount import amount_risk

CONFIG = RiskConfig()
RETAIL = CONFIG.amount_thresholds(MerchantCategory.ONLINE_RETAIL)
EPS = 1e-9


class TestAmountRisk:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (0.01, 0.2),
            (100.0, 0.2),
            (150.0, 0.325),
            (300.0, 0.4),
            (500.0, 0.5),
            (750.0, 0.65),
            (1000.0, 0.8),
            (1100.0, 0.85),
            (5000.0, 1.0),
        ],
    )
    def test_online_retail_curve(self, amount, expected):
        assert amount_risk(amount, RETAIL) == pytest.approx(expected)

    def test_excess_contribution_capped(self):
        assert amount_risk(1_000_000.0, RETAIL) == pytest.approx(1.0)

    @pytest.mark.parametrize("category", list(MerchantCategory))
    def test_bounded_for_every_category(self, category):
        thresholds = CONFIG.amount_thresholds(category)
        for amount in (0.5, thresholds.low, thresholds.medium, thresholds.high, 1e7):
            assert 0.2 <= amount_risk(amount, thresholds) <= 1.0

    @pytest.mark.parametrize("category", list(MerchantCategory))
    def test_continuous_at_medium_and_high(self, category):
        thresholds = CONFIG.amount_thresholds(category)
        for breakpoint in (thresholds.medium, thresholds.high):
            below = amount_risk(breakpoint, thresholds)
            above = amount_risk(breakpoint + EPS, thresholds)
            assert above == pytest.approx(below, abs=1e-6)

    def test_step_above_low_breakpoint(self):
        # The flat floor ends at 0.2 and the next segment starts at 0.3.
        assert amount_risk(RETAIL.low, RETAIL) == pytest.approx(0.2)
        assert amount_risk(RETAIL.low + EPS, RETAIL) == pytest.approx(0.3, abs=1e-6)

    def test_monotonic_non_decreasing(self):
        amounts = [10.0 * i for i in range(1, 400)]
        risks = [amount_risk(a, RETAIL) for a in amounts]
        assert risks == sorted(risks)

    def test_uses_category_thresholds(self):
        gambling = CONFIG.amount_thresholds(MerchantCategory.GAMBLING)
        travel = CONFIG.amount_thresholds(MerchantCategory.TRAVEL)
        assert amount_risk(600.0, gambling) > amount_risk(600.0, travel)

    def test_custom_thresholds(self):
        thresholds = AmountThresholds(low=10, medium=20, high=40)
        assert amount_risk(15.0, thresholds) == pytest.approx(0.4)
        assert amount_risk(30.0, thresholds) == pytest.approx(0.65)
