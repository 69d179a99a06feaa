"""Tests for transaction input validation."""

import pytest
from pydantic import ValidationError

from src.domains.fraud.models import (
    FraudCheckRequest,
    Transaction,
    clean_card_number,
    mask_card_number,
)


class TestTransaction:
    def test_valid_transaction(self):
        tx = Transaction(amount=150, merchant_name="Amazon Shop", card_number="4532015112830366")
        assert tx.amount == 150.0
        assert tx.masked_card_number == "************0366"

    def test_numeric_string_amount_coerced(self):
        tx = Transaction(amount="99.50", merchant_name="Shop", card_number="4532015112830366")
        assert tx.amount == 99.5

    @pytest.mark.parametrize("amount", [0, -10, float("inf"), float("nan"), "abc"])
    def test_rejects_bad_amounts(self, amount):
        with pytest.raises(ValidationError):
            Transaction(amount=amount, merchant_name="Shop", card_number="4532015112830366")

    @pytest.mark.parametrize("card", ["", "123456789012", "12345678901234567890", "abcd"])
    def test_rejects_bad_card_lengths(self, card):
        with pytest.raises(ValidationError, match="Invalid card number format"):
            Transaction(amount=10, merchant_name="Shop", card_number=card)

    @pytest.mark.parametrize(
        "card",
        [
            "\u0664\u0665\u0663\u0662\u0660\u0661\u0665\u0661\u0661\u0662\u0668\u0663\u0660\u0663\u0666\u0666",
            "\uff14\uff15\uff13\uff12\uff10\uff11\uff15\uff11\uff11\uff12\uff18\uff13\uff10\uff13\uff16\uff16",
        ],
        ids=["arabic-indic", "fullwidth"],
    )
    def test_rejects_non_ascii_digits(self, card):
        with pytest.raises(ValidationError, match="Invalid card number format"):
            Transaction(amount=10, merchant_name="Shop", card_number=card)

    def test_accepts_separated_card(self):
        tx = Transaction(amount=10, merchant_name="Shop", card_number="4532-0151-1283-0366")
        assert tx.card_number == "4532-0151-1283-0366"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_blank_merchant(self, name):
        with pytest.raises(ValidationError):
            Transaction(amount=10, merchant_name=name, card_number="4532015112830366")

    def test_is_immutable(self):
        tx = Transaction(amount=10, merchant_name="Shop", card_number="4532015112830366")
        with pytest.raises(ValidationError):
            tx.amount = 20


class TestHelpers:
    def test_clean_drops_non_ascii_digits(self):
        assert clean_card_number("4532\u0660\uff10") == "4532"

    def test_clean_card_number(self):
        assert clean_card_number("4532 0151-1283.0366") == "4532015112830366"

    def test_mask_short_input(self):
        assert mask_card_number("12") == "12"


class TestFraudCheckRequest:
    def test_requires_user_id(self):
        with pytest.raises(ValidationError):
            FraudCheckRequest(amount=10, merchant_name="Shop", card_number="4532015112830366")

    def test_to_transaction_drops_user(self):
        request = FraudCheckRequest(
            user_id="user-1", amount=10, merchant_name="Shop", card_number="4532015112830366"
        )
        tx = request.to_transaction()
        assert type(tx) is Transaction
        assert tx.amount == 10
