"""Derive pattern features from a card number."""

from .config import CardRules
from .models import CardFeatures, clean_card_number


def length_score(digits: str, rules: CardRules) -> float:
    """Position of the digit count between the min and max card lengths.

    Not clamped: lengths outside the accepted band fall below 0 or above 1.
    """
    return (len(digits) - rules.min_length) / (rules.max_length - rules.min_length)


def passes_luhn(digits: str) -> bool:
    """Validate using the Luhn algorithm. An empty string is vacuously valid."""
    checksum = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        checksum += digit
    return checksum % 10 == 0


def repetition_score(digits: str, divisor: int = 5) -> float:
    """Count digits beyond the second in each run of identical digits."""
    repetitions = 0
    streak = 0
    last_digit = ""
    for digit in digits:
        if digit == last_digit:
            streak += 1
            if streak > 2:
                repetitions += 1
        else:
            streak = 1
        last_digit = digit
    return min(repetitions / divisor, 1.0)


class CardFeatureExtractor:
    """Computes CardFeatures for a raw card number string."""

    def __init__(self, rules: CardRules | None = None) -> None:
        self._rules = rules or CardRules()

    def extract(self, card_number: str) -> CardFeatures:
        digits = clean_card_number(card_number)
        return CardFeatures(
            length_score=length_score(digits, self._rules),
            checksum_failed=0 if passes_luhn(digits) else 1,
            repetition_score=repetition_score(digits, self._rules.repetition_divisor),
        )
