"""
Password strength scorer.

Scores password text on five criteria and maps the score to a tier.
Runs on every password keystroke, independent of touched state.
"""

from dataclasses import dataclass
from enum import Enum

from .validators import MIN_PASSWORD_LENGTH, has_digit, has_lowercase, has_special, has_uppercase

MAX_SCORE = 5


class StrengthTier(str, Enum):
    """Strength tier shown by the strength bar."""

    NONE = "none"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


_LABELS = {
    StrengthTier.NONE: "Enter a password",
    StrengthTier.WEAK: "Weak password",
    StrengthTier.MEDIUM: "Medium strength",
    StrengthTier.STRONG: "Strong password",
}


@dataclass(frozen=True)
class PasswordStrength:
    score: int
    tier: StrengthTier

    @property
    def label(self) -> str:
        return _LABELS[self.tier]


EMPTY_STRENGTH = PasswordStrength(score=0, tier=StrengthTier.NONE)


def score_password(password: str) -> PasswordStrength:
    """
    Score a password from 0 to 5.

    One point each for: length >= 8, lowercase, uppercase, digit, symbol.
    Tiers: score >= 4 strong, score >= 2 medium, any other non-empty
    password weak, empty password none.
    """
    score = sum(
        [
            len(password) >= MIN_PASSWORD_LENGTH,
            has_lowercase(password),
            has_uppercase(password),
            has_digit(password),
            has_special(password),
        ]
    )

    if score >= 4:
        tier = StrengthTier.STRONG
    elif score >= 2:
        tier = StrengthTier.MEDIUM
    elif password:
        tier = StrengthTier.WEAK
    else:
        tier = StrengthTier.NONE
    return PasswordStrength(score=score, tier=tier)
