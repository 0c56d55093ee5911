"""
passgauge.score

Additive scoring of rule results into a 0-100 score and a strength tier.
"""

import enum
import functools
from typing import Dict

MAX_DISPLAY_SCORE = 100


@functools.total_ordering
class StrengthTier(enum.Enum):
    WEAK = (0, "Weak")
    MEDIUM = (1, "Medium")
    STRONG = (2, "Strong")
    VERY_STRONG = (3, "Very Strong")

    @property
    def rank(self) -> int:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    def __lt__(self, other):
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank < other.rank


def tier_for_score(raw_score: int) -> StrengthTier:
    """Map a raw (uncapped) score to its tier."""
    if raw_score >= 80:
        return StrengthTier.VERY_STRONG
    elif raw_score >= 60:
        return StrengthTier.STRONG
    elif raw_score >= 40:
        return StrengthTier.MEDIUM
    return StrengthTier.WEAK


def raw_score(
    length: int,
    rules: Dict[str, bool],
    has_repeats: bool,
    has_sequence: bool,
    good_variety: bool,
) -> int:
    """
    Sum the points for a password of the given length.
    Can reach 110; callers cap the displayed value with display_score().
    """
    score = 0

    # --- Base rules ---
    score += 10 * sum(1 for passed in rules.values() if passed)

    # --- Length tiers (stack) ---
    if length >= 12:
        score += 15
    if length >= 16:
        score += 15
    if length >= 20:
        score += 10

    # --- Patterns ---
    if not has_repeats:
        score += 10
    if not has_sequence:
        score += 10
    if good_variety:
        score += 10

    return score


def display_score(raw: int) -> int:
    return max(0, min(MAX_DISPLAY_SCORE, raw))
