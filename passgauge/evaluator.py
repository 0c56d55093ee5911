"""
passgauge.evaluator

Password strength analyzer:
- check_rules(password): the six base rules (length, uppercase, lowercase,
  number, special, common) as a name -> passed mapping
- detect patterns: common passwords, repeated characters, sequential runs,
  character variety
- analyze(password): returns an AnalysisReport with tier, score (0-100),
  per-rule results and ordered suggestions

analyze() never raises for string input and does not use randomness, so the
same password always gets the same report.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .charsets import (
    CharacterClass,
    COMMON_PASSWORDS,
    COMMON_SUBSTRING_MIN_LEN,
    SEQUENTIAL_RUNS,
    SYMBOLS,
)
from .score import StrengthTier, display_score, raw_score, tier_for_score
from .suggestions import EMPTY_INPUT_LABEL, EMPTY_INPUT_SUGGESTION, build_suggestions

RULE_NAMES = ("length", "uppercase", "lowercase", "number", "special", "common")

MIN_LENGTH = 8
VARIETY_RATIO = 0.7

_REPEAT_RE = re.compile(r"(.)\1{2,}")


@dataclass(frozen=True)
class AnalysisReport:
    tier: StrengthTier
    score: int
    raw_score: int
    rules_passed: Dict[str, bool]
    suggestions: List[str] = field(default_factory=list)
    empty: bool = False

    @property
    def label(self) -> str:
        return EMPTY_INPUT_LABEL if self.empty else self.tier.label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier": self.tier.name,
            "label": self.label,
            "score": self.score,
            "raw_score": self.raw_score,
            "rules_passed": dict(self.rules_passed),
            "suggestions": list(self.suggestions),
            "empty": self.empty,
        }


def _contains_any(password: str, alphabet: str) -> bool:
    return any(c in alphabet for c in password)


def is_common_password(password: str) -> bool:
    """
    Case-insensitive match against COMMON_PASSWORDS: an exact match, or the
    entry appearing inside the password when the entry is longer than 4 chars.
    """
    lower = password.lower()
    for common in COMMON_PASSWORDS:
        if lower == common:
            return True
        if len(common) >= COMMON_SUBSTRING_MIN_LEN and common in lower:
            return True
    return False


def has_repeating_chars(password: str) -> bool:
    """True for any character repeated 3+ times in a row ('aaa', '111')."""
    return _REPEAT_RE.search(password) is not None


def has_sequential_chars(password: str) -> bool:
    """True if an ascending 3-char run like 'abc' or '123' appears (any case)."""
    lower = password.lower()
    return any(seq in lower for seq in SEQUENTIAL_RUNS)


def has_good_variety(password: str) -> bool:
    return len(set(password)) >= len(password) * VARIETY_RATIO


def check_rules(password: str) -> Dict[str, bool]:
    return {
        "length": len(password) >= MIN_LENGTH,
        "uppercase": _contains_any(password, CharacterClass.UPPERCASE.alphabet),
        "lowercase": _contains_any(password, CharacterClass.LOWERCASE.alphabet),
        "number": _contains_any(password, CharacterClass.DIGIT.alphabet),
        "special": _contains_any(password, SYMBOLS),
        "common": not is_common_password(password),
    }


def empty_report() -> AnalysisReport:
    return AnalysisReport(
        tier=StrengthTier.WEAK,
        score=0,
        raw_score=0,
        rules_passed={name: False for name in RULE_NAMES},
        suggestions=[EMPTY_INPUT_SUGGESTION],
        empty=True,
    )


def analyze(password: str) -> AnalysisReport:
    """
    Score a password and explain the result.

    The empty string is the "no input" case: score 0, tier WEAK, empty=True
    and no rule checks.
    """
    if not password:
        return empty_report()

    rules = check_rules(password)
    repeats = has_repeating_chars(password)
    sequence = has_sequential_chars(password)
    variety = has_good_variety(password)

    raw = raw_score(len(password), rules, repeats, sequence, variety)
    return AnalysisReport(
        tier=tier_for_score(raw),
        score=display_score(raw),
        raw_score=raw,
        rules_passed=rules,
        suggestions=build_suggestions(password, rules, repeats, sequence, variety),
    )
