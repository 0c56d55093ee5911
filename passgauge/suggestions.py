"""
passgauge.suggestions

Turn rule results into the ordered list of suggestions shown to the user.
The order and wording are fixed; callers render them as-is.
"""

from typing import Dict, List

EMPTY_INPUT_LABEL = "No password entered"
EMPTY_INPUT_SUGGESTION = "Enter a password to see suggestions"
STRONG_AFFIRMATION = "Great job! Your password is strong!"

USE_MIN_LENGTH = "Use at least 8 characters (12+ recommended)"
USE_LONGER = "Consider using 12 or more characters for better security"
ADD_UPPERCASE = "Add uppercase letters (A-Z)"
ADD_LOWERCASE = "Add lowercase letters (a-z)"
ADD_NUMBERS = "Include numbers (0-9)"
ADD_SPECIAL = "Add special characters (!@#$%^&*)"
AVOID_COMMON = "This appears to be a common password. Try something more unique"
AVOID_REPEATS = 'Avoid repeating characters (like "aaa" or "111")'
AVOID_SEQUENCES = 'Avoid sequential characters (like "abc" or "123")'
ADD_VARIETY = "Use a wider variety of characters"


def build_suggestions(
    password: str,
    rules: Dict[str, bool],
    has_repeats: bool,
    has_sequence: bool,
    good_variety: bool,
) -> List[str]:
    """
    One suggestion per unmet condition, in a fixed order.
    Never empty: a password that meets everything gets STRONG_AFFIRMATION.
    """
    suggestions: List[str] = []

    if not rules["length"]:
        suggestions.append(USE_MIN_LENGTH)
    elif len(password) < 12:
        suggestions.append(USE_LONGER)

    if not rules["uppercase"]:
        suggestions.append(ADD_UPPERCASE)
    if not rules["lowercase"]:
        suggestions.append(ADD_LOWERCASE)
    if not rules["number"]:
        suggestions.append(ADD_NUMBERS)
    if not rules["special"]:
        suggestions.append(ADD_SPECIAL)
    if not rules["common"]:
        suggestions.append(AVOID_COMMON)

    if has_repeats:
        suggestions.append(AVOID_REPEATS)
    if has_sequence:
        suggestions.append(AVOID_SEQUENCES)
    if not good_variety:
        suggestions.append(ADD_VARIETY)

    if not suggestions:
        suggestions.append(STRONG_AFFIRMATION)
    return suggestions
