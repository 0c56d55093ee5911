"""
passgauge.charsets

Reference data shared by the evaluator and the generator:
- CharacterClass and its fixed alphabets
- the look-alike characters the generator can leave out
- the built-in list of common passwords
- every 3-character ascending run of letters and digits
"""

import enum
import string
from typing import Tuple

SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# visually ambiguous characters (exclude-similar option)
SIMILAR_CHARS = frozenset("iIl1oO0")


class CharacterClass(enum.Enum):
    """Character classes in the fixed order the generator walks them."""

    UPPERCASE = string.ascii_uppercase
    LOWERCASE = string.ascii_lowercase
    DIGIT = string.digits
    SYMBOL = SYMBOLS

    @property
    def alphabet(self) -> str:
        return self.value

    def filtered(self, exclude_similar: bool = False) -> str:
        if not exclude_similar:
            return self.value
        return "".join(c for c in self.value if c not in SIMILAR_CHARS)


# small built-in list (offline), matched case-insensitively
COMMON_PASSWORDS: Tuple[str, ...] = tuple(dict.fromkeys([
    "password", "123456", "123456789", "12345678", "12345", "1234567", "1234567890",
    "password123", "password1", "password!", "qwerty", "abc123", "monkey", "1234567890",
    "dragon", "123123", "baseball", "iloveyou", "trustno1", "1234567", "welcome",
    "login", "admin", "princess", "master", "sunshine", "ashley", "bailey",
    "passw0rd", "shadow", "123456", "password", "qwerty123", "michael", "football",
]))

# entries this short only count on an exact match
COMMON_SUBSTRING_MIN_LEN = 5


def _trigrams(seq: str) -> Tuple[str, ...]:
    return tuple(seq[i:i + 3] for i in range(len(seq) - 2))


# "890" wraps the digit row, as on a keyboard
SEQUENTIAL_RUNS: Tuple[str, ...] = (
    _trigrams(string.ascii_lowercase) + _trigrams(string.digits) + ("890",)
)
