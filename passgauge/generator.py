"""
passgauge.generator
Policy-driven password generator.

The random source is passed in by the caller. Production code uses
SystemRandomSource (Python's secrets / OS CSPRNG); tests can pass any object
with a next_uint32() method.
"""

import logging
from dataclasses import dataclass
from secrets import SystemRandom
from typing import FrozenSet, Iterable, List, Optional, Protocol, Set

from .charsets import CharacterClass

logger = logging.getLogger(__name__)

_UINT32_BITS = 32


class InvalidPolicy(ValueError):
    """The generation policy cannot produce a password."""


class RandomSource(Protocol):
    def next_uint32(self) -> int:
        ...


class SystemRandomSource:
    """Uniform unsigned 32-bit integers from the operating system CSPRNG."""

    def __init__(self) -> None:
        self._rand = SystemRandom()

    def next_uint32(self) -> int:
        return self._rand.getrandbits(_UINT32_BITS)


_sysrand = SystemRandomSource()


@dataclass(frozen=True)
class GenerationPolicy:
    length: int = 16
    classes: FrozenSet[CharacterClass] = frozenset(CharacterClass)
    exclude_similar: bool = False

    @classmethod
    def of(cls, length: int, classes: Iterable[CharacterClass], exclude_similar: bool = False) -> "GenerationPolicy":
        return cls(length=length, classes=frozenset(classes), exclude_similar=exclude_similar)

    def ordered_classes(self) -> List[CharacterClass]:
        """Selected classes in the fixed order: upper, lower, digit, symbol."""
        return [c for c in CharacterClass if c in self.classes]

    def effective_alphabet(self) -> str:
        return "".join(c.filtered(self.exclude_similar) for c in self.ordered_classes())

    def validate(self) -> None:
        if not isinstance(self.length, int) or self.length < 1:
            raise InvalidPolicy("length must be > 0")
        if not self.classes:
            raise InvalidPolicy("At least one character set must be enabled")
        if not self.effective_alphabet():
            raise InvalidPolicy("No characters left after excluding similar characters")


def _pick(alphabet: str, rng: RandomSource) -> str:
    # modulo reduction: the small bias is accepted for this use
    return alphabet[rng.next_uint32() % len(alphabet)]


def _shuffle(chars: List[str], rng: RandomSource) -> None:
    """In-place Fisher-Yates shuffle."""
    for i in range(len(chars) - 1, 0, -1):
        j = rng.next_uint32() % (i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def _last_of_class(chars: List[str], policy: GenerationPolicy) -> Set[int]:
    """Positions holding the only character of some selected class."""
    protected = set()
    for char_class in policy.ordered_classes():
        alphabet = char_class.filtered(policy.exclude_similar)
        hits = [i for i, c in enumerate(chars) if c in alphabet]
        if len(hits) == 1:
            protected.add(hits[0])
    return protected


def ensure_classes(chars: List[str], policy: GenerationPolicy, rng: RandomSource) -> None:
    """
    Make sure every selected class appears at least once.

    Presence is judged on the characters as drawn. Each missing class
    overwrites the next position from the front (0, 1, ...), stepping over a
    position whose character is the last one of its class. Positions wrap
    when there are fewer characters than classes, so a later class can
    replace an earlier guarantee.
    """
    drawn = "".join(chars)
    replaced = 0
    position = 0
    for char_class in policy.ordered_classes():
        alphabet = char_class.filtered(policy.exclude_similar)
        if not alphabet or any(c in alphabet for c in drawn):
            continue
        protected = _last_of_class(chars, policy)
        while position < len(chars) and position in protected:
            position += 1
        if position >= len(chars):
            logger.debug("length %d too short for %d classes; overwriting position %d",
                         len(chars), len(policy.classes), position % len(chars))
        chars[position % len(chars)] = _pick(alphabet, rng)
        position += 1
        replaced += 1
    if replaced:
        logger.debug("guarantee pass replaced %d character(s)", replaced)


def generate(policy: GenerationPolicy, rng: Optional[RandomSource] = None) -> str:
    """
    Generate a password that satisfies the policy.
    Raises InvalidPolicy if the policy cannot produce a password.
    """
    policy.validate()
    if rng is None:
        rng = _sysrand
    alphabet = policy.effective_alphabet()
    logger.debug("generating length=%d classes=%s exclude_similar=%s alphabet_size=%d",
                 policy.length, [c.name for c in policy.ordered_classes()],
                 policy.exclude_similar, len(alphabet))

    password_chars = [_pick(alphabet, rng) for _ in range(policy.length)]
    ensure_classes(password_chars, policy, rng)
    _shuffle(password_chars, rng)
    return "".join(password_chars)
