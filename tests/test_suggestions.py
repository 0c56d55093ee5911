from passgauge.evaluator import check_rules
from passgauge.suggestions import (
    ADD_LOWERCASE,
    ADD_NUMBERS,
    ADD_SPECIAL,
    ADD_UPPERCASE,
    ADD_VARIETY,
    AVOID_COMMON,
    AVOID_REPEATS,
    AVOID_SEQUENCES,
    STRONG_AFFIRMATION,
    USE_LONGER,
    USE_MIN_LENGTH,
    build_suggestions,
)

def test_every_condition_in_fixed_order():
    rules = {name: False for name in ("length", "uppercase", "lowercase", "number", "special", "common")}
    s = build_suggestions("x", rules, has_repeats=True, has_sequence=True, good_variety=False)
    assert s == [
        USE_MIN_LENGTH,
        ADD_UPPERCASE,
        ADD_LOWERCASE,
        ADD_NUMBERS,
        ADD_SPECIAL,
        AVOID_COMMON,
        AVOID_REPEATS,
        AVOID_SEQUENCES,
        ADD_VARIETY,
    ]

def test_medium_length_gets_longer_hint():
    pw = "Ab1!efgh"
    s = build_suggestions(pw, check_rules(pw), False, False, True)
    assert s == [USE_LONGER]

def test_no_issues_gives_affirmation():
    pw = "Ab1!efghjkmn"
    s = build_suggestions(pw, check_rules(pw), False, False, True)
    assert s == [STRONG_AFFIRMATION]

def test_exact_wording():
    assert USE_MIN_LENGTH == "Use at least 8 characters (12+ recommended)"
    assert AVOID_COMMON == "This appears to be a common password. Try something more unique"
    assert AVOID_REPEATS == 'Avoid repeating characters (like "aaa" or "111")'
