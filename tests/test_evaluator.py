from passgauge import evaluator
from passgauge.evaluator import (
    RULE_NAMES,
    analyze,
    check_rules,
    has_good_variety,
    has_repeating_chars,
    has_sequential_chars,
    is_common_password,
)
from passgauge.score import StrengthTier, tier_for_score
from passgauge.suggestions import (
    ADD_NUMBERS,
    ADD_SPECIAL,
    ADD_UPPERCASE,
    ADD_VARIETY,
    AVOID_COMMON,
    AVOID_REPEATS,
    AVOID_SEQUENCES,
    EMPTY_INPUT_SUGGESTION,
    STRONG_AFFIRMATION,
    USE_LONGER,
)

def test_empty_password_is_no_input():
    report = analyze("")
    assert report.empty
    assert report.score == 0
    assert report.raw_score == 0
    assert report.tier is StrengthTier.WEAK
    assert report.label == "No password entered"
    assert report.suggestions == [EMPTY_INPUT_SUGGESTION]
    assert set(report.rules_passed) == set(RULE_NAMES)
    assert not any(report.rules_passed.values())

def test_common_password():
    report = analyze("password")
    assert is_common_password("password")
    assert report.rules_passed["common"] is False
    assert report.rules_passed["length"] is True
    # base: length + lowercase; no repeats, no sequence, good variety
    assert report.raw_score == 50
    assert report.tier is StrengthTier.MEDIUM
    assert report.suggestions == [USE_LONGER, ADD_UPPERCASE, ADD_NUMBERS, ADD_SPECIAL, AVOID_COMMON]

def test_long_mixed_password_is_very_strong():
    pw = "Tr0ub4dor&3xyz!9Q"
    report = analyze(pw)
    assert all(report.rules_passed.values())
    # "xyz" is a sequential run; everything else scores
    assert report.raw_score == 110
    assert report.score == 100
    assert report.tier is StrengthTier.VERY_STRONG
    assert report.suggestions == [AVOID_SEQUENCES]

def test_repeated_single_char():
    report = analyze("aaaaaaaa")
    assert report.rules_passed["length"] is True
    assert report.rules_passed["common"] is True
    assert has_repeating_chars("aaaaaaaa")
    assert not has_good_variety("aaaaaaaa")
    assert report.raw_score == 40
    assert AVOID_REPEATS in report.suggestions
    assert report.suggestions[-1] == ADD_VARIETY

def test_strong_password_gets_affirmation():
    report = analyze("Kx7#mQ2$vL9p")
    assert report.suggestions == [STRONG_AFFIRMATION]
    assert report.tier is StrengthTier.VERY_STRONG

def test_short_password_suggestion_order():
    report = analyze("ab1")
    assert report.suggestions[0] == "Use at least 8 characters (12+ recommended)"
    assert report.suggestions[1] == ADD_UPPERCASE
    assert report.suggestions[2] == ADD_SPECIAL

def test_common_matching_is_case_insensitive_substring():
    assert is_common_password("PASSWORD")
    assert is_common_password("MyPassWord2024")
    assert is_common_password("xxadminxx")
    assert not is_common_password("Correct-Horse")

def test_short_common_entries_need_exact_match(monkeypatch):
    monkeypatch.setattr(evaluator, "COMMON_PASSWORDS", ("abc", "abcde"))
    assert is_common_password("ABC")
    assert not is_common_password("xabcx")
    assert is_common_password("xabcdex")

def test_repeats_and_sequences():
    assert has_repeating_chars("ab111c")
    assert not has_repeating_chars("aabbcc")
    assert has_sequential_chars("xxABCxx")
    assert has_sequential_chars("pin890")
    assert not has_sequential_chars("cba321")

def test_variety_threshold():
    assert has_good_variety("abcdefghaa")
    assert not has_good_variety("abcdefaaaa")

def test_rules_are_ascii():
    rules = check_rules("ÉÇ٣")
    assert rules["uppercase"] is False
    assert rules["number"] is False

def test_tiers_follow_raw_score():
    assert tier_for_score(39) is StrengthTier.WEAK
    assert tier_for_score(40) is StrengthTier.MEDIUM
    assert tier_for_score(60) is StrengthTier.STRONG
    assert tier_for_score(79) is StrengthTier.STRONG
    assert tier_for_score(80) is StrengthTier.VERY_STRONG
    assert StrengthTier.WEAK < StrengthTier.MEDIUM < StrengthTier.STRONG < StrengthTier.VERY_STRONG

def test_score_range_and_determinism():
    samples = ["a", "Ab1!", "aaaa1111", "Summer2024!", "x" * 40, "Zz9!" * 10, "abcdefghijklmnop"]
    for pw in samples:
        report = analyze(pw)
        assert 0 <= report.score <= 100
        assert report.tier is tier_for_score(report.raw_score)
        assert analyze(pw) == report

def test_report_to_dict():
    d = analyze("Summer2024!").to_dict()
    assert d["tier"] in {t.name for t in StrengthTier}
    assert d["empty"] is False
    assert list(d["rules_passed"]) == list(RULE_NAMES)
