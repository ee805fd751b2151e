# -*- coding: utf-8 -*-
"""
tests/test_password_utils.py
===============================
Tests for utils.password_utils — pure functions, no config or I/O.
"""
import random
import string

import pytest

from constants import CharacterSets, RequirementNames, StrengthLevel
from exceptions import InvalidValueError
from utils.password_utils import (
    Requirement,
    StrengthReport,
    check_requirements,
    classify_score,
    contains_common_password,
    detect_weak_pattern,
    evaluate_password,
    has_repeated_characters,
    has_sequential_characters,
)


def _met(report, name):
    return report.requirement(name).met


# ── requirement checks ────────────────────────────────────────────────────────

class TestRequirements:

    def test_fixed_order(self):
        names = [r.name for r in check_requirements("anything")]
        assert names == [
            RequirementNames.LENGTH,
            RequirementNames.UPPERCASE,
            RequirementNames.LOWERCASE,
            RequirementNames.NUMBERS,
            RequirementNames.SPECIAL,
        ]

    def test_descriptions(self):
        reqs = {r.name: r.description for r in check_requirements("")}
        assert reqs["length"] == "At least 8 characters"
        assert reqs["uppercase"] == "One uppercase letter (A-Z)"
        assert reqs["special"] == "One special character (!@#$%...)"

    def test_fresh_on_every_call(self):
        a = check_requirements("Abcdefg1!")
        b = check_requirements("Abcdefg1!")
        assert a == b
        assert a[0] is not b[0]

    def test_requirement_is_immutable(self):
        r = check_requirements("x")[0]
        with pytest.raises(Exception):
            r.met = True

    @pytest.mark.parametrize("pw,met", [
        ("",         False),
        ("1234567",  False),
        ("12345678", True),
        ("a" * 40,   True),
    ])
    def test_length(self, pw, met):
        assert _met(evaluate_password(pw), "length") is met

    @pytest.mark.parametrize("pw,name", [
        ("A", "uppercase"),
        ("z", "lowercase"),
        ("7", "numbers"),
    ])
    def test_single_class(self, pw, name):
        report = evaluate_password(pw)
        assert _met(report, name)
        assert report.met_count == 1

    @pytest.mark.parametrize("symbol", list(CharacterSets.SYMBOLS))
    def test_every_symbol_counts_as_special(self, symbol):
        assert _met(evaluate_password(symbol), "special")

    @pytest.mark.parametrize("ch", ["~", "`", "'", '"', "/", "\\", " ", "€"])
    def test_outside_symbol_set_is_not_special(self, ch):
        assert not _met(evaluate_password(ch), "special")

    def test_non_ascii_letters_do_not_count(self):
        report = evaluate_password("ÄÖÜäöüßé")
        assert _met(report, "length")
        assert not _met(report, "uppercase")
        assert not _met(report, "lowercase")
        assert report.score == 1

    def test_fullwidth_digits_do_not_count(self):
        assert not _met(evaluate_password("１２３"), "numbers")


# ── weak patterns ─────────────────────────────────────────────────────────────

class TestCommonPasswords:

    @pytest.mark.parametrize("pw", [
        "password", "PASSWORD", "MyPassword123", "xpasswordx",
        "QwErTy!", "letmein", "x123y", "TrustNo1",
    ])
    def test_detected(self, pw):
        assert contains_common_password(pw)

    @pytest.mark.parametrize("pw", ["", "Tr0ub4dor&3", "zqwlmxvr", "passw0rd"])
    def test_not_detected(self, pw):
        assert not contains_common_password(pw)


class TestRepeatedCharacters:

    @pytest.mark.parametrize("pw", ["aaa", "x111y", "!!!", "aaa1B2c3", "    "])
    def test_detected(self, pw):
        assert has_repeated_characters(pw)

    @pytest.mark.parametrize("pw", ["", "aa", "aabb", "aAa", "abab"])
    def test_not_detected(self, pw):
        assert not has_repeated_characters(pw)


class TestSequentialCharacters:

    @pytest.mark.parametrize("pw", ["abc", "xyz", "XYZ", "pQr", "789", "abc12345", "--012--"])
    def test_detected(self, pw):
        assert has_sequential_characters(pw)

    @pytest.mark.parametrize("pw", ["", "ab", "cba", "987", "acegi", "890", "za1"])
    def test_not_detected(self, pw):
        assert not has_sequential_characters(pw)


class TestDetectWeakPattern:

    def test_any_rule_triggers(self):
        assert detect_weak_pattern("xpasswordx")
        assert detect_weak_pattern("q!!!z")
        assert detect_weak_pattern("q-rst-z")

    def test_clean(self):
        assert not detect_weak_pattern("Tr0ub4dor&3")

    def test_empty(self):
        assert not detect_weak_pattern("")


# ── classification ────────────────────────────────────────────────────────────

class TestClassifyScore:

    @pytest.mark.parametrize("score,level", [
        (0, "Very Weak"),
        (1, "Very Weak"),
        (2, "Weak"),
        (3, "Medium"),
        (4, "Strong"),
        (5, "Very Strong"),
    ])
    def test_table(self, score, level):
        assert classify_score(score) == level

    @pytest.mark.parametrize("score", [-1, 6, 100, "3", None])
    def test_out_of_range(self, score):
        with pytest.raises(InvalidValueError) as exc:
            classify_score(score)
        assert exc.value.field == "score"

    def test_every_level_reachable(self):
        levels = {classify_score(s) for s in range(6)}
        assert levels == set(StrengthLevel.CHOICES)


# ── evaluate_password ─────────────────────────────────────────────────────────

class TestEvaluatePassword:

    def test_empty(self):
        report = evaluate_password("")
        assert report.score == 0
        assert report.level == "Very Weak"
        assert not any(r.met for r in report.requirements)
        assert report.weak_pattern_detected is False

    def test_none_treated_as_empty(self):
        assert evaluate_password(None) == evaluate_password("")

    def test_troubador(self):
        report = evaluate_password("Tr0ub4dor&3")
        assert all(r.met for r in report.requirements)
        assert report.weak_pattern_detected is False
        assert report.score == 5
        assert report.level == "Very Strong"

    def test_common_word_costs_one_point(self):
        report = evaluate_password("MyPassword123")
        assert report.weak_pattern_detected
        assert report.met_count == 4
        assert report.score == 3
        assert report.level == "Medium"

    def test_substring_dictionary_match(self):
        report = evaluate_password("xpasswordx")
        assert report.weak_pattern_detected
        assert report.score == 1

    def test_repetition(self):
        report = evaluate_password("aaa1B2c3")
        assert report.weak_pattern_detected
        assert report.score == 3

    def test_sequence(self):
        assert evaluate_password("abc12345").weak_pattern_detected

    def test_penalty_never_below_zero(self):
        report = evaluate_password("aaa")
        assert report.met_count == 1
        assert report.score == 0
        assert report.level == "Very Weak"

    @pytest.mark.parametrize("pw,score,level", [
        ("zqwlmxvr", 2, "Weak"),
        ("zqwlmxv7", 3, "Medium"),
        ("Zq8wLm4x", 4, "Strong"),
        ("Zq8#Lm4!", 5, "Very Strong"),
    ])
    def test_levels_without_weak_pattern(self, pw, score, level):
        report = evaluate_password(pw)
        assert not report.weak_pattern_detected
        assert report.score == score
        assert report.level == level

    def test_idempotent(self):
        assert evaluate_password("S0me-Pass!") == evaluate_password("S0me-Pass!")

    def test_to_dict(self):
        d = evaluate_password("Tr0ub4dor&3").to_dict()
        assert d["score"] == 5
        assert d["level"] == "Very Strong"
        assert d["weak_pattern_detected"] is False
        assert [r["name"] for r in d["requirements"]][0] == "length"
        assert all(r["met"] for r in d["requirements"])

    def test_report_types(self):
        report = evaluate_password("abc")
        assert isinstance(report, StrengthReport)
        assert isinstance(report.requirements, tuple)
        assert all(isinstance(r, Requirement) for r in report.requirements)

    def test_unknown_requirement_lookup(self):
        assert evaluate_password("x").requirement("pattern") is None


# ── invariants over random input ──────────────────────────────────────────────

class TestInvariants:

    ALPHABET = string.printable + "äß€✓中"

    def _samples(self, n=500):
        rng = random.Random(42)
        for _ in range(n):
            size = rng.randint(0, 24)
            yield "".join(rng.choice(self.ALPHABET) for _ in range(size))

    def test_score_formula(self):
        for pw in self._samples():
            report = evaluate_password(pw)
            penalty = 1 if report.weak_pattern_detected else 0
            assert report.score == min(5, max(0, report.met_count - penalty))
            assert 0 <= report.score <= 5
            assert report.level == classify_score(report.score)

    def test_short_never_meets_length(self):
        for pw in self._samples():
            if len(pw) < 8:
                assert not _met(evaluate_password(pw), "length")

    def test_class_absent_means_unmet(self):
        for pw in self._samples():
            report = evaluate_password(pw)
            if not any(c in CharacterSets.UPPERCASE for c in pw):
                assert not _met(report, "uppercase")
            if not any(c in CharacterSets.LOWERCASE for c in pw):
                assert not _met(report, "lowercase")
            if not any(c in CharacterSets.DIGITS for c in pw):
                assert not _met(report, "numbers")
            if not any(c in CharacterSets.SYMBOLS for c in pw):
                assert not _met(report, "special")

    def test_weak_flag_ignores_requirements(self):
        for pw in self._samples():
            assert evaluate_password(pw).weak_pattern_detected == detect_weak_pattern(pw)
