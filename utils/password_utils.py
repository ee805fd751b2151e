# -*- coding: utf-8 -*-
"""
utils/password_utils.py
=========================
Pure password evaluation: no external dependencies, no I/O, no state.

evaluate_password() is called on every keystroke by the presentation
layer, so it only allocates the report it returns.

Scoring:
  +1  length >= 8
  +1  has uppercase letter (A-Z)
  +1  has lowercase letter (a-z)
  +1  has digit (0-9)
  +1  has special character from CharacterSets.SYMBOLS
  -1  weak pattern detected (never below 0)

0-1  → Very Weak
2    → Weak
3    → Medium
4    → Strong
5    → Very Strong
"""
from __future__ import annotations

import re
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Tuple

from constants import (
    COMMON_PASSWORDS,
    SEQUENCE_ALPHABETS,
    CharacterSets,
    PasswordRules,
    RequirementNames,
    StrengthLevel,
)
from exceptions import InvalidValueError


@dataclass(frozen=True)
class Requirement:
    """One character-class test applied to a password."""
    name: str
    description: str
    met: bool


@dataclass(frozen=True)
class StrengthReport:
    """
    Result of evaluate_password().

    score == max(0, met_count - 1) when weak_pattern_detected,
    otherwise met_count. level is derived from score only.
    """
    score: int
    level: str
    requirements: Tuple[Requirement, ...]
    weak_pattern_detected: bool

    @property
    def met_count(self) -> int:
        return sum(1 for r in self.requirements if r.met)

    def requirement(self, name: str) -> Optional[Requirement]:
        for r in self.requirements:
            if r.name == name:
                return r
        return None

    def to_dict(self) -> Dict[str, object]:
        return {
            "score": self.score,
            "level": self.level,
            "requirements": [asdict(r) for r in self.requirements],
            "weak_pattern_detected": self.weak_pattern_detected,
        }


# ─── Pattern tables (compiled once) ──────────────────────────────────────────

_REQUIREMENT_PATTERNS = (
    (RequirementNames.LENGTH,    re.compile(r".{%d,}" % PasswordRules.MIN_LENGTH, re.DOTALL)),
    (RequirementNames.UPPERCASE, re.compile(r"[A-Z]")),
    (RequirementNames.LOWERCASE, re.compile(r"[a-z]")),
    (RequirementNames.NUMBERS,   re.compile(r"[0-9]")),
    (RequirementNames.SPECIAL,   re.compile("[%s]" % re.escape(CharacterSets.SYMBOLS))),
)

_COMMON_PASSWORDS_LOWER = frozenset(p.lower() for p in COMMON_PASSWORDS)

_REPEATED_RUN = re.compile(
    r"(.)\1{%d,}" % (PasswordRules.REPEAT_RUN_LENGTH - 1), re.DOTALL
)

_SEQUENCES = frozenset(
    alphabet[i:i + PasswordRules.SEQUENCE_RUN_LENGTH]
    for alphabet in SEQUENCE_ALPHABETS
    for i in range(len(alphabet) - PasswordRules.SEQUENCE_RUN_LENGTH + 1)
)


# ─── Requirement checks ──────────────────────────────────────────────────────

def check_requirements(password: str) -> Tuple[Requirement, ...]:
    """Return the five requirements, in fixed order, for this password."""
    password = password or ""
    return tuple(
        Requirement(
            name=name,
            description=RequirementNames.describe(name),
            met=bool(pattern.search(password)),
        )
        for name, pattern in _REQUIREMENT_PATTERNS
    )


# ─── Weak-pattern checks ─────────────────────────────────────────────────────

def contains_common_password(password: str) -> bool:
    """True if the password equals or contains a known-weak password (any case)."""
    lowered = (password or "").lower()
    return any(weak in lowered for weak in _COMMON_PASSWORDS_LOWER)


def has_repeated_characters(password: str) -> bool:
    """True for three or more identical characters in a row ("aaa", "111")."""
    return bool(_REPEATED_RUN.search(password or ""))


def has_sequential_characters(password: str) -> bool:
    """True for an ascending run such as "abc", "XYZ" or "789"."""
    lowered = (password or "").lower()
    n = PasswordRules.SEQUENCE_RUN_LENGTH
    return any(
        lowered[i:i + n] in _SEQUENCES
        for i in range(len(lowered) - n + 1)
    )


def detect_weak_pattern(password: str) -> bool:
    return (
        contains_common_password(password)
        or has_repeated_characters(password)
        or has_sequential_characters(password)
    )


# ─── Scoring ─────────────────────────────────────────────────────────────────

def classify_score(score: int) -> str:
    """Map an adjusted score (0..5) to its strength level."""
    try:
        return StrengthLevel.BY_SCORE[score]
    except (KeyError, TypeError):
        raise InvalidValueError(
            "score", score,
            reason=f"must be an integer between 0 and {PasswordRules.MAX_SCORE}",
        ) from None


def evaluate_password(password: str) -> StrengthReport:
    """
    Evaluate a password and return its StrengthReport.

    Accepts any text, including "" (None is treated as ""). Never raises.
    """
    password = password or ""

    requirements = check_requirements(password)
    raw_score = sum(1 for r in requirements if r.met)

    weak = detect_weak_pattern(password)
    score = raw_score
    if weak:
        score = max(0, score - PasswordRules.WEAK_PATTERN_PENALTY)
    score = min(PasswordRules.MAX_SCORE, score)

    return StrengthReport(
        score=score,
        level=classify_score(score),
        requirements=requirements,
        weak_pattern_detected=weak,
    )
