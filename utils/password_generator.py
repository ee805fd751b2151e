# -*- coding: utf-8 -*-
"""
utils/password_generator.py
=============================
Password suggestions. Every result holds an uppercase letter, a lowercase
letter and a digit (plus a symbol when requested). The length requirement
is met only when length >= PasswordRules.MIN_LENGTH; shorter lengths down
to minimum_length() are produced as asked.

  1. one random character from each mandatory class
     (lowercase, uppercase, digits, symbols when requested)
  2. fill up to `length` from the union of those classes
  3. shuffle (Fisher-Yates via Random.shuffle)

The module `random` generator is used by default; pass secure=True for
random.SystemRandom, or inject your own `rng` (tests use a seeded one).
Weak patterns are not filtered: a random "abc" is possible.
"""
from __future__ import annotations

import random
from typing import Optional

from constants import CharacterSets, GeneratorDefaults
from exceptions import InvalidValueError


def _mandatory_sets(include_symbols: bool) -> tuple:
    sets = (CharacterSets.LOWERCASE, CharacterSets.UPPERCASE, CharacterSets.DIGITS)
    if include_symbols:
        sets += (CharacterSets.SYMBOLS,)
    return sets


def minimum_length(include_symbols: bool = True) -> int:
    """Shortest length that still fits one character of every mandatory class."""
    return len(_mandatory_sets(include_symbols))


def _pick_rng(rng: Optional[random.Random], secure: bool):
    if rng is not None:
        return rng
    if secure:
        return random.SystemRandom()
    # module-level generator shares random's global state
    return random


def generate_password(
        length: int = GeneratorDefaults.LENGTH,
        include_symbols: bool = GeneratorDefaults.INCLUDE_SYMBOLS,
        *,
        rng: Optional[random.Random] = None,
        secure: bool = GeneratorDefaults.SECURE_RANDOM,
) -> str:
    """
    Generate a random password of exactly `length` characters.

    Args:
        length: Desired password length
        include_symbols: Also require (and draw from) special characters
        rng: Random instance to draw from (overrides `secure`)
        secure: Use random.SystemRandom instead of the module generator

    Returns:
        Generated password string

    Raises:
        InvalidValueError: If length is not an int, or too short to hold
            one character of every mandatory class
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidValueError(
            "length", length,
            reason="must be an integer",
            code="PWD_LENGTH_INVALID",
        )

    sets = _mandatory_sets(include_symbols)
    if length < len(sets):
        raise InvalidValueError(
            "length", length,
            reason=f"must be at least {len(sets)} to fit every required character class",
            code="PWD_LENGTH_TOO_SHORT",
        )

    source = _pick_rng(rng, secure)
    charset = "".join(sets)

    chars = [source.choice(s) for s in sets]
    chars.extend(source.choice(charset) for _ in range(length - len(chars)))
    source.shuffle(chars)

    return "".join(chars)
