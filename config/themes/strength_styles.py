"""
Strength Styles - PASSMETER
============================

Presentation tokens for a strength level: emoji, color, and the five
meter segments. The evaluator knows nothing about these; the service
layer asks for them by level or score.
"""
from dataclasses import dataclass
from typing import List

from constants import PasswordRules, StrengthLevel
from exceptions import InvalidValueError

from .palettes import ColorPalette


@dataclass(frozen=True)
class StrengthStyle:
    emoji: str
    color: str


class StrengthStyles:
    """
    Level → (emoji, palette key) lookup.

    Usage:
        >>> StrengthStyles.for_level("Strong").emoji
        '👍'
    """

    LEVELS = {
        StrengthLevel.VERY_WEAK:   ("👎", "red_400"),
        StrengthLevel.WEAK:        ("✋", "orange_400"),
        StrengthLevel.MEDIUM:      ("👌", "yellow_300"),
        StrengthLevel.STRONG:      ("👍", "green_400"),
        StrengthLevel.VERY_STRONG: ("🤘", "green_800"),
    }

    @classmethod
    def for_level(cls, level: str, theme: str = "light") -> StrengthStyle:
        try:
            emoji, key = cls.LEVELS[level]
        except KeyError:
            raise InvalidValueError(
                "level", level, reason="unknown strength level"
            ) from None
        return StrengthStyle(emoji=emoji, color=ColorPalette.get(theme)[key])

    @classmethod
    def for_score(cls, score: int, theme: str = "light") -> StrengthStyle:
        level = StrengthLevel.BY_SCORE.get(score)
        if level is None:
            raise InvalidValueError(
                "score", score,
                reason=f"must be between 0 and {PasswordRules.MAX_SCORE}",
            )
        return cls.for_level(level, theme)

    @classmethod
    def segment_colors(cls, score: int, theme: str = "light") -> List[str]:
        """
        Colors of the meter segments, left to right.

        The first `score` segments take the level color, the rest are idle.
        """
        filled = cls.for_score(score, theme).color
        idle = ColorPalette.get(theme)["segment_idle"]
        return [
            filled if i < score else idle
            for i in range(PasswordRules.MAX_SCORE)
        ]
