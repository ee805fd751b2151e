"""
PASSMETER Themes Module
========================

Color palettes and the strength-level styles built on them.

Quick Start:
    >>> from config.themes import StrengthStyles
    >>> style = StrengthStyles.for_level("Medium", theme="dark")
    >>> style.emoji, style.color
    ('👌', '#FFEE58')
"""

from .palettes import ColorPalette
from .strength_styles import StrengthStyle, StrengthStyles

__all__ = [
    "ColorPalette",
    "StrengthStyle",
    "StrengthStyles",
]
