# services/strength_service.py
"""
Strength Service
================
Bridge between the pure evaluator/generator and whatever draws the screen.

check()   → StrengthView: the report plus everything the checker screen
            shows (emoji, color, meter segments, "3/5 criteria met",
            checklist rows, the common-pattern warning)
suggest() → a generated password using the configured defaults
tips()    → the static password tips
about()   → name, version and the level legend for the about screen

Passwords are never logged; only lengths and scores are.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging

from config.themes import StrengthStyles
from constants import (
    PASSWORD_TIPS,
    PATTERN_WARNING,
    PasswordRules,
    RequirementNames,
    StrengthLevel,
)
from core.config import get_generator_settings, get_theme
from exceptions import GenerationError, ValidationError
from utils.password_generator import generate_password
from utils.password_utils import Requirement, StrengthReport, evaluate_password
from version import APP_NAME, BUILD, VERSION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChecklistItem:
    name: str
    description: str
    met: bool


@dataclass(frozen=True)
class StrengthView:
    report: StrengthReport
    emoji: str
    color: str
    segments: Tuple[str, ...]
    checklist: Tuple[ChecklistItem, ...] = field(default_factory=tuple)
    warning: Optional[str] = None

    @property
    def score(self) -> int:
        return self.report.score

    @property
    def level(self) -> str:
        return self.report.level

    @property
    def percentage(self) -> int:
        return round(self.report.score / PasswordRules.MAX_SCORE * 100)

    @property
    def summary(self) -> str:
        return f"{self.report.score}/{PasswordRules.MAX_SCORE} criteria met"


def _checklist(report: StrengthReport) -> Tuple[ChecklistItem, ...]:
    items: List[ChecklistItem] = [
        ChecklistItem(r.name, r.description, r.met) for r in report.requirements
    ]
    if report.weak_pattern_detected:
        items.append(ChecklistItem(
            RequirementNames.PATTERN,
            RequirementNames.describe(RequirementNames.PATTERN),
            False,
        ))
    return tuple(items)


class StrengthService:

    @staticmethod
    def check(password: str, theme: Optional[str] = None) -> StrengthView:
        """Evaluate `password` and dress the result for display."""
        theme = theme or get_theme()
        report = evaluate_password(password)
        style = StrengthStyles.for_level(report.level, theme)

        logger.debug(
            "Evaluated password (len=%d): score=%d level=%s weak_pattern=%s",
            len(password or ""), report.score, report.level, report.weak_pattern_detected,
        )

        return StrengthView(
            report=report,
            emoji=style.emoji,
            color=style.color,
            segments=tuple(StrengthStyles.segment_colors(report.score, theme)),
            checklist=_checklist(report),
            warning=PATTERN_WARNING if report.weak_pattern_detected else None,
        )

    @staticmethod
    def suggest(
            length: Optional[int] = None,
            include_symbols: Optional[bool] = None,
    ) -> str:
        """
        Generate a password suggestion.

        Arguments left as None fall back to PASSWORD_DEFAULT_LENGTH /
        PASSWORD_INCLUDE_SYMBOLS; PASSWORD_SECURE_RANDOM picks the RNG.

        Raises:
            InvalidValueError: length too short or not an integer
            GenerationError: anything else went wrong while generating
        """
        settings = get_generator_settings()
        if length is not None:
            settings["length"] = length
        if include_symbols is not None:
            settings["include_symbols"] = include_symbols

        try:
            password = generate_password(**settings)
        except ValidationError:
            logger.warning(
                "Rejected suggestion request: length=%r include_symbols=%r",
                settings["length"], settings["include_symbols"],
            )
            raise
        except Exception as e:
            logger.exception("Password generation failed")
            raise GenerationError("Could not generate a password", detail=str(e)) from e

        logger.info(
            "Generated password suggestion (len=%d, symbols=%s, secure=%s)",
            len(password), settings["include_symbols"], settings["secure"],
        )
        return password

    @staticmethod
    def tips() -> List[str]:
        return list(PASSWORD_TIPS)

    @staticmethod
    def unmet_requirements(password: str) -> List[Requirement]:
        """Requirements the password still misses, in display order."""
        return [r for r in evaluate_password(password).requirements if not r.met]

    @staticmethod
    def level_legend() -> List[Tuple[str, str, str]]:
        """(emoji, level, "N criteria met") rows, weakest first."""
        rows = []
        for level in StrengthLevel.CHOICES:
            scores = [s for s, lv in StrengthLevel.BY_SCORE.items() if lv == level]
            span = f"{min(scores)}-{max(scores)}" if len(scores) > 1 else str(scores[0])
            rows.append((StrengthStyles.for_level(level).emoji, level, f"{span} criteria met"))
        return rows

    @staticmethod
    def about() -> Dict[str, object]:
        return {
            "name": APP_NAME,
            "version": VERSION,
            "build": BUILD,
            "levels": StrengthService.level_legend(),
        }
