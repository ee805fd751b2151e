from .strength_service import StrengthService, StrengthView, ChecklistItem

__all__ = [
    "StrengthService",
    "StrengthView",
    "ChecklistItem",
]
