"""
Color Palettes for PASSMETER Themes
====================================

Contains raw color values organized by theme.
Use strength_styles.py for the strength-level mapping.
"""

class ColorPalette:
    """
    Base color palettes for light and dark themes.

    Usage:
        >>> palette = ColorPalette.LIGHT
        >>> very_strong = palette["green_800"]
    """

    # Light Theme Palette
    LIGHT = {
        # Strength scale (weak → strong)
        "red_400": "#FF6B6B",      # Very Weak
        "orange_400": "#FFA726",   # Weak
        "yellow_300": "#FFEE58",   # Medium
        "green_400": "#66BB6A",    # Strong
        "green_800": "#2E7D32",    # Very Strong

        # Meter
        "segment_idle": "#E5E7EB",

        # Text
        "text_primary": "#111827",
        "text_muted": "#6B7280",
        "warning_text": "#DC2626",

        # Special
        "white": "#FFFFFF",
        "black": "#000000",
    }

    # Dark Theme Palette
    DARK = {
        # Strength scale is shared with light
        "red_400": "#FF6B6B",
        "orange_400": "#FFA726",
        "yellow_300": "#FFEE58",
        "green_400": "#66BB6A",
        "green_800": "#2E7D32",

        # Meter
        "segment_idle": "#374151",

        # Text
        "text_primary": "#F9FAFB",
        "text_muted": "#D1D5DB",
        "warning_text": "#FCA5A5",

        # Special
        "white": "#FFFFFF",
        "black": "#000000",
    }

    @classmethod
    def get(cls, theme_name: str):
        """Get palette by name"""
        theme_name = (theme_name or "").upper()
        if theme_name in ("LIGHT", "DARK"):
            return getattr(cls, theme_name)
        return cls.LIGHT  # Default
