"""
version.py — PASSMETER
=======================
Single source of truth for the version number.
Used by:
  - StrengthService.about()
  - core/paths.py (user data directory name)
  - pyproject.toml metadata
"""

APP_NAME    = "PASSMETER"
VERSION     = "1.0.0"
BUILD       = "2026.10.18"
