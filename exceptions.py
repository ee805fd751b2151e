"""
exceptions.py
=============
PASSMETER — Hierarchical Exception System

All application exceptions inherit from PassmeterError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
PassmeterError
├── ValidationError
│   └── InvalidValueError
├── GenerationError
└── ConfigurationError

evaluate_password() never raises; these are for the generator,
the service layer and configuration loading.
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class PassmeterError(Exception):
    """Base exception for all PASSMETER errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "PWD_LENGTH_TOO_SHORT"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(PassmeterError):
    """Raised when a caller-provided argument fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidValueError(ValidationError):
    """Raised when an argument is out of range or of the wrong type."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


# ─── Generation ──────────────────────────────────────────────────────────────

class GenerationError(PassmeterError):
    """Raised when a password suggestion could not be produced."""


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(PassmeterError):
    """Raised when the application configuration is invalid or incomplete."""
