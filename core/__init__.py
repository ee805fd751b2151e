# core/__init__.py
"""
PASSMETER Core Module
=====================

Ambient infrastructure shared by the services.

Public API:
    - Configuration: Config, get_config
    - Logging: LoggingConfig
    - Utilities: SingletonMeta
"""

from .config import Config, get_config
from .logging_config import LoggingConfig
from .singleton import SingletonMeta

__all__ = [
    "Config",
    "get_config",
    "LoggingConfig",
    "SingletonMeta",
]
