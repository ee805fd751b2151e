"""
singleton.py — PASSMETER
=========================
Single source of truth for the Singleton pattern in the project.

  SingletonMeta  ← for plain classes
        class MyService(metaclass=SingletonMeta): ...
        MyService()  # or MyService.get_instance()

  - Thread-safe via double-checked locking
  - clear_instance() / clear_all_instances() for tests
  - logs creation and removal at DEBUG
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """
    Metaclass that makes a plain class a thread-safe singleton.

    Usage:
        class Config(metaclass=SingletonMeta):
            def __init__(self):
                ...

        c1 = Config()
        c2 = Config()
        assert c1 is c2
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._instances[cls]

    def get_instance(cls, *args, **kwargs):
        """Same as calling the class."""
        return cls(*args, **kwargs)

    def clear_instance(cls) -> None:
        """Drop the instance (tests only)."""
        with cls._lock:
            if cls in cls._instances:
                del cls._instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")

    def clear_all_instances(cls) -> None:
        """Drop every instance (tests only)."""
        with cls._lock:
            count = len(cls._instances)
            cls._instances.clear()
            logger.debug(f"[Singleton] Cleared all ({count} instances)")


__all__ = ["SingletonMeta"]
