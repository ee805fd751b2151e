"""
Settings Module - PASSMETER
Default values for every configuration key read through core/config.py
"""
import logging

from constants import GeneratorDefaults

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "LOG_LEVEL": "INFO",
    "UI_THEME": "light",
    "PASSWORD_DEFAULT_LENGTH": GeneratorDefaults.LENGTH,
    "PASSWORD_INCLUDE_SYMBOLS": GeneratorDefaults.INCLUDE_SYMBOLS,
    "PASSWORD_SECURE_RANDOM": GeneratorDefaults.SECURE_RANDOM,
}

logger.debug("Settings module loaded")
