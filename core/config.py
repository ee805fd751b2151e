"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import get_config

    config = get_config()
    length = config.get_int("PASSWORD_DEFAULT_LENGTH", 12)
    secure = config.get_bool("PASSWORD_SECURE_RANDOM")
"""
import os
import json
import logging
import re
from typing import Any, Dict, Optional, Union
from pathlib import Path

from dotenv import load_dotenv

from core.paths import config_path
from core.singleton import SingletonMeta
from config.settings import DEFAULT_SETTINGS
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file (config/settings.json)
    - Default values
    - Type conversion
    - Validation
    """

    def __init__(
            self,
            env_file: Optional[PathLike] = None,
            config_file: Optional[PathLike] = None,
    ):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._env_file_path = Path(env_file) if env_file else Path(".env")
        self._config_file_path = Path(config_file) if config_file else config_path("settings.json")

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file_path.exists():
            load_dotenv(self._env_file_path)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file_path}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config file: {e}")
            self._config_cache = {}
            return

        if not isinstance(data, dict):
            logger.error(f"Config file {self._config_file_path} must hold a JSON object")
            self._config_cache = {}
            return

        self._config_cache = data
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value
        4. DEFAULT_SETTINGS

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if key in DEFAULT_SETTINGS:
            return DEFAULT_SETTINGS[key]

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in {self._env_file_path} or {self._config_file_path}",
                code="CONFIG_MISSING",
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key)
        if value is None:
            return default

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.strip().lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Example schema:
        {
            "PASSWORD_DEFAULT_LENGTH": {
                "type": int,
                "required": False,
                "min": 4,
            },
            "UI_THEME": {
                "type": str,
                "pattern": r"(?i)^(light|dark)$",
            }
        }

        Values read from the environment are strings; they are converted
        to the schema type before checking.
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if value is None:
                if rules.get("required", False):
                    errors.append(f"Required config '{key}' is missing")
                continue

            expected = rules.get("type")
            if expected is not None:
                value = self._coerce(key, value, expected)
                if not isinstance(value, expected):
                    errors.append(
                        f"Config '{key}' must be {expected.__name__}, "
                        f"got {type(value).__name__}"
                    )
                    continue

            if "min" in rules and value < rules["min"]:
                errors.append(f"Config '{key}' must be >= {rules['min']}, got {value}")

            if "pattern" in rules and not re.match(rules["pattern"], str(value)):
                errors.append(
                    f"Config '{key}' does not match pattern {rules['pattern']}"
                )

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors),
                code="CONFIG_INVALID",
            )

    def _coerce(self, key: str, value: Any, expected: type) -> Any:
        if isinstance(value, expected) or not isinstance(value, str):
            return value
        if expected is bool:
            return self.get_bool(key)
        if expected is int:
            try:
                return int(value)
            except ValueError:
                return value
        return value

    def reload(self):
        """Reload configuration from files"""
        self._load_env()
        self._load_json_config()
        logger.info("Configuration reloaded")


def get_config() -> Config:
    """Get the shared Config instance"""
    return Config.get_instance()


def get_log_level() -> str:
    """Get logging level"""
    return str(get_config().get("LOG_LEVEL", default="INFO")).upper()


def get_theme() -> str:
    """Get UI theme name (light | dark)"""
    return str(get_config().get("UI_THEME", default="light")).lower()


def get_generator_settings() -> Dict[str, Any]:
    """Defaults for password suggestions, as generate_password() kwargs."""
    config = get_config()
    return {
        "length": config.get_int("PASSWORD_DEFAULT_LENGTH", DEFAULT_SETTINGS["PASSWORD_DEFAULT_LENGTH"]),
        "include_symbols": config.get_bool("PASSWORD_INCLUDE_SYMBOLS", DEFAULT_SETTINGS["PASSWORD_INCLUDE_SYMBOLS"]),
        "secure": config.get_bool("PASSWORD_SECURE_RANDOM", DEFAULT_SETTINGS["PASSWORD_SECURE_RANDOM"]),
    }


# Configuration schema for validation
CONFIG_SCHEMA = {
    "LOG_LEVEL": {
        "type": str,
        "required": False,
        "pattern": r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    },
    "UI_THEME": {
        "type": str,
        "required": False,
        "pattern": r"(?i)^(light|dark)$",
    },
    "PASSWORD_DEFAULT_LENGTH": {
        "type": int,
        "required": False,
        "min": 4,
    },
    "PASSWORD_INCLUDE_SYMBOLS": {
        "type": bool,
        "required": False,
    },
    "PASSWORD_SECURE_RANDOM": {
        "type": bool,
        "required": False,
    },
}


def validate_config():
    """
    Validate configuration on startup.

    Not called on import; the embedding application runs it once at
    startup, alongside LoggingConfig.setup_logging().
    """
    try:
        get_config().validate(CONFIG_SCHEMA)
        logger.info("Configuration validated successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
