"""
Logging Configuration for PASSMETER

Features:
- Rotating file handler
- Colored console output
- Level from argument, LOG_LEVEL env / config, or INFO
- Old logs cleanup

Password text is never passed to a logger anywhere in the project.

Nothing here runs on import. The embedding application calls
LoggingConfig.setup_logging() and LoggingConfig.cleanup_old_logs() once at
startup, together with core.config.validate_config().
"""
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from datetime import datetime, timedelta
from typing import Optional

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # copy so file handlers sharing the record keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
    DEFAULT_BACKUP_COUNT = 5
    LOG_FILE_PREFIX = "passmeter"

    @staticmethod
    def _default_log_dir() -> Path:
        from core.paths import logs_path
        return logs_path()

    @staticmethod
    def _resolve_level(log_level: Optional[str]) -> int:
        if not log_level:
            try:
                from core.config import get_log_level
                log_level = get_log_level()
            except ConfigurationError:
                log_level = os.getenv("LOG_LEVEL", LoggingConfig.DEFAULT_LOG_LEVEL)

        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            raise ConfigurationError(
                f"Unknown log level: {log_level!r}", code="LOG_LEVEL_INVALID"
            )
        return level

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_dir: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
    ) -> Path:
        """
        Setup the root logger.

        Returns:
            Path of the active log file
        """
        level = LoggingConfig._resolve_level(log_level)

        log_path = Path(log_dir) if log_dir else LoggingConfig._default_log_dir()
        log_path.mkdir(exist_ok=True, parents=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if enable_console and sys.stdout is not None:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            root_logger.addHandler(console_handler)

        log_file = log_path / f"{LoggingConfig.LOG_FILE_PREFIX}_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
            backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_format)
        root_logger.addHandler(file_handler)

        root_logger.info("Logging initialized.")
        return log_file

    @staticmethod
    def cleanup_old_logs(log_dir: Optional[str] = None, days_to_keep: int = 30) -> int:
        """Delete log files older than days_to_keep; return how many were removed"""
        log_path = Path(log_dir) if log_dir else LoggingConfig._default_log_dir()

        if not log_path.exists():
            return 0

        cutoff_date = datetime.now() - timedelta(days=days_to_keep)
        deleted_count = 0

        for log_file in log_path.glob("*.log*"):
            try:
                file_time = datetime.fromtimestamp(log_file.stat().st_mtime)
                if file_time < cutoff_date:
                    log_file.unlink()
                    deleted_count += 1
            except OSError as e:
                logger.warning(f"Could not remove old log {log_file}: {e}")

        return deleted_count
