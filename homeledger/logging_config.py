"""
Logging setup for the HomeLedger API.

Everything goes to the console and to a rotating ``homeledger.log``;
errors are also copied to a rotating ``errors.log``. Locations, sizes and
levels come from settings. Configured once, when this module is imported.
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional

from homeledger.config import settings


def build_logging_config(
    level: str,
    log_dir: Path,
    max_bytes: int = settings.LOG_MAX_BYTES,
    backup_count: int = settings.LOG_BACKUP_COUNT,
    sql_level: str = settings.SQL_LOG_LEVEL,
) -> dict:
    """dictConfig schema for the console and the two log files."""

    def rotating(filename: str, handler_level: str) -> dict:
        return {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_dir / filename),
            "maxBytes": max_bytes,
            "backupCount": backup_count,
            "encoding": "utf-8",
            "level": handler_level,
            "formatter": "detailed",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s", "datefmt": "%H:%M:%S"},
            "detailed": {"format": "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "level": level, "formatter": "console"},
            "app_file": rotating("homeledger.log", level),
            "error_file": rotating("errors.log", "ERROR"),
        },
        "root": {"level": level, "handlers": ["console", "app_file", "error_file"]},
        "loggers": {
            "sqlalchemy.engine": {"level": sql_level},
        },
    }


def setup_logging(level: Optional[str] = None, log_dir: Optional[Path] = None):
    """Apply the logging configuration, creating the log directory if needed."""
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = Path(log_dir or settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(build_logging_config(level, log_dir))
    logging.getLogger(__name__).info(f"Logging at {level} to {log_dir}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


setup_logging()
