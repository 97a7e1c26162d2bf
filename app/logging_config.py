"""Application logging configuration helpers."""

from __future__ import annotations

import logging
import os
from logging.config import dictConfig
from flask import Flask
from typing import Optional
from pathlib import Path

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(parent_file)s:%(lineno)-3d | %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ShortPathFilter(logging.Filter):
    """Attach `parent_file` = '<parent>/<filename>' to log records."""

    def filter(self, record) -> bool:
        parent = os.path.basename(os.path.dirname(record.pathname))
        filename = os.path.basename(record.pathname)
        record.parent_file = f"{parent}/{filename}"
        return True


def configure_logging(
    *,
    level: int = logging.INFO,
    log_format: str = DEFAULT_LOG_FORMAT,
    datefmt: str = DEFAULT_LOG_DATEFMT,
    log_dir: str | Path = "logs",
    log_filename: Optional[str | Path] = None,
    max_bytes: int = 1 * 1024 * 1024,
    backup_count: int = 5,
    in_terminal: bool = True,
) -> None:
    """
    Root logging configuration using dictConfig.

    A console handler is installed when ``in_terminal`` is set, and a rotating
    file handler under ``log_dir`` when ``log_filename`` is given.
    """

    handlers = {}
    if in_terminal:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
            "filters": ["short_path"],
        }

    if log_filename:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, Path(log_filename).with_suffix(".log"))
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "default",
            "level": level,
            "filename": log_path,
            "maxBytes": max_bytes,
            "backupCount": backup_count,
            "encoding": "utf-8",
            "filters": ["short_path"],
        }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "short_path": {
                    "()": ShortPathFilter,
                }
            },
            "formatters": {
                "default": {
                    "format": log_format,
                    "datefmt": datefmt,
                }
            },
            "handlers": handlers,
            "root": {
                "handlers": list(handlers.keys()),
                "level": level,
            },
        }
    )


def configure_app_logging(app: Flask) -> None:
    """Configure structured console and file logging based on app settings."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    log_filename = None
    if app.config.get("LOG_TO_FILE", True):
        log_filename = app.config.get("LOG_FILE", "app.log")

    configure_logging(
        level=level,
        log_format=app.config.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        datefmt=app.config.get("LOG_DATEFMT", DEFAULT_LOG_DATEFMT),
        log_dir=app.config.get("LOG_DIR", "logs"),
        log_filename=log_filename,
        max_bytes=int(app.config.get("LOG_MAX_BYTES", 10 * 1024 * 1024)),
        backup_count=int(app.config.get("LOG_BACKUP_COUNT", 5)),
    )

    # Reduce noisy request logs (dev server)
    logging.getLogger("werkzeug").setLevel(app.config.get("WERKZEUG_LOG_LEVEL", "INFO"))

    # Flask's app.logger has no handlers of its own; let it reach the root ones.
    app.logger.setLevel(level)
    app.logger.debug("Logging configured for level %s", level_name)


__all__ = ["configure_app_logging", "configure_logging", "ShortPathFilter"]
