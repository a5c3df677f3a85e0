"""
Logging configuration for envconfig tools.

The library itself only emits DEBUG records on the "envconfig" logger; the
CLI uses configure_logging() to make them visible as JSON or plain text.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal, Optional

LOGGER_NAME = "envconfig"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data)


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING",
    format: Literal["json", "text"] = "text",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the envconfig logger.

    Args:
        level: Logging level
        format: Log format (json or text)
        log_file: Optional log file path

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level))
    logger.handlers.clear()

    text_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def make_formatter() -> logging.Formatter:
        if format == "json":
            return JSONFormatter()
        return logging.Formatter(text_format)

    # stderr keeps rendered tables on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level))
    console_handler.setFormatter(make_formatter())
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level))
        file_handler.setFormatter(make_formatter())
        logger.addHandler(file_handler)

    return logger
