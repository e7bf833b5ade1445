"""Logging configuration."""

import logging
import sys

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", json_format: bool = True) -> logging.Logger:
    """
    Configure the root logger for the application.

    Args:
        level: Log level name
        json_format: Emit one JSON object per line instead of plain text

    Returns:
        logging.Logger: Configured root logger
    """
    logger = logging.getLogger()
    logger.handlers.clear()

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    if json_format:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            json_ensure_ascii=False,
            timestamp=True,
        )
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    # Route uvicorn through the root handler
    for log_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        uvicorn_logger = logging.getLogger(log_name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(log_level)

    return logger
