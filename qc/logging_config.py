"""
Logging configuration for quick-check runs.

The driver writes progress to the "qc" loggers only when a check is verbose;
it never installs handlers. Applications (and the qc CLI) call
setup_logging() to route those records somewhere.

Environment Variables:
    QC_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    QC_LOG_FORMAT: Log format (text, json) - default: text

Usage:
    from qc.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, check="sort-is-idempotent")
    logger.info("passed")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging() -> None:
    """
    Configure root logger for check diagnostics.

    Reads configuration from environment variables:
    - QC_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - QC_LOG_FORMAT: text, json (default: text)
    """
    log_level = os.getenv("QC_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("QC_LOG_FORMAT", "text").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(CheckNameFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(check)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [check=%(check)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, check: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger carrying the check name.

    Args:
        name: Logger name (typically __name__)
        check: Check name, attached to every record as `check`

    Returns:
        LoggerAdapter with check in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"check": check or "N/A"})


class CheckNameFilter(logging.Filter):
    """
    Logging filter that adds check to all log records.

    Records not emitted through get_logger() still format cleanly.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "check"):
            record.check = "N/A"  # type: ignore
        return True
