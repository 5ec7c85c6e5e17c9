"""
Logging Configuration
Structured logging with loguru
Source: https://github.com/Delgan/loguru
Verified: 2026-10-18

Every record carries the module name and, inside a calculation, the
claim id bound by the calculator.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.config import FinancialSettings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} | claim={extra[claim_id]} - {message}"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_logs: bool = False,
    compression: Optional[str] = "zip",
) -> None:
    """
    Configure calculator logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path, rotated at 100 MB
        json_logs: Serialize records (claim id included) as JSON
        compression: Archive format applied to closed log files (None to keep plain text)
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="{message}" if json_logs else LOG_FORMAT,
        level=level,
        serialize=json_logs,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="100 MB",
            retention="30 days",
            compression=compression,
            format=LOG_FORMAT,
            level=level,
            serialize=json_logs,
        )

    logger.info(f"Logging configured: level={level}, json_logs={json_logs}")


def setup_logging_from_settings(settings: FinancialSettings) -> None:
    """Configure logging from financial settings."""
    setup_logging(
        level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        json_logs=settings.LOG_JSON,
    )


# Records logged outside a calculation still render the format fields
logger.configure(extra={"name": "", "claim_id": "-"})


def get_logger(name: str = __name__):  # type: ignore[no-untyped-def]
    """
    Get a logger bound to a module name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.bind(claim_id=1001).info("Calculating")
    """
    return logger.bind(name=name)
