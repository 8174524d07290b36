"""
Logging configuration for the movie browser.

Handlers are attached to the `cinenita` package logger only, so the root
logger (and whatever Streamlit or pytest installed on it) is left alone.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

PACKAGE_LOGGER = "cinenita"

# Marks handlers installed here so reruns replace them instead of stacking
_HANDLER_FLAG = "_cinenita_handler"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "logs",
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Name of log file under log_dir (default: console only)
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Maximum size of log file before rotation (default: 5MB)
        backup_count: Number of backup files to keep (default: 3)

    Returns:
        The configured `cinenita` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        ))

    for handler in handlers:
        setattr(handler, _HANDLER_FLAG, True)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Request URLs are logged by the controller with the key redacted
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    if log_file:
        logger.info(f"Logging to file: {log_path / log_file}")
    return logger


def configure_ui_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Configure logging for the Streamlit UI process."""
    return setup_logging(level=level, log_file=log_file)
