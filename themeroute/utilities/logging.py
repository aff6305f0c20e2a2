"""Logging configuration."""

import logging
import logging.handlers
import sys
from pathlib import Path

# Per-component levels applied after the root logger is configured
LOGGING_CONFIG = {
    "themeroute": logging.INFO,
    "themeroute.template_resolver": logging.INFO,
    "themeroute.translation": logging.WARNING,
    # Reduce noise from libraries
    "jinja2": logging.WARNING,
}

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s"


def setup_logging(debug: bool = False, log_file: str | Path | None = None) -> None:
    """Configure the root logger.

    Args:
        debug: Log DEBUG and above (otherwise INFO). Also lowers every
            themeroute component to DEBUG so locator misses are visible.
        log_file: Optional path of a rotating log file (10MB x 5)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    for logger_name, level in LOGGING_CONFIG.items():
        if debug and logger_name.startswith("themeroute"):
            level = logging.DEBUG
        logging.getLogger(logger_name).setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured (console=%s, file=%s)",
        "DEBUG" if debug else "INFO",
        log_file or "DISABLED",
    )
