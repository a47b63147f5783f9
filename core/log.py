"""Logging configuration for the bookshelf system."""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

LOG_FORMAT = "%(asctime)s %(levelname)8s %(message)s (%(name)s:%(lineno)d)"
LOG_DATE_FORMAT = "%m-%d %H:%M:%S"

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: int | str = logging.INFO,
    use_colors: bool = True,
    enable_file_logging: bool = False,
    log_dir: Path | None = None,
    is_test_env: bool = False,
) -> None:
    """Configure root logging for the bookshelf system.

    Args:
        level: Logging level, as a number or a name such as ``"INFO"``
        use_colors: Whether to use colored console output
        enable_file_logging: Whether to also write to a log file
        log_dir: Directory for log files (defaults to ./logs or ./logs/test)
        is_test_env: Whether this is a test run
    """
    if log_dir is None:
        log_dir = Path("logs", "test") if is_test_env else Path("logs")

    handlers = [_create_console_handler(use_colors)]
    if enable_file_logging:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_create_file_handler(log_dir, is_test_env))

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _create_console_handler(use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)

    if use_colors:
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
            "\033[90m(%(name)s:%(lineno)d)\033[0m",
            datefmt=LOG_DATE_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handler.setFormatter(formatter)
    return handler


def _create_file_handler(log_dir: Path, is_test_env: bool) -> logging.Handler:
    handler: logging.Handler
    if is_test_env:
        handler = logging.FileHandler(log_dir / "test.log", mode="w")
    else:
        handler = logging.handlers.RotatingFileHandler(
            log_dir / "bookshelf.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=4,
            encoding="utf-8",
        )

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically ``get_logger(__name__)``)."""
    return logging.getLogger(name)


def setup_production_logging(level: int | str = logging.INFO) -> None:
    """Setup logging for production with a rotating log file."""
    setup_logging(level=level, enable_file_logging=True, is_test_env=False)


def setup_test_logging(level: int | str = logging.DEBUG) -> None:
    """Setup logging for tests, overwriting the test log on each run."""
    setup_logging(level=level, enable_file_logging=True, is_test_env=True)
