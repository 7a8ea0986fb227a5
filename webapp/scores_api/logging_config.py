"""
Logging configuration for the NBA Scores API proxy.

Design Pattern: Configuration Pattern for logging
Algorithm: Python logging module configured from Settings
Big O: O(1) for log operations
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "scores_api"

# Log file directory (in webapp directory)
DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "scores_api.log"

# Track if logging has been initialized in this session
_logging_initialized = False


def setup_logging(debug: bool, log_to_file: bool = True, log_dir: Path = DEFAULT_LOG_DIR) -> logging.Logger:
    """
    Set up logging configuration for the application.

    Args:
        debug: Verbose records with function and line number
        log_to_file: Also write records to log_dir/scores_api.log; the file is
                     truncated on the first call of the process and appended to afterwards
        log_dir: Directory for the log file, created if missing

    Returns:
        Configured logger instance
    """
    global _logging_initialized

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)

    if debug:
        formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME
        # mode='w' on app restart, 'a' for later reconfiguration
        file_handler = logging.FileHandler(log_file, encoding='utf-8', mode='a' if _logging_initialized else 'w')
        file_handler.setLevel(logging.DEBUG if debug else logging.INFO)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        if debug:
            logger.debug(f"Logging to file: {log_file}")

    _logging_initialized = True

    # Prevent propagation to root logger
    logger.propagate = False

    if debug:
        logger.debug("Debug mode enabled - verbose logging active")

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Always returns the configured "scores_api" logger so every module shares
    the same handler configuration.

    Args:
        name: Logger name (ignored, kept for API compatibility)
    """
    return logging.getLogger(LOGGER_NAME)
