import logging
import os
from datetime import datetime
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str, level=logging.INFO, log_dir: Optional[str] = None
) -> logging.Logger:
    """
    Setup a logger with a console handler and an optional file handler

    Args:
        name: Logger name (the package name configures every module below it)
        level: Logging level
        log_dir: Directory for a dated log file; no file handler when None

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        module_name = name.split(".")[-1]
        log_filename = f"{module_name}_{datetime.now().strftime('%Y%m%d')}.log"
        log_filepath = os.path.join(log_dir, log_filename)

        file_handler = logging.FileHandler(log_filepath, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info("Logging to file: %s", log_filepath)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger without handlers (for library modules)

    Args:
        name: Logger name

    Returns:
        Logger instance that inherits the configuration set up by setup_logger
    """
    return logging.getLogger(name)
