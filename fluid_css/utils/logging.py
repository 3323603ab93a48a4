"""
Logging setup for the fluid-css command line tool.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "fluid_css"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}


class LogFormatter(logging.Formatter):
    """Log formatter that colours the level name on terminals."""

    RESET = '\033[0m'

    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.

        Args:
            colored: Whether to use colored output
            *args: Additional formatter args
            **kwargs: Additional formatter kwargs
        """
        self.colored = colored and sys.platform != 'win32'
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if self.colored and color:
            formatted_msg = formatted_msg.replace(
                record.levelname, f"{color}{record.levelname}{self.RESET}", 1)
        return formatted_msg


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "WARNING",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for fluid-css.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)

    # If real handlers already exist, assume logger is already configured.
    # The package installs a NullHandler on import, which doesn't count.
    if any(not isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        return logger

    console_log_level = LOG_LEVELS.get(console_level.upper(), logging.WARNING)
    file_log_level = LOG_LEVELS.get(file_level.upper(), logging.DEBUG)
    logger.setLevel(min(console_log_level, file_log_level) if log_file else console_log_level)

    # Console output goes to stderr so generated CSS on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_log_level)
    console_handler.setFormatter(LogFormatter(
        colored=sys.stderr.isatty(),
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s",
            datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception with its traceback.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)
