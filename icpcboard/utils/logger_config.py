"""
Logging configuration for icpcboard

Console output gets colored level names and messages; file output is
written without ANSI codes. The command protocol owns stdout, so the CLI
points the console handler at stderr.
"""

import logging
import re
import sys
from typing import Optional, TextIO


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output"""

    COLORS = {
        'DEBUG': '\033[32m',      # Green text
        'INFO': '\033[36m',       # Cyan text
        'WARNING': '\033[33m',    # Yellow text
        'ERROR': '\033[31m',      # Red text
        'CRITICAL': '\033[41m\033[97m', # Red background + white text
        'RESET': '\033[0m'
    }

    def format(self, record):
        original_levelname = record.levelname
        original_msg = record.msg

        color = self.COLORS.get(record.levelname, '')
        reset = self.COLORS['RESET']

        # Only the level name and the message are colored
        record.levelname = f"{color}{original_levelname}{reset}"
        record.msg = f"{color}{original_msg}{reset}"

        formatted_message = super().format(record)

        record.levelname = original_levelname
        record.msg = original_msg

        return formatted_message


class NoColorFormatter(logging.Formatter):
    """Formatter without colors, used for file output and --no-color"""

    ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')

    def format(self, record):
        return self.ANSI_ESCAPE.sub('', super().format(record))


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    enable_colors: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Setup logging configuration

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        enable_colors: Whether to enable colored output for console
        stream: Console stream (defaults to stderr)
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    base_format = '%(asctime)s.%(msecs)03d | %(levelname)-8s | %(filename)s:%(lineno)d - %(funcName)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))

    if enable_colors:
        console_formatter = ColoredFormatter(base_format, datefmt=date_format)
    else:
        console_formatter = NoColorFormatter(base_format, datefmt=date_format)

    console_handler.setFormatter(console_formatter)
    logging.root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # File records all log levels
        file_handler.setFormatter(NoColorFormatter(base_format, datefmt=date_format))
        logging.root.addHandler(file_handler)

    logging.root.setLevel(logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
