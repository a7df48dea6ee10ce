"""
Logging configuration for sweep-dir
Console-only logging on stderr so the report on stdout stays clean
"""

import os
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "sweepdir"
LEVEL_ENV_VAR = "SWEEPDIR_LOG_LEVEL"


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'       # Reset
    }

    def __init__(self, fmt: str = None, datefmt: str = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record):
        message = super().format(record)
        if self.use_colors and record.levelname in self.COLORS:
            colored = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"
            message = message.replace(record.levelname, colored, 1)
        return message


class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever sys.stderr is at emit time,
    until setStream() pins it to an explicit stream"""

    def __init__(self):
        super().__init__(sys.stderr)
        self.follow_stderr = True

    def setStream(self, stream):
        self.follow_stderr = False
        return super().setStream(stream)

    def emit(self, record):
        if self.follow_stderr:
            self.stream = sys.stderr
        super().emit(record)


def _resolve_level(level: Optional[str]) -> int:
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "WARNING")
    return getattr(logging, level.upper(), logging.WARNING)


def setup_logger(name: str = None, level: str = None, stream: TextIO = None) -> logging.Logger:
    """Setup logger with a single stderr console handler"""

    if name is None:
        name = LOGGER_NAME

    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    numeric_level = _resolve_level(level)
    logger.setLevel(numeric_level)
    logger.propagate = False

    if stream is None:
        console_handler = StderrHandler()
    else:
        console_handler = logging.StreamHandler(stream)

    target = console_handler.stream
    console_formatter = ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        use_colors=hasattr(target, "isatty") and target.isatty()
    )

    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.debug(f"Logger '{name}' configured at {logging.getLevelName(numeric_level)}")
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger instance"""
    if name is None:
        name = LOGGER_NAME

    logger = logging.getLogger(name)
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        setup_logger(LOGGER_NAME)

    return logger


def set_debug_mode(enabled: bool = True):
    """Switch all sweep-dir loggers between DEBUG and the configured default level"""
    numeric_level = logging.DEBUG if enabled else _resolve_level(None)
    logging.getLogger(LOGGER_NAME).setLevel(numeric_level)
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(numeric_level)
