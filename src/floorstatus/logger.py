"""Logging configuration and helpers."""

import logging
import sys
from enum import Enum

LOGGER_NAME = "floorstatus"

class ConsoleFormat(str, Enum):
    """ANSI escape sequences used by the colour formatter."""

    RESET = "\033[0m"
    LIGHT_GREY = "\033[37m"
    BLUE = "\033[34m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BOLD_RED = "\033[1m\033[41m\033[30m"

class DefaultConsoleFormatter(logging.Formatter):
    """The default console formatter to use."""

    fmt = "{asctime} - {name} - {levelname} - {message}"

    def _formatted_message(self, record: logging.LogRecord) -> str:
        return self.fmt

    def format(self, record: logging.LogRecord) -> str:
        formatter = logging.Formatter(self._formatted_message(record), style="{")
        return formatter.format(record)

class ColourConsoleFormatter(DefaultConsoleFormatter):
    """Colours each line by its level."""

    COLOURS = {
        logging.DEBUG: ConsoleFormat.LIGHT_GREY,
        logging.INFO: ConsoleFormat.BLUE,
        logging.WARNING: ConsoleFormat.YELLOW,
        logging.ERROR: ConsoleFormat.RED,
        logging.CRITICAL: ConsoleFormat.BOLD_RED,
    }

    def _formatted_message(self, record: logging.LogRecord) -> str:
        colour = self.COLOURS.get(record.levelno, ConsoleFormat.RESET)
        return f"{colour.value}{self.fmt}{ConsoleFormat.RESET.value}"

LOGGER = logging.getLogger(LOGGER_NAME)

def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``floorstatus.services``."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return LOGGER.getChild(name)

def configure_logging(level: str = "INFO", colour: bool = False) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.
    Calling it again replaces the previous handler.
    """
    for handler in list(LOGGER.handlers):
        if getattr(handler, "_floorstatus_handler", False):
            LOGGER.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler._floorstatus_handler = True
    handler.setFormatter(ColourConsoleFormatter() if colour else DefaultConsoleFormatter())
    LOGGER.addHandler(handler)
    LOGGER.setLevel(level.upper())
    return LOGGER
