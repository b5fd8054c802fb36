"""Levelled, coloured log lines for the console."""

from __future__ import annotations

import enum
import inspect
import os
import sys
from typing import TextIO

PATH_SEPARATOR = "/"

COLOUR_BLACK = "\x1b[2;30m"
COLOUR_RED = "\x1b[2;31m"
COLOUR_GREEN = "\x1b[2;32m"
COLOUR_YELLOW = "\x1b[2;33m"
COLOUR_BLUE = "\x1b[2;34m"
COLOUR_MAGENTA = "\x1b[2;35m"
COLOUR_CYAN = "\x1b[2;36m"
COLOUR_WHITE = "\x1b[2;37m"
COLOUR_RESET = "\x1b[0m"


class LogLevel(enum.IntEnum):
    """Severity of a log line; lines below the logger's level are dropped."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERR = 3


_STYLES = {
    LogLevel.DEBUG: (COLOUR_CYAN, "DEBUG"),
    LogLevel.INFO: (COLOUR_GREEN, "INFO "),
    LogLevel.WARN: (COLOUR_YELLOW, "WARN "),
    LogLevel.ERR: (COLOUR_RED, "ERROR"),
}


def strip_path(path: str) -> str:
    """Return the part of ``path`` after the last path separator."""
    return path.rpartition(PATH_SEPARATOR)[2]


def colour_line(colour: str, message: str) -> str:
    """Wrap ``message`` in a colour code, ending the line and resetting."""
    return f"{colour}{message}\n{COLOUR_RESET}"


class Logger:
    """Writes tagged lines naming the calling file and line number."""

    def __init__(self, stream: TextIO | None = None, level: LogLevel = LogLevel.DEBUG) -> None:
        self.stream = stream
        self.level = LogLevel(level)

    def _emit(self, level: LogLevel, message: str) -> None:
        if self.level > level:
            return
        frame = inspect.currentframe()
        caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        if caller is not None:
            filename = os.path.basename(caller.f_code.co_filename)
            lineno = caller.f_lineno
        else:
            filename, lineno = "?", 0
        colour, tag = _STYLES[level]
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(f"{colour}[{tag} {filename} {lineno}] {COLOUR_RESET}{message}")

    def debug(self, message: str) -> None:
        self._emit(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self._emit(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        self._emit(LogLevel.ERR, message)