"""Levelled logging to the console and a log file, plus assertion reporting."""

from __future__ import annotations

import inspect
import linecache
from enum import IntEnum
from typing import Optional

from .console import console_write, console_write_error
from .filesystem import File, FileMode, open_file

LOG_FILE_NAME = "console.log"

# Formatted messages are cut to what fits a 16000-byte buffer.
_MAX_MESSAGE = 15999


class LogLevel(IntEnum):
    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


_PREFIXES = {
    LogLevel.FATAL: "[FATAL]: ",
    LogLevel.ERROR: "[ERROR]: ",
    LogLevel.WARN: "[WARN] : ",
    LogLevel.INFO: "[INFO] : ",
    LogLevel.DEBUG: "[DEBUG]: ",
    LogLevel.TRACE: "[TRACE]: ",
}


class Logger:
    """Writes levelled messages to the console and, when a path is given, to a file."""

    def __init__(self, path=LOG_FILE_NAME) -> None:
        self._file: Optional[File] = None
        if path is not None:
            try:
                self._file = open_file(path, FileMode.WRITE, False)
            except OSError:
                console_write_error(
                    "ERROR: Unable to open console.log for writing.", LogLevel.ERROR
                )
                raise

    def _append(self, line: str) -> None:
        if self._file is None or not self._file.is_valid:
            return
        try:
            self._file.write(line)
        except (OSError, ValueError):
            console_write_error("ERROR writing to console.log.", LogLevel.ERROR)

    def log(self, level: LogLevel, message: str, *args) -> str:
        """Format and emit a message; returns the line that was written."""
        level = LogLevel(level)
        text = message % args if args else message
        line = f"{_PREFIXES[level]}{text[:_MAX_MESSAGE]}\n"
        if level < LogLevel.WARN:
            console_write_error(line, level)
        else:
            console_write(line, level)
        self._append(line)
        return line

    def fatal(self, message: str, *args) -> str:
        return self.log(LogLevel.FATAL, message, *args)

    def error(self, message: str, *args) -> str:
        return self.log(LogLevel.ERROR, message, *args)

    def warn(self, message: str, *args) -> str:
        return self.log(LogLevel.WARN, message, *args)

    def info(self, message: str, *args) -> str:
        return self.log(LogLevel.INFO, message, *args)

    def debug(self, message: str, *args) -> str:
        return self.log(LogLevel.DEBUG, message, *args)

    def trace(self, message: str, *args) -> str:
        return self.log(LogLevel.TRACE, message, *args)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *args) -> None:
        self.close()


_active: Optional[Logger] = None


def initialize_logging(path=LOG_FILE_NAME) -> Logger:
    """Start logging to ``path``; replaces any logger already active."""
    global _active
    logger = Logger(path)
    if _active is not None:
        _active.close()
    _active = logger
    return logger


def shutdown_logging() -> None:
    """Close the active log file, if any."""
    global _active
    if _active is not None:
        _active.close()
        _active = None


def log_output(level: LogLevel, message: str, *args) -> str:
    """Log through the active logger, or to the console only when none is active."""
    logger = _active if _active is not None else Logger(None)
    return logger.log(level, message, *args)


def report_assertion_failure(expression: str, message: str, file: str, line: int) -> str:
    return log_output(
        LogLevel.FATAL,
        "Assertion Failure: %s, message: '%s', in file: %s, line: %d",
        expression,
        message,
        file,
        line,
    )


def ns_assert(condition, message: str = "") -> None:
    """Report and raise AssertionError when ``condition`` is false."""
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        filename = caller.f_code.co_filename
        lineno = caller.f_lineno
        expression = linecache.getline(filename, lineno).strip() or "<condition>"
    else:
        filename, lineno, expression = "<unknown>", 0, "<condition>"
    del frame, caller
    report_assertion_failure(expression, message, filename, lineno)
    raise AssertionError(message or expression)