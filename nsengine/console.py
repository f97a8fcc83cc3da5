"""Coloured console output, a monotonic clock and millisecond sleeps."""

from __future__ import annotations

import sys
import time
from typing import TextIO

# ANSI colour codes indexed by log level (fatal, error, warn, info, debug, trace).
_LEVEL_COLOURS = ("0;41", "1;31", "1;33", "1;32", "1;34", "0;36")


def _colour(level: int) -> str:
    index = int(level)
    if not 0 <= index < len(_LEVEL_COLOURS):
        raise ValueError(f"log level must be in 0..{len(_LEVEL_COLOURS) - 1}, got {level}")
    return _LEVEL_COLOURS[index]


def _emit(stream: TextIO, message: str, level: int) -> None:
    stream.write(f"\033[{_colour(level)}m{message}\033[0m")
    stream.flush()


def console_write(message: str, level: int) -> None:
    """Write ``message`` to standard output in the colour of ``level``."""
    _emit(sys.stdout, message, level)


def console_write_error(message: str, level: int) -> None:
    """Write ``message`` to standard error in the colour of ``level``."""
    _emit(sys.stderr, message, level)


def absolute_time() -> float:
    """Seconds on a monotonic clock."""
    return time.monotonic()


def sleep_ms(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    if ms < 0:
        raise ValueError("sleep duration must not be negative")
    time.sleep(ms / 1000.0)