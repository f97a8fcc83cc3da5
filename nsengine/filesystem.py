"""Thin file handles with whole-file and line-based reading and writing."""

from __future__ import annotations

import os
from enum import IntFlag
from typing import IO, Optional, Union


class FileMode(IntFlag):
    READ = 0x1
    WRITE = 0x2


def exists(path) -> bool:
    """Whether something exists at ``path``."""
    return os.path.exists(path)


def _mode_string(mode: FileMode, binary: bool) -> str:
    reading = bool(mode & FileMode.READ)
    writing = bool(mode & FileMode.WRITE)
    if reading and writing:
        base = "w+"
    elif reading:
        base = "r"
    elif writing:
        base = "w"
    else:
        raise ValueError("file mode must include READ or WRITE")
    return base + ("b" if binary else "")


class File:
    """An open file; reading the whole file always starts from the beginning."""

    def __init__(self, handle: IO, binary: bool) -> None:
        self._handle: Optional[IO] = handle
        self.binary = binary

    @property
    def is_valid(self) -> bool:
        return self._handle is not None

    def _open_handle(self) -> IO:
        if self._handle is None:
            raise ValueError("file is closed")
        return self._handle

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def size(self) -> int:
        """Size of the file; the position is moved back to the start."""
        handle = self._open_handle()
        handle.seek(0, os.SEEK_END)
        end = handle.tell()
        handle.seek(0)
        return end

    def read_line(self, max_length: int) -> Union[str, bytes]:
        """Read one line of at most ``max_length - 1`` characters; empty at end of file."""
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        return self._open_handle().readline(max_length - 1)

    def write_line(self, text: Union[str, bytes]) -> None:
        """Write ``text`` followed by a newline and flush."""
        handle = self._open_handle()
        handle.write(text)
        handle.write(b"\n" if self.binary else "\n")
        handle.flush()

    def read(self, size: int) -> Union[str, bytes]:
        """Read up to ``size`` units from the current position; shorter at end of file."""
        if size < 0:
            raise ValueError("size must not be negative")
        return self._open_handle().read(size)

    def read_all_bytes(self) -> bytes:
        """The whole file contents as bytes."""
        self.size()
        data = self._open_handle().read()
        return data if self.binary else data.encode("utf-8")

    def read_all_text(self) -> str:
        """The whole file contents as text."""
        self.size()
        data = self._open_handle().read()
        return data.decode("utf-8") if self.binary else data

    def write(self, data: Union[str, bytes]) -> int:
        """Write ``data`` and flush; returns the amount written."""
        handle = self._open_handle()
        written = handle.write(data)
        if written != len(data):
            raise OSError(f"short write: {written} of {len(data)}")
        handle.flush()
        return written

    def __enter__(self) -> "File":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def open_file(path, mode: FileMode, binary: bool = False) -> File:
    """Open ``path``; READ|WRITE truncates the file like WRITE does."""
    mode_str = _mode_string(FileMode(mode), binary)
    if binary:
        handle = open(path, mode_str)
    else:
        handle = open(path, mode_str, encoding="utf-8", newline="")
    return File(handle, binary)