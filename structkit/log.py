"""A small file/stderr logger with size-based rotation."""

from __future__ import annotations

import enum
import os
import threading
import time
import traceback
from typing import Any, Optional

__all__ = [
    "Level",
    "LogError",
    "Logger",
    "LOG_LINE_LEN_MAX",
    "LOG_FILENAME_LEN_MAX",
]

LOG_LINE_LEN_MAX = 1024 * 1024
LOG_FILENAME_LEN_MAX = 1024
LOG_FILE_MODE = 0o644
_LOG_FILE_FLAGS = os.O_WRONLY | os.O_APPEND | os.O_CREAT
_STDERR_FD = 2


class Level(enum.IntEnum):
    """Logging levels."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def label(self) -> str:
        return "CRIT" if self is Level.CRITICAL else self.name


class LogError(Exception):
    """Raised when the log file cannot be opened, written or rotated."""


class Logger:
    """Writes formatted lines to a file (or stderr when ``filename`` is None).

    With a file and a non-zero ``rotate_size``, the file is renamed with a
    timestamp suffix once more than ``rotate_size`` bytes have been written.
    """

    def __init__(
        self, name: str, filename: Optional[str] = None, rotate_size: int = 0
    ) -> None:
        self.name = name
        self.level = Level.INFO
        self.filename = filename
        self._lock = threading.RLock()
        self._closed = False
        if filename is None:
            self._fd = _STDERR_FD
            self.rotate_size = 0
            self.fsize = 0
        else:
            if len(filename) > LOG_FILENAME_LEN_MAX:
                raise ValueError("log filename is too long")
            self.rotate_size = rotate_size
            self._fd = self._open()
            try:
                self.fsize = os.fstat(self._fd).st_size
            except OSError as exc:
                os.close(self._fd)
                raise LogError(f"cannot stat {filename}: {exc}") from exc
        self._pid = threading.get_native_id()

    def _open(self) -> int:
        assert self.filename is not None
        try:
            return os.open(self.filename, _LOG_FILE_FLAGS, LOG_FILE_MODE)
        except OSError as exc:
            raise LogError(f"cannot open {self.filename}: {exc}") from exc

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the log file; logging to stderr needs no closing."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self.filename is not None:
                os.close(self._fd)

    def reopen(self) -> None:
        """Close and open the log file again (no-op for stderr)."""
        with self._lock:
            if self.filename is None or self._closed:
                return
            os.close(self._fd)
            try:
                self._fd = self._open()
            except LogError:
                self._closed = True
                raise

    def set_level(self, level: int) -> None:
        """Set the threshold, clamped between DEBUG and CRITICAL."""
        if level > Level.CRITICAL:
            self.level = Level.CRITICAL
        elif level < Level.DEBUG:
            self.level = Level.DEBUG
        else:
            self.level = level

    def rotate(self) -> None:
        """Rename the log file with a timestamp suffix and start a new one."""
        with self._lock:
            if self.filename is None or self._closed:
                raise LogError("rotation needs an open log file")
            tm = time.localtime()
            target = "%s.%04d%02d%02d-%02d%02d%03d" % (
                self.filename,
                tm.tm_year,
                tm.tm_mon,
                tm.tm_mday,
                tm.tm_hour,
                tm.tm_min,
                tm.tm_sec,
            )
            try:
                os.rename(self.filename, target)
            except OSError as exc:
                raise LogError(f"cannot rename {self.filename}: {exc}") from exc
            self.fsize = 0
            self.reopen()

    def log(self, level: int, fmt: str, *args: Any) -> None:
        """Write one line if ``level`` reaches the threshold.

        ``fmt`` is formatted printf-style with ``args``.
        """
        if level < self.level:
            return
        levelname = Level(level).label
        now = time.time()
        stamp = time.strftime("%Y-%m-%d %H:%M:%S.", time.localtime(now))
        millis = int((now % 1) * 1000)
        message = fmt % args if args else fmt
        line = "%s%03d %-5s %s[%d] %s" % (
            stamp,
            millis,
            levelname,
            self.name,
            self._pid,
            message,
        )
        data = line.encode("utf-8")
        if len(data) > LOG_LINE_LEN_MAX:
            self.error("the log is too large")
            raise LogError("log line is too large")
        self.write(data + b"\n")

    def debug(self, fmt: str, *args: Any) -> None:
        self.log(Level.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(Level.INFO, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        self.log(Level.WARN, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(Level.ERROR, fmt, *args)

    def critical(self, fmt: str, *args: Any) -> None:
        self.log(Level.CRITICAL, fmt, *args)

    def trace(self) -> None:
        """Write the current call stack, one numbered frame per line."""
        frames = traceback.format_stack()[:-1]
        if not frames:
            return
        text = "".join(
            "  [%d] %s\n" % (i, " ".join(frame.split()))
            for i, frame in enumerate(frames)
        )
        self.write(text.encode("utf-8"))

    def write(self, data: bytes | str) -> None:
        """Write raw ``data`` and rotate when the size limit is passed."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not data:
            return
        with self._lock:
            if self._closed:
                raise LogError("logger is closed")
            try:
                os.write(self._fd, data)
            except OSError as exc:
                raise LogError(f"cannot write log: {exc}") from exc
            if self.filename is not None:
                self.fsize += len(data)
                if self.rotate_size and self.fsize > self.rotate_size:
                    self.rotate()