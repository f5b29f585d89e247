"""
Logger - Writes caller-annotated lines to stdout and a dated log file.

Each instance owns one append-mode file under ./logs/<YYYY-MM-DD>/ and one lock.
Every logging call renders its message, stamps it with the current time and
the caller's file:line, then writes the same line to the file and to stdout.

Example:
    log = Logger("worker.log")
    log.printf("processed %d items", 12)
    log.errorf("lookup failed for %s", key)
    log.close()
"""

import logging
import os
import sys
import threading
from datetime import datetime
from pathlib import Path

from . import config
from .errors import LogDirectoryError, LogFileOpenError, WorkingDirectoryError
from .log_utils import error_message, format_line, sprint, sprintf

logger = logging.getLogger(__name__)


def _open_log_file(path, flags):
    return os.open(path, flags, config.FILE_MODE)


class _LogFileHandler(logging.FileHandler):
    """FileHandler that creates its file with FILE_MODE instead of 0666."""

    def _open(self):
        return open(
            self.baseFilename,
            self.mode,
            encoding=self.encoding,
            errors=self.errors,
            opener=_open_log_file,
        )


class _StdoutHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stdout is at write time."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stdout


class Logger:
    """Thread-safe logger writing each line to a date-partitioned file and stdout.

    The date directory is fixed when the Logger is created; a long-lived
    instance keeps writing to the same file after midnight.
    """

    def __init__(self, filename: str = ""):
        filename = filename or config.DEFAULT_FILENAME

        try:
            cwd = Path.cwd()
        except OSError as e:
            raise WorkingDirectoryError(f"Failed to get working directory: {e}") from e

        logs_dir = cwd / config.LOGS_DIR_NAME
        try:
            logs_dir.mkdir(mode=config.DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise LogDirectoryError(f"Error creating logs directory: {e}") from e

        date_dir = logs_dir / datetime.now().strftime(config.DATE_DIR_FORMAT)
        try:
            date_dir.mkdir(mode=config.DIR_MODE, exist_ok=True)
        except OSError as e:
            raise LogDirectoryError(f"Failed to create date directory: {e}") from e

        self._path = date_dir / filename
        try:
            self._handler = _LogFileHandler(self._path, mode="a", encoding="utf-8")
        except OSError as e:
            raise LogFileOpenError(f"Failed to open log file: {e}") from e

        # Records go straight to the handlers, bypassing logger levels and
        # logging.disable(), so both sinks always see the same lines.
        self._console = _StdoutHandler()
        for handler in (self._handler, self._console):
            handler.setFormatter(logging.Formatter("%(message)s"))

        self._lock = threading.Lock()
        self._closed = False
        logger.debug(f"Opened log file: {self._path}")

    @property
    def path(self) -> Path:
        """Absolute path of the log file."""
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the log file. Safe to call more than once."""
        if self._closed:
            return
        self._handler.close()
        self._console.close()
        self._closed = True
        logger.debug(f"Closed log file: {self._path}")

    # --- Logging calls ---
    # Each public method calls _emit() directly so the caller tag always sits
    # at the same stack depth.

    def print(self, *values) -> None:
        """Log values rendered with sprint()."""
        self._emit(sprint(*values))

    def printf(self, fmt: str, *args) -> None:
        """Log a printf-style formatted message."""
        self._emit(sprintf(fmt, *args))

    def error(self, *values) -> None:
        """Log values with the [ERROR] tag."""
        self._emit(error_message(sprint(*values)))

    def errorf(self, fmt: str, *args) -> None:
        """Log a formatted message with the [ERROR] tag."""
        self._emit(error_message(sprintf(fmt, *args)))

    def fatal(self, *values) -> None:
        """Log values, then terminate the process with exit status 1."""
        self._emit(sprint(*values), fatal=True)

    def fatalf(self, fmt: str, *args) -> None:
        """Log a formatted message, then terminate the process with exit status 1."""
        self._emit(sprintf(fmt, *args), fatal=True)

    # --- Pure rendering ---

    def sprint(self, *values) -> str:
        return sprint(*values)

    def sprintf(self, fmt: str, *args) -> str:
        return sprintf(fmt, *args)

    def _emit(self, message: str, fatal: bool = False) -> None:
        """Format and write one line to both sinks under the instance lock.

        Write failures on either sink go to the handler's handleError(),
        never to the caller.
        """
        if self._closed:
            raise ValueError("I/O operation on closed logger")

        with self._lock:
            # depth 2: _emit <- public method <- caller
            line = format_line(message, depth=2)
            record = logging.makeLogRecord(
                {"msg": line, "levelno": logging.INFO, "levelname": "INFO"}
            )
            self._handler.handle(record)
            self._console.handle(record)

            if fatal:
                try:
                    self._handler.flush()
                    self._console.flush()
                finally:
                    os._exit(config.FATAL_EXIT_CODE)
