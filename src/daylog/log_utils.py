"""Shared rendering helpers for log lines.

Everything here is pure: no locking and no I/O. The Logger wraps these with
its lock and its two sinks.
"""

import os
import sys
from collections.abc import Mapping
from datetime import datetime

from . import config


def sprint(*values) -> str:
    """Render values the way the builtin print() joins its arguments."""
    return " ".join(str(value) for value in values)


def sprintf(fmt: str, *args) -> str:
    """Render a printf-style format string.

    Follows the stdlib logging convention: no args leaves the format untouched,
    and a single non-empty mapping is used for %(name)s lookups.
    """
    if not args:
        return str(fmt)
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return fmt % args[0]
    return fmt % args


def timestamp(now: datetime | None = None) -> str:
    """Local wall-clock time as YYYY-MM-DD HH:MM:SS."""
    return (now or datetime.now()).strftime(config.TIMESTAMP_FORMAT)


def caller_tag(depth: int = 0) -> str:
    """Return "file:line" for a frame above the caller of this function.

    depth=0 is the line that called caller_tag(), depth=1 its caller, and so on.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return config.UNKNOWN_CALLER
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


def format_line(message: str, depth: int = 0, now: datetime | None = None) -> str:
    """Compose "[<timestamp>] [<file:line>] <message>".

    depth counts frames above the caller of format_line(), as in caller_tag().
    """
    return f"[{timestamp(now)}] [{caller_tag(depth + 1)}] {message}"


def error_message(message: str) -> str:
    """Prefix a rendered message with the error tag."""
    return f"{config.ERROR_TAG} {message}"
