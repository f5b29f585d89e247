from .errors import LogDirectoryError, LogFileOpenError, LoggerSetupError, WorkingDirectoryError
from .log_utils import sprint, sprintf
from .logger import Logger

__all__ = [
    "Logger",
    "LoggerSetupError",
    "WorkingDirectoryError",
    "LogDirectoryError",
    "LogFileOpenError",
    "sprint",
    "sprintf",
]
