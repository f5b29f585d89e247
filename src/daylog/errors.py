"""Exceptions raised while setting up a Logger."""


class LoggerSetupError(OSError):
    """Base class for failures while building the log file location."""


class WorkingDirectoryError(LoggerSetupError):
    """Raised when the current working directory cannot be resolved."""


class LogDirectoryError(LoggerSetupError):
    """Raised when the logs root or its date partition cannot be created."""


class LogFileOpenError(LoggerSetupError):
    """Raised when the log file cannot be opened for append."""
