"""Layout and line-format constants."""

# Fixed on-disk layout: <cwd>/logs/<YYYY-MM-DD>/<filename>
LOGS_DIR_NAME = "logs"
DATE_DIR_FORMAT = "%Y-%m-%d"
DEFAULT_FILENAME = "application.log"
DIR_MODE = 0o755
FILE_MODE = 0o644

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
UNKNOWN_CALLER = "unknown:0"
ERROR_TAG = "[ERROR]"
FATAL_EXIT_CODE = 1
