"""
Logging utilities for the dataset validators.

Provides:
- Per-module loggers using standard Python logging
- Colored console output on stderr (stdout is reserved for validation summaries)
- Rotating file handlers under the configured log directory, when one is set
- JSON structured logging support
- Context managers for operation tracking
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO

# Global configuration (with defaults, can be overridden via configure_logging_system)
# No log files are written while LOG_DIR is None
LOG_DIR: Optional[Path] = None
LOG_LEVEL = "INFO"
LOG_FORMAT_JSON = False
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB in bytes
BACKUP_COUNT = 5
CONSOLE_COLORS = True


def configure_logging_system(config) -> None:
    """Apply the logging settings of a ValidatorConfig.

    Package loggers that already have handlers are rebuilt so their file
    handlers follow the configured log directory. An empty logging_log_dir
    means console-only logging.

    Args:
        config: ValidatorConfig instance with logging settings
    """
    global LOG_DIR, LOG_LEVEL, LOG_FORMAT_JSON, MAX_LOG_SIZE, BACKUP_COUNT, CONSOLE_COLORS

    LOG_DIR = Path(config.logging_log_dir) if config.logging_log_dir else None
    LOG_LEVEL = config.logging_level.upper()
    LOG_FORMAT_JSON = config.logging_format == "json"
    MAX_LOG_SIZE = config.logging_max_log_size_mb * 1024 * 1024
    BACKUP_COUNT = config.logging_backup_count
    CONSOLE_COLORS = config.logging_console_colors

    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        if not logger_name.startswith("pokedex_validator"):
            continue
        logger_obj = logging.getLogger(logger_name)
        if not logger_obj.handlers:
            continue
        for handler in list(logger_obj.handlers):
            handler.close()
            logger_obj.removeHandler(handler)
        setup_logger(logger_name)


# Standard fields that are part of every LogRecord instance
# These fields are excluded when adding extra fields to JSON logs
_STANDARD_LOG_RECORD_FIELDS = frozenset(
    [
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    ]
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOG_RECORD_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so file handlers see the uncolored level name
        record_copy = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record_copy.levelname, self.RESET)
        record_copy.levelname = f"{log_color}{record_copy.levelname}{self.RESET}"
        return super().format(record_copy)


def _module_log_file(name: str) -> str:
    """Map a dotted logger name to a nested log file path (a.b.c -> a/b/c.log)."""
    parts = name.split(".")
    if len(parts) > 1:
        return str(Path(*parts[:-1]) / f"{parts[-1]}.log")
    return f"{name}.log"


def _use_colors(stream: TextIO) -> bool:
    """Colors are only written to interactive terminals."""
    isatty = getattr(stream, "isatty", None)
    return CONSOLE_COLORS and isatty is not None and isatty()


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Set up a logger with a console handler, plus a file handler when a log directory is set.

    Args:
        name (str): Logger name (typically __name__ from calling module)
        level (Optional[str], optional): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to None.
        log_file (Optional[str], optional): Specific log file name relative to the log directory. Defaults to None.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    if has_console and (has_file or LOG_DIR is None):
        return logger

    log_level = getattr(logging, level or LOG_LEVEL, logging.INFO)
    logger.setLevel(log_level)
    logger.propagate = False

    if not has_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)

        if LOG_FORMAT_JSON:
            console_formatter = JSONFormatter()
        elif _use_colors(console_handler.stream):
            console_formatter = ColoredConsoleFormatter(fmt="%(levelname)s - %(name)s - %(message)s")
        else:
            console_formatter = logging.Formatter(fmt="%(levelname)s - %(name)s - %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if not has_file and LOG_DIR is not None:
        file_path = LOG_DIR / (log_file or _module_log_file(name))
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)

        if LOG_FORMAT_JSON:
            file_formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the specified module.

    Args:
        name (str): The name of the logger (typically __name__ from the calling module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return setup_logger(name)


class LogContext:
    """Context manager for tracking operations with automatic success/failure logging."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.INFO,
    ):
        """Initialize log context.

        Args:
            logger (logging.Logger): Logger instance to use
            operation (str): Description of the operation
            level (int, optional): Log level for success messages. Defaults to logging.INFO.
        """
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is not None:
            duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        else:
            duration_ms = None

        if exc_type is None:
            self.logger.log(
                self.level,
                f"Completed {self.operation}",
                extra={"duration_ms": duration_ms},
            )
        else:
            self.logger.error(
                f"Failed {self.operation}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
                extra={"duration_ms": duration_ms},
            )

        # Don't suppress exceptions
        return False
