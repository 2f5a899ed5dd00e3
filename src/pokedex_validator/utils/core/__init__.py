"""Core infrastructure utilities."""

from .config_registry import clear_config, get_config, has_config, set_config
from .loader import DatasetLoader
from .logger import LogContext, configure_logging_system, get_logger
from .report import Failure, ValidationReport, build_report
from .schema_checker import FieldKind, FieldSpec, RecordSchema, check_record

__all__ = [
    "get_logger",
    "LogContext",
    "configure_logging_system",
    "set_config",
    "get_config",
    "has_config",
    "clear_config",
    "DatasetLoader",
    "Failure",
    "ValidationReport",
    "build_report",
    "FieldKind",
    "FieldSpec",
    "RecordSchema",
    "check_record",
]
