"""
Base validator class for checking a dataset file against its record schema.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from pokedex_validator.config import ValidatorConfig
from pokedex_validator.utils.core.config_registry import get_config, set_config
from pokedex_validator.utils.core.loader import DatasetLoader
from pokedex_validator.utils.core.logger import LogContext, configure_logging_system, get_logger
from pokedex_validator.utils.core.report import Failure, ValidationReport, build_report
from pokedex_validator.utils.core.schema_checker import RecordSchema, check_record
from pokedex_validator.utils.data.constants import UNKNOWN_ID
from pokedex_validator.utils.formatters.console_formatter import format_id_header, format_summary


class BaseValidator(ABC):
    """
    Abstract base class for all dataset validators.

    A validator loads one dataset file, checks every record against its schema,
    writes a JSON report to the report directory, prints a console summary and
    returns a process exit status.

    Subclasses set the dataset-specific labels in __init__ and implement
    dataset_file() and describe_failure().
    """

    schema: RecordSchema

    def __init__(self, config: Optional[ValidatorConfig] = None):
        """Initialize the base validator.

        Args:
            config (Optional[ValidatorConfig], optional): Validator settings. If not provided, the
                globally registered config is used.
        """
        # Dataset-specific labels, set by subclasses
        self.dataset = ""
        self.total_key = ""
        self.failed_key = ""
        self.entity_label = ""
        self.failure_label = ""

        if config is None:
            config = get_config()
        else:
            set_config(config)
        self.config = config

        self.logger = get_logger(self.__class__.__module__)

    @abstractmethod
    def dataset_file(self) -> str:
        """Return the dataset file name (relative to the project root)."""
        raise NotImplementedError("Subclasses must implement dataset_file()")

    @abstractmethod
    def describe_failure(self, record: Any, missing_keys: list[str]) -> Failure:
        """Build the failure descriptor of a record that failed validation.

        Args:
            record (Any): The failing record, of unknown shape
            missing_keys (list[str]): Field paths returned by validate_record()

        Returns:
            Failure: Descriptor carrying a best-effort id and name
        """
        raise NotImplementedError("Subclasses must implement describe_failure()")

    @property
    def dataset_path(self) -> Path:
        return self.config.dataset_path(self.dataset_file())

    @property
    def report_path(self) -> Path:
        return self.config.report_path(self.dataset)

    def load_all_data(self) -> list[Any]:
        """Load every record of the dataset file."""
        return DatasetLoader.load_dataset(self.dataset_path)

    def validate_record(self, record: Any) -> list[str]:
        """Return the missing or malformed field paths of one record."""
        return check_record(record, self.schema)

    def validate(self, records: list[Any]) -> ValidationReport:
        """Validate every record in order."""
        return build_report(records, self.validate_record, self.describe_failure)

    def format_failure_header(self, failure: Failure) -> str:
        return format_id_header(failure)

    def write_report(self, report: ValidationReport) -> Path:
        """Write the JSON report file."""
        return DatasetLoader.save_report(
            self.report_path, report.to_dict(self.total_key, self.failed_key)
        )

    def print_summary(self, report: ValidationReport, report_path: Path) -> None:
        for line in format_summary(
            report,
            report_path,
            self.entity_label,
            self.failure_label,
            header=self.format_failure_header,
        ):
            print(line)

    def run(self) -> int:
        """
        Execute the full validation pipeline.

        Load errors and report write errors propagate to the caller.

        Returns:
            int: 0 if every record conforms, 1 otherwise
        """
        with LogContext(self.logger, f"{self.dataset} validation"):
            records = self.load_all_data()
            self.logger.info(f"Loaded {len(records)} {self.dataset} records from {self.dataset_path}")

            report = self.validate(records)
            report_path = self.write_report(report)

        self.print_summary(report, report_path)

        if report.ok:
            return 0
        self.logger.warning(f"{report.failed} of {report.total} {self.dataset} records failed validation")
        return 1


# region Record Helpers
def get_english_name(record: Any, container: Optional[str] = "name") -> Optional[str]:
    """Best-effort English display name of a record.

    Args:
        record (Any): Record of unknown shape
        container (Optional[str], optional): Key of the nested localized-name object, or None
            when "english" sits directly on the record. Defaults to "name".

    Returns:
        Optional[str]: The English name if it is a string, else None
    """
    if not isinstance(record, Mapping):
        return None
    names = record.get(container) if container else record
    if not isinstance(names, Mapping):
        return None
    english = names.get("english")
    return english if isinstance(english, str) else None


def get_record_id(record: Any, id_types: tuple[type, ...]) -> Any:
    """Return the record's id if it has one of the expected types, else "unknown".

    Booleans are never accepted as numeric ids. Integral floats are reported as
    ints, so an id of 1.0 is written as 1 like any other JSON number.
    """
    if not isinstance(record, Mapping):
        return UNKNOWN_ID
    record_id = record.get("id")
    if isinstance(record_id, bool) or not isinstance(record_id, id_types):
        return UNKNOWN_ID
    if isinstance(record_id, float) and record_id.is_integer():
        return int(record_id)
    return record_id


def collect_type_names(type_records: list[Any]) -> set[str]:
    """English names of the type records that have one."""
    names = set()
    for record in type_records:
        name = get_english_name(record, container=None)
        if name is not None:
            names.add(name)
    return names


# endregion


def run_cli(validator_class: type[BaseValidator]) -> int:
    """Entry point shared by the verify-* commands: validate against the current directory."""
    config = ValidatorConfig(project_root=Path.cwd())
    configure_logging_system(config)
    return validator_class(config).run()
