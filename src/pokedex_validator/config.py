"""
Configuration for the Pokédex dataset validators.

This module provides the ValidatorConfig dataclass that describes where the
dataset files live, where validation reports are written, and how logging
behaves. Every validator accepts a ValidatorConfig instance for dependency
injection; the command-line entry points build one rooted at the current
working directory.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_VALIDATORS_REGISTRY: dict[str, dict[str, Any]] = {
    "pokedex": {
        "module": "pokedex_validator.validators.pokedex_validator",
        "class": "PokedexValidator",
    },
    "moves": {
        "module": "pokedex_validator.validators.move_validator",
        "class": "MoveValidator",
    },
    "items": {
        "module": "pokedex_validator.validators.item_validator",
        "class": "ItemValidator",
    },
    "types": {
        "module": "pokedex_validator.validators.type_validator",
        "class": "TypeValidator",
    },
}


@dataclass
class ValidatorConfig:
    """
    Configuration for dataset validation.

    Example:
        config = ValidatorConfig(project_root=Path.cwd())
        PokedexValidator(config).run()
    """

    # ============================================================================
    # Project Root Configuration
    # ============================================================================

    project_root: Path

    # ============================================================================
    # Dataset Files (relative to project_root)
    # ============================================================================

    pokedex_file: str = "pokedex.json"
    moves_file: str = "moves.json"
    items_file: str = "items.json"
    types_file: str = "types.json"

    # ============================================================================
    # Report Output
    # ============================================================================

    report_dir: str = ""  # Will be set in __post_init__ if empty

    # ============================================================================
    # Logging Configuration
    # ============================================================================

    logging_level: str = "INFO"
    logging_format: str = "text"
    logging_log_dir: str = ""  # Empty: console-only logging, no log files
    logging_max_log_size_mb: int = 10
    logging_backup_count: int = 5
    logging_console_colors: bool = True

    # ============================================================================
    # Validator Registry
    # ============================================================================

    validators_registry: dict[str, dict[str, Any]] = field(
        default_factory=lambda: {name: dict(details) for name, details in DEFAULT_VALIDATORS_REGISTRY.items()}
    )

    def __post_init__(self):
        """Set default paths based on project_root if not provided and validate configuration.

        Raises:
            ValueError: If configuration validation fails
            TypeError: If configuration types are incorrect
        """
        self._validate_required_fields()

        if not self.report_dir:
            self.report_dir = str(self.project_root / "scripts")

        self._validate_configuration()

    def _validate_required_fields(self) -> None:
        """Validate that all required fields are populated.

        Raises:
            ValueError: If required fields are missing or invalid
            TypeError: If field types are incorrect
        """
        if not isinstance(self.project_root, Path):
            raise TypeError(
                f"project_root must be a Path object, got {type(self.project_root).__name__}"
            )

        for attr in ("pokedex_file", "moves_file", "items_file", "types_file"):
            value = getattr(self, attr)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{attr} cannot be empty")

    def _validate_configuration(self) -> None:
        """Validate configuration values and ranges.

        Raises:
            ValueError: If configuration values are invalid
        """
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level.upper() not in valid_log_levels:
            raise ValueError(
                f"logging_level must be one of {valid_log_levels}, got '{self.logging_level}'"
            )

        valid_log_formats = ["text", "json"]
        if self.logging_format not in valid_log_formats:
            raise ValueError(
                f"logging_format must be one of {valid_log_formats}, got '{self.logging_format}'"
            )

        if self.logging_max_log_size_mb <= 0:
            raise ValueError(
                f"logging_max_log_size_mb must be positive, got {self.logging_max_log_size_mb}"
            )

        if self.logging_backup_count < 0:
            raise ValueError(
                f"logging_backup_count must be non-negative, got {self.logging_backup_count}"
            )

        if not isinstance(self.validators_registry, dict):
            raise TypeError(
                f"validators_registry must be a dict, got {type(self.validators_registry).__name__}"
            )

    def dataset_path(self, file_name: str) -> Path:
        """Resolve a dataset file name against the project root."""
        return self.project_root / file_name

    def report_path(self, dataset: str) -> Path:
        """Return the report file path for a dataset (e.g. scripts/moves-validation.json)."""
        return Path(self.report_dir) / f"{dataset}-validation.json"
