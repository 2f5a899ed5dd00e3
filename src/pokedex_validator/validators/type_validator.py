"""
Validator for the elemental type dataset (types.json).
"""

import sys
from typing import Any, Optional

from pokedex_validator.config import ValidatorConfig
from pokedex_validator.utils.core.report import Failure
from pokedex_validator.utils.data.schemas import TYPE_SCHEMA

from .base_validator import BaseValidator, collect_type_names, get_english_name, run_cli


class TypeValidator(BaseValidator):
    """
    Checks every type for its localized names and its three matchup lists.

    Type records carry their names directly (english/chinese/japanese) and have no id,
    so failures are identified by English name only.
    """

    schema = TYPE_SCHEMA

    def __init__(self, config: Optional[ValidatorConfig] = None):
        super().__init__(config)

        self.dataset = "types"
        self.total_key = "totalTypes"
        self.failed_key = "typesWithMissingKeys"
        self.entity_label = "types"
        self.failure_label = "type(s)"
        self.allowed_types: set[str] = set()

    def dataset_file(self) -> str:
        return self.config.types_file

    def load_all_data(self) -> list[Any]:
        records = super().load_all_data()
        # Matchup lists are not checked against these names
        self.allowed_types = collect_type_names(records)
        return records

    def describe_failure(self, record: Any, missing_keys: list[str]) -> Failure:
        return Failure(missing_keys=missing_keys, name=get_english_name(record, container=None))

    def format_failure_header(self, failure: Failure) -> str:
        return f"Type: {failure.name}" if failure.name else "Unknown type"


def main() -> int:
    """Validate types.json in the current directory."""
    return run_cli(TypeValidator)


if __name__ == "__main__":
    sys.exit(main())
