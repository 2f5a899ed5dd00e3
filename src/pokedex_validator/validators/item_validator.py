"""
Validator for the item dataset (items.json).
"""

import sys
from typing import Any, Optional

from pokedex_validator.config import ValidatorConfig
from pokedex_validator.utils.core.report import Failure
from pokedex_validator.utils.data.schemas import ITEM_SCHEMA

from .base_validator import BaseValidator, get_english_name, get_record_id, run_cli


class ItemValidator(BaseValidator):
    """Checks every item for its numeric id, localized names, type and description."""

    schema = ITEM_SCHEMA

    def __init__(self, config: Optional[ValidatorConfig] = None):
        super().__init__(config)

        self.dataset = "items"
        self.total_key = "totalItems"
        self.failed_key = "itemsWithMissingKeys"
        self.entity_label = "items"
        self.failure_label = "item(s)"

    def dataset_file(self) -> str:
        return self.config.items_file

    def describe_failure(self, record: Any, missing_keys: list[str]) -> Failure:
        return Failure(
            missing_keys=missing_keys,
            id=get_record_id(record, (int, float)),
            name=get_english_name(record),
        )


def main() -> int:
    """Validate items.json in the current directory."""
    return run_cli(ItemValidator)


if __name__ == "__main__":
    sys.exit(main())
