"""
Validator for the move dataset (moves.json).
"""

import sys
from typing import Any, Optional

from pokedex_validator.config import ValidatorConfig
from pokedex_validator.utils.core.loader import DatasetLoader
from pokedex_validator.utils.core.report import Failure
from pokedex_validator.utils.data.schemas import MOVE_SCHEMA

from .base_validator import (
    BaseValidator,
    collect_type_names,
    get_english_name,
    get_record_id,
    run_cli,
)


class MoveValidator(BaseValidator):
    """
    Checks every move for its string id, localized names, type, category, pp, power and accuracy.

    pp, power and accuracy are strings in the dataset ("—" for moves without a value), so a
    numeric power is reported as malformed.

    The type dataset is loaded alongside the moves to collect the official type names
    (allowed_types). Move types are not checked against that set.
    """

    schema = MOVE_SCHEMA

    def __init__(self, config: Optional[ValidatorConfig] = None):
        super().__init__(config)

        self.dataset = "moves"
        self.total_key = "totalMoves"
        self.failed_key = "movesWithMissingKeys"
        self.entity_label = "moves"
        self.failure_label = "move(s)"
        self.allowed_types: set[str] = set()

    def dataset_file(self) -> str:
        return self.config.moves_file

    def load_allowed_types(self) -> set[str]:
        """Collect the English type names from the type dataset."""
        types_path = self.config.dataset_path(self.config.types_file)
        self.allowed_types = collect_type_names(DatasetLoader.load_dataset(types_path))
        self.logger.debug(f"Collected {len(self.allowed_types)} type names from {types_path}")
        return self.allowed_types

    def load_all_data(self) -> list[Any]:
        records = super().load_all_data()
        self.load_allowed_types()
        return records

    def describe_failure(self, record: Any, missing_keys: list[str]) -> Failure:
        return Failure(
            missing_keys=missing_keys,
            id=get_record_id(record, (str,)),
            name=get_english_name(record),
        )


def main() -> int:
    """Validate moves.json in the current directory."""
    return run_cli(MoveValidator)


if __name__ == "__main__":
    sys.exit(main())
