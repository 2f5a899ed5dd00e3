"""
Validator for the Pokédex dataset (pokedex.json).
"""

import sys
from typing import Any, Optional

from pokedex_validator.config import ValidatorConfig
from pokedex_validator.utils.core.report import Failure
from pokedex_validator.utils.data.schemas import POKEMON_SCHEMA

from .base_validator import BaseValidator, get_english_name, get_record_id, run_cli


class PokedexValidator(BaseValidator):
    """Checks every Pokémon entry for its required fields, names, base stats and profile."""

    schema = POKEMON_SCHEMA

    def __init__(self, config: Optional[ValidatorConfig] = None):
        super().__init__(config)

        self.dataset = "pokedex"
        self.total_key = "totalPokemon"
        self.failed_key = "pokemonWithMissingKeys"
        self.entity_label = "Pokémon"
        self.failure_label = "Pokémon"

    def dataset_file(self) -> str:
        return self.config.pokedex_file

    def describe_failure(self, record: Any, missing_keys: list[str]) -> Failure:
        return Failure(
            missing_keys=missing_keys,
            id=get_record_id(record, (int, float)),
            name=get_english_name(record),
        )


def main() -> int:
    """Validate pokedex.json in the current directory."""
    return run_cli(PokedexValidator)


if __name__ == "__main__":
    sys.exit(main())
