"""
Run every dataset validator: python -m pokedex_validator (or verify-all).
"""

import sys
from pathlib import Path

from pokedex_validator.config import ValidatorConfig
from pokedex_validator.utils.core.executor import run_validators
from pokedex_validator.utils.core.logger import configure_logging_system
from pokedex_validator.utils.core.registry import get_validator_registry


def main() -> int:
    config = ValidatorConfig(project_root=Path.cwd())
    configure_logging_system(config)
    registry = get_validator_registry(config)
    return 0 if run_validators(registry, config) else 1


if __name__ == "__main__":
    sys.exit(main())
