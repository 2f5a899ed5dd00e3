"""
Validator registry loading.

Validators are listed in ValidatorConfig.validators_registry as
name -> {"module": ..., "class": ...} and imported on demand.
"""

import importlib
from typing import Any

from pokedex_validator.utils.core.logger import get_logger

logger = get_logger(__name__)


def get_validator_registry(config) -> dict[str, Any]:
    """Get the registry of available validators by dynamically loading them from the config.

    Entries that cannot be imported are logged and left out.

    Args:
        config: ValidatorConfig instance containing validators_registry

    Returns:
        dict[str, Any]: Mapping of validator names to validator classes, in config order
    """
    registry = {}

    for name, details in config.validators_registry.items():
        try:
            module = importlib.import_module(details["module"])
            registry[name] = getattr(module, details["class"])
        except (KeyError, ImportError, AttributeError) as e:
            logger.error(f"Failed to load validator '{name}': {e}", exc_info=True)
            continue

    return registry
