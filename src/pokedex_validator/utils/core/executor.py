"""
Runs several validators in sequence with unified error handling.
"""

from typing import Any

from pokedex_validator.utils.core.logger import get_logger

logger = get_logger(__name__)


def run_validators(registry: dict[str, Any], config) -> bool:
    """Run every validator in the registry.

    A validator that aborts (missing dataset, invalid JSON, unwritable report) is
    logged and counted as failed; the remaining validators still run.

    Args:
        registry (dict[str, Any]): Mapping of validator names to validator classes
        config: ValidatorConfig passed to each validator

    Returns:
        bool: True if every validator ran and found no failing records
    """
    failed_validators = []
    for name, ValidatorClass in registry.items():
        logger.info(f"Running validator: {name}")

        try:
            status = ValidatorClass(config).run()
        except FileNotFoundError as e:
            logger.error(f"[FAIL] {name} failed - file not found: {e}")
            failed_validators.append((name, "file not found"))
            continue
        except (ValueError, TypeError) as e:
            logger.error(f"[FAIL] {name} failed - invalid dataset: {e}")
            failed_validators.append((name, "invalid dataset"))
            continue
        except OSError as e:
            logger.error(f"[FAIL] {name} failed - file system error: {e}", exc_info=True)
            failed_validators.append((name, "file system error"))
            continue

        if status == 0:
            logger.info(f"[OK] {name} completed successfully")
        else:
            logger.error(f"[FAIL] {name} found records with missing keys")
            failed_validators.append((name, "validation failed"))

    if failed_validators:
        logger.error(f"Failed validators ({len(failed_validators)}):")
        for name, reason in failed_validators:
            logger.error(f"  - {name}: {reason}")
        return False

    logger.info(f"All {len(registry)} validator(s) completed successfully")
    return True
