"""
Global config registry for pokedex_validator.

This module provides a thread-safe registry for storing and accessing the
ValidatorConfig instance globally, so validators created without an explicit
config can still find one.
"""

import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pokedex_validator.config import ValidatorConfig

_config: Optional["ValidatorConfig"] = None
_lock = threading.Lock()


def set_config(config: "ValidatorConfig") -> None:
    """Set the global ValidatorConfig instance.

    Args:
        config: ValidatorConfig instance to use globally

    Example:
        >>> from pokedex_validator.config import ValidatorConfig
        >>> from pokedex_validator.utils.core.config_registry import set_config
        >>> set_config(ValidatorConfig(project_root=Path.cwd()))
    """
    global _config
    with _lock:
        _config = config


def get_config() -> "ValidatorConfig":
    """Get the global ValidatorConfig instance.

    Returns:
        ValidatorConfig instance

    Raises:
        RuntimeError: If config has not been set
    """
    with _lock:
        if _config is None:
            raise RuntimeError(
                "Config has not been set. Call set_config() first or pass config explicitly."
            )
        return _config


def has_config() -> bool:
    """Check if a config has been set."""
    with _lock:
        return _config is not None


def clear_config() -> None:
    """Clear the global config (useful for testing)."""
    global _config
    with _lock:
        _config = None
