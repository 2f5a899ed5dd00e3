"""Pokédex Validator - schema checks for the Pokédex JSON datasets."""

from .config import ValidatorConfig
from .validators import ItemValidator, MoveValidator, PokedexValidator, TypeValidator

__version__ = "1.0.0"
__all__ = [
    "ValidatorConfig",
    "PokedexValidator",
    "MoveValidator",
    "ItemValidator",
    "TypeValidator",
]
