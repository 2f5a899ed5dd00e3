"""
Validators that check dataset files against their record schemas.
"""

from .base_validator import BaseValidator
from .item_validator import ItemValidator
from .move_validator import MoveValidator
from .pokedex_validator import PokedexValidator
from .type_validator import TypeValidator

__all__ = [
    "BaseValidator",
    "PokedexValidator",
    "MoveValidator",
    "ItemValidator",
    "TypeValidator",
]
