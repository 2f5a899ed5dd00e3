"""Dataset schemas, models and constants."""

from .constants import UNKNOWN_ID
from .models import Item, Move, MoveCategory, Pokemon, PokemonType
from .schemas import ITEM_SCHEMA, MOVE_SCHEMA, POKEMON_SCHEMA, TYPE_SCHEMA

__all__ = [
    # Constants
    "UNKNOWN_ID",
    # Schemas
    "POKEMON_SCHEMA",
    "MOVE_SCHEMA",
    "ITEM_SCHEMA",
    "TYPE_SCHEMA",
    # Models
    "Pokemon",
    "Move",
    "MoveCategory",
    "Item",
    "PokemonType",
]
