"""
Typed schemas for the Pokédex datasets.

These dataclasses describe a record that has already passed structural
validation. Incoming JSON is never assumed to match them: records are checked
with check_record() first and only conforming ones are converted (see
DatasetLoader.to_models).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pokedex_validator.utils.data.constants import BASE_STAT_FIELD_NAMES


# region Pokedex Structure
@dataclass(slots=True)
class PokemonName:
    """Localized Pokémon names."""

    english: str
    japanese: str
    chinese: str
    french: str


@dataclass(slots=True)
class BaseStats:
    """Represents the base stats of a Pokémon."""

    hp: int
    attack: int
    defense: int
    sp_attack: int
    sp_defense: int
    speed: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BaseStats":
        """Create BaseStats from dataset keys ("HP", "Sp. Attack", ...)."""
        return cls(**{attr: data[key] for key, attr in BASE_STAT_FIELD_NAMES.items()})

    def to_dict(self) -> dict[str, int]:
        """Convert back to dataset keys."""
        return {key: getattr(self, attr) for key, attr in BASE_STAT_FIELD_NAMES.items()}


@dataclass(slots=True)
class Evolution:
    """Evolution links as [id, condition] pairs. Both are absent for single-stage Pokémon."""

    prev: Optional[list[str]] = None
    next: Optional[list[list[str]]] = None


@dataclass(slots=True)
class Profile:
    height: str
    weight: str
    egg: list[str]
    # [ability name, is hidden] pairs
    ability: list[list[str]]
    gender: str


@dataclass(slots=True)
class Pokemon:
    """A Pokédex entry."""

    id: int
    name: PokemonName
    type: list[str]
    base: BaseStats
    species: str
    description: str
    evolution: Evolution
    profile: Profile


# endregion


# region Move Structure
class MoveCategory(str, Enum):
    """Damage category of a move. Unknown is stored as "???" in the dataset."""

    PHYSICAL = "Physical"
    SPECIAL = "Special"
    STATUS = "Status"
    UNKNOWN = "???"


@dataclass(slots=True)
class MoveName:
    english: str
    japanese: str
    french: str
    chinese: str


@dataclass(slots=True)
class Move:
    """A move entry. pp, power and accuracy are kept as strings, as in the dataset."""

    id: str
    name: MoveName
    type: str
    category: MoveCategory
    pp: str
    power: str
    accuracy: str

    def __post_init__(self):
        """Convert the category string to a MoveCategory.

        Raises:
            ValueError: If the category is not a known move category.
        """
        if not isinstance(self.category, MoveCategory):
            self.category = MoveCategory(self.category)


# endregion


# region Item Structure
@dataclass(slots=True)
class ItemName:
    english: str
    japanese: str
    chinese: str


@dataclass(slots=True)
class Item:
    """Represents an item entry."""

    id: int
    name: ItemName
    type: str
    description: str


# endregion


# region Type Structure
@dataclass(slots=True)
class PokemonType:
    """An elemental type with its localized names and matchups."""

    english: str
    chinese: str
    japanese: str
    effective: list[str] = field(default_factory=list)
    ineffective: list[str] = field(default_factory=list)
    no_effect: list[str] = field(default_factory=list)


# endregion
