"""
Required-field specifications for each dataset.

Move pp, power and accuracy are stored as strings in the dataset (e.g. "—" for
status moves) and are checked as non-empty strings, while Pokémon base stats
are checked as numbers.
"""

from pokedex_validator.utils.core.schema_checker import FieldKind, FieldSpec, RecordSchema
from pokedex_validator.utils.data.constants import (
    REQUIRED_BASE_KEYS,
    REQUIRED_ITEM_NAME_KEYS,
    REQUIRED_MOVE_NAME_KEYS,
    REQUIRED_POKEMON_NAME_KEYS,
)


def _strings(*names: str) -> tuple[FieldSpec, ...]:
    return tuple(FieldSpec(name, FieldKind.STRING) for name in names)


def _numbers(*names: str) -> tuple[FieldSpec, ...]:
    return tuple(FieldSpec(name, FieldKind.NUMBER) for name in names)


POKEMON_SCHEMA = RecordSchema(
    name="pokemon",
    fields=(
        FieldSpec("id", FieldKind.NUMBER),
        FieldSpec("name", FieldKind.OBJECT, fields=_strings(*REQUIRED_POKEMON_NAME_KEYS)),
        FieldSpec("type", FieldKind.STRING_ARRAY, non_empty=True),
        FieldSpec("base", FieldKind.OBJECT, fields=_numbers(*REQUIRED_BASE_KEYS)),
        FieldSpec("species", FieldKind.STRING),
        FieldSpec("description", FieldKind.STRING),
        # prev/next are both optional (base and final forms), so only the container is checked
        FieldSpec("evolution", FieldKind.OBJECT),
        FieldSpec(
            "profile",
            FieldKind.OBJECT,
            fields=(
                FieldSpec("height", FieldKind.STRING),
                FieldSpec("weight", FieldKind.STRING),
                FieldSpec("egg", FieldKind.STRING_ARRAY),
                FieldSpec("ability", FieldKind.ARRAY),
                FieldSpec("gender", FieldKind.STRING),
            ),
        ),
    ),
)

MOVE_SCHEMA = RecordSchema(
    name="moves",
    fields=(
        FieldSpec("id", FieldKind.STRING),
        FieldSpec("name", FieldKind.OBJECT, fields=_strings(*REQUIRED_MOVE_NAME_KEYS)),
        *_strings("type", "category", "pp", "power", "accuracy"),
    ),
)

ITEM_SCHEMA = RecordSchema(
    name="items",
    fields=(
        FieldSpec("id", FieldKind.NUMBER),
        FieldSpec("name", FieldKind.OBJECT, fields=_strings(*REQUIRED_ITEM_NAME_KEYS)),
        *_strings("type", "description"),
    ),
)

TYPE_SCHEMA = RecordSchema(
    name="types",
    fields=(
        *_strings("english", "chinese", "japanese"),
        FieldSpec("effective", FieldKind.STRING_ARRAY),
        FieldSpec("ineffective", FieldKind.STRING_ARRAY),
        FieldSpec("no_effect", FieldKind.STRING_ARRAY),
    ),
)
