"""
Shared constants for the Pokédex datasets.

Key tuples are listed in canonical order; that order is the order in which
validation failures are reported.
"""

# ============================================================================
# Localized Name Keys
# ============================================================================

REQUIRED_POKEMON_NAME_KEYS: tuple[str, ...] = ("english", "japanese", "chinese", "french")
REQUIRED_MOVE_NAME_KEYS: tuple[str, ...] = ("english", "japanese", "french", "chinese")
REQUIRED_ITEM_NAME_KEYS: tuple[str, ...] = ("english", "japanese", "chinese")

# ============================================================================
# Base Stats
# ============================================================================

REQUIRED_BASE_KEYS: tuple[str, ...] = (
    "HP",
    "Attack",
    "Defense",
    "Sp. Attack",
    "Sp. Defense",
    "Speed",
)

# Dataset keys that are not valid Python identifiers, mapped to model field names
BASE_STAT_FIELD_NAMES: dict[str, str] = {
    "HP": "hp",
    "Attack": "attack",
    "Defense": "defense",
    "Sp. Attack": "sp_attack",
    "Sp. Defense": "sp_defense",
    "Speed": "speed",
}

# ============================================================================
# Reporting
# ============================================================================

# Identifier used in failure reports when a record has no usable id
UNKNOWN_ID = "unknown"
