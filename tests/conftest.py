"""Shared fixtures: conforming sample records and a temporary project directory."""

import copy
from pathlib import Path

import orjson
import pytest

from pokedex_validator.config import ValidatorConfig
from pokedex_validator.utils.core.config_registry import clear_config

BULBASAUR = {
    "id": 1,
    "name": {
        "english": "Bulbasaur",
        "japanese": "フシギダネ",
        "chinese": "妙蛙种子",
        "french": "Bulbizarre",
    },
    "type": ["Grass", "Poison"],
    "base": {
        "HP": 45,
        "Attack": 49,
        "Defense": 49,
        "Sp. Attack": 65,
        "Sp. Defense": 65,
        "Speed": 45,
    },
    "species": "Seed Pokémon",
    "description": "Bulbasaur can be seen napping in bright sunlight.",
    "evolution": {"next": [["2", "Level 16"]]},
    "profile": {
        "height": "0.7 m",
        "weight": "6.9 kg",
        "egg": ["Monster", "Grass"],
        "ability": [["Overgrow", "false"], ["Chlorophyll", "true"]],
        "gender": "87.5:12.5",
    },
}

THUNDERBOLT = {
    "id": "85",
    "name": {
        "english": "Thunderbolt",
        "japanese": "10まんボルト",
        "french": "Tonnerre",
        "chinese": "十万伏特",
    },
    "type": "Electric",
    "category": "Special",
    "pp": "15",
    "power": "90",
    "accuracy": "100",
}

POTION = {
    "id": 17,
    "name": {"english": "Potion", "japanese": "キズぐすり", "chinese": "伤药"},
    "type": "Medicine",
    "description": "Restores 20 HP.",
}

FIRE = {
    "english": "Fire",
    "chinese": "火",
    "japanese": "ほのお",
    "effective": ["Grass", "Ice", "Bug", "Steel"],
    "ineffective": ["Fire", "Water", "Rock", "Dragon"],
    "no_effect": [],
}


@pytest.fixture
def pokemon() -> dict:
    return copy.deepcopy(BULBASAUR)


@pytest.fixture
def move() -> dict:
    return copy.deepcopy(THUNDERBOLT)


@pytest.fixture
def item() -> dict:
    return copy.deepcopy(POTION)


@pytest.fixture
def elemental_type() -> dict:
    return copy.deepcopy(FIRE)


@pytest.fixture(autouse=True)
def _reset_config():
    clear_config()
    yield
    clear_config()


@pytest.fixture
def config(tmp_path: Path) -> ValidatorConfig:
    return ValidatorConfig(project_root=tmp_path)


@pytest.fixture
def write_dataset(tmp_path: Path):
    """Write a list of records as a dataset file under the temporary project root."""

    def _write(file_name: str, records) -> Path:
        path = tmp_path / file_name
        path.write_bytes(orjson.dumps(records))
        return path

    return _write


@pytest.fixture
def read_report():
    def _read(path: Path) -> dict:
        return orjson.loads(path.read_bytes())

    return _read
