import pytest
from dacite import DaciteError

from pokedex_validator.utils.core.loader import DatasetLoader
from pokedex_validator.utils.data.models import (
    BaseStats,
    Item,
    Move,
    MoveCategory,
    Pokemon,
    PokemonType,
)


# region Dataset Files
def test_load_dataset_returns_records_in_order(write_dataset, item):
    second = dict(item, id=18)
    path = write_dataset("items.json", [item, None, second])
    assert DatasetLoader.load_dataset(path) == [item, None, second]


def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DatasetLoader.load_dataset(tmp_path / "missing.json")


def test_load_dataset_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{]", encoding="utf-8")
    with pytest.raises(ValueError):
        DatasetLoader.load_dataset(path)


def test_load_dataset_requires_an_array(write_dataset):
    path = write_dataset("items.json", {"id": 1})
    with pytest.raises(TypeError):
        DatasetLoader.load_dataset(path)


def test_save_report_creates_directory(tmp_path, read_report):
    path = tmp_path / "scripts" / "items-validation.json"
    DatasetLoader.save_report(path, {"failures": [], "totalItems": 0})
    assert read_report(path) == {"failures": [], "totalItems": 0}
    assert not path.with_suffix(".tmp").exists()
    # Indented output, key order preserved
    assert path.read_text(encoding="utf-8").startswith('{\n  "failures"')


# endregion


# region Models
def test_pokemon_model(pokemon):
    model = DatasetLoader.to_model(pokemon, Pokemon)
    assert model.name.french == "Bulbizarre"
    assert model.base == BaseStats(hp=45, attack=49, defense=49, sp_attack=65, sp_defense=65, speed=45)
    assert model.base.to_dict() == pokemon["base"]
    assert model.evolution.prev is None
    assert model.evolution.next == [["2", "Level 16"]]
    assert model.profile.egg == ["Monster", "Grass"]


def test_move_model_category(move):
    assert DatasetLoader.to_model(move, Move).category is MoveCategory.SPECIAL
    move["category"] = "???"
    assert DatasetLoader.to_model(move, Move).category is MoveCategory.UNKNOWN


def test_move_model_rejects_unknown_category(move):
    move["category"] = "Shadow"
    with pytest.raises(ValueError):
        DatasetLoader.to_model(move, Move)


def test_item_and_type_models(item, elemental_type):
    assert DatasetLoader.to_model(item, Item).name.chinese == "伤药"
    fire = DatasetLoader.to_model(elemental_type, PokemonType)
    assert fire.english == "Fire"
    assert fire.no_effect == []


def test_to_model_missing_field(item):
    del item["description"]
    with pytest.raises(DaciteError):
        DatasetLoader.to_model(item, Item)


def test_to_models_skips_unconvertible_records(move):
    shadow = dict(move, category="Shadow")
    models = DatasetLoader.to_models([move, shadow, move], Move)
    assert len(models) == 2


# endregion
