from pathlib import Path

import pytest

from pokedex_validator.config import ValidatorConfig


def test_default_paths(tmp_path):
    config = ValidatorConfig(project_root=tmp_path)
    assert config.report_dir == str(tmp_path / "scripts")
    assert config.logging_log_dir == ""
    assert config.dataset_path(config.pokedex_file) == tmp_path / "pokedex.json"
    assert config.report_path("moves") == tmp_path / "scripts" / "moves-validation.json"
    assert list(config.validators_registry) == ["pokedex", "moves", "items", "types"]


def test_registry_default_is_not_shared(tmp_path):
    first = ValidatorConfig(project_root=tmp_path)
    first.validators_registry["pokedex"]["class"] = "Other"
    second = ValidatorConfig(project_root=tmp_path)
    assert second.validators_registry["pokedex"]["class"] == "PokedexValidator"


def test_project_root_must_be_a_path():
    with pytest.raises(TypeError):
        ValidatorConfig(project_root="/tmp")


def test_empty_dataset_file_name(tmp_path):
    with pytest.raises(ValueError):
        ValidatorConfig(project_root=tmp_path, items_file=" ")


@pytest.mark.parametrize(
    "overrides",
    [
        {"logging_level": "LOUD"},
        {"logging_format": "xml"},
        {"logging_max_log_size_mb": 0},
        {"logging_backup_count": -1},
    ],
)
def test_invalid_logging_settings(tmp_path, overrides):
    with pytest.raises(ValueError):
        ValidatorConfig(project_root=tmp_path, **overrides)


def test_registry_must_be_a_dict(tmp_path):
    with pytest.raises(TypeError):
        ValidatorConfig(project_root=Path(tmp_path), validators_registry=[])
