import pytest

from pokedex_validator.utils.core.schema_checker import (
    FieldKind,
    FieldSpec,
    RecordSchema,
    check_record,
    is_non_empty_string,
    is_number,
    is_string_array,
)
from pokedex_validator.utils.data.schemas import (
    ITEM_SCHEMA,
    MOVE_SCHEMA,
    POKEMON_SCHEMA,
    TYPE_SCHEMA,
)

POKEMON_KEYS = ["id", "name", "type", "base", "species", "description", "evolution", "profile"]
MOVE_KEYS = ["id", "name", "type", "category", "pp", "power", "accuracy"]
ITEM_KEYS = ["id", "name", "type", "description"]
TYPE_KEYS = ["english", "chinese", "japanese", "effective", "ineffective", "no_effect"]


# region Predicates
@pytest.mark.parametrize("value", ["a", " x ", "—"])
def test_non_empty_string_accepts(value):
    assert is_non_empty_string(value)


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None, 3, ["a"]])
def test_non_empty_string_rejects(value):
    assert not is_non_empty_string(value)


@pytest.mark.parametrize("value", [0, 45, -1, 1.5])
def test_number_accepts(value):
    assert is_number(value)


@pytest.mark.parametrize("value", ["45", True, False, None, float("nan"), float("inf")])
def test_number_rejects(value):
    assert not is_number(value)


def test_string_array():
    assert is_string_array([])
    assert is_string_array(["Grass", "Poison"])
    assert not is_string_array(["Grass", 3])
    assert not is_string_array("Grass")
    assert not is_string_array(None)


# endregion


# region Engine
def test_sub_fields_require_object_kind():
    with pytest.raises(ValueError):
        FieldSpec("name", FieldKind.STRING, fields=(FieldSpec("english", FieldKind.STRING),))


def test_conforming_records_pass(pokemon, move, item, elemental_type):
    assert check_record(pokemon, POKEMON_SCHEMA) == []
    assert check_record(move, MOVE_SCHEMA) == []
    assert check_record(item, ITEM_SCHEMA) == []
    assert check_record(elemental_type, TYPE_SCHEMA) == []


@pytest.mark.parametrize("record", [None, "pikachu", 25, 2.5, True, [], [{"id": 1}]])
@pytest.mark.parametrize(
    "schema, keys",
    [
        (POKEMON_SCHEMA, POKEMON_KEYS),
        (MOVE_SCHEMA, MOVE_KEYS),
        (ITEM_SCHEMA, ITEM_KEYS),
        (TYPE_SCHEMA, TYPE_KEYS),
    ],
)
def test_non_object_reports_every_top_level_field(record, schema, keys):
    assert check_record(record, schema) == keys


def test_empty_object_reports_every_top_level_field():
    assert check_record({}, ITEM_SCHEMA) == ITEM_KEYS


def test_idempotent(pokemon):
    del pokemon["species"]
    pokemon["base"]["HP"] = "45"
    first = check_record(pokemon, POKEMON_SCHEMA)
    assert first == check_record(pokemon, POKEMON_SCHEMA)
    assert first == ["species", "base.HP"]


def test_field_reported_once_when_absent_and_malformed(item):
    del item["type"]
    failures = check_record(item, ITEM_SCHEMA)
    assert failures == ["type"]


def test_whitespace_string_is_missing(item):
    item["description"] = "   "
    assert check_record(item, ITEM_SCHEMA) == ["description"]


def test_non_string_array_element_is_malformed(elemental_type):
    elemental_type["effective"] = ["Grass", None]
    assert check_record(elemental_type, TYPE_SCHEMA) == ["effective"]


def test_nested_failures_keep_parent_untouched(item):
    item["name"]["japanese"] = ""
    del item["name"]["chinese"]
    assert check_record(item, ITEM_SCHEMA) == ["name.chinese", "name.japanese"]


def test_non_object_container_is_reported_without_sub_fields(item):
    item["name"] = "Potion"
    assert check_record(item, ITEM_SCHEMA) == ["name"]


def test_array_container_is_not_an_object(item):
    item["name"] = ["Potion"]
    assert check_record(item, ITEM_SCHEMA) == ["name"]


def test_absent_paths_come_before_malformed_paths():
    schema = RecordSchema(
        name="sample",
        fields=(
            FieldSpec("a", FieldKind.NUMBER),
            FieldSpec("b", FieldKind.STRING),
            FieldSpec("c", FieldKind.STRING_ARRAY, non_empty=True),
        ),
    )
    assert check_record({"a": "1", "c": []}, schema) == ["b", "a", "c"]


def test_empty_container_reports_all_sub_fields(pokemon):
    pokemon["base"] = {}
    assert check_record(pokemon, POKEMON_SCHEMA) == [
        "base.HP",
        "base.Attack",
        "base.Defense",
        "base.Sp. Attack",
        "base.Sp. Defense",
        "base.Speed",
    ]


# endregion
