import json

import pytest

from cardschema.loader import Loaded, LoadedTypes, LoadError, load_json_files, load_types
from cardschema.naming import sanitize_type_ident
from cardschema.schema_classes import SchemaClass
from cardschema.schema_types import EnumValue, SchemaError


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_json_files_reads_nested_json_only(tmp_path):
    _write(tmp_path / "Action.Submit.json", {"extends": "Action"})
    _write(tmp_path / "sub" / "TextBlock.json", {})
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    loaded = {item.id: item for item in load_json_files(tmp_path)}
    assert set(loaded) == {"Action.Submit", "TextBlock"}
    submit = loaded["Action.Submit"]
    assert submit.file_name == "Action.Submit.json"
    assert submit.type_name == sanitize_type_ident("Action.Submit")
    assert submit.value == {"extends": "Action"}


def test_load_json_files_skips_invalid_json(tmp_path):
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    _write(tmp_path / "ok.json", {"a": 1})
    ids = [item.id for item in load_json_files(tmp_path)]
    assert ids == ["ok"]


def test_load_json_files_accepts_single_file(tmp_path):
    target = tmp_path / "Single.json"
    _write(target, [1, 2])
    items = list(load_json_files(target))
    assert [(i.id, i.value) for i in items] == [("Single", [1, 2])]


def test_loaded_equality_and_hash_use_id():
    first = Loaded(value=1, file_name="a.json", type_name="A", id="a")
    second = Loaded(value=2, file_name="other.json", type_name="B", id="a")
    third = Loaded(value=1, file_name="a.json", type_name="A", id="b")
    assert first == second
    assert first != third
    assert len({first, second, third}) == 2


def test_load_types_splits_classes_and_enums(tmp_path):
    _write(tmp_path / "Element.json", {"isAbstract": True})
    _write(tmp_path / "enums" / "Spacing.json", {"classType": "Enum", "values": ["default"]})

    loaded = load_types(tmp_path)
    assert set(loaded.classes) == {"Element"}
    assert set(loaded.enums) == {"Spacing"}
    assert loaded.classes["Element"].value == SchemaClass(is_abstract=True)
    assert loaded.enums["Spacing"].value.values == (EnumValue(value="default"),)
    assert loaded.enums["Spacing"].file_name == "Spacing.json"


def test_load_types_empty_directory(tmp_path):
    assert load_types(tmp_path) == LoadedTypes()


def test_load_types_rejects_duplicate_ids(tmp_path):
    _write(tmp_path / "a" / "Item.json", {})
    _write(tmp_path / "b" / "Item.json", {})
    with pytest.raises(LoadError, match="Duplicate id: Item"):
        load_types(tmp_path)


def test_load_types_rejects_unknown_class_type(tmp_path):
    _write(tmp_path / "Thing.json", {"classType": "Interface"})
    with pytest.raises(LoadError, match="Unknown type: Interface"):
        load_types(tmp_path)


def test_load_types_propagates_schema_errors(tmp_path):
    _write(tmp_path / "Bad.json", {"unexpected": True})
    with pytest.raises(SchemaError):
        load_types(tmp_path)