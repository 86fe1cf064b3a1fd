import pytest

from cardschema.enums import process_enum
from cardschema.loader import Loaded
from cardschema.naming import to_pascal_case
from cardschema.schema_classes import parse_enum


def loaded(values, type_name="Spacing"):
    return Loaded(
        value=parse_enum({"classType": "Enum", "values": values}),
        file_name=f"{type_name}.json",
        type_name=type_name,
        id=type_name,
    )


def test_name_comes_from_type_name():
    result = process_enum(loaded(["small"], type_name="FontSize"))
    assert result.name == "FontSize"


def test_variants_keep_order_and_json_names():
    values = ["small", "medium", "large"]
    result = process_enum(loaded(values))
    assert [v.json_name for v in result.variants] == values


def test_lowercase_value_aliases_pascal_name():
    result = process_enum(loaded(["auto"]))
    variant = result.variants[0]
    assert variant.name == "Auto"
    assert variant.alias == variant.name


def test_pascal_value_aliases_camel_name():
    result = process_enum(loaded(["Top"]))
    variant = result.variants[0]
    assert variant.name == "Top"
    assert variant.alias == "top"


def test_variant_names_are_pascal_case():
    result = process_enum(loaded(["extraLarge", "none"]))
    for variant in result.variants:
        assert variant.name == to_pascal_case(variant.json_name)


def test_object_enum_values_are_used():
    result = process_enum(loaded([{"value": "default", "description": "d"}]))
    assert result.variants[0].json_name == "default"
    assert result.default_variant == "Default"


def test_first_default_candidate_wins():
    result = process_enum(loaded(["none", "top", "auto", "default"]))
    assert result.default_variant == "Top"


def test_no_default_variant():
    result = process_enum(loaded(["small", "large"]))
    assert result.default_variant is None


def test_resolve_by_json_name_and_alias():
    result = process_enum(loaded(["auto", "stretch"]))
    assert result.resolve("auto") is result.variants[0]
    assert result.resolve("Auto") is result.variants[0]
    assert result.resolve("stretch") is result.variants[1]


def test_resolve_unknown_raises():
    result = process_enum(loaded(["auto"]))
    with pytest.raises(ValueError):
        result.resolve("missing")