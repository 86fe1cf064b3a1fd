"""Typed schema documents: classes and enums."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cardschema.schema_types import (
    EnumValue,
    Property,
    SchemaError,
    _expect_object,
    _optional_bool,
    _optional_features,
    _optional_str,
    _reject_unknown,
    parse_enum_value,
    parse_property,
)


@dataclass(frozen=True)
class SchemaClass:
    """A class described by a typed schema file."""

    description: str | None = None
    extends: str | None = None
    features: tuple[float, ...] | None = None
    is_abstract: bool | None = None
    properties: Mapping[str, Property] = field(default_factory=dict)
    schema: str | None = None
    shorthand: str | None = None
    version: str | None = None


_CLASS_FIELDS = frozenset(
    {
        "description",
        "extends",
        "features",
        "isAbstract",
        "properties",
        "$schema",
        "shorthand",
        "version",
    }
)


def parse_class(data: Any) -> SchemaClass:
    """Parse a class document, rejecting unknown fields."""
    what = "Class"
    obj = _expect_object(data, what)
    _reject_unknown(obj, _CLASS_FIELDS, what)

    raw_properties = obj.get("properties", {})
    if not isinstance(raw_properties, Mapping):
        raise SchemaError(f"{what}: field `properties` must be an object")

    return SchemaClass(
        description=_optional_str(obj, "description", what),
        extends=_optional_str(obj, "extends", what),
        features=_optional_features(obj),
        is_abstract=_optional_bool(obj, "isAbstract", what),
        properties={name: parse_property(value) for name, value in raw_properties.items()},
        schema=_optional_str(obj, "$schema", what),
        shorthand=_optional_str(obj, "shorthand", what),
        version=_optional_str(obj, "version", what),
    )


@dataclass(frozen=True)
class SchemaEnum:
    """An enum described by a typed schema file."""

    values: tuple[EnumValue, ...]
    class_type: str | None = None
    description: str | None = None
    features: tuple[float, ...] | None = None
    schema: str | None = None
    version: str | None = None


_ENUM_FIELDS = frozenset(
    {"classType", "description", "features", "$schema", "values", "version"}
)


def parse_enum(data: Any) -> SchemaEnum:
    """Parse an enum document, rejecting unknown fields."""
    what = "Enum"
    obj = _expect_object(data, what)
    _reject_unknown(obj, _ENUM_FIELDS, what)

    class_type = obj.get("classType")
    if class_type is not None and class_type != "Enum":
        raise SchemaError(f"{what}: field `classType` must be `Enum`")

    if "values" not in obj:
        raise SchemaError(f"{what}: missing field `values`")
    values = obj["values"]
    if not isinstance(values, (list, tuple)):
        raise SchemaError(f"{what}: field `values` must be an array")

    return SchemaEnum(
        values=tuple(parse_enum_value(v) for v in values),
        class_type=class_type,
        description=_optional_str(obj, "description", what),
        features=_optional_features(obj),
        schema=_optional_str(obj, "$schema", what),
        version=_optional_str(obj, "version", what),
    )