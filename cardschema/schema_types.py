"""Typed schema building blocks: properties, enum values and feature lists."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class SchemaError(ValueError):
    """Raised when a typed schema document does not have the expected shape."""


def _expect_object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise SchemaError(f"{what}: expected an object, found {type(data).__name__}")
    return data


def _reject_unknown(obj: Mapping[str, Any], allowed: frozenset[str], what: str) -> None:
    unknown = sorted(set(obj) - allowed)
    if unknown:
        raise SchemaError(f"{what}: unknown field `{unknown[0]}`")


def _optional_str(obj: Mapping[str, Any], key: str, what: str) -> str | None:
    value = obj.get(key)
    if value is None or isinstance(value, str):
        return value
    raise SchemaError(f"{what}: field `{key}` must be a string")


def _required_str(obj: Mapping[str, Any], key: str, what: str) -> str:
    if key not in obj:
        raise SchemaError(f"{what}: missing field `{key}`")
    value = obj[key]
    if not isinstance(value, str):
        raise SchemaError(f"{what}: field `{key}` must be a string")
    return value


def _optional_bool(obj: Mapping[str, Any], key: str, what: str) -> bool | None:
    value = obj.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise SchemaError(f"{what}: field `{key}` must be a boolean")


def parse_features(data: Any) -> tuple[float, ...]:
    """Parse a feature list: an array of numbers."""
    if not isinstance(data, (list, tuple)):
        raise SchemaError("features: expected an array of numbers")
    features = []
    for item in data:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise SchemaError(f"features: expected a number, found {item!r}")
        features.append(float(item))
    return tuple(features)


def _optional_features(obj: Mapping[str, Any]) -> tuple[float, ...] | None:
    value = obj.get("features")
    return None if value is None else parse_features(value)


@dataclass(frozen=True)
class Property:
    """A property of a schema class."""

    type: str
    default: Any = None
    description: str | None = None
    example: str | None = None
    examples: tuple[Any, ...] = ()
    features: tuple[float, ...] | None = None
    format: str | None = None
    override: bool | None = None
    required: bool = False
    shorthands: tuple[Property, ...] = field(default_factory=tuple)
    version: str | None = None


_PROPERTY_FIELDS = frozenset(
    {
        "default",
        "description",
        "example",
        "examples",
        "features",
        "format",
        "override",
        "required",
        "shorthands",
        "type",
        "version",
    }
)


def parse_property(data: Any) -> Property:
    """Parse a property object, rejecting unknown fields."""
    what = "Property"
    obj = _expect_object(data, what)
    _reject_unknown(obj, _PROPERTY_FIELDS, what)

    examples = obj.get("examples", [])
    if not isinstance(examples, (list, tuple)):
        raise SchemaError(f"{what}: field `examples` must be an array")

    required = obj.get("required", False)
    if not isinstance(required, bool):
        raise SchemaError(f"{what}: field `required` must be a boolean")

    shorthands = obj.get("shorthands", [])
    if not isinstance(shorthands, (list, tuple)):
        raise SchemaError(f"{what}: field `shorthands` must be an array")

    return Property(
        type=_required_str(obj, "type", what),
        default=obj.get("default"),
        description=_optional_str(obj, "description", what),
        example=_optional_str(obj, "example", what),
        examples=tuple(examples),
        features=_optional_features(obj),
        format=_optional_str(obj, "format", what),
        override=_optional_bool(obj, "override", what),
        required=required,
        shorthands=tuple(parse_property(s) for s in shorthands),
        version=_optional_str(obj, "version", what),
    )


@dataclass(frozen=True)
class EnumValue:
    """A single value of a schema enum."""

    value: str
    description: str | None = None
    version: str | None = None


_ENUM_VALUE_FIELDS = frozenset({"description", "value", "version"})


def parse_enum_value(data: Any) -> EnumValue:
    """Parse an enum value given either as a bare string or as an object."""
    if isinstance(data, str):
        return EnumValue(value=data)
    what = "EnumValue"
    obj = _expect_object(data, what)
    _reject_unknown(obj, _ENUM_VALUE_FIELDS, what)
    return EnumValue(
        value=_required_str(obj, "value", what),
        description=_optional_str(obj, "description", what),
        version=_optional_str(obj, "version", what),
    )