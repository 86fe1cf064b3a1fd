"""Generated enum descriptions for schema enums."""

from __future__ import annotations

from dataclasses import dataclass

from cardschema.loader import Loaded
from cardschema.naming import to_camel_case, to_pascal_case
from cardschema.schema_classes import SchemaEnum

DEFAULT_VARIANT_NAMES = ("Default", "Auto", "Top")


@dataclass(frozen=True)
class EnumVariant:
    """A variant: its identifier, its name in JSON and an accepted alias."""

    name: str
    json_name: str
    alias: str

    def matches(self, text: str) -> bool:
        """Whether `text` names this variant in JSON."""
        return text in (self.json_name, self.alias)


@dataclass(frozen=True)
class GeneratedEnum:
    """An enum ready for code generation."""

    name: str
    variants: tuple[EnumVariant, ...]
    default_variant: str | None = None

    def resolve(self, text: str) -> EnumVariant:
        """Return the variant that `text` names, by JSON name or alias."""
        for variant in self.variants:
            if variant.matches(text):
                return variant
        raise ValueError(f"unknown variant `{text}` for {self.name}")


def process_enum(loaded_enum: Loaded[SchemaEnum]) -> GeneratedEnum:
    """Describe the enum to generate for a loaded schema enum.

    Each variant is named in PascalCase. If the JSON name is already
    PascalCase the alias is its camelCase form, otherwise the PascalCase
    form. The first variant named Default, Auto or Top becomes the default.
    """
    variants = []
    default_variant = None
    for value in loaded_enum.value.values:
        json_name = value.value
        pascal = to_pascal_case(json_name)
        alias = to_camel_case(json_name) if pascal == json_name else pascal
        if default_variant is None and pascal in DEFAULT_VARIANT_NAMES:
            default_variant = pascal
        variants.append(EnumVariant(name=pascal, json_name=json_name, alias=alias))

    return GeneratedEnum(
        name=loaded_enum.type_name,
        variants=tuple(variants),
        default_variant=default_variant,
    )