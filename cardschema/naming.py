"""Name conversion between schema names and generated identifiers."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[_\-\s]+")
_LOWER_UPPER = re.compile(r"(?<=[a-z])(?=[A-Z])")
_ACRONYM = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")

_TYPE_SUFFIXES = ("[]?", "?", "[]")

_PRIMITIVE_TYPES = {
    "string": "String",
    "uri-reference": "String",
    "uri": "String",
    "number": "f64",
    "boolean": "bool",
    "Dictionary<string>": "std::collections::HashMap<String,String>",
    "object": "serde_json::Value",
}


def _words(text: str) -> list[str]:
    spaced = _ACRONYM.sub(" ", _LOWER_UPPER.sub(" ", text))
    return [word for word in _SEPARATORS.split(spaced) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_snake_case(text: str) -> str:
    """Convert text to snake_case."""
    return "_".join(word.lower() for word in _words(text))


def to_pascal_case(text: str) -> str:
    """Convert text to PascalCase."""
    return "".join(_capitalize(word) for word in _words(text))


def to_camel_case(text: str) -> str:
    """Convert text to camelCase."""
    words = _words(text)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(_capitalize(word) for word in rest)


def _replace_specials(ident: str) -> str:
    return ident.replace(".", "_").replace("$", "_")


def sanitize_field_ident(ident: str) -> str:
    """Turn a schema property name into a field identifier."""
    result = to_snake_case(_replace_specials(ident))
    return "type_" if result == "type" else result


def sanitize_type_ident(ident: str) -> str:
    """Turn a schema type name into a type identifier."""
    return to_pascal_case(_replace_specials(ident))


def type_without_modifiers(type_name: str) -> tuple[str, str]:
    """Split a type name into its base and its `[]?`, `?` or `[]` suffix."""
    for suffix in _TYPE_SUFFIXES:
        if type_name.endswith(suffix):
            return type_name[: -len(suffix)], suffix
    return type_name, ""


def sanitize_type_inner(type_name: str) -> str:
    """Map a schema type name to the generated type name.

    A trailing `?` is dropped (optionality is decided per field) and a
    trailing `[]` becomes a `Vec<...>`.
    """
    if type_name.endswith("?"):
        return sanitize_type_inner(type_name[:-1])
    if type_name.endswith("[]"):
        return f"Vec<{sanitize_type_inner(type_name[:-2])}>"
    return _PRIMITIVE_TYPES.get(type_name) or sanitize_type_ident(type_name)