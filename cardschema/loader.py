"""Loading typed schema files from a directory tree."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, TypeVar

from cardschema.naming import sanitize_type_ident
from cardschema.schema_classes import SchemaClass, SchemaEnum, parse_class, parse_enum

_log = logging.getLogger(__name__)

T = TypeVar("T")


class LoadError(ValueError):
    """Raised when a set of schema files cannot be loaded together."""


@dataclass(eq=False)
class Loaded(Generic[T]):
    """A value loaded from a file, identified by the file's stem."""

    value: T
    file_name: str
    type_name: str
    id: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Loaded):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class LoadedTypes:
    """Classes and enums keyed by id."""

    classes: dict[str, Loaded[SchemaClass]] = field(default_factory=dict)
    enums: dict[str, Loaded[SchemaEnum]] = field(default_factory=dict)


def _walk_files(root: Path) -> Iterator[Path]:
    if root.is_file():
        yield root
        return
    for directory, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            yield Path(directory) / name


def load_json_files(path: str | os.PathLike[str]) -> Iterator[Loaded[Any]]:
    """Yield every readable `.json` file under `path`; unreadable files are skipped."""
    for file_path in _walk_files(Path(path)):
        if file_path.suffix != ".json" or not file_path.is_file():
            continue
        try:
            with file_path.open(encoding="utf-8") as handle:
                value = json.load(handle)
        except (OSError, ValueError):
            continue
        stem = file_path.stem
        yield Loaded(
            value=value,
            file_name=file_path.name,
            type_name=sanitize_type_ident(stem),
            id=stem,
        )


def load_types(path: str | os.PathLike[str]) -> LoadedTypes:
    """Load all schema classes and enums under `path`."""
    _log.info("Loading JSON files in %s", path)
    loaded = LoadedTypes()
    seen_ids: set[str] = set()

    for json_file in load_json_files(path):
        _log.debug("%s", json_file.file_name)

        if json_file.id in seen_ids:
            raise LoadError(f"Duplicate id: {json_file.id}")
        seen_ids.add(json_file.id)

        value = json_file.value
        item_type = value.get("classType") if isinstance(value, dict) else None
        if not isinstance(item_type, str):
            item_type = "Class"

        if item_type == "Class":
            target, parser = loaded.classes, parse_class
        elif item_type == "Enum":
            target, parser = loaded.enums, parse_enum
        else:
            raise LoadError(f"Unknown type: {item_type}")

        target[json_file.id] = Loaded(
            value=parser(value),
            file_name=json_file.file_name,
            type_name=json_file.type_name,
            id=json_file.id,
        )

    return loaded