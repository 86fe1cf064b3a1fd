"""Inheritance relationships between schema classes and derived metadata."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from cardschema.loader import Loaded
from cardschema.schema_classes import SchemaClass

IMAGE_TYPE = "Image"
LAYOUTABLE_TYPES = frozenset(
    {
        "Item",
        "AdaptiveCard",
        # An action that does not extend Item.
        "ISelectAction",
        "TableCell",
        "TableRow",
        "Inline",
        # Holds an action, so it needs layout data too.
        "Refresh",
    }
)
ELEMENT_TYPE = "Element"
TOGGLEABLE_ITEM_TYPE = "ToggleableItem"
STACKABLE_TYPES = frozenset({"Element", "Column"})

LoadedClass = Loaded[SchemaClass]


class RelationshipError(LookupError):
    """Raised when class relationships are missing or inconsistent."""


@dataclass(frozen=True)
class ClassMetadata:
    """Flags derived from a class and its ancestors."""

    is_abstract: bool
    is_layoutable: bool
    is_image: bool
    is_element: bool
    is_toggleable: bool
    is_stackable: bool


@dataclass(frozen=True)
class ClassRelationships:
    """Ancestors, descendants and metadata of a single class."""

    ancestors: list[LoadedClass]
    descendants: list[LoadedClass]
    metadata: ClassMetadata


@dataclass
class Relationships:
    """Relationships of every class in a schema, keyed by class id."""

    classes: Mapping[str, LoadedClass]
    ancestors: dict[str, list[LoadedClass]] = field(default_factory=dict)
    descendants: dict[str, list[LoadedClass]] = field(default_factory=dict)
    metadata: dict[str, ClassMetadata] = field(default_factory=dict)
    type_name_to_id: dict[str, str] = field(default_factory=dict)

    def get_class_data(self, id: str) -> ClassRelationships:
        """Return the ancestors, descendants and metadata of class `id`."""
        if id not in self.ancestors:
            raise RelationshipError(f"No ancestors for {id}")
        if id not in self.descendants:
            raise RelationshipError(f"No descendants for {id}")
        if id not in self.metadata:
            raise RelationshipError(f"No metadata for {id}")
        return ClassRelationships(
            ancestors=list(self.ancestors[id]),
            descendants=list(self.descendants[id]),
            metadata=self.metadata[id],
        )

    def is_layoutable(self, id: str) -> bool:
        """Whether a class, given by id or by type name, carries layout data."""
        metadata = self.metadata.get(id)
        if metadata is None:
            mapped = self.type_name_to_id.get(id)
            metadata = self.metadata.get(mapped) if mapped is not None else None
        return metadata.is_layoutable if metadata is not None else False

    def type_has_shorthand(self, type_names: Iterable[str]) -> bool:
        """Whether any named class, or any of its descendants, defines a shorthand."""
        for name in type_names:
            loaded = self.classes.get(name)
            if loaded is not None and loaded.value.shorthand is not None:
                return True
            if any(d.value.shorthand is not None for d in self.descendants.get(name, ())):
                return True
        return False


def _lookup(classes: Mapping[str, LoadedClass], id: str) -> LoadedClass:
    try:
        return classes[id]
    except KeyError:
        raise RelationshipError(f"Failed to find class {id}") from None


def _parents_map(classes: Mapping[str, LoadedClass]) -> dict[str, set[LoadedClass]]:
    parents: dict[str, set[LoadedClass]] = {}
    for id, loaded in classes.items():
        entry = parents.setdefault(id, set())
        extends = loaded.value.extends
        if extends is not None:
            for name in {part.strip() for part in extends.split(",")}:
                entry.add(_lookup(classes, name))
    return parents


def _children_map(
    parents: Mapping[str, set[LoadedClass]], classes: Mapping[str, LoadedClass]
) -> dict[str, set[LoadedClass]]:
    children: dict[str, set[LoadedClass]] = {}
    for id, class_parents in parents.items():
        children.setdefault(id, set())
        child = _lookup(classes, id)
        for parent in class_parents:
            children.setdefault(parent.id, set()).add(child)
    return children


def _flatten_for(
    class_id: str, graph: Mapping[str, set[LoadedClass]], path: tuple[str, ...] = ()
) -> list[LoadedClass]:
    if class_id in path:
        raise RelationshipError(f"Cyclic inheritance involving {class_id}")
    result: list[LoadedClass] = []
    for related in sorted(graph.get(class_id, ()), key=lambda c: c.id):
        result.append(related)
        result.extend(_flatten_for(related.id, graph, path + (class_id,)))
    return result


def _flatten(graph: Mapping[str, set[LoadedClass]]) -> dict[str, list[LoadedClass]]:
    return {id: _flatten_for(id, graph) for id in graph}


def _matches(loaded: LoadedClass, ancestors: list[LoadedClass], names: frozenset[str]) -> bool:
    return loaded.type_name in names or any(a.type_name in names for a in ancestors)


def get_relationships(classes: Mapping[str, LoadedClass]) -> Relationships:
    """Compute ancestors, descendants and metadata for every class.

    Ancestor and descendant lists are ordered depth first, closer classes
    before more distant ones, with siblings ordered by id.
    """
    parents = _parents_map(classes)
    children = _children_map(parents, classes)

    ancestors = _flatten(parents)
    descendants = _flatten(children)

    metadata: dict[str, ClassMetadata] = {}
    for id, loaded in classes.items():
        class_ancestors = ancestors.get(id)
        if class_ancestors is None:
            raise RelationshipError(f"No ancestors for {loaded.id}")
        metadata[id] = ClassMetadata(
            is_abstract=bool(loaded.value.is_abstract),
            is_layoutable=_matches(loaded, class_ancestors, LAYOUTABLE_TYPES),
            is_image=_matches(loaded, class_ancestors, frozenset({IMAGE_TYPE})),
            is_element=_matches(loaded, class_ancestors, frozenset({ELEMENT_TYPE})),
            is_toggleable=_matches(loaded, class_ancestors, frozenset({TOGGLEABLE_ITEM_TYPE})),
            is_stackable=_matches(loaded, class_ancestors, STACKABLE_TYPES),
        )

    type_name_to_id = {loaded.type_name: id for id, loaded in classes.items()}

    return Relationships(
        classes=classes,
        ancestors=ancestors,
        descendants=descendants,
        metadata=metadata,
        type_name_to_id=type_name_to_id,
    )