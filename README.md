# cardschema

Utilities for working with the Adaptive Cards typed schema, and for drawing
onto RGBA images through nested masks:

- parse typed-schema documents into classes, enums, properties and enum
  values, rejecting unknown fields (`cardschema.schema_classes`,
  `cardschema.schema_types`);
- load a folder of typed-schema JSON files into classes and enums
  (`cardschema.loader.load_types`);
- work out inheritance between schema classes, with ancestors and
  descendants ordered depth first by distance (`cardschema.relationships.get_relationships`);
- turn schema names into identifiers (`cardschema.naming`) and find the shared
  prefix of variant names (`cardschema.common_prefix.common_prefix`);
- describe enum types with their variants, aliases and default variant
  (`cardschema.enums.process_enum`);
- draw onto an RGBA image through nested rectangular masks
  (`cardschema.masked_image`, `cardschema.geometry`);
- print a computed layout tree as debug lines (`cardschema.print_tree`).

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Working with the typed schema

```python
from cardschema.loader import load_types
from cardschema.relationships import get_relationships
from cardschema.enums import process_enum

types = load_types("schema/typed-schema-1.6")
relationships = get_relationships(types.classes)

print(relationships.is_layoutable("Action.Execute"))
for loaded_enum in types.enums.values():
    print(process_enum(loaded_enum))
```

`load_types` raises `LoadError` on a duplicate file id or an unknown
`classType`; the parsers raise `SchemaError` on documents of the wrong shape;
`get_relationships` raises `RelationshipError` when a class extends one that
is not loaded.

Naming helpers:

```python
from cardschema.common_prefix import common_prefix
from cardschema.naming import sanitize_type_ident, sanitize_type_inner

common_prefix(["Action.OpenUrl", "Action.Submit", "Action.ShowCard"])  # "Action."
sanitize_type_ident("Action.OpenUrl")  # "ActionOpenUrl"
sanitize_type_inner("string[]")        # "Vec<String>"
```

## Masked drawing

```python
from cardschema.geometry import Rect
from cardschema.masked_image import DebugMode, MaskedImage, RgbaImage

image = RgbaImage.filled(10, 10, (255, 255, 255, 255))
canvas = MaskedImage.from_image(image, DebugMode.none()).mask(Rect.at(2, 2, 5, 5))
canvas.draw_pixel(3, 3, (255, 0, 0, 255))  # inside the mask: drawn
canvas.draw_pixel(1, 1, (0, 255, 0, 255))  # outside the mask: ignored
```

With `DebugMode.with_transparent_masks()`, pixels outside a mask are drawn in
a faint grey instead of being dropped, which makes mask boundaries visible.
`MaskedImage.eject()` returns the underlying image, and raises `RuntimeError`
while another mask still refers to the chain.

## Layout tree printing

```python
from cardschema.print_tree import LayoutNode, NodeLayout, print_tree

root = LayoutNode("card", 0, NodeLayout(width=100, height=50),
                  [LayoutNode("text", 1, NodeLayout(y=10, width=100, height=20))])
print_tree(root, print)
```

`tree_lines(root)` yields the same lines, starting with a `TREE` header.

## What this package does not do

It does not generate source code from the schema: it produces the data a
generator would need (relationships, identifiers, enum descriptions). It does
not fill JSON schema properties with defaults, lay out or render cards, and it
installs no command-line program.