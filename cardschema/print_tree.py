"""Debug printing of a computed layout tree."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class NodeLayout:
    """The computed layout of a node."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    content_width: float = 0.0
    content_height: float = 0.0
    border_left: float = 0.0
    border_right: float = 0.0
    border_top: float = 0.0
    border_bottom: float = 0.0
    padding_left: float = 0.0
    padding_right: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0


@dataclass
class LayoutNode:
    """A node of a layout tree with its label, id, layout and children."""

    label: str
    node_id: int
    layout: NodeLayout = field(default_factory=NodeLayout)
    children: list[LayoutNode] = field(default_factory=list)


def _fmt(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def _node_line(node: LayoutNode, lines: str, has_sibling: bool) -> str:
    layout = node.layout
    fork = "├── " if has_sibling else "└── "

    def padded(value: float) -> str:
        return f"{_fmt(value):<4}"

    return (
        f"{lines}{fork} {node.label} "
        f"[x: {padded(layout.x)} y: {padded(layout.y)} "
        f"w: {padded(layout.width)} h: {padded(layout.height)} "
        f"content_w: {padded(layout.content_width)} "
        f"content_h: {padded(layout.content_height)} "
        f"border: l:{_fmt(layout.border_left)} r:{_fmt(layout.border_right)} "
        f"t:{_fmt(layout.border_top)} b:{_fmt(layout.border_bottom)}, "
        f"padding: l:{_fmt(layout.padding_left)} r:{_fmt(layout.padding_right)} "
        f"t:{_fmt(layout.padding_top)} b:{_fmt(layout.padding_bottom)}] "
        f"(NodeId({node.node_id}))"
    )


def _walk(node: LayoutNode, has_sibling: bool, lines: str) -> Iterator[str]:
    yield _node_line(node, lines, has_sibling)
    child_lines = lines + ("│   " if has_sibling else "    ")
    last = len(node.children) - 1
    for index, child in enumerate(node.children):
        yield from _walk(child, index < last, child_lines)


def tree_lines(root: LayoutNode) -> Iterator[str]:
    """Yield the lines describing a layout tree, starting with a `TREE` header."""
    yield "TREE"
    yield from _walk(root, False, "")


def print_tree(root: LayoutNode, log_debug: Callable[[str], None]) -> None:
    """Send each line describing the layout tree to `log_debug`."""
    for line in tree_lines(root):
        log_debug(line)