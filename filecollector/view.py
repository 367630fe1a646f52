# filecollector/view.py

"""
Presentation helpers.

Plain records a tree widget can bind its checkboxes to, and a text rendering
of the known part of a selection tree.
"""


from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from anytree import ContStyle, RenderTree

from filecollector.selection import Node, SelectionTree


class TreeItemView(NamedTuple):
    label: str
    path: Path
    expandable: bool
    checked: bool


def item_view(node: Node) -> TreeItemView:
    return TreeItemView(node.name, node.fs_path, node.is_dir, node.checked)


def draw_selection(tree: SelectionTree) -> str:
    """
    Render the known nodes of ``tree`` as a Unicode tree with checkboxes.

    The first line is the root name; every other line is
    ``<branch>[x] name`` or ``<branch>[ ] name``. Directories that were never
    listed show no children.
    """

    lines: list[str] = []
    for pre, _, node in RenderTree(tree.root_node, style=ContStyle()):
        if node is tree.root_node:
            lines.append(node.name)
        else:
            mark = "[x]" if node.checked else "[ ]"
            lines.append(f"{pre}{mark} {node.name}")
    return "\n".join(lines)
