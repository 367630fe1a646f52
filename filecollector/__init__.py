"""
filecollector — pick files from a directory tree and bundle them into one text.

This package provides:
- a lazily expanded selection tree with checkbox state per file/directory,
  directory-to-descendant propagation and a global toggle,
- a collector that concatenates the checked files, each preceded by its
  path relative to the workspace root,
- a small session object wiring both to a tree-view style front end.

Filesystem access goes through an injectable capability; the default is
based on ``pathlib.Path``.
"""

from __future__ import annotations

from .content import Document, FileCollector
from .errors import FileCollectorError, FileReadError, InvalidFileNameError, NoSelectionError
from .fs import Entry, FileSystem, LocalFileSystem
from .lister import IGNORED_DIRECTORY_NAMES, DirectoryLister
from .selection import Node, SelectionTree
from .session import CollectorSession
from .view import TreeItemView, draw_selection, item_view

__all__ = [
    "CollectorSession",
    "DirectoryLister",
    "Document",
    "Entry",
    "FileCollector",
    "FileCollectorError",
    "FileReadError",
    "FileSystem",
    "IGNORED_DIRECTORY_NAMES",
    "InvalidFileNameError",
    "LocalFileSystem",
    "NoSelectionError",
    "Node",
    "SelectionTree",
    "TreeItemView",
    "draw_selection",
    "item_view",
]
