# filecollector/session.py

"""
Editor-style orchestration of a selection tree.

:class:`CollectorSession` bundles one :class:`SelectionTree` and one
:class:`FileCollector` for a workspace root and exposes the handful of
commands a tree view needs: listing children, reacting to a checkbox change,
toggling everything and writing the combined file.
"""


from __future__ import annotations

import logging
from pathlib import Path

from filecollector.content import Document, FileCollector
from filecollector.errors import InvalidFileNameError
from filecollector.fs import FileSystem, LocalFileSystem
from filecollector.lister import DirectoryLister
from filecollector.selection import SelectionTree
from filecollector.view import TreeItemView, item_view

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".txt"


def validate_file_name(name: str) -> str:
    """
    Check an output file name entered without extension.

    Raises
    ------
    InvalidFileNameError
        If ``name`` is empty or contains a dot.
    """

    if not name:
        raise InvalidFileNameError("File name is required")
    if "." in name:
        raise InvalidFileNameError("Please enter name without extension")
    return name


class CollectorSession:
    """
    Commands bound to one workspace root.

    Parameters
    ----------
    root : pathlib.Path
        Workspace root.
    fs : FileSystem, optional
        Filesystem capability shared by the lister, the collector and the
        output writer.
    sort : bool, default=False
        Passed to :class:`DirectoryLister`.
    follow_symlinks : bool, default=False
        Passed to :class:`SelectionTree`.
    encoding : str, default="utf-8"
        Encoding used for reading inputs and writing the output.
    """

    def __init__(
        self,
        root: Path,
        fs: FileSystem | None = None,
        *,
        sort: bool = False,
        follow_symlinks: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        self.fs = fs if fs is not None else LocalFileSystem()
        self.encoding = encoding
        self.tree = SelectionTree(
            root, DirectoryLister(self.fs, sort=sort), follow_symlinks=follow_symlinks
        )
        self.collector = FileCollector(self.fs, encoding=encoding)

    @property
    def root(self) -> Path:
        return self.tree.root

    def children(self, path: Path | str | None = None) -> list[TreeItemView]:
        """Expand ``path`` (the root when ``None``) and return its items."""
        return [item_view(n) for n in self.tree.expand(path)]

    def on_checkbox_changed(self, path: Path | str) -> bool:
        """
        Toggle the known node at ``path`` and return its new state.

        The workspace root is not an item of the view and cannot be toggled.

        Raises
        ------
        KeyError
            If ``path`` is the root or has not been listed yet.
        """

        node = self.tree.get(path)
        if node is None:
            raise KeyError(f"Unknown path: {path}")
        return self.tree.toggle(node)

    def toggle_all(self) -> str:
        """Toggle every known node and return a status message."""
        message = "All files selected" if self.tree.toggle_all() else "All files deselected"
        logger.info(message)
        return message

    def generate(self) -> Document:
        return self.collector.generate(self.tree, self.root)

    def generate_file(self, name: str) -> Path:
        """
        Write the combined document to ``<root>/<name>.txt``.

        The name is validated and the document generated before anything is
        written, so a missing selection or an unreadable file leaves the
        workspace untouched.

        Raises
        ------
        InvalidFileNameError
            If ``name`` is empty or has an extension.
        NoSelectionError
            If no file is checked.
        FileReadError
            If a checked file cannot be read.
        OSError
            If the output cannot be written.
        """

        validate_file_name(name)
        document = self.generate()
        output = self.root / f"{name}{OUTPUT_SUFFIX}"
        self.fs.write_text(output, document.text, encoding=self.encoding)
        logger.info("Generated file: %s (%d files)", output, len(document.files))
        return output
