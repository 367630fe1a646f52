# filecollector/content.py

"""
Combined document generation.

This module turns the checked files of a :class:`~filecollector.selection.SelectionTree`
into a single text document: one block per file, made of a header line with
the file path relative to the workspace root, the raw file content and a
blank-line separator, in the order the files were discovered.

Files are read fully into memory; there is no size limit.
"""


from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from filecollector.errors import FileReadError, NoSelectionError
from filecollector.fs import FileSystem, LocalFileSystem
from filecollector.selection import SelectionTree

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "// File: {path}\n"


@dataclass(frozen=True)
class Document:
    """Generated text together with the relative paths it contains."""

    text: str
    files: tuple[str, ...]

    def __str__(self) -> str:
        return self.text


def relative_posix(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` with forward slashes."""
    return Path(os.path.relpath(path, root)).as_posix()


def file_to_text(content: str, rel_path: str, *, header: str = DEFAULT_HEADER) -> str:
    """
    Format one file block.

    Parameters
    ----------
    content : str
        Raw file content.
    rel_path : str
        Path shown in the header line.
    header : str, default="// File: {path}\\n"
        Header template; ``{path}`` is replaced with ``rel_path``.

    Returns
    -------
    str
        ``header + content`` followed by a blank-line separator.
    """

    return f"{header.format(path=rel_path)}{content}\n\n"


class FileCollector:
    """
    Build a :class:`Document` from the checked files of a selection tree.

    Parameters
    ----------
    fs : FileSystem, optional
        Filesystem capability used to read files. Defaults to
        :class:`~filecollector.fs.LocalFileSystem`.
    encoding : str, default="utf-8"
        Text encoding used when reading files.
    header : str, default="// File: {path}\\n"
        Header template for each block.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        *,
        encoding: str = "utf-8",
        header: str = DEFAULT_HEADER,
    ) -> None:
        self.fs = fs if fs is not None else LocalFileSystem()
        self.encoding = encoding
        self.header = header

    def generate(self, tree: SelectionTree, workspace_root: Path | None = None) -> Document:
        """
        Concatenate every checked file of ``tree``.

        Parameters
        ----------
        tree : SelectionTree
            Source of the checked files.
        workspace_root : pathlib.Path, optional
            Base for the relative paths in the headers. Defaults to the
            tree root.

        Returns
        -------
        Document
            The assembled text. Nothing is written to disk.

        Raises
        ------
        NoSelectionError
            If no file is checked.
        FileReadError
            If any checked file cannot be read or decoded. No partial
            document is returned.
        """

        root = Path(workspace_root) if workspace_root is not None else tree.root
        paths = tree.checked_files()
        if not paths:
            raise NoSelectionError()

        blocks: list[str] = []
        files: list[str] = []
        for path in paths:
            try:
                data = self.fs.read_text(path, encoding=self.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise FileReadError(path, exc) from exc
            rel = relative_posix(path, root)
            blocks.append(file_to_text(data, rel, header=self.header))
            files.append(rel)

        logger.debug("Collected %d files", len(files))
        return Document("".join(blocks), tuple(files))
