# filecollector/fs.py

"""
Filesystem capability.

The selection tree and the collector never touch the disk directly; they go
through an object implementing :class:`FileSystem`. :class:`LocalFileSystem`
is the ``pathlib`` implementation used by default. Tests and hosts may inject
their own.
"""


from __future__ import annotations

import stat
from pathlib import Path
from typing import NamedTuple, Protocol


class Entry(NamedTuple):
    """
    One immediate entry of a directory.

    ``is_dir`` describes the link target for symbolic links, so a link to a
    directory has both ``is_dir`` and ``is_symlink`` set.
    """

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool = False


class FileSystem(Protocol):
    def list_dir(self, path: Path) -> list[Entry]: ...

    def read_text(self, path: Path, encoding: str = "utf-8") -> str: ...

    def write_text(self, path: Path, text: str, encoding: str = "utf-8") -> None: ...


def classify(p: Path) -> Entry:
    """
    Build the :class:`Entry` for ``p`` without following it blindly.

    Regular entries are classified with ``lstat``, whose failures propagate.
    A symbolic link is a directory only if its target resolves to one; broken
    or looping links are reported as non-directory leaves.

    Raises
    ------
    OSError
        If ``p`` itself cannot be stat'ed.
    """

    st = p.lstat()
    if stat.S_ISLNK(st.st_mode):
        return Entry(p.name, p, p.is_dir(), True)
    return Entry(p.name, p, stat.S_ISDIR(st.st_mode), False)


class LocalFileSystem:
    """
    ``pathlib``-backed :class:`FileSystem`.

    Errors are not caught: a missing path raises ``FileNotFoundError``, an
    unreadable one ``PermissionError``, a file passed to :meth:`list_dir`
    ``NotADirectoryError``.
    """

    def list_dir(self, path: Path) -> list[Entry]:
        # Native iteration order; materialised so a failure surfaces here.
        return [classify(p) for p in Path(path).iterdir()]

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: Path, text: str, encoding: str = "utf-8") -> None:
        Path(path).write_text(text, encoding=encoding)
