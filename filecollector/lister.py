# filecollector/lister.py

"""
Directory listing with ignored-directory filtering.
"""


from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from filecollector.fs import Entry, FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

IGNORED_DIRECTORY_NAMES: frozenset[str] = frozenset({"node_modules", ".git"})


class DirectoryLister:
    """
    Return the immediate entries of a directory, minus ignored directories.

    Parameters
    ----------
    fs : FileSystem, optional
        Filesystem capability. Defaults to :class:`LocalFileSystem`.
    ignored_names : Iterable[str], optional
        Directory names to drop. Matching is on the exact, case-sensitive
        entry name and only applies to directories; a file that happens to
        carry one of these names is kept.
    sort : bool, default=False
        If ``False``, entries keep the native order of the filesystem, which
        differs between platforms. If ``True``, directories come first and
        entries are sorted case-insensitively by name.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        *,
        ignored_names: Iterable[str] = IGNORED_DIRECTORY_NAMES,
        sort: bool = False,
    ) -> None:
        self.fs = fs if fs is not None else LocalFileSystem()
        self.ignored_names = frozenset(ignored_names)
        self.sort = sort

    def list(self, dir_path: Path) -> list[Entry]:
        """
        List ``dir_path`` without the ignored directories.

        Raises
        ------
        OSError
            If the directory does not exist or cannot be read.
        """

        entries = [
            e
            for e in self.fs.list_dir(Path(dir_path))
            if not (e.is_dir and e.name in self.ignored_names)
        ]
        if self.sort:
            entries.sort(key=lambda e: (not e.is_dir, e.name.casefold()))
        logger.debug("Listed %s: %d entries", dir_path, len(entries))
        return entries
