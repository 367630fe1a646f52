# filecollector/selection.py

"""
Checkbox selection state over a lazily materialised directory tree.

A :class:`SelectionTree` owns one :class:`Node` per filesystem entry it has
seen so far, keyed by absolute path. Nodes are only created when their
parent directory is listed, either because the directory was expanded or
because a checked directory propagated its state downwards. Once created a
node lives as long as the tree, so expanding the same directory again hands
back the same nodes with their checked state intact.

Nodes are ``anytree`` nodes: the known part of the tree can be walked with
``PreOrderIter`` or drawn with ``RenderTree``.
"""


from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from anytree import NodeMixin

from filecollector.fs import Entry
from filecollector.lister import DirectoryLister

logger = logging.getLogger(__name__)


class Node(NodeMixin):
    """
    In-memory record of one filesystem entry.

    Attributes
    ----------
    name : str
        Entry name, used as the display label.
    fs_path : pathlib.Path
        Absolute path; unique within a tree.
    is_dir : bool
        Entry kind, fixed at creation.
    is_symlink : bool
        Whether the entry is a symbolic link.
    checked : bool
        Checkbox state.
    children_known : bool
        Whether the immediate children of this directory have been listed.
        Always ``False`` for files.
    """

    def __init__(
        self,
        fs_path: Path,
        is_dir: bool,
        *,
        is_symlink: bool = False,
        checked: bool = False,
        parent: Node | None = None,
    ) -> None:
        super().__init__()
        self.name = fs_path.name or str(fs_path)
        self.fs_path = fs_path
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.checked = checked
        self.children_known = False
        self.parent = parent

    def __repr__(self) -> str:
        kind = "dir" if self.is_dir else "file"
        return f"Node({str(self.fs_path)!r}, {kind}, checked={self.checked})"


class SelectionTree:
    """
    Selection state for one workspace root.

    Parameters
    ----------
    root : pathlib.Path
        Workspace root directory. It is represented by :attr:`root_node`,
        which is not part of the node map and is never reported as checked.
    lister : DirectoryLister, optional
        Source of directory entries. Defaults to a local, unsorted lister.
    follow_symlinks : bool, default=False
        Whether directory propagation descends into symbolic links to
        directories. Such links are still listed as directory nodes and can
        be expanded explicitly. When following, a link that resolves to one of
        the directories currently being walked is not descended into, so link
        cycles terminate.

    Notes
    -----
    :attr:`all_checked` records the direction of the last :meth:`toggle_all`
    call only. After individual toggles it may disagree with the actual node
    states, in which case the next toggle-all still goes by the flag.

    Mutating methods hold a per-tree re-entrant lock, so concurrent callers
    are served one at a time.
    """

    def __init__(
        self,
        root: Path,
        lister: DirectoryLister | None = None,
        *,
        follow_symlinks: bool = False,
    ) -> None:
        self.root = Path(root).absolute()
        self.lister = lister if lister is not None else DirectoryLister()
        self.follow_symlinks = follow_symlinks
        self.root_node = Node(self.root, True)
        self.all_checked = False
        self._nodes: dict[Path, Node] = {}
        self._remembered: dict[Path, bool] = {}
        self._lock = threading.RLock()

    # -- lookup ------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, Path)) and Path(path) in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def get(self, path: Path | str) -> Node | None:
        """Return the known node for ``path``, or ``None``."""
        return self._nodes.get(Path(path))

    def node_for(self, path: Path | str | None) -> Node:
        """Like :meth:`get`, but ``None`` or the root path give the root node."""
        if path is None or Path(path) == self.root:
            return self.root_node
        node = self.get(path)
        if node is None:
            raise KeyError(f"Unknown path: {path}")
        return node

    # -- expansion ---------------------------------------------------------

    def _register(self, parent: Node, entries: Iterable[Entry]) -> list[Node]:
        nodes: list[Node] = []
        for entry in entries:
            node = self._nodes.get(entry.path)
            if node is None:
                node = Node(
                    entry.path,
                    entry.is_dir,
                    is_symlink=entry.is_symlink,
                    checked=self._remembered.pop(entry.path, False),
                )
            node.parent = parent
            self._nodes[entry.path] = node
            nodes.append(node)
        parent.children_known = True
        return nodes

    def expand(self, dir_path: Path | str | None = None) -> list[Node]:
        """
        List a directory and return its nodes in listing order.

        Nodes already known for a listed path are reused as-is, so their
        checked state survives repeated expansion. Unknown entries get a new,
        unchecked node.

        Parameters
        ----------
        dir_path : pathlib.Path | str | None
            Directory to expand. ``None`` expands the workspace root.

        Raises
        ------
        OSError
            If the directory cannot be listed.
        """

        with self._lock:
            parent = self.node_for(dir_path)
            nodes = self._register(parent, self.lister.list(parent.fs_path))
            logger.debug("Expanded %s: %d nodes", parent.fs_path, len(nodes))
            return nodes

    # -- toggling ----------------------------------------------------------

    def toggle(self, node: Node) -> bool:
        """
        Flip ``node.checked`` and return the new state.

        For a directory, the new state is applied to every entry below it on
        disk, not just the ones already known; missing nodes are created on
        the way. Ignored directories are skipped like in :meth:`expand`, and
        symbolic links to directories are only descended into when
        ``follow_symlinks`` is set.

        Raises
        ------
        OSError
            If a directory in the subtree cannot be listed. Entries handled
            before the failure keep their new state.
        """

        with self._lock:
            checked = not node.checked
            node.checked = checked
            logger.debug("Toggled %s -> %s", node.fs_path, checked)
            if node.is_dir and (self.follow_symlinks or not node.is_symlink):
                self._propagate(node, checked, {node.fs_path.resolve()})
            return checked

    def _propagate(self, directory: Node, checked: bool, ancestors: set[Path]) -> None:
        for child in self._register(directory, self.lister.list(directory.fs_path)):
            child.checked = checked
            if not child.is_dir or (child.is_symlink and not self.follow_symlinks):
                continue
            real = child.fs_path.resolve()
            if real in ancestors:
                logger.debug("Not descending into %s: cycles back to %s", child.fs_path, real)
                continue
            ancestors.add(real)
            self._propagate(child, checked, ancestors)
            ancestors.discard(real)

    def toggle_all(self) -> bool:
        """
        Flip :attr:`all_checked` and apply it to every known node.

        Only nodes that exist at call time are touched; parts of the tree that
        were never listed keep their default state until discovered.
        """

        with self._lock:
            self.all_checked = not self.all_checked
            for node in self._nodes.values():
                node.checked = self.all_checked
            logger.info(
                "%s %d known nodes",
                "Checked" if self.all_checked else "Unchecked",
                len(self._nodes),
            )
            return self.all_checked

    # -- results -----------------------------------------------------------

    def checked_files(self) -> list[Path]:
        """Return checked file paths in discovery order."""
        with self._lock:
            files = [p for p, n in self._nodes.items() if n.checked and not n.is_dir]
        logger.debug("Total checked files found: %d", len(files))
        return files

    # -- state export ------------------------------------------------------

    def export_state(self) -> dict[str, bool]:
        """Return ``{path: checked}`` for every known node, in discovery order."""
        with self._lock:
            return {str(p): n.checked for p, n in self._nodes.items()}

    def import_state(self, state: Mapping[str, bool]) -> None:
        """
        Apply a mapping produced by :meth:`export_state`.

        Known nodes are updated immediately. States for paths not yet
        discovered are kept and used as the initial state of those nodes when
        they are first listed.
        Remembered states for paths that are never listed stay on the tree
        for its whole lifetime.
        """

        with self._lock:
            for key, checked in state.items():
                path = Path(key)
                node = self._nodes.get(path)
                if node is not None:
                    node.checked = bool(checked)
                else:
                    self._remembered[path] = bool(checked)
