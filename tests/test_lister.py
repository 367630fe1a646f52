import os
import stat
import sys
from pathlib import Path

import pytest

from filecollector import DirectoryLister, Entry


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def test_lists_immediate_entries_only(tmp_path: Path):
    _make_file(tmp_path / "a.txt")
    _make_file(tmp_path / "sub/b.txt")

    entries = DirectoryLister().list(tmp_path)

    assert {e.name for e in entries} == {"a.txt", "sub"}
    by_name = {e.name: e for e in entries}
    assert by_name["sub"] == Entry("sub", tmp_path / "sub", True)
    assert by_name["a.txt"].is_dir is False
    assert by_name["a.txt"].path == tmp_path / "a.txt"


def test_ignored_directories_are_dropped(tmp_path: Path):
    _make_file(tmp_path / "node_modules/pkg/index.js")
    _make_file(tmp_path / ".git/config")
    _make_file(tmp_path / "keep.txt")

    names = {e.name for e in DirectoryLister().list(tmp_path)}

    assert names == {"keep.txt"}


def test_ignore_is_exact_name_and_directories_only(tmp_path: Path):
    (tmp_path / "Node_Modules").mkdir()
    (tmp_path / "node_modules_old").mkdir()
    # A worktree-style `.git` file is a file, not a directory.
    _make_file(tmp_path / ".git", "gitdir: elsewhere")

    names = {e.name for e in DirectoryLister().list(tmp_path)}

    assert names == {"Node_Modules", "node_modules_old", ".git"}


def test_custom_ignored_names(tmp_path: Path):
    (tmp_path / "build").mkdir()
    (tmp_path / "node_modules").mkdir()

    names = {e.name for e in DirectoryLister(ignored_names={"build"}).list(tmp_path)}

    assert names == {"node_modules"}


def test_sorted_listing_is_dirs_first_case_insensitive(tmp_path: Path):
    (tmp_path / "bDir").mkdir()
    (tmp_path / "ADir").mkdir()
    _make_file(tmp_path / "z.txt")
    _make_file(tmp_path / "A.txt")

    names = [e.name for e in DirectoryLister(sort=True).list(tmp_path)]

    assert names == ["ADir", "bDir", "A.txt", "z.txt"]


def test_missing_directory_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        DirectoryLister().list(tmp_path / "nope")


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="Permission bits test is POSIX-only, non-root")
def test_unreadable_directory_raises(tmp_path: Path):
    secret = tmp_path / "secret"
    secret.mkdir()
    secret.chmod(0)
    try:
        with pytest.raises(PermissionError):
            DirectoryLister().list(secret)
    finally:
        secret.chmod(stat.S_IRWXU)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlinks_are_flagged(tmp_path: Path):
    (tmp_path / "real").mkdir()
    _make_file(tmp_path / "data.txt")
    (tmp_path / "linkdir").symlink_to(tmp_path / "real", target_is_directory=True)
    (tmp_path / "linkfile").symlink_to(tmp_path / "data.txt")
    (tmp_path / "dangling").symlink_to(tmp_path / "missing")

    by_name = {e.name: e for e in DirectoryLister().list(tmp_path)}

    assert by_name["real"] == Entry("real", tmp_path / "real", True, False)
    assert by_name["linkdir"] == Entry("linkdir", tmp_path / "linkdir", True, True)
    assert by_name["linkfile"] == Entry("linkfile", tmp_path / "linkfile", False, True)
    assert by_name["dangling"] == Entry("dangling", tmp_path / "dangling", False, True)
