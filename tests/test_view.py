# tests/test_view.py
from pathlib import Path

from filecollector import DirectoryLister, SelectionTree, TreeItemView, draw_selection, item_view


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def _lines(s: str):
    return s.splitlines()


def test_item_view_fields(tmp_path: Path):
    _make_file(tmp_path / "a.txt")
    (tmp_path / "d").mkdir()

    tree = SelectionTree(tmp_path, DirectoryLister(sort=True))
    d, a = tree.expand()
    tree.toggle(a)

    assert item_view(d) == TreeItemView("d", tmp_path / "d", True, False)
    assert item_view(a) == TreeItemView("a.txt", tmp_path / "a.txt", False, True)


def test_draw_selection_only_root_before_expansion(tmp_path: Path):
    _make_file(tmp_path / "a.txt")

    tree = SelectionTree(tmp_path)

    assert _lines(draw_selection(tree)) == [tmp_path.name]


def test_draw_selection_nested_structure(tmp_path: Path):
    # root
    # ├── [ ] docs
    # │   └── [ ] readme.md
    # └── [x] src
    #     └── [x] a.py
    _make_file(tmp_path / "src/a.py")
    _make_file(tmp_path / "docs/readme.md")

    tree = SelectionTree(tmp_path, DirectoryLister(sort=True))
    docs, src = tree.expand()
    tree.expand(docs.fs_path)
    tree.toggle(src)

    lines = _lines(draw_selection(tree))

    assert lines[0] == tmp_path.name
    assert lines[1:] == [
        "├── [ ] docs",
        "│   └── [ ] readme.md",
        "└── [x] src",
        "    └── [x] a.py",
    ]


def test_draw_selection_hides_unlisted_children(tmp_path: Path):
    _make_file(tmp_path / "pkg/inner.py")
    _make_file(tmp_path / "top.txt")

    tree = SelectionTree(tmp_path, DirectoryLister(sort=True))
    tree.expand()

    out = draw_selection(tree)

    assert "inner.py" not in out
    assert _lines(out)[1:] == ["├── [ ] pkg", "└── [ ] top.txt"]
