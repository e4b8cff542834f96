"""Unit tests for the tree drawing strategy."""

import pytest

from projstruct.file_system_tree.file_system_node import FileSystemNode
from projstruct.render_strategies import create_strategy
from projstruct.render_strategies.tree_strategy import LOOP_MARKER, TreeRenderStrategy, pluralize


@pytest.fixture
def sample_tree():
    root = FileSystemNode(".", display_path=".", is_dir=True)
    public = FileSystemNode("public", root, display_path="./public", is_dir=True)
    FileSystemNode("index.html", public, display_path="./public/index.html")
    src = FileSystemNode("src", root, display_path="./src", is_dir=True)
    FileSystemNode("App.js", src, display_path="./src/App.js")
    components = FileSystemNode("components", src, display_path="./src/components", is_dir=True)
    FileSystemNode("Button.js", components, display_path="./src/components/Button.js")
    return root


def test_render_draws_connectors(sample_tree):
    assert list(TreeRenderStrategy().render(sample_tree)) == [
        ".",
        "├── public/",
        "│   └── index.html",
        "└── src/",
        "    ├── App.js",
        "    └── components/",
        "        └── Button.js",
    ]


def test_root_is_printed_as_given():
    root = FileSystemNode("src/components", display_path="src/components", is_dir=True)
    assert list(TreeRenderStrategy().render(root)) == ["src/components"]


def test_file_root():
    root = FileSystemNode("README.md", display_path="README.md")
    assert list(TreeRenderStrategy().render(root)) == ["README.md"]


def test_symlinks_show_their_target():
    root = FileSystemNode("src", display_path="src", is_dir=True)
    FileSystemNode("Main.js", root, display_path="src/Main.js", is_symlink=True, symlink_target="App.js")
    FileSystemNode(
        "up",
        root,
        display_path="src/up",
        is_dir=True,
        is_symlink=True,
        symlink_target="..",
        loop_detected=True,
    )
    assert list(TreeRenderStrategy().render(root)) == [
        "src",
        "├── Main.js -> App.js",
        f"└── up -> .. {LOOP_MARKER}",
    ]


def test_unreadable_symlink_target():
    root = FileSystemNode("src", display_path="src", is_dir=True)
    FileSystemNode("odd", root, display_path="src/odd", is_symlink=True)
    assert list(TreeRenderStrategy().render(root))[1] == "└── odd [symlink]"


def test_report_with_files():
    assert list(TreeRenderStrategy().render_report(3, 5, show_files=True)) == ["", "3 directories, 5 files"]


def test_report_singular_forms():
    assert list(TreeRenderStrategy().render_report(1, 1, show_files=True)) == ["", "1 directory, 1 file"]


def test_report_in_compact_mode():
    assert list(TreeRenderStrategy().render_report(2, 0, show_files=False)) == ["", "2 directories"]


@pytest.mark.parametrize("count, expected", [(0, "0 files"), (1, "1 file"), (2, "2 files")])
def test_pluralize(count, expected):
    assert pluralize(count, "file", "files") == expected


def test_create_strategy():
    assert isinstance(create_strategy("tree"), TreeRenderStrategy)
    assert isinstance(create_strategy("TREE"), TreeRenderStrategy)
    with pytest.raises(ValueError, match="Unsupported render style"):
        create_strategy("xml")
