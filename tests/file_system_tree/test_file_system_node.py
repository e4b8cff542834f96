"""Unit tests for FileSystemNode."""

from anytree import PreOrderIter

from projstruct.file_system_tree.file_system_node import FileSystemNode


def test_defaults():
    node = FileSystemNode("App.js", display_path="src/App.js")
    assert node.name == "App.js"
    assert node.display_path == "src/App.js"
    assert node.is_dir is False
    assert node.is_symlink is False
    assert node.symlink_target is None
    assert node.loop_detected is False


def test_nodes_form_a_tree():
    root = FileSystemNode("src", display_path="src", is_dir=True)
    components = FileSystemNode("components", root, display_path="src/components", is_dir=True)
    button = FileSystemNode("Button.js", components, display_path="src/components/Button.js")

    assert button.parent is components
    assert root.children == (components,)
    assert [node.display_path for node in PreOrderIter(root)] == [
        "src",
        "src/components",
        "src/components/Button.js",
    ]


def test_symlink_attributes():
    node = FileSystemNode(
        "loop",
        display_path="./loop",
        is_dir=True,
        is_symlink=True,
        symlink_target="..",
        loop_detected=True,
    )
    assert node.is_symlink
    assert node.symlink_target == ".."
    assert node.loop_detected
