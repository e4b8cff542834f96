"""Hierarchical tree drawing in the style of the Unix ``tree`` command."""

from typing import Iterator

from anytree import ContStyle, RenderTree

from projstruct.file_system_tree.file_system_node import FileSystemNode

from .base_strategy import RenderStrategy

LOOP_MARKER = "[recursive, not followed]"


def pluralize(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


class TreeRenderStrategy(RenderStrategy):
    """Render trees with box-drawing connectors.

    The root is printed as given, child directories carry a trailing ``/`` and symbolic
    links show their target. After all roots a blank line and a report such as
    ``2 directories, 5 files`` are printed (``2 directories`` when files are hidden).

    Example:
        >>> root = FileSystemNode("src", display_path="src", is_dir=True)
        >>> _ = FileSystemNode("App.js", parent=root, display_path="src/App.js")
        >>> lib = FileSystemNode("components", parent=root, display_path="src/components", is_dir=True)
        >>> _ = FileSystemNode("Button.js", parent=lib, display_path="src/components/Button.js")
        >>> for line in TreeRenderStrategy().render(root):
        ...     print(line)
        src
        ├── App.js
        └── components/
            └── Button.js
    """

    def format_node(self, node: FileSystemNode, is_root: bool = False) -> str:
        """Format the label of a single node."""
        if is_root:
            return str(node.name)

        label = str(node.name)
        if node.is_symlink:
            label += f" -> {node.symlink_target}" if node.symlink_target is not None else " [symlink]"
        elif node.is_dir:
            label += "/"
        if node.loop_detected:
            label += f" {LOOP_MARKER}"
        return label

    def render(self, root: FileSystemNode) -> Iterator[str]:
        for prefix, _fill, node in RenderTree(root, style=ContStyle()):
            yield f"{prefix}{self.format_node(node, is_root=node is root)}"

    def render_report(self, directory_count: int, file_count: int, show_files: bool) -> Iterator[str]:
        yield ""
        directories = pluralize(directory_count, "directory", "directories")
        if show_files:
            yield f"{directories}, {pluralize(file_count, 'file', 'files')}"
        else:
            yield directories
