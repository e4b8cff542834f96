"""Flat path listing in the style of ``find``."""

from typing import Iterator

from anytree import PreOrderIter

from projstruct.file_system_tree.file_system_node import FileSystemNode

from .base_strategy import RenderStrategy


class FlatRenderStrategy(RenderStrategy):
    """Render every surviving entry as its display path, one per line.

    The root comes first, followed by its descendants in depth-first lexical order.

    Example:
        >>> root = FileSystemNode(".", display_path=".", is_dir=True)
        >>> _ = FileSystemNode("app.js", parent=root, display_path="./app.js")
        >>> list(FlatRenderStrategy().render(root))
        ['.', './app.js']
    """

    def render(self, root: FileSystemNode) -> Iterator[str]:
        for node in PreOrderIter(root):
            yield node.display_path
