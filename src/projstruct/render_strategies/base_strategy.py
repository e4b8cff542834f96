"""Render strategy base class defining how a filtered tree becomes text lines.

A run renders one tree per traversal root, in root order, followed by an optional
closing report. Concrete strategies decide the line format.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from projstruct.file_system_tree.file_system_node import FileSystemNode


class RenderStrategy(ABC):
    """Abstract base class for tree rendering strategies.

    Example:
        >>> class NamesOnly(RenderStrategy):
        ...     def render(self, root: FileSystemNode) -> Iterator[str]:
        ...         yield root.name
        >>> root = FileSystemNode("src", display_path="src", is_dir=True)
        >>> list(NamesOnly().render(root))
        ['src']
    """

    @abstractmethod
    def render(self, root: FileSystemNode) -> Iterator[str]:
        """Render the tree below one traversal root.

        Args:
            root: Root node of a filtered tree.

        Yields:
            Output lines, without trailing newlines, in depth-first order.
        """
        pass

    def render_report(self, directory_count: int, file_count: int, show_files: bool) -> Iterator[str]:
        """Render the closing report printed after all roots.

        The default strategy has no report.

        Args:
            directory_count: Directories shown, excluding roots.
            file_count: Files shown.
            show_files: Whether file entries were rendered.

        Yields:
            Output lines, without trailing newlines.
        """
        return iter(())
