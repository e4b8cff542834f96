"""Node representation for file system entries in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node representing a file or directory that survived filtering.

    Extends anytree.Node with the attributes the renderers and the content aggregator
    need. Tree traversal (children, ancestors, pre-order iteration) comes from anytree.

    Attributes:
        name (str): Base name of the entry, or the root path as given for a root node.
        display_path (str): Path shown for the entry: the root path joined with the
            entry's path below the root, e.g. ``src/components/Button.js``.
        is_dir (bool): True if the entry is (or links to) a directory.
        is_symlink (bool): True if the entry is a symbolic link.
        symlink_target (Optional[str]): Raw link target, if this is a readable symlink.
        loop_detected (bool): True for a directory link pointing at a directory already on
            the current descent path. Such nodes are never descended.

    Example:
        >>> root = FileSystemNode("src", display_path="src", is_dir=True)
        >>> child = FileSystemNode("App.js", parent=root, display_path="src/App.js")
        >>> child.parent.name
        'src'
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        *,
        display_path: str,
        is_dir: bool = False,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        loop_detected: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.display_path = display_path
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target
        self.loop_detected = loop_detected
