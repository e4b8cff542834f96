"""Filtered tree representation of one traversal root.

This module provides the FileSystemTree class, which walks a root depth-first in
lexical order, prunes directories matching directory rules, hides files matching file
patterns and keeps what survives as a tree of FileSystemNode objects.
"""

import os
import posixpath
from pathlib import Path
from typing import Iterator, List, Optional, Set

from anytree import PreOrderIter

from projstruct.exceptions import TraversalRootMissing
from projstruct.exclusion_rules.ignore_rules import IgnoreRuleSet
from projstruct.file_system_tree.decisions import classify_entry
from projstruct.file_system_tree.file_identifier import FileIdentifier
from projstruct.file_system_tree.file_system_node import FileSystemNode
from projstruct.types import FileDecision


class FileSystemTree:
    """A filtered tree representation of a single traversal root.

    The tree is built lazily on first access. Entries are visited depth-first with the
    children of every directory sorted lexically, which gives a deterministic order for
    both rendering and file iteration.

    Filtering:
        - A directory whose name matches a directory rule is pruned: neither it nor any
          of its descendants appear. The root itself is never pruned.
        - A file matching a file pattern is hidden.
        - With show_files=False no file nodes are created, but every directory is still
          descended so that the full directory structure (including directories that
          only contain files) is kept.
        - A root that is a file is subject to file-pattern filtering only.

    Symbolic Link Behavior:
        Links are traversed like the entries they point to. A link to a directory that
        is already on the current descent path is kept as a leaf marked loop_detected and
        never descended, so traversal always terminates.

    Attributes:
        root_path (str): The root as given (trailing separators already stripped).
        ignore_rules (Optional[IgnoreRuleSet]): Rules for pruning and hiding entries.
        show_files (bool): Whether file nodes are created.
        warnings (List[str]): Directories whose contents could not be listed.

    Example:
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> [path for path in tree.iterate_files()]  # doctest: +SKIP
        ['src/App.js', 'src/components/Button.js']
    """

    def __init__(
        self,
        root_path: str,
        ignore_rules: Optional[IgnoreRuleSet] = None,
        show_files: bool = True,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path of the root directory or file.
            ignore_rules: Rules for excluding entries. Defaults to None (show everything).
            show_files: Whether file entries are kept. Defaults to True.
        """
        self.root_path = root_path
        self.ignore_rules = ignore_rules
        self.show_files = show_files
        self.warnings: List[str] = []
        self._tree: Optional[FileSystemNode] = None
        self._built = False
        self._file_count = 0
        self._directory_count = 0

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the filtered tree, building it on first access.

        Returns:
            The root node, or None when nothing of the root survives filtering (a file
            root that is hidden, or any file root when files are not shown).

        Raises:
            TraversalRootMissing: If the root path does not exist.
        """
        if not self._built:
            self._build_tree()
        return self._tree

    def _build_tree(self) -> None:
        root = Path(self.root_path)
        if not os.path.lexists(root):
            raise TraversalRootMissing(self.root_path)

        self.warnings = []
        ancestors: Set[FileIdentifier] = set()
        if self._is_dir(root):
            self._tree = self._create_directory_node(
                root, self.root_path, self.root_path, ancestors, parent=None, is_root=True
            )
        else:
            self._tree = self._create_file_node(root, self.root_path, self.root_path, parent=None)

        self._built = True
        self._count_files_and_directories()

    @staticmethod
    def _is_dir(path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    @staticmethod
    def _read_link(path: Path) -> Optional[str]:
        try:
            return os.readlink(path)
        except OSError:
            return None

    def _create_node(
        self, path: Path, display_path: str, ancestors: Set[FileIdentifier], parent: FileSystemNode
    ) -> Optional[FileSystemNode]:
        """Create the node for a child entry, or return None if it is filtered out."""
        if self._is_dir(path):
            return self._create_directory_node(path, path.name, display_path, ancestors, parent)
        return self._create_file_node(path, path.name, display_path, parent)

    def _create_file_node(
        self, path: Path, name: str, display_path: str, parent: Optional[FileSystemNode]
    ) -> Optional[FileSystemNode]:
        if not self.show_files:
            return None
        if classify_entry(self.ignore_rules, display_path, is_dir=False) is FileDecision.HIDE:
            return None

        is_symlink = path.is_symlink()
        return FileSystemNode(
            name,
            parent=parent,
            display_path=display_path,
            is_dir=False,
            is_symlink=is_symlink,
            symlink_target=self._read_link(path) if is_symlink else None,
        )

    def _create_directory_node(
        self,
        path: Path,
        name: str,
        display_path: str,
        ancestors: Set[FileIdentifier],
        parent: Optional[FileSystemNode],
        is_root: bool = False,
    ) -> Optional[FileSystemNode]:
        if not is_root and classify_entry(self.ignore_rules, display_path, is_dir=True) is FileDecision.PRUNE:
            return None

        is_symlink = path.is_symlink()
        file_id = FileIdentifier.from_path(path)
        node = FileSystemNode(
            name,
            parent=parent,
            display_path=display_path,
            is_dir=True,
            is_symlink=is_symlink,
            symlink_target=self._read_link(path) if is_symlink else None,
            loop_detected=file_id is not None and file_id in ancestors,
        )
        if node.loop_detected:
            return node

        try:
            children = sorted(os.listdir(path))
        except OSError as e:
            # Keep the directory itself but skip its contents
            self.warnings.append(f"Cannot read directory {display_path}: {e.strerror or e}")
            return node

        if file_id is not None:
            ancestors.add(file_id)
        for child in children:
            self._create_node(path / child, posixpath.join(display_path, child), ancestors, parent=node)
        # Only the current descent path counts; siblings may reach the same directory
        if file_id is not None:
            ancestors.discard(file_id)

        return node

    def _count_files_and_directories(self) -> None:
        """Count the files and directories in the tree, excluding the root."""
        self._file_count = 0
        self._directory_count = 0
        if self._tree is None:
            return

        for node in PreOrderIter(self._tree):
            if node is self._tree and node.is_dir:
                continue
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the number of files in the tree."""
        if not self._built:
            self._build_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        if not self._built:
            self._build_tree()
        return self._directory_count

    def iterate_files(self) -> Iterator[str]:
        """Iterate over the display paths of all files in the tree.

        Files are yielded in the same lexical depth-first order used for rendering.

        Yields:
            The display path of each file node.

        Raises:
            TraversalRootMissing: If the root path does not exist.
        """
        tree = self.get_tree()
        if tree is None:
            return

        for node in PreOrderIter(tree, filter_=lambda n: not n.is_dir):
            yield node.display_path
