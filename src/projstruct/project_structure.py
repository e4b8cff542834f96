"""Project structure listing across one or more traversal roots.

This module ties the pieces of a run together: the selected roots, the ignore rules
and a rendering strategy. It streams the rendering root by root and exposes the same
filtered file set for content aggregation.
"""

from typing import Iterator, List, Optional, Sequence, Union

from projstruct.exceptions import TraversalRootMissing
from projstruct.exclusion_rules.ignore_rules import IgnoreRuleSet
from projstruct.file_system_tree.file_system_tree import FileSystemTree
from projstruct.path_selector import select_roots
from projstruct.render_strategies import RenderStrategy, create_strategy


class ProjectStructure:
    """Filtered view of a project over an ordered set of traversal roots.

    Roots are processed in the order given. A root that does not exist is recorded in
    root_errors and skipped; the other roots are still processed. Directories whose
    contents could not be listed are recorded in warnings.

    Attributes:
        roots (Tuple[str, ...]): The normalized traversal roots.
        ignore_rules (Optional[IgnoreRuleSet]): Rules applied to every root.
        show_files (bool): Whether file entries are rendered.
        root_errors (List[TraversalRootMissing]): Missing roots, one entry per root.
        warnings (List[str]): Unreadable directories encountered so far.
        directory_count (int): Directories rendered (roots excluded).
        file_count (int): Files rendered.

    Example:
        >>> project = ProjectStructure(["src", "public"])  # doctest: +SKIP
        >>> for line in project.stream_tree():  # doctest: +SKIP
        ...     print(line, end="")
        src
        ├── App.js
        └── components/
            └── Button.js
        public
        └── index.html
        <BLANKLINE>
        1 directory, 3 files
    """

    def __init__(
        self,
        paths: Optional[Sequence[str]] = None,
        *,
        ignore_rules: Optional[IgnoreRuleSet] = None,
        show_files: bool = True,
        render_strategy: Union[str, RenderStrategy] = "tree",
    ) -> None:
        """Initialize the project view.

        Args:
            paths: Explicit roots; the project root (``.``) when empty or None.
            ignore_rules: Rules applied during traversal. None shows everything.
            show_files: Whether file entries are rendered. File iteration for content
                aggregation always includes files.
            render_strategy: ``"tree"``, ``"flat"`` or a RenderStrategy instance.

        Raises:
            ValueError: If render_strategy names an unknown style.
            TypeError: If render_strategy is neither a string nor a RenderStrategy.
        """
        self.roots = select_roots(paths)
        self.ignore_rules = ignore_rules
        self.show_files = show_files

        if isinstance(render_strategy, str):
            self.render_strategy = create_strategy(render_strategy)
        elif isinstance(render_strategy, RenderStrategy):
            self.render_strategy = render_strategy
        else:
            raise TypeError("render_strategy must be either a string ('tree' or 'flat') or a RenderStrategy instance")

        self.root_errors: List[TraversalRootMissing] = []
        self.warnings: List[str] = []
        self.directory_count = 0
        self.file_count = 0

    def _record_root_error(self, error: TraversalRootMissing) -> None:
        if all(existing.path != error.path for existing in self.root_errors):
            self.root_errors.append(error)

    def _record_warnings(self, tree: FileSystemTree) -> None:
        for warning in tree.warnings:
            if warning not in self.warnings:
                self.warnings.append(warning)

    def stream_tree(self) -> Iterator[str]:
        """Stream the rendering of every root, then the strategy's closing report.

        Yields:
            Output lines, each terminated by a newline.
        """
        self.directory_count = 0
        self.file_count = 0

        for root in self.roots:
            fs_tree = FileSystemTree(root, self.ignore_rules, show_files=self.show_files)
            try:
                node = fs_tree.get_tree()
            except TraversalRootMissing as e:
                self._record_root_error(e)
                continue

            self._record_warnings(fs_tree)
            self.directory_count += fs_tree.get_directory_count()
            self.file_count += fs_tree.get_file_count()

            if node is not None:
                for line in self.render_strategy.render(node):
                    yield line + "\n"

        for line in self.render_strategy.render_report(self.directory_count, self.file_count, self.show_files):
            yield line + "\n"

    def iterate_files(self) -> Iterator[str]:
        """Iterate over every file that survives the ignore rules, across all roots.

        Files are yielded regardless of show_files, in the same order as the rendering.

        Yields:
            Display paths of the files.
        """
        for root in self.roots:
            fs_tree = FileSystemTree(root, self.ignore_rules, show_files=True)
            try:
                yield from fs_tree.iterate_files()
            except TraversalRootMissing as e:
                self._record_root_error(e)
                continue
            self._record_warnings(fs_tree)
