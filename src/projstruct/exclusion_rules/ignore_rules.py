"""Immutable set of directory-name and file-pattern ignore rules."""

import posixpath
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from pathspec import PathSpec
from pathspec.util import normalize_file

from .glob_pattern import SimpleGlobPattern


@dataclass(frozen=True)
class IgnoreRuleSet:
    """Directory names to prune and file-name patterns to hide.

    Directory names are compared against path segments, so a directory named ``dist``
    is pruned wherever it occurs. A directory rule containing a ``/`` (for example
    ``build/output``) prunes a directory whose path ends with that sequence of segments.

    File patterns are ``*``/``?`` globs (see SimpleGlobPattern), compiled once into a
    pathspec PathSpec. A path is hidden when any pattern matches it.

    The rule set is built once per run and never modified afterwards.

    Attributes:
        directory_names (FrozenSet[str]): Directory rules, without trailing separators.
        file_patterns (Tuple[str, ...]): File-name glob patterns in their source order.

    Example:
        >>> rules = IgnoreRuleSet(frozenset({"node_modules"}), ("*.log", "docs/*.tmp"))
        >>> rules.prunes("web/node_modules")
        True
        >>> rules.hides("server/app.log")
        True
        >>> rules.hides("docs/draft.tmp")
        True
        >>> rules.hides("src/docs/draft.tmp")
        False
    """

    directory_names: FrozenSet[str] = frozenset()
    file_patterns: Tuple[str, ...] = ()
    spec: PathSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "directory_names", frozenset(self.directory_names))
        object.__setattr__(self, "file_patterns", tuple(self.file_patterns))
        object.__setattr__(self, "spec", PathSpec(SimpleGlobPattern(p) for p in self.file_patterns))

    def prunes(self, directory_path: str) -> bool:
        """Check whether a directory should be pruned.

        Args:
            directory_path: Path of the directory, relative or absolute.

        Returns:
            bool: True if the directory's base name equals a directory rule, or its
                normalized path ends with a multi-segment directory rule.
        """
        norm_path = normalize_file(directory_path).rstrip("/")
        if posixpath.basename(norm_path) in self.directory_names:
            return True

        for rule in self.directory_names:
            if "/" in rule and (norm_path == rule or norm_path.endswith("/" + rule)):
                return True
        return False

    def hides(self, file_path: str) -> bool:
        """Check whether a file matches any file pattern.

        Args:
            file_path: Path of the file. A leading ``./`` is ignored.

        Returns:
            bool: True if any file pattern matches.
        """
        return bool(self.spec.match_file(file_path))
