"""Build an IgnoreRuleSet from built-in defaults, an ignore file and user excludes.

Ignore-file lines and user excludes are classified differently:

* An ignore-file line ending in ``/`` is a directory rule; any other line is a file
  pattern.
* A user exclude ending in ``/`` is a directory rule; one containing ``*`` or ``?`` is
  a file pattern; anything else is treated as a directory name.

In both cases a leading ``./`` or ``/`` is dropped and the trailing ``/`` of directory
rules is stripped.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from projstruct.types import PathType

from .glob_pattern import has_wildcard
from .ignore_rules import IgnoreRuleSet

# Version control metadata, dependency caches and framework build output
DEFAULT_DIRECTORY_IGNORES: Tuple[str, ...] = (".git", "node_modules", ".next")

COMMENT_MARKER = "#"


def _strip_current_dir(entry: str) -> str:
    if entry.startswith("./"):
        entry = entry[2:]
    # Anchored entries are matched like unanchored ones
    return entry.lstrip("/")


def classify_exclude(exclude: str) -> Tuple[str, str]:
    """Classify a user-supplied exclude string.

    Args:
        exclude: The value given to -e/--exclude.

    Returns:
        A (kind, rule) tuple where kind is ``"directory"`` or ``"file"``.

    Example:
        >>> classify_exclude("dist/")
        ('directory', 'dist')
        >>> classify_exclude("*.log")
        ('file', '*.log')
        >>> classify_exclude("coverage")
        ('directory', 'coverage')
    """
    if exclude.endswith("/"):
        return "directory", _strip_current_dir(exclude.rstrip("/"))
    if has_wildcard(exclude):
        return "file", _strip_current_dir(exclude)
    return "directory", _strip_current_dir(exclude)


def parse_ignore_lines(lines: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Parse the lines of an ignore file.

    Everything from the first ``#`` onward is dropped, surrounding whitespace is trimmed
    and blank lines are skipped.

    Args:
        lines: Lines of the ignore file.

    Returns:
        A tuple of (directory_rules, file_patterns) in source order.

    Example:
        >>> parse_ignore_lines(["# build output", "dist/", "./coverage/", "*.log  # logs", ""])
        (['dist', 'coverage'], ['*.log'])
    """
    directories: List[str] = []
    patterns: List[str] = []
    for raw_line in lines:
        line = raw_line.split(COMMENT_MARKER, 1)[0].strip()
        if not line:
            continue
        if line.endswith("/"):
            entry = _strip_current_dir(line.rstrip("/"))
            if entry:
                directories.append(entry)
        else:
            patterns.append(_strip_current_dir(line))
    return directories, patterns


def read_ignore_file(ignore_file: PathType) -> Tuple[List[str], List[str]]:
    """Read and parse an ignore file.

    A missing file is not an error: it simply contributes no rules.

    Args:
        ignore_file: Path to the ignore file.

    Returns:
        A tuple of (directory_rules, file_patterns).

    Raises:
        OSError: If the file exists but cannot be read.
    """
    path = Path(ignore_file)
    if not path.is_file():
        return [], []

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return parse_ignore_lines(f.read().splitlines())


def load_rules(
    ignore_file: Optional[PathType] = None,
    excludes: Sequence[str] = (),
    defaults: Sequence[str] = DEFAULT_DIRECTORY_IGNORES,
) -> IgnoreRuleSet:
    """Merge default directories, an ignore file and user excludes into one rule set.

    Args:
        ignore_file: Optional path to a .gitignore-style file. Missing files are ignored.
        excludes: User-supplied exclude strings, classified with classify_exclude().
        defaults: Directory names that are always pruned.

    Returns:
        IgnoreRuleSet: The immutable rule set for this run.

    Example:
        >>> rules = load_rules(excludes=["dist/", "*.map"])
        >>> sorted(rules.directory_names)
        ['.git', '.next', 'dist', 'node_modules']
        >>> rules.file_patterns
        ('*.map',)
    """
    directories: List[str] = list(defaults)
    patterns: List[str] = []

    if ignore_file is not None:
        file_directories, file_patterns = read_ignore_file(ignore_file)
        directories.extend(file_directories)
        patterns.extend(file_patterns)

    for exclude in excludes:
        kind, rule = classify_exclude(exclude)
        if not rule:
            continue
        if kind == "directory":
            directories.append(rule)
        else:
            patterns.append(rule)

    return IgnoreRuleSet(directory_names=frozenset(directories), file_patterns=tuple(patterns))
