"""Per-entry filtering decisions.

These functions are pure with respect to the rules and options they are given: the
outcome for an entry depends only on its path, its type, its size and (for binary
classification) its content, never on entries visited before it.
"""

from typing import Callable, Optional

from projstruct.exclusion_rules.ignore_rules import IgnoreRuleSet
from projstruct.exclusion_rules.size_rules import SizeExclusionRules
from projstruct.types import FileDecision

from .binary_detector import is_binary_file


def classify_entry(rules: Optional[IgnoreRuleSet], path: str, is_dir: bool) -> FileDecision:
    """Decide whether a traversed entry is pruned, hidden or shown.

    Args:
        rules: The ignore rules, or None to show everything.
        path: Display path of the entry.
        is_dir: Whether the entry is a directory. Directories are only checked against
            directory rules and files only against file patterns.

    Returns:
        FileDecision.PRUNE, FileDecision.HIDE or FileDecision.SHOW.

    Example:
        >>> from projstruct.exclusion_rules.rule_loader import load_rules
        >>> rules = load_rules(excludes=["dist/", "*.log"])
        >>> classify_entry(rules, "web/dist", is_dir=True)
        <FileDecision.PRUNE: 'prune'>
        >>> classify_entry(rules, "web/app.log", is_dir=False)
        <FileDecision.HIDE: 'hide'>
        >>> classify_entry(rules, "web/app.js", is_dir=False)
        <FileDecision.SHOW: 'show'>
    """
    if rules is None:
        return FileDecision.SHOW
    if is_dir:
        return FileDecision.PRUNE if rules.prunes(path) else FileDecision.SHOW
    return FileDecision.HIDE if rules.hides(path) else FileDecision.SHOW


def classify_content(
    path: str,
    size_bytes: int,
    *,
    skip_binaries: bool,
    size_rules: Optional[SizeExclusionRules] = None,
    binary_probe: Callable[[str], bool] = is_binary_file,
) -> FileDecision:
    """Decide how a shown file is treated during aggregation.

    The size limit is checked before anything is read, so oversize files are excluded
    whether or not binaries are skipped.

    Args:
        path: Path used to read the file.
        size_bytes: Size of the file.
        skip_binaries: Whether binary files are replaced with a marker.
        size_rules: Optional size limit.
        binary_probe: Classifier returning True for binary files.

    Returns:
        FileDecision.SKIP_OVERSIZE, FileDecision.SKIP_BINARY, FileDecision.SKIP_UNREADABLE
        (the classifier could not read the file) or FileDecision.SHOW.
    """
    if size_rules is not None and size_rules.exceeds(size_bytes):
        return FileDecision.SKIP_OVERSIZE

    if skip_binaries:
        try:
            if binary_probe(path):
                return FileDecision.SKIP_BINARY
        except OSError:
            return FileDecision.SKIP_UNREADABLE

    return FileDecision.SHOW
