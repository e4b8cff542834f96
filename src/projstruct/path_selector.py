"""Resolve the traversal roots for a run."""

from typing import Optional, Sequence, Tuple

PROJECT_ROOT = "."


def normalize_root(path: str) -> str:
    """Strip trailing separators from a root path, keeping ``/`` itself intact.

    Example:
        >>> normalize_root("src/")
        'src'
        >>> normalize_root("/")
        '/'
    """
    stripped = path.rstrip("/")
    return stripped or path[:1]


def select_roots(paths: Optional[Sequence[str]] = None) -> Tuple[str, ...]:
    """Return the ordered, non-empty sequence of roots to traverse.

    No existence check happens here; a missing root is reported when it is traversed.

    Args:
        paths: Explicitly selected paths, in command-line order. Empty strings are ignored.

    Returns:
        The normalized paths, or ``(".",)`` when none were given.

    Example:
        >>> select_roots(["src/", "public"])
        ('src', 'public')
        >>> select_roots([])
        ('.',)
    """
    roots = tuple(normalize_root(path) for path in paths or () if path)
    return roots or (PROJECT_ROOT,)
