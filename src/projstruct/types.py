from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileDecision(Enum):
    """Outcome of filtering a single filesystem entry.

    Attributes:
        PRUNE: Directory matched a directory rule; it is not descended.
        HIDE: File matched a file pattern; it is omitted from output.
        SHOW: Entry is shown (and, when aggregating, its contents are emitted).
        SKIP_BINARY: File was classified as binary; a marker replaces its contents.
        SKIP_OVERSIZE: File exceeds the size limit; it is silently excluded.
        SKIP_UNREADABLE: File could not be read; a marker replaces its contents.
    """

    PRUNE = "prune"
    HIDE = "hide"
    SHOW = "show"
    SKIP_BINARY = "skip_binary"
    SKIP_OVERSIZE = "skip_oversize"
    SKIP_UNREADABLE = "skip_unreadable"
