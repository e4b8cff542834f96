"""File identifier for uniquely identifying files by device and inode."""

import os
from typing import NamedTuple, Optional

from projstruct.types import PathType


class FileIdentifier(NamedTuple):
    """Identity of a file or directory as a (device, inode) pair.

    Two paths refer to the same filesystem object exactly when their identifiers are
    equal, which makes this usable for spotting a symbolic link that leads back to a
    directory already on the current descent path, or for recognising the output file
    among the files being read.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)

    @classmethod
    def from_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Build the identifier of whatever path points to, following symlinks.

        Args:
            path: The path to identify.

        Returns:
            The identifier, or None if the path cannot be stat'ed (missing, broken
            link, no permission).
        """
        try:
            return cls.from_stat(os.stat(path))
        except OSError:
            return None
