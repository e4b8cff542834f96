"""Size-based exclusion rules for filtering files by size."""

from typing import Union

from humanfriendly import InvalidSize, format_size, parse_size


def parse_file_size(size_str: str) -> int:
    """Parse a human-readable file size to bytes.

    Suffixes are powers of 1024: ``K``, ``M`` and ``G`` (in any case, optionally
    followed by ``B`` or ``iB``). A bare number is a byte count.

    Args:
        size_str: Size string like '5M', '500k', '1G' or just '1024'.

    Returns:
        Size in bytes.

    Raises:
        ValueError: If size_str is not a valid size format.

    Example:
        >>> parse_file_size("5M")
        5242880
        >>> parse_file_size("500k")
        512000
    """
    try:
        return int(parse_size(size_str.strip(), binary=True))
    except InvalidSize as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


def format_file_size(size_bytes: int) -> str:
    """Render a byte count for messages, e.g. ``5 MiB``."""
    return str(format_size(size_bytes, binary=True))


class SizeExclusionRules:
    """Exclusion rules based on a file size limit.

    Files strictly larger than the limit are excluded. Symbolic links are measured by
    the size of their target.

    Attributes:
        max_size_bytes (int): Maximum allowed file size in bytes.

    Example:
        >>> rules = SizeExclusionRules("1K")
        >>> rules.max_size_bytes
        1024
        >>> rules.exceeds(1025)
        True
    """

    def __init__(self, max_size: Union[str, int]):
        """Initialize size exclusion rules.

        Args:
            max_size: Maximum file size, either a size string ('5M', '500k') or an
                integer number of bytes.

        Raises:
            ValueError: If max_size is negative or cannot be parsed.
        """
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int):
            if max_size < 0:
                raise ValueError("Size cannot be negative")
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")

    def exceeds(self, size_bytes: int) -> bool:
        """Check a known size against the limit."""
        return size_bytes > self.max_size_bytes
