"""Text/binary classification of files.

The file name can only make a file binary: a content encoding such as gzip, or a MIME
type guessed from the extension that is neither ``text/*``, one of the structured text
formats in TEXT_LIKE_MIME_TYPES nor an ``+xml``/``+json`` suffix type, means binary
without reading anything.

Every other file is classified by its content, whatever its extension says: a NUL byte
in the first chunk means binary, valid UTF-8 means text, and anything else is judged by
the share of control characters. A binary payload saved as ``notes.txt`` is therefore
still binary.
"""

import codecs
import mimetypes
import os
from typing import Optional, Tuple

from projstruct.types import PathType

# Built-in table only, so classification does not depend on the host's mime.types files
_MIME_TYPES = mimetypes.MimeTypes()

TEXT_LIKE_MIME_TYPES = frozenset(
    {
        "application/json",
        "application/xml",
        "application/javascript",
        "application/x-javascript",
        "application/x-sh",
        "application/x-shellscript",
        "application/x-python",
        "application/yaml",
        "application/x-yaml",
        "application/toml",
        "application/x-tex",
        "application/x-latex",
        "application/x-csh",
        "application/x-perl",
    }
)

DEFAULT_CHUNK_SIZE = 8192

# Tab, newline, form feed and carriage return
WHITESPACE_CONTROL_BYTES = frozenset({9, 10, 12, 13})
MAX_CONTROL_RATIO = 0.01


def guess_mime_type(file_path: PathType) -> Tuple[Optional[str], Optional[str]]:
    """Guess a file's MIME type and content encoding from its name.

    Returns:
        A (mime_type, encoding) tuple; either element may be None.

    Example:
        >>> guess_mime_type("logo.png")
        ('image/png', None)
        >>> guess_mime_type("notes.txt")
        ('text/plain', None)
        >>> guess_mime_type("backup.tar.gz")
        ('application/x-tar', 'gzip')
    """
    return _MIME_TYPES.guess_type(os.fspath(file_path), strict=False)


def is_text_mime(mime_type: str) -> bool:
    """Check whether a MIME type denotes textual content.

    Example:
        >>> is_text_mime("text/x-python")
        True
        >>> is_text_mime("application/json")
        True
        >>> is_text_mime("image/svg+xml")
        True
        >>> is_text_mime("image/png")
        False
    """
    mime_type = mime_type.lower()
    if mime_type.split("/", 1)[0] == "text":
        return True
    if mime_type in TEXT_LIKE_MIME_TYPES:
        return True
    return mime_type.endswith("+xml") or mime_type.endswith("+json")


def looks_binary(file_path: PathType, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bool:
    """Classify a file by inspecting its first chunk of bytes.

    Args:
        file_path: Path to the file to analyze.
        chunk_size: Number of bytes to inspect.

    Returns:
        True if the content appears to be binary.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(file_path, "rb") as file:
        chunk = file.read(chunk_size)

    if not chunk:
        return False

    if b"\0" in chunk:
        return True

    try:
        # final=False tolerates a multi-byte sequence cut off at the chunk boundary
        codecs.getincrementaldecoder("utf-8")().decode(chunk, final=False)
        return False
    except UnicodeDecodeError:
        pass

    # Possibly a legacy 8-bit encoding: binary only if control characters are common
    control_bytes = sum(1 for byte in chunk if (byte < 32 and byte not in WHITESPACE_CONTROL_BYTES) or byte == 127)
    return control_bytes / len(chunk) > MAX_CONTROL_RATIO


def is_binary_file(file_path: PathType, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bool:
    """Detect whether a file is binary.

    Args:
        file_path: Path to the file to classify.
        chunk_size: Number of bytes inspected when the name does not already mark the
            file as binary.

    Returns:
        True if the file is binary, False if it is text.

    Raises:
        OSError: If the content has to be inspected and the file cannot be read.

    Example:
        >>> is_binary_file("photo.jpeg")
        True
        >>> is_binary_file("README.md")  # doctest: +SKIP
        False
    """
    mime_type, encoding = guess_mime_type(file_path)
    if encoding is not None:
        return True
    if mime_type is not None and not is_text_mime(mime_type):
        return True
    # A text extension is only a hint; the bytes decide
    return looks_binary(file_path, chunk_size)
