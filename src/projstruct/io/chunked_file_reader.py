"""Tools for chunk-based file reading operations."""

from typing import BinaryIO, Iterator


class ChunkedFileReader:
    """Iterator-based reader yielding a binary file's bytes in fixed-size chunks.

    Chunks are passed on unchanged, so concatenating everything the reader yields
    reproduces the file exactly while only one chunk is held in memory at a time.

    Args:
        file_obj: An opened binary file object to read from.
        chunk_size: Size of chunks to read in bytes. Must be at least 4096 bytes.
            Defaults to 65536 (64 KB).

    Raises:
        ValueError: If chunk_size is less than 4096 bytes.

    Example:
        >>> with open('myfile.bin', 'rb') as f:  # doctest: +SKIP
        ...     for chunk in ChunkedFileReader(f):
        ...         destination.write(chunk)
    """

    MINIMUM_CHUNK_SIZE = 4096  # 4 KB

    def __init__(self, file_obj: BinaryIO, chunk_size: int = 65536) -> None:
        if chunk_size < self.MINIMUM_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be at least {self.MINIMUM_CHUNK_SIZE} bytes, " f"got {chunk_size}")

        self._file: BinaryIO = file_obj
        self._chunk_size: int = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        """Return self as iterator."""
        return self

    def __next__(self) -> bytes:
        """Get the next chunk of the file.

        Raises:
            StopIteration: When the end of the file is reached.
            OSError: If reading fails part way through.
        """
        chunk: bytes = self._file.read(self._chunk_size)
        if not chunk:
            raise StopIteration
        return chunk
