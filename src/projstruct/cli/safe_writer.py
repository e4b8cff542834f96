"""Single-writer output destination for the get-project-structure CLI.

A destination is either an already open file descriptor (standard output) or a path.
Paths are created or truncated when the writer is opened and then appended to by this
writer alone, in the order data is handed to it.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from projstruct.cli.signal_handler import signal_handler
from projstruct.exceptions import DestinationWriteFailure


class SafeWriter:
    """Signal-aware writer for text and raw bytes.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the safe writer.

        Args:
            file: A file descriptor or a path. Paths are created or truncated.

        Raises:
            DestinationWriteFailure: If the path cannot be opened for writing.
            TypeError: If file is neither a descriptor nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            try:
                self._file_obj = path.open("wb")
            except OSError as e:
                raise DestinationWriteFailure(str(path), e.strerror or str(e)) from e
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: Union[str, bytes]) -> None:
        """Write all of data, encoding text as UTF-8.

        Undecodable file names arrive as lone surrogates and are written back
        as their original bytes.

        Args:
            data: Text or raw bytes to write.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            DestinationWriteFailure: If writing to a path destination fails.
            OSError: If writing to a descriptor fails for another reason.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = memoryview(data.encode("utf-8", "surrogateescape") if isinstance(data, str) else data)
        try:
            # os.write may accept only part of the buffer
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            if self._file_obj is not None:
                raise DestinationWriteFailure(str(self.file), e.strerror or str(e)) from e
            raise

    def close(self) -> None:
        """Close the file if it was opened by this class.

        The writer is marked as closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
