"""Unit tests for the SafeWriter class."""

import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from projstruct.cli.safe_writer import SafeWriter
from projstruct.cli.signal_handler import signal_handler
from projstruct.exceptions import DestinationWriteFailure


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "out.txt"


def test_init_with_fd(tmp_path):
    """A descriptor is used as is and never closed by the writer."""
    fd = os.open(tmp_path / "fd.txt", os.O_WRONLY | os.O_CREAT)
    try:
        writer = SafeWriter(fd)
        assert writer.fd == fd
        assert writer._file_obj is None
        writer.close()
        os.write(fd, b"still open")
    finally:
        os.close(fd)


def test_write_text_and_bytes(output_path):
    """Text is encoded as UTF-8 and bytes are written unchanged."""
    with SafeWriter(output_path) as writer:
        writer.write("héllo\n")
        writer.write(b"\x00\xff raw")
    assert output_path.read_bytes() == "héllo\n".encode("utf-8") + b"\x00\xff raw"


def test_undecodable_file_names_keep_their_bytes(output_path):
    with SafeWriter(output_path) as writer:
        writer.write(os.fsdecode(b"bad\xff.txt") + "\n")
    assert output_path.read_bytes() == b"bad\xff.txt\n"


def test_path_is_truncated(output_path):
    """An existing destination is replaced, not appended to."""
    output_path.write_text("old content that is long")
    with SafeWriter(str(output_path)) as writer:
        writer.write("new")
    assert output_path.read_text() == "new"


def test_partial_writes_are_completed(output_path):
    """os.write may accept fewer bytes than offered."""
    real_write = os.write

    def one_byte_at_a_time(fd, data):
        return real_write(fd, bytes(data[:1]))

    with SafeWriter(output_path) as writer:
        with patch("projstruct.cli.safe_writer.os.write", side_effect=one_byte_at_a_time):
            writer.write("abcdef")
    assert output_path.read_text() == "abcdef"


def test_open_failure_raises_destination_write_failure(tmp_path):
    """A destination in a missing directory cannot be created."""
    target = tmp_path / "missing-dir" / "out.txt"
    with pytest.raises(DestinationWriteFailure) as exc_info:
        SafeWriter(target)
    assert exc_info.value.path == str(target)


def test_write_failure_on_path_raises_destination_write_failure(output_path):
    """Errors other than EPIPE become DestinationWriteFailure for path destinations."""
    with SafeWriter(output_path) as writer:
        with patch("projstruct.cli.safe_writer.os.write", side_effect=OSError(errno.ENOSPC, "No space left on device")):
            with pytest.raises(DestinationWriteFailure) as exc_info:
                writer.write("data")
    assert exc_info.value.reason == "No space left on device"


def test_write_failure_on_fd_is_propagated(tmp_path):
    """Descriptor destinations propagate the original OSError."""
    fd = os.open(tmp_path / "fd.txt", os.O_WRONLY | os.O_CREAT)
    try:
        writer = SafeWriter(fd)
        with patch("projstruct.cli.safe_writer.os.write", side_effect=OSError(errno.EIO, "I/O error")):
            with pytest.raises(OSError) as exc_info:
                writer.write("data")
        assert not isinstance(exc_info.value, DestinationWriteFailure)
    finally:
        os.close(fd)


def test_epipe_raises_broken_pipe(output_path):
    """A closed pipe is reported as BrokenPipeError."""
    with SafeWriter(output_path) as writer:
        with patch("projstruct.cli.safe_writer.os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
            with pytest.raises(BrokenPipeError):
                writer.write("data")


def test_write_after_signal_raises_broken_pipe(output_path):
    """Once a signal was received no more data is written."""
    signal_handler.sigint_received.set()
    with SafeWriter(output_path) as writer:
        with pytest.raises(BrokenPipeError):
            writer.write("data")
    assert output_path.read_bytes() == b""


def test_write_after_close_raises(output_path):
    writer = SafeWriter(output_path)
    writer.close()
    writer.close()
    with pytest.raises(ValueError, match="closed"):
        writer.write("data")


def test_invalid_destination_type():
    with pytest.raises(TypeError, match="Expected int, str, or PathLike"):
        SafeWriter(3.14)  # type: ignore[arg-type]


def test_context_manager_keeps_original_exception(output_path):
    """An exception from the with block is not masked by closing."""
    with pytest.raises(RuntimeError, match="boom"):
        with SafeWriter(Path(output_path)) as writer:
            writer.write("partial")
            raise RuntimeError("boom")
    assert output_path.read_text() == "partial"
