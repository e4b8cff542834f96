"""Unit tests for the exception hierarchy."""

import pytest

from projstruct.exceptions import DestinationWriteFailure, TraversalRootMissing, UsageError


def test_usage_error_message():
    error = UsageError("unrecognized arguments: --bogus")
    assert str(error) == "unrecognized arguments: --bogus"


def test_traversal_root_missing():
    error = TraversalRootMissing("src/missing")
    assert error.path == "src/missing"
    assert str(error) == "Path does not exist: src/missing"
    assert isinstance(error, FileNotFoundError)


def test_destination_write_failure():
    error = DestinationWriteFailure("/read-only/out.txt", "Permission denied")
    assert error.path == "/read-only/out.txt"
    assert error.reason == "Permission denied"
    assert str(error) == "Failed to write to /read-only/out.txt: Permission denied"
    assert isinstance(error, OSError)


def test_exceptions_can_be_raised_and_caught():
    with pytest.raises(OSError):
        raise DestinationWriteFailure("out.txt", "No space left on device")
    with pytest.raises(FileNotFoundError):
        raise TraversalRootMissing("nope")
