class UsageError(Exception):
    """
    Exception raised when the command line cannot be interpreted.

    Raised for unknown options, missing option values and values that fail validation
    (for example an unparseable --max-size). The CLI reports it together with the usage
    text and exits with status 1.

    Example:
        >>> error = UsageError("unrecognized arguments: --bogus")
        >>> str(error)
        'unrecognized arguments: --bogus'
    """

    pass


class TraversalRootMissing(FileNotFoundError):
    """
    Exception raised when a selected traversal root does not exist.

    This error is scoped to a single root: the remaining roots are still processed and
    the error is reported once traversal finishes.

    Attributes:
        path (str): The root path that could not be found.

    Example:
        >>> error = TraversalRootMissing("src/missing")
        >>> str(error)
        'Path does not exist: src/missing'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the missing root path.

        Args:
            path (str): The root path that could not be found.
        """
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class DestinationWriteFailure(OSError):
    """
    Exception raised when an output destination cannot be created or written.

    The destination is the whole point of a run, so this error is fatal.

    Attributes:
        path (str): The destination that could not be written.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = DestinationWriteFailure("/read-only/out.txt", "Permission denied")
        >>> str(error)
        'Failed to write to /read-only/out.txt: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the destination and the failure reason.

        Args:
            path (str): The destination that could not be written.
            reason (str): Description of the underlying failure.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write to {path}: {reason}")
