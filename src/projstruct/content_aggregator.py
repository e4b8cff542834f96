"""Aggregation of file contents into a single stream.

Every file that survives the ignore rules is emitted as a header line followed by its
exact bytes. Binary files (when skipped) and unreadable files are replaced by markers,
and files above the size limit are left out without any trace. The framing is::

    \\n----- FILE: <path> -----\\n<file bytes>
    \\n----- SKIPPED BINARY: <path> -----\\n[Skipped binary file: <path>]\\n
    \\n----- FILE: <path> -----\\n\\n[Could not read file: <path>]\\n

Each block begins with a newline, so the bytes between a FILE header line and the
newline that starts the next block (or the end of the stream) are the file's contents.
"""

import os
import stat
from typing import Callable, Iterator, List, Optional, Tuple

from .exclusion_rules.size_rules import SizeExclusionRules
from .file_system_tree.binary_detector import is_binary_file
from .file_system_tree.decisions import classify_content
from .file_system_tree.file_identifier import FileIdentifier
from .io.chunked_file_reader import ChunkedFileReader
from .options import AggregationOptions
from .project_structure import ProjectStructure
from .types import FileDecision


def _encode(text: str) -> bytes:
    # Paths that are not valid UTF-8 round-trip through surrogateescape
    return text.encode("utf-8", "surrogateescape")


def format_file_header(path: str) -> bytes:
    return _encode(f"\n----- FILE: {path} -----\n")


def format_binary_marker(path: str) -> bytes:
    return _encode(f"\n----- SKIPPED BINARY: {path} -----\n[Skipped binary file: {path}]\n")


def format_unreadable_marker(path: str) -> bytes:
    return _encode(f"\n[Could not read file: {path}]\n")


class ContentAggregator:
    """Streams the contents of a project's filtered files with per-file headers.

    The aggregator walks the same filtered file set as the tree rendering, always
    including files even when the rendering is compact. Each file is processed
    independently: a file that cannot be read produces a marker and the run carries on.
    Only regular files (or links to them) are read; the destination file itself is
    never read back into the stream.

    Attributes:
        project (ProjectStructure): Source of roots and ignore rules.
        options (AggregationOptions): Destination, binary skipping and size limit.
        decisions (List[Tuple[str, FileDecision]]): Outcome per processed file, in order.

    Example:
        >>> project = ProjectStructure(["src"])  # doctest: +SKIP
        >>> options = AggregationOptions("contents.txt", skip_binaries=True)  # doctest: +SKIP
        >>> aggregator = ContentAggregator(project, options)  # doctest: +SKIP
        >>> with open("contents.txt", "wb") as out:  # doctest: +SKIP
        ...     for chunk in aggregator.stream_contents():
        ...         out.write(chunk)
    """

    def __init__(
        self,
        project: ProjectStructure,
        options: AggregationOptions,
        binary_probe: Callable[[str], bool] = is_binary_file,
        chunk_size: int = 65536,
    ) -> None:
        """Initialize the aggregator.

        Args:
            project: Source of roots and ignore rules.
            options: Aggregation options.
            binary_probe: Classifier returning True for binary files.
            chunk_size: Read size for streaming file contents.

        Raises:
            ValueError: If options.max_size_bytes is negative or chunk_size is too small.
        """
        if chunk_size < ChunkedFileReader.MINIMUM_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be at least {ChunkedFileReader.MINIMUM_CHUNK_SIZE} bytes")

        self.project = project
        self.options = options
        self.binary_probe = binary_probe
        self.chunk_size = chunk_size
        self.size_rules: Optional[SizeExclusionRules] = (
            SizeExclusionRules(options.max_size_bytes) if options.max_size_bytes is not None else None
        )
        self.decisions: List[Tuple[str, FileDecision]] = []

    def count(self, decision: FileDecision) -> int:
        """Number of processed files that ended with the given decision."""
        return sum(1 for _path, outcome in self.decisions if outcome is decision)

    def _stream_file(self, path: str) -> Iterator[bytes]:
        yield format_file_header(path)
        try:
            with open(path, "rb") as file:
                for chunk in ChunkedFileReader(file, self.chunk_size):
                    yield chunk
        except OSError:
            yield format_unreadable_marker(path)
            self.decisions.append((path, FileDecision.SKIP_UNREADABLE))
        else:
            self.decisions.append((path, FileDecision.SHOW))

    def stream_contents(self) -> Iterator[bytes]:
        """Stream headers, markers and file bytes for every candidate file.

        Yields:
            Byte chunks to be appended to the destination in order.
        """
        self.decisions = []
        destination_id = FileIdentifier.from_path(self.options.destination_file)

        for path in self.project.iterate_files():
            try:
                file_stat = os.stat(path)
            except OSError:
                # Broken links and entries removed since traversal
                continue
            if not stat.S_ISREG(file_stat.st_mode):
                continue
            if destination_id is not None and FileIdentifier.from_stat(file_stat) == destination_id:
                continue

            decision = classify_content(
                path,
                file_stat.st_size,
                skip_binaries=self.options.skip_binaries,
                size_rules=self.size_rules,
                binary_probe=self.binary_probe,
            )

            if decision is FileDecision.SKIP_OVERSIZE:
                self.decisions.append((path, decision))
            elif decision is FileDecision.SKIP_BINARY:
                self.decisions.append((path, decision))
                yield format_binary_marker(path)
            elif decision is FileDecision.SKIP_UNREADABLE:
                self.decisions.append((path, decision))
                yield format_file_header(path)
                yield format_unreadable_marker(path)
            else:
                yield from self._stream_file(path)
