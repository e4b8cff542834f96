"""Per-run options for rendering and content aggregation."""

from dataclasses import dataclass
from typing import Optional

from projstruct.types import PathType


@dataclass(frozen=True)
class RenderOptions:
    """Options for rendering the filtered tree.

    Attributes:
        show_files: Emit file entries. When False only the directory structure is shown.
        output_destination: File to write the rendering to; None means standard output.
        style: ``"tree"`` for the hierarchical drawing, ``"flat"`` for a path list.
    """

    show_files: bool = True
    output_destination: Optional[PathType] = None
    style: str = "tree"


@dataclass(frozen=True)
class AggregationOptions:
    """Options for aggregating file contents into one destination file.

    Attributes:
        destination_file: File receiving the aggregated contents. Truncated at start.
        skip_binaries: Replace binary files with a marker instead of their bytes.
        max_size_bytes: Files larger than this are left out entirely. None disables the limit.
    """

    destination_file: PathType
    skip_binaries: bool = False
    max_size_bytes: Optional[int] = None
