"""Command-line argument parsing for get-project-structure.

This module defines the command-line interface, handling argument parsing and
validation. Parse failures raise UsageError instead of exiting, so that the caller
controls the exit status.
"""

import argparse
from pathlib import Path
from typing import List, NoReturn

from projstruct import __version__
from projstruct.exceptions import UsageError
from projstruct.exclusion_rules.size_rules import parse_file_size

DEFAULT_IGNORE_FILE = ".gitignore"


class ProjectStructureArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors by raising UsageError."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def max_size_type(value: str) -> int:
    """argparse type for -M/--max-size values."""
    try:
        return parse_file_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> ProjectStructureArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        A parser configured with get-project-structure's options.
    """
    description = """
    get-project-structure: print a clean tree of a project.

    The tree honors the directory entries (ending with '/') and file patterns of the
    project's .gitignore, always skips .git, node_modules and .next, and accepts extra
    excludes on the command line. Optionally the contents of every selected file are
    collected into a single text file.
    """

    epilog = """
    Examples:
      # Tree of the current project
      get-project-structure

      # Save the tree to a file
      get-project-structure -o structure.txt

      # Extra excludes: 'dist/' and 'coverage' are directories, '*.map' is a file pattern
      get-project-structure -e dist/ -e coverage -e '*.map' -o s.txt

      # Folders only
      get-project-structure --compact

      # Only some paths within the project
      get-project-structure -p src/ -p docs/

      # Collect the contents of src/ into one file, skipping binaries and files over 5 MiB
      get-project-structure -p src/ -C project-files-contents.txt -B -M 5M

    Notes:
      Ignore-file lines ending in '/' are directory names pruned at any depth; other
      lines are file-name patterns where only '*' and '?' are wildcards. Negation,
      nested ignore files and character classes are not supported.

      Excludes given with -e are directories when they end in '/', file patterns when
      they contain '*' or '?', and directories otherwise.

      --max-size accepts a byte count with an optional K, M or G suffix (powers of 1024).
      It and --skip-binaries only affect -C/--contents-file.

    Exit status:
      0  success
      1  usage error, missing path, or an output file could not be written
      130 interrupted (Ctrl+C)
      141 output pipe closed
    """

    parser = ProjectStructureArgumentParser(
        prog="get-project-structure",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"get-project-structure {__version__}",
        help="Show the version and exit",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Save the tree output to FILE instead of printing it.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERN",
        action="append",
        default=[],
        help="Extra exclude (repeatable). Ending with '/' means a directory.",
    )
    parser.add_argument(
        "-p",
        "--path",
        metavar="PATH",
        action="append",
        default=[],
        help="Directory or file within the project to show (repeatable). Defaults to the project root.",
    )
    parser.add_argument(
        "-C",
        "--contents-file",
        type=Path,
        metavar="FILE",
        help="Aggregate the contents of all selected files into FILE.",
    )
    parser.add_argument(
        "-B",
        "--skip-binaries",
        action="store_true",
        help="Skip files detected as binary when aggregating contents.",
    )
    parser.add_argument(
        "-M",
        "--max-size",
        type=max_size_type,
        metavar="SIZE",
        help="Skip files larger than SIZE when aggregating contents (e.g. 5M, 500k).",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Show folders only (no files).",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="Print a flat list of paths instead of a tree drawing.",
    )
    parser.add_argument(
        "-i",
        "--ignore-file",
        type=Path,
        metavar="FILE",
        default=Path(DEFAULT_IGNORE_FILE),
        help=f"Ignore file to honor (default: {DEFAULT_IGNORE_FILE} in the current directory). Missing files are fine.",
    )
    parser.add_argument(
        "--no-default-ignores",
        action="store_true",
        help="Do not skip .git, node_modules and .next unless the rules say so.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate combinations of arguments that argparse cannot check on its own.

    Args:
        args: Parsed command-line arguments.

    Raises:
        UsageError: If the tree output and the contents file are the same file.
    """
    if args.output is not None and args.contents_file is not None:
        if args.output.resolve() == args.contents_file.resolve():
            raise UsageError("-o/--output and -C/--contents-file must name different files")


def collect_warnings(args: argparse.Namespace) -> List[str]:
    """List options that were given but have no effect.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Warning messages, possibly empty.
    """
    warnings = []
    if args.contents_file is None:
        if args.skip_binaries:
            warnings.append("-B/--skip-binaries has no effect without -C/--contents-file")
        if args.max_size is not None:
            warnings.append("-M/--max-size has no effect without -C/--contents-file")
    return warnings
