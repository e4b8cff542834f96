"""Command-line interface for get-project-structure.

This module provides the entry point that prints a filtered tree of the project and,
on request, aggregates the contents of the selected files into one file.

Key Features:
    - Tree drawing or flat path listing of one or more selected paths
    - .gitignore directory entries and file patterns, plus built-in and extra excludes
    - Compact (folders only) mode
    - Content aggregation with binary skipping and a size limit
    - Signal handling (SIGPIPE on Unix systems, SIGINT)

Output Streams:
    The rendering goes to stdout unless -o/--output is given. Errors, warnings and
    confirmation lines go to stderr.

Exit Codes:
    0: Successful completion
    1: Usage error, missing traversal root, or an output file could not be written
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    $ get-project-structure -e dist/ -o structure.txt
    $ get-project-structure -p src/ -C contents.txt -B -M 5M
"""

import sys
from typing import Optional, Sequence

from projstruct.cli.argparser import collect_warnings, create_parser, validate_args
from projstruct.cli.safe_writer import SafeWriter
from projstruct.cli.signal_handler import setup_signal_handling, signal_handler
from projstruct.content_aggregator import ContentAggregator
from projstruct.exceptions import DestinationWriteFailure, UsageError
from projstruct.exclusion_rules.rule_loader import DEFAULT_DIRECTORY_IGNORES, load_rules
from projstruct.exclusion_rules.size_rules import format_file_size
from projstruct.options import AggregationOptions, RenderOptions
from projstruct.project_structure import ProjectStructure


def report_problems(project: ProjectStructure) -> None:
    """Print missing roots as errors and unreadable directories as warnings."""
    for error in project.root_errors:
        print(f"Error: {error}", file=sys.stderr)
    for warning in project.warnings:
        print(f"Warning: {warning}", file=sys.stderr)


def write_tree(project: ProjectStructure, options: RenderOptions) -> None:
    """Write the rendering to the configured destination (stdout by default).

    Raises:
        DestinationWriteFailure: If the output file cannot be created or written.
    """
    output = options.output_destination if options.output_destination is not None else sys.stdout.fileno()
    with SafeWriter(output) as writer:
        for line in project.stream_tree():
            writer.write(line)

    if options.output_destination is not None:
        print(f"Project structure saved to {options.output_destination}", file=sys.stderr)


def write_contents(project: ProjectStructure, options: AggregationOptions) -> None:
    """Aggregate file contents into the destination file.

    Raises:
        DestinationWriteFailure: If the destination cannot be created or written.
    """
    aggregator = ContentAggregator(project, options)
    with SafeWriter(options.destination_file) as writer:
        for chunk in aggregator.stream_contents():
            writer.write(chunk)

    print(f"All file contents saved to {options.destination_file}", file=sys.stderr)
    if options.skip_binaries:
        print("Note: binary files were skipped (per --skip-binaries).", file=sys.stderr)
    if options.max_size_bytes is not None:
        print(
            f"Note: files larger than {format_file_size(options.max_size_bytes)} were excluded (per --max-size).",
            file=sys.stderr,
        )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the get-project-structure command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Usage error, missing traversal root, or an output file could not be written
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()
    parser = create_parser()
    exit_code = 0

    try:
        args = parser.parse_args(argv)
        validate_args(args)
        for warning in collect_warnings(args):
            print(f"Warning: {warning}", file=sys.stderr)

        rules = load_rules(
            args.ignore_file,
            args.exclude,
            defaults=() if args.no_default_ignores else DEFAULT_DIRECTORY_IGNORES,
        )
        render_options = RenderOptions(
            show_files=not args.compact,
            output_destination=args.output,
            style="flat" if args.flat else "tree",
        )
        project = ProjectStructure(
            args.path,
            ignore_rules=rules,
            show_files=render_options.show_files,
            render_strategy=render_options.style,
        )

        try:
            write_tree(project, render_options)

            if args.contents_file is not None:
                write_contents(
                    project,
                    AggregationOptions(
                        destination_file=args.contents_file,
                        skip_binaries=args.skip_binaries,
                        max_size_bytes=args.max_size,
                    ),
                )
        except BrokenPipeError:
            pass  # SafeWriter closes itself in the context manager

        report_problems(project)
        if project.root_errors:
            exit_code = 1

    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except DestinationWriteFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    signal_exit = signal_handler.exit_code()
    if signal_exit is not None:
        sys.exit(signal_exit)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
