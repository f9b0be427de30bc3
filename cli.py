"""Command-line interface for csv2struct.

This module provides the CLI entry point. It handles argument parsing,
option validation, and running the generator on a file or stdin.
"""

import argparse
import sys
from typing import Optional, Sequence

from core.generator import SchemaGenerator
from level1_ingestion.table import DatasetLoadError, TableStructureError
from level3_rendering.rust_renderer import RenderError
from level3_rendering.writer import OutputWriter
from options.validator import OptionsValidationError, resolve_options
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_OPTIONS,
    EXIT_MALFORMED_INPUT,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    PathValidationError,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate struct definitions from CSV using some very basic rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  cat test.csv | csv2struct\n"
            "  csv2struct data.tsv --format json --output schema.json"
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Table file (.csv, .tsv, .txt); '-' or omitted reads stdin",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="YAML or JSON options file",
    )
    parser.add_argument(
        "--format",
        "-f",
        dest="output_format",
        choices=["rust", "json"],
        default=None,
        help="Output format (default: rust)",
    )
    parser.add_argument(
        "--delimiter",
        "-d",
        type=str,
        default=None,
        help="Field delimiter (default: from file extension, ',' for stdin)",
    )
    parser.add_argument(
        "--record-name",
        type=str,
        default=None,
        help="Name of the generated record type (default: Record)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write output to this file instead of stdout",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Allow --output to replace an existing file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Run the generator for parsed arguments.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        options = resolve_options(
            args.config,
            overrides={
                "output_format": args.output_format,
                "delimiter": args.delimiter,
                "record_name": args.record_name,
            },
        )
    except OptionsValidationError as e:
        print(f"✗ Invalid options:\n{e}", file=sys.stderr)
        return EXIT_INVALID_OPTIONS

    generator = SchemaGenerator(options)

    try:
        if args.input == "-":
            result = generator.generate_from_stream(sys.stdin)
        else:
            result = generator.generate_from_path(args.input)
    except TableStructureError as e:
        print(f"✗ Malformed table: {e}", file=sys.stderr)
        return EXIT_MALFORMED_INPUT
    except DatasetLoadError as e:
        print(f"✗ Failed to load table: {e}", file=sys.stderr)
        return EXIT_MALFORMED_INPUT
    except RenderError as e:
        print(f"✗ Failed to render output: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.output is None:
        sys.stdout.write(result.output)
        return EXIT_SUCCESS

    try:
        path = OutputWriter().write(result.output, args.output, overwrite=args.overwrite)
    except (PathValidationError, FileExistsError, OSError) as e:
        print(f"✗ Failed to write output: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print(f"✓ Definitions written to {path}", file=sys.stderr)
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        return run(args)
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Runtime error: {e}", file=sys.stderr)
        logger.exception("Unexpected error during generation")
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
