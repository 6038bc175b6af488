"""
Command-line interface for prtitles.

Usage:
  prtitles project.prproj              # Extract titles next to the project
  prtitles -o titles/ project.prproj   # Extract into another directory
  prtitles -n project.prproj           # List titles without writing them
  prtitles --json project.prproj       # Print a JSON report
"""

from __future__ import annotations

import argparse
import sys
import warnings

from prtitles._version import __version__
from prtitles.analyze import extract_file
from prtitles.config import get_config
from prtitles.errors import PrtitlesError, TitleFormatWarning
from prtitles.formatters import format_default, format_json, format_quiet
from prtitles.writer import save_titles


def _show_warning(message, category, filename, lineno, file=None, line=None) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def _print_error(error: BaseException) -> None:
    """Print a single-line error, with its cause if any."""
    message = f"Error: {error}"
    if error.__cause__ is not None:
        message += f" -> {error.__cause__}"
    print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for prtitles CLI."""
    parser = argparse.ArgumentParser(
        prog="prtitles",
        description="Extract titles embedded in an Adobe Premiere Pro project as XML files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Titles are written as <file>-title-001.xml, <file>-title-002.xml, ...
next to the project file unless -o/--output-dir is given.

Examples:
  prtitles project.prproj
  prtitles -o titles/ project.prproj
  prtitles --dry-run project.prproj
        """,
    )
    parser.add_argument("file", help="a Premiere Pro .prproj file")
    parser.add_argument("-o", "--output-dir", help="Directory for the title files")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Extract titles without writing them",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument("-q", "--quiet", action="store_true", help="One-line summary only")
    output_group.add_argument("--json", action="store_true", help="Print a JSON report")

    args = parser.parse_args(argv)

    with warnings.catch_warnings():
        warnings.simplefilter("always", TitleFormatWarning)
        warnings.showwarning = _show_warning

        try:
            config = get_config()
            report = extract_file(args.file, config)
        except (FileNotFoundError, PrtitlesError) as e:
            _print_error(e)
            return 1

    output_dir = args.output_dir or config.output.output_dir
    if not args.dry_run:
        try:
            save_titles(report, output_dir)
        except OSError as e:
            _print_error(e)
            return 1

    if args.json:
        print(format_json(report))
    elif args.quiet:
        print(format_quiet(report))
    else:
        print(format_default(report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
