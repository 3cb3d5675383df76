#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/cli.py
"""Command-line interface for docz.

Examples
--------
Create a project in the current directory::

    $ docz init

Build the configured outputs::

    $ docz build

Build specific formats of a project elsewhere, with verbose logging::

    $ docz --cwd ./handbook --log-level DEBUG build -o html -o pdf

Exit codes: 0 on success, 1 when a build stage failed, 2 for usage and
configuration errors.

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from docz import __version__
from docz.config import Config
from docz.exceptions import ConfigError, FormatError
from docz.formats import Format
from docz.logging_utils import configure_logging
from docz.service import BuildReport, Service

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_BUILD_ERROR = 1
EXIT_USAGE_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``docz`` command."""
    parser = argparse.ArgumentParser(
        prog="docz",
        description="Build documentation from Markdown and HTML sources.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--cwd", metavar="DIR", help="Project directory (default: current directory)")
    parser.add_argument("-c", "--config", metavar="FILE", help="Configuration file (default: <cwd>/doc.toml)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Timestamped, detailed logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser("init", help="Create doc.toml and a source directory")

    build_parser = subparsers.add_parser("build", help="Build the document")
    build_parser.add_argument(
        "-o",
        "--output",
        dest="outputs",
        action="append",
        choices=[fmt.value for fmt in Format],
        metavar="FORMAT",
        help="Output format, repeatable; overrides build.outputs "
        f"(choices: {', '.join(fmt.value for fmt in Format)})",
    )
    build_parser.add_argument(
        "-j", "--jobs", type=int, default=None, metavar="N", help="Parse source files on N threads"
    )
    return parser


def _print_report(report: BuildReport, console: Console) -> None:
    """Print the build summary table."""
    table = Table(title="Build Summary")
    table.add_column("Stage", style="magenta")
    table.add_column("Target", style="cyan", no_wrap=False)
    table.add_column("Status", style="white")

    for path in report.written:
        table.add_row("write", str(path), "[green][OK][/green]")
    for failure in report.failures:
        target = failure.format_id or failure.file or "-"
        table.add_row(failure.stage or "-", target, f"[red][X] {failure}[/red]")

    console.print(table)


def _cmd_init(root: Path, console: Console) -> int:
    try:
        Config.init_dir(root)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        return EXIT_USAGE_ERROR
    console.print(f"[green]Initialized project in {root}[/green]")
    return EXIT_SUCCESS


def _cmd_build(root: Path, config_file: Optional[str], args: argparse.Namespace, console: Console) -> int:
    try:
        if config_file:
            config_path = Path(config_file)
            if not config_path.is_absolute():
                config_path = root / config_path
            config = Config.load_from(config_path)
        else:
            config = Config.load(root)
        report = Service(config, max_workers=args.jobs).build(args.outputs)
    except (ConfigError, FormatError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return EXIT_USAGE_ERROR

    _print_report(report, console)
    return EXIT_SUCCESS if report.ok else EXIT_BUILD_ERROR


def main(args: list[str] | None = None) -> int:
    """Run the ``docz`` command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    root = Path(parsed_args.cwd) if parsed_args.cwd else Path.cwd()
    console = Console()
    logger.debug("Running '%s' in %s", parsed_args.command, root)

    if parsed_args.command == "init":
        return _cmd_init(root, console)
    return _cmd_build(root, parsed_args.config, parsed_args, console)


if __name__ == "__main__":
    sys.exit(main())
