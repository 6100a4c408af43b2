"""
Command-line interface for model conversion.

Builds a ConvertConfig from a JSON configuration file and command-line
options, runs the conversion and reports the outcome.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .codegen.core.config import ConfigError, ConvertConfig, get_config_manager, load_config
from .logging_config import get_logger, setup_logging
from .service import ConversionResult, convert

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="model-converter",
        description="Convert C# model classes and enums into TypeScript declarations.",
    )

    parser.add_argument(
        "roots",
        nargs="*",
        metavar="DIRECTORY",
        help="Working directories to scan (default: current directory)",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "--working-directory",
        metavar="DIR",
        help="Single working directory, relative to the current directory",
    )
    input_group.add_argument(
        "--working-directories",
        metavar="DIRS",
        help="';' separated list of working directories",
    )
    input_group.add_argument(
        "--source-extension",
        metavar="EXT",
        help="Extension of model source files (default: .cs)",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        help="Convert directory, cleared on every run (default: current directory, not cleared)",
    )
    output_group.add_argument(
        "--no-header",
        action="store_true",
        help="Don't write the auto generated comment at the top of each file",
    )
    output_group.add_argument(
        "--enum-values",
        choices=["numeric", "string"],
        help="Emit enum members with numeric or string values (default: numeric)",
    )
    output_group.add_argument(
        "--path-style",
        choices=["default", "kebab", "kebab-case"],
        help="Naming style of generated files and folders (default: default)",
    )

    common_group = parser.add_argument_group("common options")
    common_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file"
    )
    common_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging and run metadata"
    )
    common_group.add_argument(
        "--log-file", metavar="FILE", help="Also write the log to this file"
    )

    return parser


def build_config(args: argparse.Namespace) -> ConvertConfig:
    """Build configuration from CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.working_directory:
        overrides["working_directory"] = args.working_directory

    directories: List[str] = list(args.roots or [])
    if args.working_directories:
        directories.append(args.working_directories)
    if directories:
        overrides["working_directories"] = ";".join(directories)

    if args.source_extension:
        overrides["source_extension"] = args.source_extension
    if args.output:
        overrides["convert_directory"] = args.output
    if args.no_header:
        overrides["auto_generated_tag"] = False
    if args.enum_values:
        overrides["enum_values"] = args.enum_values
    if args.path_style:
        overrides["path_style"] = args.path_style

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _run(config: ConvertConfig) -> ConversionResult:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("[cyan]Converting models...", total=None)
        result = convert(config)
        progress.remove_task(task)
    return result


def _print_summary(result: ConversionResult, verbose: bool):
    console.print(
        f"[green]✓[/green] Generated {len(result.written)} file(s) in "
        f"[cyan]{result.output_directory}[/cyan]"
    )

    if not verbose:
        return

    metadata_table = Table(
        title="📊 Conversion Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        if isinstance(value, list):
            value = "\n".join(str(item) for item in value)
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)

    if result.written:
        console.print(
            Panel(
                "\n".join(str(path) for path in result.written),
                title="📄 Generated Files",
                border_style="blue",
            )
        )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Args:
        argv: Arguments without the program name (sys.argv when None)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(
        verbose=args.verbose,
        log_file=Path(args.log_file) if args.log_file else None,
    )

    try:
        config = build_config(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    result = _run(config)

    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        logger.debug("Conversion error details", exc_info=result.exception)
        return 1

    _print_summary(result, args.verbose)
    return 0


__all__ = ["CLIError", "build_config", "create_parser", "main"]
