"""Command-line interface for tosecdb."""

import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

from tosecdb import __version__
from tosecdb.builder import BuildResult, DatabaseBuilder
from tosecdb.config.loader import load_config, ConfigError
from tosecdb.config.validator import validate_config, ValidationError
from tosecdb.naming.record import RomRecord
from tosecdb.output.errors import OutputDirectoryError, OutputError
from tosecdb.sources.errors import (
    NotReadableDirectoryError,
    NotReadableFileError,
    SourceError,
    UnknownSourceError,
)

# Exit codes
EXIT_OK = 0
EXIT_NOT_READABLE_DIRECTORY = 1
EXIT_NOT_READABLE_FILE = 2
EXIT_BAD_ARGUMENTS = 3
EXIT_OUTPUT_DIRECTORY = 4
EXIT_UNKNOWN_SOURCE = 5
EXIT_CONFIG_ERROR = 6
EXIT_WRITE_ERROR = 7


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='tosecdb',
        description='Build CSV and JSON database files from TOSEC named ROMs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The ROMs source is either the directory containing TOSEC named ROMs (only one
level is scanned) or a TOSEC datfile listing ROMs. Quote paths with spaces.

Examples:
  # Scan all the ROM files of a directory
  tosecdb $HOME/Downloads/my_roms_directory

  # Scan all the ROMs listed in a datfile
  tosecdb "$HOME/Downloads/Commodore Amiga - Games - [ADF] (TOSEC-v2019-12-19_CM).dat"

  # Write into a given directory, comma separated, with a summary table
  tosecdb --output-dir ./db --separator , --summary ./roms

Exit codes:
  0  success
  1  ROM directory not readable
  2  datfile not readable
  3  wrong arguments
  4  output directory cannot be created
  5  source is neither a directory nor a file
  6  configuration error
  7  ROM list, CSV or JSON file cannot be written
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        'source',
        type=Path,
        metavar='ROMS_SOURCE',
        help='ROM directory or TOSEC datfile'
    )

    parser.add_argument(
        '--config',
        type=Path,
        metavar='PATH',
        help='Path to tosecdb.yaml (default: ./tosecdb.yaml if present)'
    )

    parser.add_argument(
        '--output-dir',
        type=Path,
        metavar='DIR',
        help='Output directory (default: ~/TOSEC_ROM_<date>_<time>). Overrides config.'
    )

    parser.add_argument(
        '--separator',
        metavar='CHAR',
        help='CSV field separator (default: ;). Overrides config.'
    )

    parser.add_argument(
        '--no-rom-list',
        action='store_true',
        help='Do not write the roms.list file. Overrides config.'
    )

    parser.add_argument(
        '--summary',
        action='store_true',
        help='Print a table of flag counts when done'
    )

    return parser


def _setup_logging(config: dict) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = logging_config.get('level', 'INFO').upper()
    level = getattr(logging, level_str, logging.INFO)

    handlers = []

    if logging_config.get('console', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except (OSError, PermissionError) as e:
            print(f"Error: Could not create log file '{log_file}': {e}", file=sys.stderr)
            sys.exit(EXIT_CONFIG_ERROR)

    if not handlers:
        handlers.append(logging.NullHandler())

    # Configure root logger
    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )


def _apply_overrides(config: dict, args: argparse.Namespace) -> None:
    """Apply command-line overrides to config."""
    output = config.setdefault('output', {})

    if args.output_dir is not None:
        output['directory'] = str(args.output_dir)

    if args.separator is not None:
        output['csv_separator'] = args.separator

    if args.no_rom_list:
        output['write_rom_list'] = False


def _source_exit_code(error: SourceError) -> int:
    """Map a source error to its exit code."""
    if isinstance(error, NotReadableDirectoryError):
        return EXIT_NOT_READABLE_DIRECTORY
    if isinstance(error, NotReadableFileError):
        return EXIT_NOT_READABLE_FILE
    if isinstance(error, UnknownSourceError):
        return EXIT_UNKNOWN_SOURCE
    return EXIT_NOT_READABLE_FILE


def print_summary(result: BuildResult, console: Optional[Console] = None) -> None:
    """
    Print a table of how many ROMs carry each flag.

    Args:
        result: Build result
        console: Rich console (default: stdout console)
    """
    console = console or Console()

    table = Table(
        title=f"{result.total_roms} ROMs from {result.source.name}",
        box=box.SIMPLE,
        show_edge=False,
    )
    table.add_column("Flag", style="bold")
    table.add_column("ROMs", justify="right")

    for name in RomRecord.field_names():
        count = result.flag_counts.get(name, 0)
        if name == 'rom' or not count:
            continue
        table.add_row(name.upper(), str(count))

    console.print(table)

    if result.unrecognized:
        console.print(f"[yellow]{len(result.unrecognized)} ROM names with unrecognized flags[/yellow]")
    console.print(f"CSV:  {result.csv_path}")
    console.print(f"JSON: {result.json_path}")


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for tosecdb CLI.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help and --version exit with 0
        return EXIT_BAD_ARGUMENTS if e.code else EXIT_OK

    # Load and validate configuration
    try:
        config = load_config(args.config)
        _apply_overrides(config, args)
        validate_config(config)
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    _setup_logging(config)

    builder = DatabaseBuilder(config)
    try:
        result = builder.build(args.source)
    except OutputDirectoryError as e:
        logger.error(str(e))
        return EXIT_OUTPUT_DIRECTORY
    except OutputError as e:
        logger.error(str(e))
        return EXIT_WRITE_ERROR
    except SourceError as e:
        logger.error(str(e))
        return _source_exit_code(e)
    except KeyboardInterrupt:
        print("\n\nBuild interrupted by user.", file=sys.stderr)
        return 130

    if args.summary:
        print_summary(result)

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
