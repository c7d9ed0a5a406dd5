"""
Output package for tosecdb.

Writes the ROM list and the parsed records as CSV and JSON files.
"""

from .errors import OutputError, OutputDirectoryError, OutputWriteError
from .writers import (
    ensure_output_directory,
    write_rom_list,
    write_csv,
    write_json,
    records_to_json,
)

__all__ = [
    'OutputError',
    'OutputDirectoryError',
    'OutputWriteError',
    'ensure_output_directory',
    'write_rom_list',
    'write_csv',
    'write_json',
    'records_to_json',
]
