"""
ROM source package for tosecdb.

Produces the ROM names to parse, from a ROM directory or a TOSEC datfile.
"""

from .errors import (
    SourceError,
    NotReadableDirectoryError,
    NotReadableFileError,
    UnknownSourceError,
)
from .rom_directory import list_rom_directory
from .datfile import read_datfile, DatfileError
from .loader import load_rom_names, SourceType, detect_source_type

__all__ = [
    'SourceError',
    'NotReadableDirectoryError',
    'NotReadableFileError',
    'UnknownSourceError',
    'DatfileError',
    'list_rom_directory',
    'read_datfile',
    'load_rom_names',
    'SourceType',
    'detect_source_type',
]
