"""
TOSEC naming convention package for tosecdb.

Splits ROM names and classifies their title, flags and dump flags.
"""

from .record import RomRecord, NameParts
from .splitter import split_name, strip_extension, tokenize_region
from .title import classify_title
from .flags import classify_flag
from .dump_flags import classify_dump_flag
from .parser import parse_rom_name, RomNameParser

__all__ = [
    'RomRecord',
    'NameParts',
    'split_name',
    'strip_extension',
    'tokenize_region',
    'classify_title',
    'classify_flag',
    'classify_dump_flag',
    'parse_rom_name',
    'RomNameParser',
]
