"""
TOSEC ROM name parser.

Runs the full classification of one ROM name:

    extension stripping -> splitting -> title/version -> flags -> dump flags

Each name is parsed on its own into a fresh RomRecord; nothing is shared
between names.
"""

import logging
from collections import Counter
from typing import Iterable, List

from tosecdb.naming.dump_flags import MORE_INFO, classify_dump_flag
from tosecdb.naming.dump_flags import UNKNOWN as UNKNOWN_DUMP
from tosecdb.naming.flags import UNKNOWN, classify_flag
from tosecdb.naming.record import RomRecord
from tosecdb.naming.splitter import split_name, strip_extension
from tosecdb.naming.title import classify_title

logger = logging.getLogger(__name__)

# Fields that collect every matching token instead of keeping the last one
ACCUMULATED_FIELDS = {UNKNOWN, MORE_INFO, UNKNOWN_DUMP}


def _store(record: RomRecord, name: str, value: str) -> None:
    if name in ACCUMULATED_FIELDS:
        record.append(name, value)
    else:
        setattr(record, name, value)


def parse_rom_name(rom: str, strip_ext: bool = True) -> RomRecord:
    """
    Parse a TOSEC ROM name into its flags.

    Args:
        rom: ROM file name or datfile ROM name
        strip_ext: Remove the final extension before parsing

    Returns:
        RomRecord with rom set to the name as given

    Example:
        >>> record = parse_rom_name("Sonic the Hedgehog (1991)(Sega)(EU)(en)[!].bin")
        >>> record.title, record.publisher_flag, record.known_verified_dump_flag
        ('Sonic the Hedgehog', 'Sega', '!')
    """
    raw = strip_extension(rom) if strip_ext else rom
    parts = split_name(raw)

    record = RomRecord(rom=rom)
    record.title, record.version_flag = classify_title(parts.title)

    for token in parts.flag_tokens:
        name, value = classify_flag(token, record)
        _store(record, name, value)

    for token in parts.dump_tokens:
        name, value = classify_dump_flag(token)
        _store(record, name, value)

    return record


class RomNameParser:
    """
    Parses sequences of ROM names and keeps per-category statistics.

    Counts how many names carry each flag, and remembers the names that
    left tokens in the unknown buckets.
    """

    def __init__(self, strip_ext: bool = True):
        """
        Initialize parser.

        Args:
            strip_ext: Remove file extensions before parsing (False when the
                       names carry no extension)
        """
        self.strip_ext = strip_ext
        self.flag_counts: Counter = Counter()
        self.parsed = 0
        self.unrecognized: List[str] = []

    def parse(self, rom: str) -> RomRecord:
        """Parse a single ROM name and update statistics."""
        record = parse_rom_name(rom, strip_ext=self.strip_ext)

        flags = record.set_flags()
        self.flag_counts.update(flags.keys())
        self.parsed += 1

        if record.unknown_flags or record.unknown_dump_flags:
            self.unrecognized.append(rom)
            logger.debug(
                f"Unrecognized flags in {rom!r}: "
                f"flags={record.unknown_flags!r} dump={record.unknown_dump_flags!r}"
            )
        else:
            logger.debug(f"Parsed {rom!r}: {flags}")

        return record

    def parse_all(self, roms: Iterable[str]) -> List[RomRecord]:
        """Parse ROM names, keeping input order."""
        return [self.parse(rom) for rom in roms]

    def reset(self) -> None:
        """Clear statistics."""
        self.flag_counts.clear()
        self.parsed = 0
        self.unrecognized.clear()
