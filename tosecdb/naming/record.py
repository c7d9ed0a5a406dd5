"""ROM record definitions and data structures."""

from dataclasses import dataclass, field, fields
from typing import Dict, List


@dataclass
class RomRecord:
    """
    Flags parsed from a single TOSEC ROM name.

    Every field holds the flag text without its enclosing parentheses or
    square brackets, or an empty string when the flag is absent. Field order
    is the column order of the CSV and JSON outputs.
    """
    # Identification
    rom: str                                # Name as received (with extension)
    title: str = ""
    version_flag: str = ""

    # Software specification flags, between parentheses
    demo_flag: str = ""
    date_flag: str = ""
    publisher_flag: str = ""
    system_flag: str = ""
    video_flag: str = ""
    country_region_flag: str = ""
    language_flag: str = ""
    copyright_status_flag: str = ""
    development_status_flag: str = ""
    media_type_flag: str = ""
    media_label_flag: str = ""
    unknown_flags: str = ""

    # Dump flags, between square brackets
    cracked_dump_flag: str = ""
    fixed_dump_flag: str = ""
    hacked_dump_flag: str = ""
    modified_dump_flag: str = ""
    pirated_dump_flag: str = ""
    trained_dump_flag: str = ""
    translated_dump_flag: str = ""
    over_dump_flag: str = ""
    under_dump_flag: str = ""
    virus_dump_flag: str = ""
    bad_dump_flag: str = ""
    alternate_dump_flag: str = ""
    known_verified_dump_flag: str = ""
    more_info_dump_flags: str = ""
    unknown_dump_flags: str = ""

    @staticmethod
    def field_names() -> List[str]:
        """Record field names in output order."""
        return [f.name for f in fields(RomRecord)]

    @staticmethod
    def headers() -> List[str]:
        """CSV header names (upper-case field names)."""
        return [name.upper() for name in RomRecord.field_names()]

    def to_dict(self) -> Dict[str, str]:
        """Ordered mapping of field name to value."""
        return {name: getattr(self, name) for name in self.field_names()}

    def to_row(self) -> List[str]:
        """Field values in output order."""
        return [getattr(self, name) for name in self.field_names()]

    def set_flags(self) -> Dict[str, str]:
        """Non-empty flag fields (everything except the ROM name)."""
        return {
            name: value
            for name, value in self.to_dict().items()
            if name != 'rom' and value
        }

    def append(self, name: str, value: str) -> None:
        """Append a value to a space-joined accumulator field."""
        current = getattr(self, name)
        setattr(self, name, f"{current} {value}" if current else value)


# Flags whose presence means the Publisher position has been passed
POSITIONAL_FLAGS = (
    'publisher_flag',
    'system_flag',
    'video_flag',
    'country_region_flag',
    'language_flag',
    'copyright_status_flag',
    'development_status_flag',
    'media_type_flag',
    'media_label_flag',
)


@dataclass
class NameParts:
    """A raw ROM name split into its three regions."""
    title: str
    flags_region: str = ""
    dump_region: str = ""
    flag_tokens: List[str] = field(default_factory=list)
    dump_tokens: List[str] = field(default_factory=list)
