"""ROM source detection and loading."""

import logging
from enum import Enum
from pathlib import Path
from typing import List

from tosecdb.sources.datfile import read_datfile
from tosecdb.sources.errors import UnknownSourceError
from tosecdb.sources.rom_directory import list_rom_directory

logger = logging.getLogger(__name__)


class SourceType(Enum):
    """Kinds of ROM sources."""
    DIRECTORY = "directory"   # Repository of TOSEC named ROM files
    DATFILE = "datfile"       # TOSEC datfile listing ROMs


def detect_source_type(path: Path) -> SourceType:
    """
    Detect whether path is a ROM directory or a datfile.

    Raises:
        UnknownSourceError: If path is neither a directory nor a file
    """
    path = Path(path)
    if path.is_dir():
        return SourceType.DIRECTORY
    if path.is_file():
        return SourceType.DATFILE
    raise UnknownSourceError(
        f"{path} is neither a ROM files repository nor a datfile"
    )


def load_rom_names(path: Path) -> List[str]:
    """
    Load ROM names from a ROM directory or a datfile.

    Args:
        path: ROM directory or datfile path

    Returns:
        ROM names in source order

    Raises:
        SourceError: If the source cannot be read
    """
    source_type = detect_source_type(path)
    logger.info(f"Reading ROM names from {source_type.value}: {path}")

    if source_type == SourceType.DIRECTORY:
        return list_rom_directory(path)
    return read_datfile(path)
