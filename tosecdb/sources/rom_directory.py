"""ROM directory listing."""

import logging
import os
from pathlib import Path
from typing import List

from tosecdb.sources.errors import NotReadableDirectoryError

logger = logging.getLogger(__name__)


def check_directory_readable(path: Path) -> None:
    """
    Check that path is a directory that can be listed.

    Raises:
        NotReadableDirectoryError: If path is not a readable directory
    """
    if not (path.is_dir() and os.access(path, os.R_OK | os.X_OK)):
        raise NotReadableDirectoryError(
            f"{path} is either not a directory or has not sufficient "
            f"permissions to be accessed at least in read-only mode"
        )


def list_rom_directory(path: Path) -> List[str]:
    """
    List ROM names found in a directory.

    Only one level is scanned. Hidden entries are skipped; names are
    returned sorted.

    Args:
        path: ROM directory

    Returns:
        Entry names (with extensions)

    Raises:
        NotReadableDirectoryError: If directory cannot be listed
    """
    path = Path(path)
    check_directory_readable(path)

    try:
        entries = [entry.name for entry in path.iterdir()]
    except PermissionError:
        raise NotReadableDirectoryError(f"Permission denied accessing ROM directory: {path}")
    except OSError as e:
        raise NotReadableDirectoryError(f"Failed to scan ROM directory: {e}")

    names = sorted(name for name in entries if not name.startswith('.'))
    logger.info(f"Found {len(names)} entries in {path}")
    return names
