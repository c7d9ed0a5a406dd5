"""
TOSEC datfile reading.

Extracts the declared ROM names from a Logiqx-style TOSEC datfile:

    <datafile>
        <game name="Game (1990)(Acme)">
            <description>Game (1990)(Acme)</description>
            <rom name="Game (1990)(Acme).adf" size="901120" crc="..."/>
        </game>
    </datafile>
"""

import html
import logging
import os
import re
from pathlib import Path
from typing import List, Optional

from lxml import etree

from tosecdb.sources.errors import NotReadableFileError

logger = logging.getLogger(__name__)

# Line scan used when the file is not well-formed XML (bare &, truncated file)
ROM_NAME_PATTERN = re.compile(r'<rom\s+name="([^"]*)"')


class DatfileError(NotReadableFileError):
    """Datfile cannot be read."""
    pass


def check_file_readable(path: Path) -> None:
    """
    Check that path is a regular file that can be read.

    Raises:
        NotReadableFileError: If path is not a readable file
    """
    if not (path.is_file() and os.access(path, os.R_OK)):
        raise NotReadableFileError(
            f"{path} is either not a normal file or has not sufficient "
            f"permissions to be accessed at least in read-only mode"
        )


def read_datfile(path: Path) -> List[str]:
    """
    Read ROM names declared in a datfile.

    Names come from the name attribute of every <rom> element, in document
    order, with XML entities such as &amp; already decoded.

    Args:
        path: Datfile path

    Returns:
        ROM names (with extensions)

    Raises:
        NotReadableFileError: If the datfile cannot be read
    """
    path = Path(path)
    check_file_readable(path)

    root = _parse_tree(path)
    if root is not None:
        names = [rom.get('name') for rom in root.iter('rom') if rom.get('name') is not None]
    else:
        logger.warning(f"Datfile is not well-formed XML, scanning lines instead: {path}")
        names = _scan_lines(path)

    logger.info(f"Found {len(names)} ROMs in datfile {path}")
    return names


def _parse_tree(path: Path) -> Optional[etree._Element]:
    """Parse datfile strictly, returning None when it is not well-formed XML."""
    parser = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)
    try:
        tree = etree.parse(str(path), parser)
    except etree.XMLSyntaxError as e:
        logger.debug(f"lxml could not parse {path}: {e}")
        return None
    except OSError as e:
        raise DatfileError(f"Failed to read datfile: {e}")

    return tree.getroot()


def _scan_lines(path: Path) -> List[str]:
    """Extract <rom name="..."> attributes line by line."""
    try:
        text = path.read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        raise DatfileError(f"Failed to read datfile: {e}")

    return [html.unescape(match) for match in ROM_NAME_PATTERN.findall(text)]
