"""
Database file writers.

Output layout:
    roms.list   One ROM name per line, as read from the source
    roms.csv    Header row, then one row per ROM (';' separated by default)
    roms.json   {"ROMS": [{"rom": ..., "title": ..., ...}, ...]}
"""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from tosecdb.naming.record import RomRecord
from tosecdb.output.errors import OutputDirectoryError, OutputWriteError

logger = logging.getLogger(__name__)

JSON_ROOT_KEY = "ROMS"


def ensure_output_directory(path: Path) -> Path:
    """
    Create the output directory (and parents) if needed.

    Raises:
        OutputDirectoryError: If the directory cannot be created
    """
    path = Path(path).expanduser()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"Output directory {path} can't be created: {e}")
    return path


def write_rom_list(names: Iterable[str], output_path: Path) -> None:
    """
    Write ROM names, one per line.

    Args:
        names: ROM names in source order
        output_path: Path to list file
    """
    try:
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            for name in names:
                f.write(f"{name}\n")
    except OSError as e:
        raise OutputWriteError(f"Failed to write ROM list {output_path}: {e}")


def write_csv(records: Iterable[RomRecord], output_path: Path, separator: str = ';') -> int:
    """
    Write records as a delimited text file with a header row.

    Args:
        records: Parsed records
        output_path: Path to CSV file
        separator: Field separator

    Returns:
        Number of data rows written
    """
    count = 0
    try:
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f, delimiter=separator, lineterminator='\n')
            writer.writerow(RomRecord.headers())
            for record in records:
                writer.writerow(record.to_row())
                count += 1
    except OSError as e:
        raise OutputWriteError(f"Failed to write CSV file {output_path}: {e}")

    logger.debug(f"Wrote {count} rows to {output_path}")
    return count


def records_to_json(records: Iterable[RomRecord]) -> Dict[str, List[Dict[str, Any]]]:
    """Build the JSON document for records."""
    return {JSON_ROOT_KEY: [record.to_dict() for record in records]}


def write_json(records: Iterable[RomRecord], output_path: Path) -> None:
    """
    Write records as a JSON document.

    Args:
        records: Parsed records
        output_path: Path to JSON file
    """
    document = records_to_json(records)
    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
            f.write('\n')
    except OSError as e:
        raise OutputWriteError(f"Failed to write JSON file {output_path}: {e}")

    logger.debug(f"Wrote {len(document[JSON_ROOT_KEY])} objects to {output_path}")
