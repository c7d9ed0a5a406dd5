"""
Database build workflow.

One build run:
    1. Create the output directory
    2. Read ROM names from the source (directory or datfile)
    3. Write the ROM list
    4. Parse every name, in source order
    5. Write the CSV and JSON database files
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from tosecdb.config.loader import get_config_value
from tosecdb.naming.parser import RomNameParser
from tosecdb.naming.record import RomRecord
from tosecdb.output.writers import (
    ensure_output_directory,
    write_csv,
    write_json,
    write_rom_list,
)
from tosecdb.sources.loader import load_rom_names

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of a database build."""
    source: Path
    output_directory: Path
    csv_path: Path
    json_path: Path
    rom_list_path: Optional[Path]
    total_roms: int
    records: List[RomRecord] = field(default_factory=list)
    flag_counts: Dict[str, int] = field(default_factory=dict)
    unrecognized: List[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0


class DatabaseBuilder:
    """
    Builds TOSEC database files from a ROM source.

    Coordinates:
    - Output directory creation
    - ROM name loading
    - Name parsing
    - CSV/JSON writing
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize builder.

        Args:
            config: Validated configuration dictionary
        """
        self.config = config
        self.output_directory = Path(get_config_value(config, 'output.directory')).expanduser()
        self.separator = get_config_value(config, 'output.csv_separator', ';')
        self.rom_list_name = get_config_value(config, 'output.rom_list', 'roms.list')
        self.csv_name = get_config_value(config, 'output.csv_file', 'roms.csv')
        self.json_name = get_config_value(config, 'output.json_file', 'roms.json')
        self.write_list = get_config_value(config, 'output.write_rom_list', True)

    def build(self, source: Path) -> BuildResult:
        """
        Run a complete build.

        Args:
            source: ROM directory or datfile

        Returns:
            BuildResult with output paths and statistics

        Raises:
            OutputDirectoryError: If the output directory cannot be created
            OutputWriteError: If an output file cannot be written
            SourceError: If the source cannot be read
        """
        start = time.time()
        source = Path(source).expanduser()

        output_dir = ensure_output_directory(self.output_directory)
        logger.info(f"Output directory: {output_dir}")

        names = load_rom_names(source)

        rom_list_path = None
        if self.write_list:
            rom_list_path = output_dir / self.rom_list_name
            write_rom_list(names, rom_list_path)

        parser = RomNameParser()
        records = parser.parse_all(names)

        csv_path = output_dir / self.csv_name
        json_path = output_dir / self.json_name
        write_csv(records, csv_path, separator=self.separator)
        write_json(records, json_path)

        if parser.unrecognized:
            logger.warning(f"{len(parser.unrecognized)} ROM names have unrecognized flags")

        elapsed = time.time() - start
        logger.info(f"Parsed {parser.parsed} ROM names in {elapsed:.2f}s")
        logger.info(f"CSV file: {csv_path}")
        logger.info(f"JSON file: {json_path}")

        return BuildResult(
            source=source,
            output_directory=output_dir,
            csv_path=csv_path,
            json_path=json_path,
            rom_list_path=rom_list_path,
            total_roms=len(records),
            records=records,
            flag_counts=dict(parser.flag_counts),
            unrecognized=list(parser.unrecognized),
            elapsed_seconds=elapsed,
        )
