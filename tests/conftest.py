"""
Shared pytest fixtures and utilities for the tosecdb test suite.
"""

from pathlib import Path
from typing import Dict, Any, Callable, List

import pytest
import yaml


SAMPLE_ROMS = [
    "Sonic the Hedgehog (1991)(Sega)(EU)(en)[!].bin",
    "Game (1990)(Acme)(Disk 1 of 3)[cr PiratedGroup].img",
    "Game (Taito)(US).rom",
    "Dungeon Master v1.2 (1987)(FTL)(M3)[a].adf",
]


@pytest.fixture
def sample_roms() -> List[str]:
    """A few TOSEC names covering the common flags."""
    return list(SAMPLE_ROMS)


@pytest.fixture
def rom_directory(tmp_path: Path, sample_roms: List[str]) -> Path:
    """
    Directory holding empty files named after the sample ROMs.
    """
    directory = tmp_path / "roms"
    directory.mkdir()
    for name in sample_roms:
        (directory / name).write_bytes(b"")
    (directory / ".hidden").write_text("skip me")
    return directory


@pytest.fixture
def make_datfile(tmp_path: Path) -> Callable[[List[str]], Path]:
    """
    Write a minimal Logiqx-style datfile listing the given ROM names.

    Usage:
        path = make_datfile(["Game (1990)(Acme).adf"])
    """

    def _builder(names: List[str], filename: str = "roms.dat") -> Path:
        games = []
        for name in names:
            escaped = (
                name.replace("&", "&amp;")
                .replace('"', "&quot;")
                .replace("<", "&lt;")
                .replace(">", "&gt;")
            )
            stem = escaped.rsplit(".", 1)[0]
            games.append(
                f'\t<game name="{stem}">\n'
                f'\t\t<description>{stem}</description>\n'
                f'\t\t<rom name="{escaped}" size="901120" crc="00000000"/>\n'
                f'\t</game>\n'
            )

        content = (
            '<?xml version="1.0"?>\n'
            '<!DOCTYPE datafile PUBLIC "-//Logiqx//DTD ROM Management Datafile//EN" '
            '"http://www.logiqx.com/Dats/datafile.dtd">\n'
            '<datafile>\n'
            '\t<header>\n'
            '\t\t<name>Test - Games</name>\n'
            '\t</header>\n'
            + "".join(games)
            + '</datafile>\n'
        )
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _builder


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Create a minimal tosecdb.yaml in a temp directory.

    Usage:
        path = make_config({"output": {"csv_separator": ","}})
    """

    def _builder(overrides: Dict[str, Any] | None = None) -> Path:
        base = {
            "output": {
                "directory": str(tmp_path / "out"),
            },
            "logging": {"console": False},
        }
        if overrides:
            base = merge_dicts(base, overrides)

        cfg_path = tmp_path / "tosecdb.yaml"
        cfg_path.write_text(yaml.safe_dump(base))
        return cfg_path

    return _builder


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow+deep merge helper for fixture config dictionaries.
    """
    result: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
