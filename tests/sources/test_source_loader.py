import pytest

from tosecdb.sources.errors import UnknownSourceError
from tosecdb.sources.loader import SourceType, detect_source_type, load_rom_names


@pytest.mark.unit
def test_detect_source_type(rom_directory, make_datfile):
    assert detect_source_type(rom_directory) == SourceType.DIRECTORY
    assert detect_source_type(make_datfile(["Game.adf"])) == SourceType.DATFILE


@pytest.mark.unit
def test_detect_missing_source(tmp_path):
    with pytest.raises(UnknownSourceError):
        detect_source_type(tmp_path / "missing")


@pytest.mark.unit
def test_load_rom_names_from_directory(rom_directory, sample_roms):
    assert load_rom_names(rom_directory) == sorted(sample_roms)


@pytest.mark.unit
def test_load_rom_names_from_datfile(make_datfile, sample_roms):
    assert load_rom_names(make_datfile(sample_roms)) == sample_roms
