import os

import pytest

from tosecdb.sources.errors import NotReadableDirectoryError
from tosecdb.sources.rom_directory import list_rom_directory


@pytest.mark.unit
def test_lists_sorted_names_without_hidden(rom_directory, sample_roms):
    names = list_rom_directory(rom_directory)

    assert names == sorted(sample_roms)
    assert ".hidden" not in names


@pytest.mark.unit
def test_only_one_level_is_listed(rom_directory):
    sub = rom_directory / "Sub Dir"
    sub.mkdir()
    (sub / "Nested (1990)(Acme).adf").write_bytes(b"")

    names = list_rom_directory(rom_directory)

    assert "Sub Dir" in names
    assert "Nested (1990)(Acme).adf" not in names


@pytest.mark.unit
def test_empty_directory(tmp_path):
    assert list_rom_directory(tmp_path) == []


@pytest.mark.unit
def test_file_is_not_a_directory(tmp_path):
    path = tmp_path / "file.adf"
    path.write_bytes(b"")

    with pytest.raises(NotReadableDirectoryError):
        list_rom_directory(path)


@pytest.mark.unit
@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="permissions not enforced")
def test_unreadable_directory(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0o000)
    try:
        with pytest.raises(NotReadableDirectoryError):
            list_rom_directory(locked)
    finally:
        locked.chmod(0o755)
