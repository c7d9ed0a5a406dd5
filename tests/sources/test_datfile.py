import pytest

from tosecdb.sources.datfile import read_datfile
from tosecdb.sources.errors import NotReadableFileError


@pytest.mark.unit
def test_reads_rom_names_in_document_order(make_datfile, sample_roms):
    path = make_datfile(sample_roms)

    assert read_datfile(path) == sample_roms


@pytest.mark.unit
def test_unescapes_ampersand(make_datfile):
    path = make_datfile(["Rock & Roll (1990)(Smith & Jones).adf"])

    assert read_datfile(path) == ["Rock & Roll (1990)(Smith & Jones).adf"]


@pytest.mark.unit
def test_keeps_bare_ampersand(tmp_path, caplog):
    path = tmp_path / "bare.dat"
    path.write_text(
        '<?xml version="1.0"?>\n'
        '<datafile>\n'
        '\t<game name="Rock & Roll (1990)(Smith & Jones)">\n'
        '\t\t<rom name="Rock & Roll (1990)(Smith & Jones).adf" size="1"/>\n'
        '\t</game>\n'
        '\t<game name="Tom &amp; Jerry (1989)(Magic Bytes)">\n'
        '\t\t<rom name="Tom &amp; Jerry (1989)(Magic Bytes).adf" size="1"/>\n'
        '\t</game>\n'
        '</datafile>\n'
    )

    with caplog.at_level("WARNING", logger="tosecdb.sources.datfile"):
        names = read_datfile(path)

    assert names == [
        "Rock & Roll (1990)(Smith & Jones).adf",
        "Tom & Jerry (1989)(Magic Bytes).adf",
    ]
    assert "not well-formed" in caplog.text


@pytest.mark.unit
def test_several_roms_per_game(tmp_path):
    path = tmp_path / "multi.dat"
    path.write_text(
        '<?xml version="1.0"?>\n'
        '<datafile>\n'
        '\t<game name="Game (1990)(Acme)">\n'
        '\t\t<rom name="Game (1990)(Acme)(Disk 1 of 2).adf" size="1"/>\n'
        '\t\t<rom name="Game (1990)(Acme)(Disk 2 of 2).adf" size="1"/>\n'
        '\t</game>\n'
        '</datafile>\n'
    )

    assert read_datfile(path) == [
        "Game (1990)(Acme)(Disk 1 of 2).adf",
        "Game (1990)(Acme)(Disk 2 of 2).adf",
    ]


@pytest.mark.unit
def test_recovers_from_broken_xml(tmp_path):
    path = tmp_path / "broken.dat"
    path.write_text(
        '<datafile>\n'
        '\t<game name="A">\n'
        '\t\t<rom name="Alpha (1990)(Acme).adf" size="1"/>\n'
        '\t</game>\n'
        '\t<game name="B">\n'
        '\t\t<rom name="Beta (1991)(Acme).adf" size="1"/>\n'
    )

    names = read_datfile(path)

    assert names[0] == "Alpha (1990)(Acme).adf"
    assert "Beta (1991)(Acme).adf" in names


@pytest.mark.unit
def test_empty_file_has_no_roms(tmp_path):
    path = tmp_path / "empty.dat"
    path.write_text("")

    assert read_datfile(path) == []


@pytest.mark.unit
def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(NotReadableFileError):
        read_datfile(tmp_path)
