import pytest

from tosecdb.naming.title import classify_title, is_version


@pytest.mark.unit
@pytest.mark.parametrize("word", ["v1.0", "V2", "v.9", "Rev1", "rev2.1", "REV3"])
def test_is_version_accepts_versions(word):
    assert is_version(word)


@pytest.mark.unit
@pytest.mark.parametrize("word", ["Vampire", "Revenge", "v", "rev", "Level2", "1.0"])
def test_is_version_rejects_title_words(word):
    assert not is_version(word)


@pytest.mark.unit
def test_classify_title_extracts_version():
    assert classify_title("Dungeon Master v1.2 ") == ("Dungeon Master", "v1.2")


@pytest.mark.unit
def test_classify_title_last_version_wins():
    assert classify_title("Game v1.0 Special v2.0") == ("Game Special", "v2.0")


@pytest.mark.unit
def test_classify_title_normalizes_whitespace():
    assert classify_title("  Sonic   the Hedgehog ") == ("Sonic the Hedgehog", "")


@pytest.mark.unit
def test_classify_title_empty_segment():
    assert classify_title("") == ("", "")
