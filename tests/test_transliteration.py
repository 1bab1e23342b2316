import pytest

from NameSanitizer import remove_accents
from NameSanitizer.transliteration import ACCENT_TABLE


def test_remove_accents_latin1():
    """Test that Latin-1 accented letters map to plain ASCII"""
    assert remove_accents("École") == "Ecole"
    assert remove_accents("naïve") == "naive"
    assert remove_accents("Ñandú") == "Nandu"
    assert remove_accents("Ærø") == "AEro"


def test_remove_accents_expanding_letters():
    """Test that ligatures and sharp s expand or collapse as in the table"""
    assert remove_accents("Œuvre") == "OEuvre"
    assert remove_accents("Ĳssel") == "IJssel"
    assert remove_accents("Straße") == "Strase"
    assert remove_accents("Þór") == "THor"


def test_remove_accents_extended_a():
    """Test Latin Extended-A letters"""
    assert remove_accents("Łódź") == "Lodz"
    assert remove_accents("Čeština") == "Cestina"
    assert remove_accents("İstanbul") == "Istanbul"
    assert remove_accents("Ģirts") == "Girts"


def test_remove_accents_passthrough():
    """Test that characters outside the table are kept unchanged"""
    assert remove_accents("plain_ASCII 123") == "plain_ASCII 123"
    assert remove_accents("日本") == "日本"
    assert remove_accents("Ωmega") == "Ωmega"
    assert remove_accents("") == ""


def test_accent_table_is_ascii():
    """Every replacement is plain ASCII letters"""
    for char, replacement in ACCENT_TABLE.items():
        assert ord(char) > 127
        assert replacement.isascii() and replacement.isalpha()
        assert 1 <= len(replacement) <= 2


def test_accent_table_read_only():
    with pytest.raises(TypeError):
        ACCENT_TABLE["é"] = "x"
    assert remove_accents("é") == "e"
