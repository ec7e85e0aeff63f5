import pytest

from fontcatalog.errors import UnparsableFont
from fontcatalog.reader import open_font

from helpers import build_font, corrupt_font, corrupt_table


def test_open_font_exposes_tables(acme_font):
    with open_font(acme_font) as handle:
        assert handle.has_table("name")
        assert handle.has_table("OS/2")
        assert not handle.has_table("fvar")
        assert handle.table("fvar") is None
        assert "GlyphOrder" not in handle.table_tags()
        assert handle.flavor is None
        assert not handle.is_cff


def test_english_name_and_cmap(acme_font):
    with open_font(acme_font) as handle:
        assert handle.english_name(1) == "Acme Sans"
        assert handle.english_name(2) == "Regular"
        assert handle.english_name(9) is None
        assert handle.best_cmap()[0x41] == "A"
        assert handle.glyph_count() == 7


def test_missing_cmap_gives_empty_map():
    data = build_font(drop_tables=("cmap", "OS/2"))
    with open_font(data) as handle:
        assert handle.best_cmap() == {}


def test_corrupted_table_directory_raises_unparsable():
    with pytest.raises(UnparsableFont):
        open_font(corrupt_font())


def test_woff2_is_decoded():
    with open_font(build_font(flavor="woff2")) as handle:
        assert handle.flavor == "woff2"
        assert handle.english_name(1) == "Acme Sans"


def test_decoded_table_reports_corrupt_table(open_handle):
    handle = open_handle(corrupt_table(build_font(), "OS/2"))
    table, error = handle.decoded_table("OS/2")
    assert table is None
    assert error.startswith("OS/2 table unreadable")
    assert handle.decoded_table("OS/2") == (None, error)
    assert handle.decoded_table("fvar") == (None, None)
    assert handle.decoded_table("hhea")[0].ascent == 800
