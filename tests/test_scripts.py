from fontcatalog.scripts import count_sampled_hits, detect_scripts, scripts_from_cmap

from helpers import CYRILLIC_SAMPLE, GREEK_SAMPLE, HIRAGANA_SAMPLE, build_font


def _cmap(codepoints):
    return {cp: f"uni{cp:04X}" for cp in codepoints}


def test_latin_only():
    assert scripts_from_cmap(_cmap([0x41, 0x61])) == ["Latin"]


def test_cyrillic_needs_three_sampled_hits():
    assert "Cyrillic" not in scripts_from_cmap(_cmap(CYRILLIC_SAMPLE[:2]))
    assert "Cyrillic" in scripts_from_cmap(_cmap(CYRILLIC_SAMPLE[:3]))


def test_unsampled_codepoints_do_not_count():
    # Cyrillic block, but outside the sampled set
    assert "Cyrillic" not in scripts_from_cmap(_cmap([0x0450, 0x0451, 0x0452, 0x0453]))


def test_multiple_scripts_in_order():
    scripts = scripts_from_cmap(_cmap(CYRILLIC_SAMPLE + GREEK_SAMPLE + HIRAGANA_SAMPLE))
    assert scripts == ["Latin", "Cyrillic", "Greek", "Japanese"]


def test_count_sampled_hits():
    assert count_sampled_hits({0x41: "A", 0x42: ""}, [0x41, 0x42, 0x43]) == 1


def test_detect_scripts_from_font(open_handle):
    handle = open_handle(build_font(extra_codepoints=CYRILLIC_SAMPLE))
    scripts, warnings = detect_scripts(handle)
    assert scripts == ["Latin", "Cyrillic"]
    assert warnings == []


def test_two_cyrillic_glyphs_in_font_are_not_enough(open_handle):
    handle = open_handle(build_font(extra_codepoints=CYRILLIC_SAMPLE[:2]))
    scripts, _ = detect_scripts(handle)
    assert scripts == ["Latin"]


def test_missing_cmap_assumes_latin(open_handle):
    handle = open_handle(build_font(drop_tables=("cmap", "OS/2")))
    scripts, warnings = detect_scripts(handle)
    assert scripts == ["Latin"]
    assert "No cmap table" in warnings[0]


def test_no_handle_assumes_latin():
    assert detect_scripts(None) == (["Latin"], [])
