from fontcatalog.filename_rules import (
    DEFAULT_RULES,
    FilenameRule,
    StyleCorrection,
    find_correction,
)


def test_jost_weight_maps_to_style():
    correction = find_correction("Jost", "Jost-300-Light.otf")
    assert correction == StyleCorrection(rule="jost", style="Light", weight=300)


def test_jost_italic_marker():
    correction = find_correction("Jost", "Jost-700-BoldItalic.otf")
    assert correction.weight == 700
    assert correction.style == "Bold Italic"
    assert correction.is_italic


def test_basteleur_style_maps_to_weight():
    correction = find_correction("Basteleur", "Basteleur-Moonlight.otf")
    assert correction.weight == 300
    assert correction.style == "Moonlight"


def test_outward_style_is_capitalized():
    correction = find_correction("Outward", "outward-round.ttf")
    assert correction.style == "Round"
    assert correction.weight is None


def test_family_match_is_case_insensitive_and_full():
    assert find_correction("jost", "Jost-500-Medium.otf") is not None
    assert find_correction("Jost Pro", "Jost-500-Medium.otf") is None


def test_unmatched_filename_returns_none():
    assert find_correction("Jost", "jost.ttf") is None


def test_custom_rule_is_data():
    rule = FilenameRule(
        name="acme",
        family_match=r"Acme",
        filename_pattern=r"Acme_(?P<style>\w+)\.ttf$",
        weight_map={"Fat": 900},
    )
    rules = [rule, *DEFAULT_RULES]
    correction = find_correction("Acme", "dir/Acme_Fat.ttf", rules)
    assert correction == StyleCorrection(rule="acme", style="Fat", weight=900)


def test_default_rules_are_immutable():
    assert isinstance(DEFAULT_RULES, tuple)
