from fontcatalog.features import extract_features, feature_kind, feature_title
from fontcatalog.models import FeatureKind

from helpers import build_font

LIGA_BOTH_TABLES = """
feature liga {
    sub f i by f_i;
} liga;

feature liga {
    pos f i -20;
} liga;
"""

KERN_AND_SMCP = """
feature smcp {
    sub a by A;
} smcp;

feature kern {
    pos A V -50;
} kern;
"""

NAMED_STYLISTIC_SET = """
feature ss01 {
    featureNames {
        name "Round dots";
    };
    sub a by a.ss01;
} ss01;

feature ss02 {
    sub a by a.ss01;
} ss02;
"""


def test_feature_titles():
    assert feature_title("liga") == "Standard Ligatures"
    assert feature_title("ss07") == "Stylistic Set 7"
    assert feature_title("cv12") == "Character Variant 12"
    assert feature_title("zzzz") == "zzzz"


def test_feature_kind():
    assert feature_kind("ss01") is FeatureKind.ALTERNATE
    assert feature_kind("salt") is FeatureKind.ALTERNATE
    assert feature_kind("liga") is FeatureKind.OTHER


def test_liga_in_gsub_and_gpos_is_reported_once(open_handle):
    handle = open_handle(build_font(features=LIGA_BOTH_TABLES, extra_glyphs=["f_i"]))
    assert handle.has_table("GSUB") and handle.has_table("GPOS")
    features, warnings = extract_features(handle)
    assert [f.tag for f in features] == ["liga"]
    assert features[0].human_title == "Standard Ligatures"
    assert warnings == []


def test_gsub_features_come_before_gpos(open_handle):
    handle = open_handle(build_font(features=KERN_AND_SMCP))
    features, _ = extract_features(handle)
    assert [f.tag for f in features] == ["smcp", "kern"]
    assert [f.human_title for f in features] == ["Small Capitals", "Kerning"]


def test_stylistic_set_uses_font_supplied_name(open_handle):
    handle = open_handle(
        build_font(features=NAMED_STYLISTIC_SET, extra_glyphs=["a.ss01"])
    )
    features, _ = extract_features(handle)
    by_tag = {f.tag: f for f in features}
    assert by_tag["ss01"].human_title == "Round dots"
    assert by_tag["ss02"].human_title == "Stylistic Set 2"
    assert all(f.is_alternate for f in features)


def test_font_without_layout_tables_warns(open_handle):
    features, warnings = extract_features(open_handle(build_font()))
    assert features == []
    assert warnings == ["No GSUB/GPOS tables; no OpenType features detected"]


def test_no_handle():
    assert extract_features(None) == ([], [])
