from fontcatalog.models import FeatureKind, OpenTypeFeatureDescriptor, VariableAxisDescriptor
from fontcatalog.style_tags import generate_style_tags


def _feature(tag, title, kind=FeatureKind.OTHER):
    return OpenTypeFeatureDescriptor(tag=tag, human_title=title, kind=kind)


def test_sans_family():
    assert generate_style_tags("Acme Sans", [], False, []) == ["Sans Serif"]


def test_serif_without_sans():
    assert generate_style_tags("Acme Serif", [], False, []) == ["Serif"]


def test_slab_serif():
    assert generate_style_tags("Acme Slab Serif", [], False, []) == ["Serif", "Slab Serif"]


def test_family_patterns():
    assert generate_style_tags("Acme Mono", [], False, []) == ["Monospace"]
    assert generate_style_tags("Acme Display", [], False, []) == ["Display"]
    assert generate_style_tags("Acme Brush", [], False, []) == ["Script"]


def test_feature_fragments():
    features = [
        _feature("liga", "Standard Ligatures"),
        _feature("smcp", "Small Capitals"),
        _feature("swsh", "Swash"),
    ]
    assert generate_style_tags("Acme", features, False, []) == [
        "Ligatures",
        "Swashes",
        "Small Caps",
    ]


def test_custom_stylistic_set_name_still_tags_stylistic_sets():
    features = [_feature("ss01", "Round dots", FeatureKind.ALTERNATE)]
    assert generate_style_tags("Acme", features, False, []) == ["Stylistic Sets"]


def test_variable_wide_weight_range():
    axes = [VariableAxisDescriptor("Weight", "wght", 100, 900, 400)]
    assert generate_style_tags("Acme", [], True, axes) == ["Variable", "Wide Weight Range"]


def test_narrow_weight_range():
    axes = [VariableAxisDescriptor("Weight", "wght", 300, 700, 400)]
    assert generate_style_tags("Acme", [], True, axes) == ["Variable"]


def test_wide_range_on_other_axis_does_not_count():
    axes = [VariableAxisDescriptor("Optical Size", "opsz", 6, 1000, 12)]
    assert "Wide Weight Range" not in generate_style_tags("Acme", [], True, axes)


def test_tags_never_repeat():
    features = [
        _feature("liga", "Standard Ligatures"),
        _feature("dlig", "Discretionary Ligatures"),
    ]
    tags = generate_style_tags("Acme Code Mono", features, False, [])
    assert tags == ["Ligatures", "Monospace"]
