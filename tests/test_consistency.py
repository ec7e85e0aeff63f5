import pytest

from fontcatalog.consistency import validate_consistency
from fontcatalog.models import ProcessedFontMetadata


def _record(**overrides):
    values = dict(family="Acme Sans", weight=400, category=["Sans"], languages=["Latin"])
    values.update(overrides)
    return ProcessedFontMetadata(**values)


def test_consistent_record_is_unchanged():
    record = _record()
    corrected, warnings = validate_consistency(record, "acme")
    assert corrected == record
    assert warnings == []


def test_blank_family_uses_fallback():
    corrected, warnings = validate_consistency(_record(family="   "), "acme-regular")
    assert corrected.family == "acme-regular"
    assert warnings == ["Missing family name, using 'acme-regular'"]


def test_family_is_stripped():
    corrected, warnings = validate_consistency(_record(family=" Acme "), "acme")
    assert corrected.family == "Acme"
    assert warnings == []


@pytest.mark.parametrize("weight", [0, 1001, -5, True, 400.5, None])
def test_invalid_weight_defaults_to_400(weight):
    corrected, warnings = validate_consistency(_record(weight=weight), "acme")
    assert corrected.weight == 400
    assert warnings == [f"Invalid weight: {weight}, defaulting to 400"]


@pytest.mark.parametrize("weight", [1, 400, 1000])
def test_boundary_weights_are_kept(weight):
    corrected, _ = validate_consistency(_record(weight=weight), "acme")
    assert corrected.weight == weight


def test_empty_category_and_languages_get_defaults():
    corrected, warnings = validate_consistency(_record(category=[], languages=[]), "acme")
    assert corrected.category == ["Sans"]
    assert corrected.languages == ["Latin"]
    assert warnings == [
        "No categories detected, defaulting to Sans",
        "No languages detected, defaulting to Latin",
    ]


def test_input_record_is_not_mutated():
    record = _record(category=[])
    validate_consistency(record, "acme")
    assert record.category == []


@pytest.mark.parametrize("fallback", ["", "   "])
def test_blank_fallback_family_uses_unknown(fallback):
    corrected, warnings = validate_consistency(_record(family=""), fallback)
    assert corrected.family == "Unknown"
    assert warnings == ["Missing family name, using 'Unknown'"]


def test_fallback_family_is_stripped():
    corrected, _ = validate_consistency(_record(family=""), "  acme  ")
    assert corrected.family == "acme"
