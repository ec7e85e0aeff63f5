import dataclasses
import logging

import pytest

from fontcatalog.models import (
    DesignerInfo,
    FeatureKind,
    FontMetrics,
    OpenTypeFeatureDescriptor,
    ProcessedFontMetadata,
    RawFontBuffer,
)
from fontcatalog.results import OperationResult, ResultLevel


def test_raw_buffer_stem_and_size():
    buffer = RawFontBuffer(b"1234", "uploads/Acme-Bold.woff2", 10)
    assert buffer.stem == "Acme-Bold"
    assert buffer.actual_size == 4


def test_record_to_dict_uses_camel_case():
    record = ProcessedFontMetadata(
        family="Acme",
        open_type_features=[
            OpenTypeFeatureDescriptor("liga", "Standard Ligatures"),
            OpenTypeFeatureDescriptor("ss01", "Round dots", FeatureKind.ALTERNATE),
        ],
        font_metrics=FontMetrics(800, -200, 0, 1000),
        designer_info=DesignerInfo(),
        version="1.000",
    )
    data = record.to_dict()

    assert data["openTypeFeatures"] == ["Standard Ligatures", "Round dots"]
    assert data["openTypeFeatureTags"][1] == {
        "tag": "ss01",
        "title": "Round dots",
        "kind": "alternate",
    }
    assert data["fontMetrics"] == {
        "ascender": 800,
        "descender": -200,
        "lineGap": 0,
        "unitsPerEm": 1000,
    }
    assert "designerInfo" not in data
    assert data["version"] == "1.000"
    assert "copyright" not in data
    assert "processedAt" not in data


def test_operation_result_collects_warnings(caplog):
    result = OperationResult()
    result.extend(["first", "second"])
    result.add_error("broken", "details here")

    assert result.warning_strings() == ["first", "second", "broken (details here)"]
    assert result.messages[-1].level is ResultLevel.ERROR

    with caplog.at_level(logging.WARNING, logger="fontcatalog.results"):
        result.emit_all("acme.ttf")
    assert "acme.ttf: first" in caplog.text
    assert [r.levelname for r in caplog.records] == ["WARNING", "WARNING", "ERROR"]


def test_record_is_frozen():
    record = ProcessedFontMetadata(family="Acme")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.family = "Other"
