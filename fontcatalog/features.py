"""
OpenType feature extraction.

Collects feature tags from the GSUB and GPOS feature lists and maps them to
display titles, using the font's own stylistic set names where provided.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .config import CONFIG, PipelineConfig
from .models import FeatureKind, OpenTypeFeatureDescriptor
from .reader import ParsedFontHandle

logger = logging.getLogger(__name__)

LAYOUT_TABLES = ("GSUB", "GPOS")


def feature_title(tag: str, config: Optional[PipelineConfig] = None) -> str:
    """Display title for a feature tag; unknown tags are returned unchanged."""
    config = config or CONFIG
    return config.FEATURE_TITLES.get(tag, tag)


def feature_kind(tag: str, config: Optional[PipelineConfig] = None) -> FeatureKind:
    """Stylistic sets and stylistic alternates are grouped as alternates."""
    config = config or CONFIG
    if tag in config.ALTERNATE_FEATURE_TAGS:
        return FeatureKind.ALTERNATE
    return FeatureKind.OTHER


def iter_feature_records(handle: ParsedFontHandle) -> Iterator[Tuple[str, object]]:
    """Yield (table tag, FeatureRecord) for GSUB then GPOS."""
    for table_tag in LAYOUT_TABLES:
        table = handle.table(table_tag)
        if table is None:
            continue
        ot_table = table.table
        if not hasattr(ot_table, "FeatureList") or not ot_table.FeatureList:
            continue
        for frec in ot_table.FeatureList.FeatureRecord:
            yield table_tag, frec


def custom_feature_name(handle: ParsedFontHandle, frec) -> Optional[str]:
    """Name-table label referenced by a feature's FeatureParams UINameID."""
    feature = getattr(frec, "Feature", None)
    params = getattr(feature, "FeatureParams", None)
    if params is None:
        return None
    uinameid = getattr(params, "UINameID", None)
    if uinameid is None:
        return None
    return handle.name_by_id(uinameid)


def extract_features(
    handle: Optional[ParsedFontHandle], config: Optional[PipelineConfig] = None
) -> Tuple[List[OpenTypeFeatureDescriptor], List[str]]:
    """
    Extract deduplicated OpenType features.

    Tags are kept in first-seen order across GSUB then GPOS; the first
    occurrence of a tag decides its title.

    Args:
        handle: Parsed font, or None
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        (features, warnings) tuple
    """
    config = config or CONFIG
    warnings: List[str] = []

    if handle is None:
        return [], warnings

    if not any(handle.has_table(tag) for tag in LAYOUT_TABLES):
        warnings.append("No GSUB/GPOS tables; no OpenType features detected")

    features: List[OpenTypeFeatureDescriptor] = []
    seen = set()

    for table_tag, frec in iter_feature_records(handle):
        tag = str(frec.FeatureTag)
        if not tag or tag in seen:
            continue
        seen.add(tag)

        title = feature_title(tag, config)
        kind = feature_kind(tag, config)
        if kind is FeatureKind.ALTERNATE:
            title = custom_feature_name(handle, frec) or title

        features.append(OpenTypeFeatureDescriptor(tag=tag, human_title=title, kind=kind))
        logger.debug("%s feature %s -> %s", table_tag, tag, title)

    # Legacy kern table without a GPOS kern feature
    if "kern" not in seen and handle.has_table("kern"):
        features.append(
            OpenTypeFeatureDescriptor(
                tag="kern", human_title=feature_title("kern", config), kind=FeatureKind.OTHER
            )
        )

    return features, warnings
