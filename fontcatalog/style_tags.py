"""Descriptive style tags inferred from already-extracted metadata."""

import re
from typing import List, Optional, Sequence

from .config import CONFIG, PipelineConfig
from .models import OpenTypeFeatureDescriptor, VariableAxisDescriptor


def _add(tags: List[str], tag: str):
    if tag not in tags:
        tags.append(tag)


def generate_style_tags(
    family: str,
    features: Sequence[OpenTypeFeatureDescriptor],
    is_variable: bool,
    axes: Sequence[VariableAxisDescriptor],
    config: Optional[PipelineConfig] = None,
) -> List[str]:
    """
    Infer catalog style tags.

    Pure function of the extracted family, features and axes; tags keep
    insertion order and never repeat.

    Args:
        family: Family name
        features: Extracted OpenType features
        is_variable: Whether the font is variable
        axes: Extracted variable axes
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        Ordered list of style tags
    """
    config = config or CONFIG
    tags: List[str] = []

    # Custom stylistic set names replace the generic title, so the stock
    # title for the tag is checked as well.
    titles = []
    for feature in features:
        titles.append(feature.human_title.lower())
        titles.append(config.FEATURE_TITLES.get(feature.tag, "").lower())

    for fragment, tag in config.FEATURE_STYLE_FRAGMENTS:
        if any(fragment in title for title in titles):
            _add(tags, tag)

    for pattern, tag in config.FAMILY_STYLE_PATTERNS:
        if re.search(pattern, family, re.IGNORECASE):
            _add(tags, tag)

    has_sans = re.search(r"sans", family, re.IGNORECASE) is not None
    if re.search(r"serif", family, re.IGNORECASE) and not has_sans:
        _add(tags, "Serif")
    if has_sans:
        _add(tags, "Sans Serif")
    if re.search(r"slab", family, re.IGNORECASE):
        _add(tags, "Slab Serif")

    if is_variable:
        _add(tags, "Variable")

    for axis in axes:
        if axis.tag == config.WEIGHT_AXIS_TAG and axis.span >= config.WIDE_WEIGHT_RANGE:
            _add(tags, "Wide Weight Range")
            break

    return tags
