"""
Family, style, weight and italic detection.

Name records and OS/2 metrics are preferred; style-name keywords and
filename rules fill in where the tables are missing or unreliable.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .config import CONFIG, PipelineConfig
from .filename_rules import DEFAULT_RULES, FilenameRule, find_correction
from .reader import ParsedFontHandle
from .utils import filename_stem

logger = logging.getLogger(__name__)

# Name table IDs
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULL_NAME = 4

ITALIC_PATTERN = re.compile(r"italic|oblique", re.IGNORECASE)


@dataclass(frozen=True)
class FontIdentity:
    family: str
    style: str
    weight: int
    is_italic: bool


def default_identity(filename: str, config: Optional[PipelineConfig] = None) -> FontIdentity:
    """Identity used when the font tables cannot be read."""
    config = config or CONFIG
    return FontIdentity(
        family=filename_stem(filename),
        style=config.DEFAULT_STYLE,
        weight=config.DEFAULT_WEIGHT,
        is_italic=False,
    )


def weight_from_style(style: str, config: Optional[PipelineConfig] = None) -> int:
    """
    Map a style name onto a weight class.

    Spaces, hyphens and underscores are ignored so "Extra Light",
    "Extra-Light" and "ExtraLight" all resolve to 200.

    Args:
        style: Subfamily / style name
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        Weight class, or the default weight when no keyword matches
    """
    config = config or CONFIG
    normalized = re.sub(r"[\s_\-]+", "", style.lower())
    for keyword, weight in config.WEIGHT_LADDER:
        if keyword in normalized:
            return weight
    return config.DEFAULT_WEIGHT


def _os2_weight(os2, config: PipelineConfig) -> Optional[int]:
    if os2 is None:
        return None
    weight = getattr(os2, "usWeightClass", None)
    if isinstance(weight, int) and config.MIN_WEIGHT <= weight <= config.MAX_WEIGHT:
        return weight
    return None


def _os2_italic(os2, config: PipelineConfig) -> bool:
    if os2 is None:
        return False
    return bool(getattr(os2, "fsSelection", 0) & config.FS_SELECTION_ITALIC)


def extract_identity(
    handle: Optional[ParsedFontHandle],
    filename: str,
    config: Optional[PipelineConfig] = None,
    rules: Sequence[FilenameRule] = DEFAULT_RULES,
) -> Tuple[FontIdentity, List[str]]:
    """
    Derive family, style, weight and italic flag.

    Args:
        handle: Parsed font, or None when the tables could not be read
        filename: Uploaded filename (fallback family and filename rules)
        config: Pipeline configuration (defaults to CONFIG)
        rules: Filename correction rules

    Returns:
        (identity, warnings) tuple
    """
    config = config or CONFIG
    warnings: List[str] = []

    if handle is None:
        return default_identity(filename, config), warnings

    if not handle.has_table("name"):
        warnings.append("Name table missing; family taken from filename")

    family = (
        handle.english_name(NAME_ID_FAMILY)
        or handle.english_name(NAME_ID_FULL_NAME)
        or filename_stem(filename)
    )
    style = handle.english_name(NAME_ID_SUBFAMILY) or config.DEFAULT_STYLE

    # A corrupt OS/2 only costs weight and italic; family and style stand
    os2, os2_error = handle.decoded_table("OS/2")
    if os2_error:
        warnings.append(f"{os2_error}; weight and italic derived from style name")
    elif os2 is None:
        warnings.append("OS/2 table missing; weight and italic derived from style name")

    weight = _os2_weight(os2, config)
    if weight is None:
        if os2 is not None:
            warnings.append(
                f"OS/2 usWeightClass {getattr(os2, 'usWeightClass', None)} out of range"
            )
        weight = weight_from_style(style, config)

    is_italic = _os2_italic(os2, config) or bool(ITALIC_PATTERN.search(style))

    identity = FontIdentity(family=family, style=style, weight=weight, is_italic=is_italic)
    return apply_filename_rules(identity, filename, rules, warnings), warnings


def apply_filename_rules(
    identity: FontIdentity,
    filename: str,
    rules: Sequence[FilenameRule] = DEFAULT_RULES,
    warnings: Optional[List[str]] = None,
) -> FontIdentity:
    """Apply the first matching filename rule to an extracted identity."""
    correction = find_correction(identity.family, filename, rules)
    if correction is None:
        return identity

    corrected = replace(
        identity,
        style=correction.style or identity.style,
        weight=correction.weight if correction.weight is not None else identity.weight,
        is_italic=identity.is_italic or correction.is_italic,
    )
    if corrected != identity:
        logger.debug(
            "Filename rule %s: %s %s/%d -> %s/%d",
            correction.rule,
            identity.family,
            identity.style,
            identity.weight,
            corrected.style,
            corrected.weight,
        )
        if warnings is not None:
            warnings.append(
                f"Style corrected from filename ({correction.rule}): "
                f"{identity.style}/{identity.weight} -> {corrected.style}/{corrected.weight}"
            )
    return corrected
