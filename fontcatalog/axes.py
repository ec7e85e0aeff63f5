"""Variable font axis extraction from the fvar table."""

import logging
from typing import List, Optional, Tuple

from .config import CONFIG, PipelineConfig
from .models import VariableAxisDescriptor
from .reader import ParsedFontHandle

logger = logging.getLogger(__name__)


def axis_name(tag: str, config: Optional[PipelineConfig] = None) -> str:
    """Display name for an axis tag; unknown tags are returned unchanged."""
    config = config or CONFIG
    return config.AXIS_NAMES.get(tag, tag)


def _number(value: float):
    """Keep whole-number axis values as ints so 100.0 serializes as 100."""
    value = float(value)
    return int(value) if value.is_integer() else value


def extract_axes(
    handle: Optional[ParsedFontHandle], config: Optional[PipelineConfig] = None
) -> Tuple[List[VariableAxisDescriptor], bool, List[str]]:
    """
    Read fvar axis records into descriptors.

    Degenerate axes (max <= min, or a default outside the range) are dropped.

    Args:
        handle: Parsed font, or None
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        (axes, has_fvar, warnings) tuple
    """
    config = config or CONFIG
    warnings: List[str] = []

    if handle is None:
        return [], False, warnings

    fvar = handle.table("fvar")
    if fvar is None:
        return [], False, warnings

    axes: List[VariableAxisDescriptor] = []
    for axis in getattr(fvar, "axes", []):
        tag = str(axis.axisTag)
        minimum = _number(axis.minValue)
        maximum = _number(axis.maxValue)
        default = _number(axis.defaultValue)

        if maximum <= minimum:
            warnings.append(f"Dropped degenerate axis {tag} ({minimum}..{maximum})")
            continue
        if not minimum <= default <= maximum:
            warnings.append(
                f"Dropped axis {tag}: default {default} outside {minimum}..{maximum}"
            )
            continue

        axes.append(
            VariableAxisDescriptor(
                human_name=axis_name(tag, config),
                tag=tag,
                min=minimum,
                max=maximum,
                default=default,
            )
        )

    logger.debug("Extracted %d variable axes", len(axes))
    return axes, True, warnings


def extract_named_instances(handle: Optional[ParsedFontHandle]) -> List[str]:
    """Style names of the fvar named instances, in table order."""
    if handle is None:
        return []
    fvar = handle.table("fvar")
    if fvar is None:
        return []

    names: List[str] = []
    for instance in getattr(fvar, "instances", []):
        name = handle.name_by_id(instance.subfamilyNameID)
        if name and name not in names:
            names.append(name)
    return names
