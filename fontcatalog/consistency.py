"""
Final consistency checks for processed metadata.

Never raises: every problem is corrected to a usable default and reported
as a warning, so downstream consumers can rely on the record's invariants.
"""

from dataclasses import replace
from typing import List, Optional, Tuple

from .config import CONFIG, PipelineConfig
from .models import ProcessedFontMetadata


def _valid_weight(weight, config: PipelineConfig) -> bool:
    return (
        isinstance(weight, int)
        and not isinstance(weight, bool)
        and config.MIN_WEIGHT <= weight <= config.MAX_WEIGHT
    )


def validate_consistency(
    record: ProcessedFontMetadata,
    fallback_family: str,
    config: Optional[PipelineConfig] = None,
) -> Tuple[ProcessedFontMetadata, List[str]]:
    """
    Enforce the record invariants.

    Args:
        record: Metadata assembled by the earlier stages
        fallback_family: Family used if the record's family is blank
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        (corrected copy of record, warnings) tuple
    """
    config = config or CONFIG
    warnings: List[str] = []
    changes = {}

    family = (record.family or "").strip()
    if not family:
        family = (fallback_family or "").strip() or config.UNKNOWN_FAMILY
        warnings.append(f"Missing family name, using '{family}'")
    if family != record.family:
        changes["family"] = family

    if not _valid_weight(record.weight, config):
        warnings.append(
            f"Invalid weight: {record.weight}, defaulting to {config.DEFAULT_WEIGHT}"
        )
        changes["weight"] = config.DEFAULT_WEIGHT

    if not record.category:
        warnings.append(
            f"No categories detected, defaulting to {config.DEFAULT_CATEGORY}"
        )
        changes["category"] = [config.DEFAULT_CATEGORY]

    if not record.languages:
        warnings.append(
            f"No languages detected, defaulting to {config.BASELINE_SCRIPT}"
        )
        changes["languages"] = [config.BASELINE_SCRIPT]

    return replace(record, **changes), warnings
