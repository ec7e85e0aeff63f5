"""
Writing-script coverage detection.

Samples a fixed set of code points per script against the font's cmap.
This is a coarse catalog-filtering heuristic: a font with a handful of
glyphs in a block counts as supporting the script.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .config import CONFIG, PipelineConfig
from .reader import ParsedFontHandle

logger = logging.getLogger(__name__)


def count_sampled_hits(cmap: Dict[int, str], samples: Iterable[int]) -> int:
    """Number of sampled code points that map to a glyph."""
    return sum(1 for codepoint in samples if cmap.get(codepoint))


def scripts_from_cmap(
    cmap: Dict[int, str], config: Optional[PipelineConfig] = None
) -> List[str]:
    """
    Infer supported scripts from a code point -> glyph map.

    Args:
        cmap: Code point -> glyph name mapping
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        Script names, baseline script first
    """
    config = config or CONFIG
    scripts = [config.BASELINE_SCRIPT]

    for script, (start, end, samples) in config.SCRIPT_SAMPLES.items():
        in_block = [cp for cp in samples if start <= cp <= end]
        hits = count_sampled_hits(cmap, in_block)
        if hits >= config.SCRIPT_MIN_HITS:
            scripts.append(script)
        logger.debug("%s: %d/%d sampled code points", script, hits, len(in_block))

    return scripts


def detect_scripts(
    handle: Optional[ParsedFontHandle], config: Optional[PipelineConfig] = None
) -> Tuple[List[str], List[str]]:
    """
    Detect script coverage for a parsed font.

    Args:
        handle: Parsed font, or None
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        (scripts, warnings) tuple; scripts is never empty
    """
    config = config or CONFIG
    warnings: List[str] = []

    if handle is None:
        return [config.BASELINE_SCRIPT], warnings

    if not handle.has_table("cmap"):
        warnings.append(
            f"No cmap table; no languages detected, assuming {config.BASELINE_SCRIPT}"
        )
        return [config.BASELINE_SCRIPT], warnings

    cmap = handle.best_cmap()
    if not cmap:
        warnings.append(
            f"No Unicode cmap subtable; no languages detected, assuming {config.BASELINE_SCRIPT}"
        )
        return [config.BASELINE_SCRIPT], warnings

    return scripts_from_cmap(cmap, config), warnings
