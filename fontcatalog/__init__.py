"""
Font catalog metadata pipeline.

Extracts family, style, weight, variable axes, OpenType features, script
coverage and catalog tags from uploaded font files.
"""

__all__ = [
    "CONFIG",
    "PipelineConfig",
    "FontProcessingError",
    "InvalidSignature",
    "UnparsableFont",
    "FeatureKind",
    "OpenTypeFeatureDescriptor",
    "ProcessedFontMetadata",
    "RawFontBuffer",
    "VariableAxisDescriptor",
    "FilenameRule",
    "DEFAULT_RULES",
    "FontProcessor",
    "process_font",
    "process_font_with_timeout",
    "reprocess_fonts",
]

# Import main exports for convenience
from fontcatalog.config import CONFIG, PipelineConfig
from fontcatalog.errors import FontProcessingError, InvalidSignature, UnparsableFont
from fontcatalog.models import (
    FeatureKind,
    OpenTypeFeatureDescriptor,
    ProcessedFontMetadata,
    RawFontBuffer,
    VariableAxisDescriptor,
)
from fontcatalog.filename_rules import DEFAULT_RULES, FilenameRule
from fontcatalog.pipeline import FontProcessor, process_font, process_font_with_timeout
from fontcatalog.maintenance import reprocess_fonts
