"""
Re-processing sweep for already-stored fonts.

Fetches each stored font's original bytes, re-runs the pipeline and writes
back only the fields the pipeline owns, leaving admin edits alone.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import FontProcessingError
from .models import RawFontBuffer
from .pipeline import FontProcessor
from .stores import BinaryStore, MetadataStore

logger = logging.getLogger(__name__)

# Record fields derived from the font binary
PIPELINE_FIELDS = (
    "family",
    "style",
    "weight",
    "isItalic",
    "isVariable",
    "variableAxes",
    "openTypeFeatures",
    "openTypeFeatureTags",
    "languages",
    "styleTags",
)


@dataclass
class FontReprocessResult:
    font_id: str
    filename: str
    changes: Dict[str, Any] = field(default_factory=dict)
    success: bool = True
    error: Optional[str] = None


@dataclass
class ReprocessReport:
    results: List[FontReprocessResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def updated(self) -> int:
        return sum(1 for r in self.results if r.success and r.changes)

    @property
    def errors(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def unchanged(self) -> int:
        return self.total - self.updated - self.errors


def diff_pipeline_fields(stored: Dict[str, Any], fresh: Dict[str, Any]) -> Dict[str, Any]:
    """Pipeline-owned fields whose fresh value differs from the stored one."""
    return {
        key: fresh[key]
        for key in PIPELINE_FIELDS
        if key in fresh and stored.get(key) != fresh[key]
    }


def reprocess_fonts(
    binary_store: BinaryStore,
    metadata_store: MetadataStore,
    processor: Optional[FontProcessor] = None,
    dry_run: bool = False,
) -> ReprocessReport:
    """
    Re-run the pipeline over every stored font.

    Per-font failures are recorded in the report and never raised.

    Args:
        binary_store: Source of original font bytes
        metadata_store: Stored records to refresh
        processor: Processor to use (defaults to a stock FontProcessor)
        dry_run: Compute changes without writing them

    Returns:
        ReprocessReport with one entry per stored font
    """
    processor = processor or FontProcessor()
    report = ReprocessReport()

    for font_id, stored in metadata_store.items():
        filename = stored.get("filename") or ""
        entry = FontReprocessResult(font_id=font_id, filename=filename)
        report.results.append(entry)

        try:
            data = binary_store.fetch(filename)
        except KeyError:
            entry.success = False
            entry.error = f"Original file not found: {filename}"
            logger.warning("%s: %s", font_id, entry.error)
            continue

        declared_size = stored.get("fileSize") or len(data)
        try:
            fresh = processor.process(RawFontBuffer(data, filename, declared_size))
        except FontProcessingError as e:
            entry.success = False
            entry.error = str(e)
            logger.warning("%s: %s", font_id, e)
            continue

        entry.changes = diff_pipeline_fields(stored, fresh.to_dict())
        if not entry.changes or dry_run:
            continue

        if not metadata_store.update(font_id, entry.changes):
            entry.success = False
            entry.error = "Metadata update failed"
            logger.warning("%s: metadata update failed", font_id)

    logger.info(
        "Re-processed %d fonts: %d updated, %d errors, %d unchanged",
        report.total,
        report.updated,
        report.errors,
        report.unchanged,
    )
    return report
