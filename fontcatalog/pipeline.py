"""
Font metadata processing pipeline.

Runs a fixed sequence of stages over one uploaded font. The signature check
is the only fatal stage; every other failure is recorded as a warning and
the record keeps its filename-derived defaults.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from .axes import extract_axes, extract_named_instances
from .classification import classify_category
from .config import CONFIG, PipelineConfig
from .consistency import validate_consistency
from .details import extract_details
from .errors import UnparsableFont
from .features import extract_features
from .filename_rules import DEFAULT_RULES, FilenameRule
from .identity import extract_identity
from .models import ProcessedFontMetadata, RawFontBuffer
from .reader import ParsedFontHandle, open_font
from .results import OperationResult
from .scripts import detect_scripts
from .signature import validate_signature
from .style_tags import generate_style_tags
from .utils import detect_format

logger = logging.getLogger(__name__)


@dataclass
class StageContext:
    """Mutable state shared by the stages of one pipeline run."""

    buffer: RawFontBuffer
    record: ProcessedFontMetadata
    handle: Optional[ParsedFontHandle] = None
    result: OperationResult = field(default_factory=OperationResult)


@dataclass(frozen=True)
class ProcessingStage:
    name: str
    process: Callable[[StageContext], None]


class FontProcessor:
    """Extract catalog metadata from raw font files."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        filename_rules: Sequence[FilenameRule] = DEFAULT_RULES,
    ):
        self.config = config or CONFIG
        self.filename_rules = list(filename_rules)
        self.stages: List[ProcessingStage] = [
            ProcessingStage("extractIdentity", self._extract_identity),
            ProcessingStage("extractDetails", self._extract_details),
            ProcessingStage("extractVariableAxes", self._extract_axes),
            ProcessingStage("parseOpenTypeFeatures", self._extract_features),
            ProcessingStage("detectLanguageSupport", self._detect_scripts),
            ProcessingStage("classifyCategory", self._classify_category),
            ProcessingStage("generateStyleTags", self._generate_style_tags),
        ]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, buffer: RawFontBuffer) -> str:
        """Signature gate; raises InvalidSignature."""
        return validate_signature(buffer.data, self.config)

    def process(self, buffer: RawFontBuffer) -> ProcessedFontMetadata:
        """
        Run the full pipeline over one font.

        Args:
            buffer: Uploaded font bytes and claimed filename/size

        Returns:
            Processed metadata; always satisfies the record invariants

        Raises:
            InvalidSignature: If the buffer is not recognizably a font
        """
        container = self.validate(buffer)
        ctx = StageContext(buffer=buffer, record=self.default_record(buffer))
        self._check_declared_size(ctx)

        try:
            ctx.handle = open_font(buffer.data)
        except UnparsableFont as e:
            ctx.result.add_error(f"OpenType parsing failed: {e}")
            logger.info("%s: falling back to filename defaults", buffer.filename)

        try:
            for stage in self.stages:
                self._run_stage(stage, ctx)
        finally:
            if ctx.handle is not None:
                ctx.handle.close()

        logger.debug("%s: processed %s container", buffer.filename, container)
        return self._finalize(ctx)

    def process_file(self, path: Path) -> ProcessedFontMetadata:
        """Process a font on disk, using its real size as the declared size."""
        data = Path(path).read_bytes()
        return self.process(RawFontBuffer(data, Path(path).name, len(data)))

    def fallback_record(
        self, buffer: RawFontBuffer, warnings: Sequence[str] = ()
    ) -> ProcessedFontMetadata:
        """Filename-derived record used when the tables are unusable."""
        ctx = StageContext(buffer=buffer, record=self.default_record(buffer))
        self._check_declared_size(ctx)
        for warning in warnings:
            ctx.result.add_warning(warning)
        return self._finalize(ctx)

    def default_record(self, buffer: RawFontBuffer) -> ProcessedFontMetadata:
        return ProcessedFontMetadata(
            family=buffer.stem,
            style=self.config.DEFAULT_STYLE,
            weight=self.config.DEFAULT_WEIGHT,
            processing_version=self.config.PROCESSING_VERSION,
            filename=buffer.filename,
            format=detect_format(buffer.filename, self.config.FORMAT_BY_EXTENSION),
            file_size=buffer.declared_size,
            available_styles=[self.config.DEFAULT_STYLE],
        )

    # ------------------------------------------------------------------
    # Stage runner
    # ------------------------------------------------------------------

    def _run_stage(self, stage: ProcessingStage, ctx: StageContext):
        try:
            stage.process(ctx)
        except Exception as e:
            ctx.result.add_error(f"Stage {stage.name} failed: {e}")
            logger.debug("Stage %s failed", stage.name, exc_info=True)

    def _check_declared_size(self, ctx: StageContext):
        buffer = ctx.buffer
        if buffer.declared_size != buffer.actual_size:
            ctx.result.add_warning(
                f"Declared size {buffer.declared_size} differs from "
                f"actual size {buffer.actual_size}"
            )

    def _finalize(self, ctx: StageContext) -> ProcessedFontMetadata:
        record, warnings = validate_consistency(ctx.record, ctx.buffer.stem, self.config)
        ctx.result.extend(warnings)
        ctx.result.emit_all(ctx.buffer.filename)
        return replace(record, warnings=ctx.result.warning_strings())

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _extract_identity(self, ctx: StageContext):
        identity, warnings = extract_identity(
            ctx.handle, ctx.buffer.filename, self.config, self.filename_rules
        )
        ctx.result.extend(warnings)
        ctx.record = replace(
            ctx.record,
            family=identity.family,
            style=identity.style,
            weight=identity.weight,
            is_italic=identity.is_italic,
            available_styles=[identity.style],
        )

    def _extract_details(self, ctx: StageContext):
        details, warnings = extract_details(ctx.handle)
        ctx.result.extend(warnings)
        ctx.record = replace(
            ctx.record,
            font_metrics=details.font_metrics,
            designer_info=details.designer_info,
            version=details.version,
            copyright=details.copyright,
            license=details.license,
            description=details.description,
            foundry=details.foundry,
            embedding_permissions=details.embedding_permissions,
            glyph_count=details.glyph_count,
        )

    def _extract_axes(self, ctx: StageContext):
        axes, has_fvar, warnings = extract_axes(ctx.handle, self.config)
        ctx.result.extend(warnings)
        styles = list(ctx.record.available_styles)
        for name in extract_named_instances(ctx.handle):
            if name not in styles:
                styles.append(name)
        ctx.record = replace(
            ctx.record,
            variable_axes=axes,
            is_variable=has_fvar and bool(axes),
            available_styles=styles,
        )

    def _extract_features(self, ctx: StageContext):
        features, warnings = extract_features(ctx.handle, self.config)
        ctx.result.extend(warnings)
        ctx.record = replace(ctx.record, open_type_features=features)

    def _detect_scripts(self, ctx: StageContext):
        scripts, warnings = detect_scripts(ctx.handle, self.config)
        ctx.result.extend(warnings)
        ctx.record = replace(ctx.record, languages=scripts)

    def _classify_category(self, ctx: StageContext):
        categories, panose = classify_category(ctx.record.family, ctx.handle)
        ctx.record = replace(
            ctx.record, category=categories, panose_classification=panose
        )

    def _generate_style_tags(self, ctx: StageContext):
        record = ctx.record
        tags = generate_style_tags(
            record.family,
            record.open_type_features,
            record.is_variable,
            record.variable_axes,
            self.config,
        )
        ctx.record = replace(record, style_tags=tags)


def process_font(
    data: bytes,
    filename: str,
    declared_size: int,
    processor: Optional[FontProcessor] = None,
) -> ProcessedFontMetadata:
    """
    Extract catalog metadata from an uploaded font file.

    Args:
        data: Raw font bytes
        filename: Uploaded filename
        declared_size: Size reported by the uploader
        processor: Processor to use (defaults to a stock FontProcessor)

    Returns:
        Processed metadata

    Raises:
        InvalidSignature: If the buffer is not recognizably a font
    """
    processor = processor or FontProcessor()
    return processor.process(RawFontBuffer(bytes(data), filename, declared_size))


def process_font_with_timeout(
    data: bytes,
    filename: str,
    declared_size: int,
    timeout: float,
    processor: Optional[FontProcessor] = None,
) -> ProcessedFontMetadata:
    """
    Run ``process_font`` under a wall-clock limit.

    The signature is checked up front so invalid files still raise. A run
    that exceeds ``timeout`` seconds is treated like an unreadable font and
    yields the filename-derived record. The worker is a daemon thread that
    is abandoned, not interrupted, so a hung parse cannot block interpreter
    exit.

    Raises:
        InvalidSignature: If the buffer is not recognizably a font
    """
    processor = processor or FontProcessor()
    buffer = RawFontBuffer(bytes(data), filename, declared_size)
    processor.validate(buffer)

    outcome: Dict[str, Any] = {}

    def run():
        try:
            outcome["record"] = processor.process(buffer)
        except Exception as e:
            outcome["error"] = e

    worker = threading.Thread(
        target=run, name=f"fontcatalog-process-{filename}", daemon=True
    )
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        logger.warning("%s: processing exceeded %ss", filename, timeout)
        return processor.fallback_record(
            buffer,
            [f"Processing timed out after {timeout}s; using filename defaults"],
        )
    if "error" in outcome:
        raise outcome["error"]
    return outcome["record"]
