"""Font metadata data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .utils import filename_stem


@dataclass(frozen=True)
class RawFontBuffer:
    """Uploaded font bytes with the name and size the uploader claimed."""

    data: bytes
    filename: str
    declared_size: int

    @property
    def stem(self) -> str:
        """Filename without directory and extension."""
        return filename_stem(self.filename)

    @property
    def actual_size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class VariableAxisDescriptor:
    human_name: str
    tag: str
    min: float
    max: float
    default: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.human_name,
            "axis": self.tag,
            "min": self.min,
            "max": self.max,
            "default": self.default,
        }


class FeatureKind(Enum):
    """How the catalog groups a feature in the UI."""

    ALTERNATE = "alternate"
    OTHER = "other"


@dataclass(frozen=True)
class OpenTypeFeatureDescriptor:
    tag: str
    human_title: str
    kind: FeatureKind = FeatureKind.OTHER

    @property
    def is_alternate(self) -> bool:
        return self.kind is FeatureKind.ALTERNATE

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag, "title": self.human_title, "kind": self.kind.value}


@dataclass
class FontMetrics:
    ascender: int
    descender: int
    line_gap: int
    units_per_em: int
    x_height: Optional[int] = None
    cap_height: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "ascender": self.ascender,
            "descender": self.descender,
            "lineGap": self.line_gap,
            "unitsPerEm": self.units_per_em,
        }
        if self.x_height is not None:
            data["xHeight"] = self.x_height
        if self.cap_height is not None:
            data["capHeight"] = self.cap_height
        return data


@dataclass
class DesignerInfo:
    designer: Optional[str] = None
    designer_url: Optional[str] = None
    manufacturer: Optional[str] = None
    vendor_url: Optional[str] = None
    trademark: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(
            (
                self.designer,
                self.designer_url,
                self.manufacturer,
                self.vendor_url,
                self.trademark,
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "designer": self.designer,
            "designerURL": self.designer_url,
            "manufacturer": self.manufacturer,
            "vendorURL": self.vendor_url,
            "trademark": self.trademark,
        }
        return {key: value for key, value in data.items() if value}


@dataclass(frozen=True)
class ProcessedFontMetadata:
    """Pipeline output for one uploaded font file.

    Built up stage by stage inside ``FontProcessor.process`` with
    ``dataclasses.replace``; callers persist ``to_dict()`` verbatim.
    """

    family: str
    style: str = "Regular"
    weight: int = 400
    is_italic: bool = False
    is_variable: bool = False
    variable_axes: List[VariableAxisDescriptor] = field(default_factory=list)
    open_type_features: List[OpenTypeFeatureDescriptor] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    style_tags: List[str] = field(default_factory=list)
    category: List[str] = field(default_factory=list)
    font_metrics: Optional[FontMetrics] = None
    designer_info: Optional[DesignerInfo] = None
    warnings: List[str] = field(default_factory=list)
    processing_version: str = ""

    # File facts
    filename: str = ""
    format: str = "truetype"
    file_size: int = 0
    glyph_count: int = 0

    # Descriptive name-table data
    version: Optional[str] = None
    copyright: Optional[str] = None
    license: Optional[str] = None
    description: Optional[str] = None
    foundry: Optional[str] = None
    embedding_permissions: Optional[str] = None
    panose_classification: Optional[str] = None
    available_styles: List[str] = field(default_factory=list)

    @property
    def alternate_features(self) -> List[OpenTypeFeatureDescriptor]:
        return [f for f in self.open_type_features if f.is_alternate]

    @property
    def other_features(self) -> List[OpenTypeFeatureDescriptor]:
        return [f for f in self.open_type_features if not f.is_alternate]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the catalog's camelCase field names."""
        data: Dict[str, Any] = {
            "family": self.family,
            "style": self.style,
            "weight": self.weight,
            "isItalic": self.is_italic,
            "isVariable": self.is_variable,
            "variableAxes": [axis.to_dict() for axis in self.variable_axes],
            "openTypeFeatures": [f.human_title for f in self.open_type_features],
            "openTypeFeatureTags": [f.to_dict() for f in self.open_type_features],
            "languages": list(self.languages),
            "styleTags": list(self.style_tags),
            "category": list(self.category),
            "warnings": list(self.warnings),
            "processingVersion": self.processing_version,
            "filename": self.filename,
            "format": self.format,
            "fileSize": self.file_size,
            "glyphCount": self.glyph_count,
            "availableStyles": list(self.available_styles),
        }
        if self.font_metrics is not None:
            data["fontMetrics"] = self.font_metrics.to_dict()
        if self.designer_info is not None and not self.designer_info.is_empty():
            data["designerInfo"] = self.designer_info.to_dict()
        optional = {
            "version": self.version,
            "copyright": self.copyright,
            "license": self.license,
            "description": self.description,
            "foundry": self.foundry,
            "embeddingPermissions": self.embedding_permissions,
            "panoseClassification": self.panose_classification,
        }
        data.update({key: value for key, value in optional.items() if value})
        return data
