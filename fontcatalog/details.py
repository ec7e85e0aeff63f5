"""
Descriptive font details: metrics, designer credits, licensing and version.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .models import DesignerInfo, FontMetrics
from .reader import ParsedFontHandle

# Name table IDs
NAME_ID_COPYRIGHT = 0
NAME_ID_VERSION = 5
NAME_ID_TRADEMARK = 7
NAME_ID_MANUFACTURER = 8
NAME_ID_DESIGNER = 9
NAME_ID_DESCRIPTION = 10
NAME_ID_VENDOR_URL = 11
NAME_ID_DESIGNER_URL = 12
NAME_ID_LICENSE = 13
NAME_ID_LICENSE_URL = 14

# OS/2 fsType bits
FS_TYPE_RESTRICTED = 0x0002
FS_TYPE_PREVIEW_PRINT = 0x0004
FS_TYPE_EDITABLE = 0x0008

MAX_FOUNDRY_DESCRIPTION = 100


@dataclass
class FontDetails:
    font_metrics: Optional[FontMetrics] = None
    designer_info: Optional[DesignerInfo] = None
    version: Optional[str] = None
    copyright: Optional[str] = None
    license: Optional[str] = None
    description: Optional[str] = None
    foundry: Optional[str] = None
    embedding_permissions: Optional[str] = None
    glyph_count: int = 0


def extract_metrics(handle: ParsedFontHandle) -> Optional[FontMetrics]:
    """Vertical metrics from hhea, falling back to the OS/2 typo values."""
    hhea = handle.table("hhea")
    os2, _ = handle.decoded_table("OS/2")
    head = handle.table("head")
    if hhea is None and os2 is None:
        return None

    def pick(table, attr):
        value = getattr(table, attr, None) if table is not None else None
        return int(value) if value is not None else None

    ascender = pick(hhea, "ascent") or pick(os2, "sTypoAscender") or 0
    descender = pick(hhea, "descent") or pick(os2, "sTypoDescender") or 0
    line_gap = pick(hhea, "lineGap") or pick(os2, "sTypoLineGap") or 0
    units_per_em = pick(head, "unitsPerEm") or 1000

    return FontMetrics(
        ascender=ascender,
        descender=descender,
        line_gap=line_gap,
        units_per_em=units_per_em,
        x_height=pick(os2, "sxHeight"),
        cap_height=pick(os2, "sCapHeight"),
    )


def extract_designer_info(handle: ParsedFontHandle) -> Optional[DesignerInfo]:
    info = DesignerInfo(
        designer=handle.english_name(NAME_ID_DESIGNER),
        designer_url=handle.english_name(NAME_ID_DESIGNER_URL),
        manufacturer=handle.english_name(NAME_ID_MANUFACTURER),
        vendor_url=handle.english_name(NAME_ID_VENDOR_URL),
        trademark=handle.english_name(NAME_ID_TRADEMARK),
    )
    return None if info.is_empty() else info


def extract_version(handle: ParsedFontHandle) -> Optional[str]:
    """Font revision from head, else the version string without its prefix."""
    head = handle.table("head")
    revision = getattr(head, "fontRevision", None) if head is not None else None
    if revision:
        return f"{float(revision):.3f}"
    version = handle.english_name(NAME_ID_VERSION)
    if version:
        return re.sub(r"^Version\s+", "", version, flags=re.IGNORECASE)
    return None


def extract_license(handle: ParsedFontHandle) -> Optional[str]:
    license_text = handle.english_name(NAME_ID_LICENSE)
    if license_text:
        return license_text
    license_url = handle.english_name(NAME_ID_LICENSE_URL)
    if license_url:
        return f"See: {license_url}"
    return None


def detect_foundry(handle: ParsedFontHandle) -> Optional[str]:
    """First non-empty of manufacturer, designer, vendor URL, designer URL,
    or a short description."""
    for name_id in (
        NAME_ID_MANUFACTURER,
        NAME_ID_DESIGNER,
        NAME_ID_VENDOR_URL,
        NAME_ID_DESIGNER_URL,
    ):
        value = handle.english_name(name_id)
        if value:
            return value
    description = handle.english_name(NAME_ID_DESCRIPTION)
    if description and len(description) < MAX_FOUNDRY_DESCRIPTION:
        return description
    return None


def embedding_permissions(handle: ParsedFontHandle) -> Optional[str]:
    os2, _ = handle.decoded_table("OS/2")
    fs_type = getattr(os2, "fsType", None) if os2 is not None else None
    if fs_type is None:
        return None
    if fs_type == 0:
        return "Unrestricted"
    if fs_type & FS_TYPE_RESTRICTED:
        return "Restricted License"
    if fs_type & FS_TYPE_PREVIEW_PRINT:
        return "Preview & Print"
    if fs_type & FS_TYPE_EDITABLE:
        return "Editable"
    return "Unknown"


def extract_details(handle: Optional[ParsedFontHandle]) -> Tuple[FontDetails, List[str]]:
    """
    Collect descriptive details from name, head, hhea, OS/2 and maxp.

    Args:
        handle: Parsed font, or None

    Returns:
        (details, warnings) tuple
    """
    warnings: List[str] = []
    if handle is None:
        return FontDetails(), warnings

    font_metrics = extract_metrics(handle)
    if font_metrics is None:
        warnings.append("No hhea or OS/2 table; font metrics unavailable")

    details = FontDetails(
        font_metrics=font_metrics,
        designer_info=extract_designer_info(handle),
        version=extract_version(handle),
        copyright=handle.english_name(NAME_ID_COPYRIGHT),
        license=extract_license(handle),
        description=handle.english_name(NAME_ID_DESCRIPTION),
        foundry=detect_foundry(handle),
        embedding_permissions=embedding_permissions(handle),
        glyph_count=handle.glyph_count(),
    )
    return details, warnings
