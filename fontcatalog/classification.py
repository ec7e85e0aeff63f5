"""
Catalog category classification.

Family-name keywords decide first; the OS/2 Panose classification is the
fallback. An empty result is left for the consistency validator to default.
"""

from typing import List, Optional, Tuple

from .reader import ParsedFontHandle

# Keyword groups checked in order against the lowercased family name
_DISPLAY_KEYWORDS = ("display", "decorative", "script", "handwriting", "vintage", "stencil")
_UNUSUAL_KEYWORDS = ("pixel", "bitmap", "experimental", "symbol")

# Panose bFamilyType values
PANOSE_LATIN_TEXT = 2
PANOSE_LATIN_HAND_WRITTEN = 3
PANOSE_LATIN_DECORATIVE = 4
PANOSE_LATIN_SYMBOL = 5
PANOSE_MONOSPACED = 9


def _has(family: str, *keywords: str) -> bool:
    return any(keyword in family for keyword in keywords)


def category_from_family(family: str) -> Optional[str]:
    """Category implied by keywords in the family name, if any."""
    name = family.lower()
    serif_only = "serif" in name and "sans" not in name

    if _has(name, *_DISPLAY_KEYWORDS):
        if _has(name, "handwriting"):
            return "Handwritten"
        if _has(name, "script"):
            return "Script"
        if _has(name, "vintage"):
            return "Vintage"
        if _has(name, "stencil"):
            return "Stencil"
        return "Serif-based" if serif_only else "Sans-based"

    if _has(name, *_UNUSUAL_KEYWORDS):
        if _has(name, "pixel", "bitmap"):
            return "Bitmap"
        if _has(name, "symbol"):
            return "Symbol"
        return "Experimental"

    if _has(name, "mono", "code", "console"):
        return "Mono"
    if _has(name, "slab"):
        return "Slab"
    if serif_only:
        return "Serif"
    if _has(name, "sans"):
        return "Sans"
    return None


def panose_classification(handle: Optional[ParsedFontHandle]) -> Optional[str]:
    """Coarse classification from the OS/2 Panose bytes.

    A corrupt OS/2 table is treated like a missing one.
    """
    if handle is None:
        return None
    os2, _ = handle.decoded_table("OS/2")
    panose = getattr(os2, "panose", None)
    if panose is None:
        return None

    family_type = getattr(panose, "bFamilyType", 0)
    serif_style = getattr(panose, "bSerifStyle", 0)
    proportion = getattr(panose, "bProportion", 0)

    if family_type == PANOSE_LATIN_TEXT:
        if proportion == PANOSE_MONOSPACED:
            return "Monospace"
        if 11 <= serif_style <= 15:
            return "Sans Serif"
        if 2 <= serif_style <= 10:
            return "Serif"
    elif family_type == PANOSE_LATIN_HAND_WRITTEN:
        return "Script"
    elif family_type == PANOSE_LATIN_DECORATIVE:
        return "Decorative"
    elif family_type == PANOSE_LATIN_SYMBOL:
        return "Symbol"
    return None


_PANOSE_CATEGORIES = {
    "Monospace": "Mono",
    "Sans Serif": "Sans",
    "Serif": "Serif",
    "Script": "Script",
    "Decorative": "Sans-based",
    "Symbol": "Symbol",
}


def classify_category(
    family: str, handle: Optional[ParsedFontHandle]
) -> Tuple[List[str], Optional[str]]:
    """
    Classify a font into a catalog category.

    Args:
        family: Extracted family name
        handle: Parsed font, or None

    Returns:
        (categories, panose classification) tuple; categories may be empty
    """
    panose = panose_classification(handle)
    category = category_from_family(family)
    if category is None and panose is not None:
        category = _PANOSE_CATEGORIES.get(panose)
    return ([category] if category else []), panose
