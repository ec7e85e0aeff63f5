"""
OpenType table access.

Thin read-only wrapper over fontTools so the extractors share one decoded
font and one place that knows how fontTools exposes tables.
"""

import io
import logging
from typing import Any, Dict, List, Optional, Tuple

from fontTools.ttLib import TTFont

from .errors import UnparsableFont

logger = logging.getLogger(__name__)


class ParsedFontHandle:
    """Read-only view over the decoded tables of one font."""

    def __init__(self, font: TTFont):
        self.font = font
        self._best_cmap: Optional[Dict[int, str]] = None
        self._decode_errors: Dict[str, str] = {}

    def __enter__(self) -> "ParsedFontHandle":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.font.close()

    @property
    def flavor(self) -> Optional[str]:
        """Container flavor: None for plain sfnt, "woff" or "woff2"."""
        return self.font.flavor

    @property
    def is_cff(self) -> bool:
        return self.font.sfntVersion == "OTTO"

    def table_tags(self) -> List[str]:
        return [tag for tag in self.font.keys() if tag != "GlyphOrder"]

    def has_table(self, tag: str) -> bool:
        return tag in self.font

    def table(self, tag: str) -> Optional[Any]:
        """Return the decoded table, or None when the font lacks it.

        Decoding errors propagate to the calling stage.
        """
        if tag not in self.font:
            return None
        return self.font[tag]

    def decoded_table(self, tag: str) -> Tuple[Optional[Any], Optional[str]]:
        """
        Decode a table without letting a corrupt table abort the caller.

        Returns:
            (table, None) when decoded, (None, None) when absent, and
            (None, reason) when the table is present but fails to decode.
            Failures are sticky: later calls report the same reason.
        """
        if tag in self._decode_errors:
            return None, self._decode_errors[tag]
        try:
            return self.table(tag), None
        except Exception as e:
            logger.debug("Failed to decode %s", tag, exc_info=True)
            self._decode_errors[tag] = f"{tag} table unreadable: {e}"
            return None, self._decode_errors[tag]

    def english_name(self, name_id: int) -> Optional[str]:
        """English (Windows en-US or Mac Roman) name record, stripped."""
        name_table = self.table("name")
        if name_table is None:
            return None
        value = name_table.getDebugName(name_id)
        if value is None:
            return None
        value = value.strip()
        return value or None

    def name_by_id(self, name_id: int) -> Optional[str]:
        """Resolve a UINameID-style reference into display text."""
        return self.english_name(name_id)

    def best_cmap(self) -> Dict[int, str]:
        """Code point -> glyph name from the preferred Unicode subtable."""
        if self._best_cmap is None:
            if "cmap" not in self.font:
                self._best_cmap = {}
            else:
                self._best_cmap = dict(self.font.getBestCmap() or {})
        return self._best_cmap

    def glyph_count(self) -> int:
        maxp = self.table("maxp")
        if maxp is not None:
            return int(maxp.numGlyphs)
        return 0


def open_font(data: bytes) -> ParsedFontHandle:
    """
    Decode a font buffer with fontTools.

    Args:
        data: Raw font bytes (sfnt, WOFF or WOFF2)

    Returns:
        ParsedFontHandle over the decoded font

    Raises:
        UnparsableFont: If the table directory cannot be read or is empty
    """
    try:
        font = TTFont(io.BytesIO(data), lazy=True)
    except Exception as e:
        raise UnparsableFont(f"fontTools could not open font: {e}") from e

    handle = ParsedFontHandle(font)
    if not handle.table_tags():
        handle.close()
        raise UnparsableFont("Font contains no tables")

    logger.debug("Opened font with tables: %s", ", ".join(handle.table_tags()))
    return handle
