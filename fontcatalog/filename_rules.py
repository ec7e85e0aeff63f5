"""
Filename-based style corrections for known problematic families.

Some foundries ship fonts whose name tables disagree with the weight and
style encoded in their filenames. Each correction is a FilenameRule entry;
the identity extractor applies the first rule that matches, so new
corrections are added here as data.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Pattern, Sequence, Tuple


@dataclass(frozen=True)
class StyleCorrection:
    """Replacement style values derived from a filename."""

    rule: str
    style: str
    weight: Optional[int] = None
    is_italic: bool = False


@dataclass(frozen=True)
class FilenameRule:
    """
    Declarative filename correction.

    ``filename_pattern`` is searched against the file's basename and may
    capture ``weight`` (digits) and/or ``style`` named groups.

    Attributes:
        name: Rule identifier used in warnings
        family_match: Regex matched (full, case-insensitive) against the family
        filename_pattern: Regex with ``weight``/``style`` named groups
        weight_map: Captured style -> weight class
        style_map: Captured weight digits -> style name
        style_override: Transform applied to a captured style with no map entry
        italic_marker: Filename substring that marks an italic file
    """

    name: str
    family_match: str
    filename_pattern: str
    weight_map: Dict[str, int] = field(default_factory=dict)
    style_map: Dict[str, str] = field(default_factory=dict)
    style_override: Optional[Callable[[str], str]] = None
    italic_marker: Optional[str] = None

    @property
    def family_regex(self) -> Pattern:
        return re.compile(self.family_match, re.IGNORECASE)

    @property
    def filename_regex(self) -> Pattern:
        return re.compile(self.filename_pattern)

    def matches_family(self, family: str) -> bool:
        return self.family_regex.fullmatch(family.strip()) is not None

    def correct(self, filename: str) -> Optional[StyleCorrection]:
        """Derive a correction from ``filename``, or None if it doesn't fit."""
        basename = os.path.basename(filename)
        match = self.filename_regex.search(basename)
        if match is None:
            return None

        groups = match.groupdict()
        captured_weight = groups.get("weight")
        captured_style = (groups.get("style") or "").strip()

        weight: Optional[int] = None
        style: Optional[str] = None

        if captured_weight is not None:
            weight = int(captured_weight)
            style = self.style_map.get(captured_weight) or captured_style or None
        elif captured_style in self.weight_map:
            weight = self.weight_map[captured_style]
            style = captured_style
        elif captured_style and self.style_override is not None:
            style = self.style_override(captured_style)

        if style is None and weight is None:
            return None

        is_italic = bool(self.italic_marker and self.italic_marker in basename)
        if style and is_italic and "italic" not in style.lower():
            style = f"{style} Italic"

        return StyleCorrection(
            rule=self.name, style=style or "", weight=weight, is_italic=is_italic
        )


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


DEFAULT_RULES: Tuple[FilenameRule, ...] = (
    FilenameRule(
        name="jost",
        family_match=r"Jost",
        filename_pattern=r"Jost-(?P<weight>\d+)-(?P<style>.*?)(?:Italic)?\.otf$",
        style_map={
            "100": "Thin",
            "200": "Thin",
            "300": "Light",
            "400": "Book",
            "500": "Medium",
            "600": "Semi",
            "700": "Bold",
            "900": "Black",
        },
        italic_marker="Italic",
    ),
    FilenameRule(
        name="basteleur",
        family_match=r"Basteleur",
        filename_pattern=r"Basteleur-(?P<style>.*?)\.otf$",
        weight_map={"Moonlight": 300, "Bold": 700},
    ),
    FilenameRule(
        name="outward",
        family_match=r"Outward",
        filename_pattern=r"outward-(?P<style>.*?)\.ttf$",
        style_override=_capitalize,
    ),
)


def find_correction(
    family: str, filename: str, rules: Sequence[FilenameRule] = DEFAULT_RULES
) -> Optional[StyleCorrection]:
    """Return the correction of the first rule matching family and filename."""
    for rule in rules:
        if not rule.matches_family(family):
            continue
        correction = rule.correct(filename)
        if correction is not None:
            return correction
    return None
