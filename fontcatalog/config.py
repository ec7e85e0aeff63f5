"""
Configuration constants for the font metadata pipeline.

Centralizes all magic numbers, lookup tables, and pattern definitions.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple


def _stylistic_set_titles() -> Dict[str, str]:
    return {f"ss{num:02d}": f"Stylistic Set {num}" for num in range(1, 21)}


def _character_variant_titles() -> Dict[str, str]:
    return {f"cv{num:02d}": f"Character Variant {num}" for num in range(1, 100)}


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for metadata extraction."""

    # Identifies the pipeline revision stamped on every record
    PROCESSING_VERSION: str = "2.0.0"

    # Binary validation
    MIN_FONT_SIZE: int = 100
    FONT_SIGNATURES: Dict[bytes, str] = field(
        default_factory=lambda: {
            b"\x00\x01\x00\x00": "TTF",
            b"OTTO": "OTF",
            b"wOFF": "WOFF",
            b"wOF2": "WOFF2",
        }
    )

    # Filename extension -> CSS font format
    FORMAT_BY_EXTENSION: Dict[str, str] = field(
        default_factory=lambda: {
            "ttf": "truetype",
            "otf": "opentype",
            "woff": "woff",
            "woff2": "woff2",
            "eot": "embedded-opentype",
        }
    )

    # Identity defaults
    DEFAULT_STYLE: str = "Regular"
    DEFAULT_WEIGHT: int = 400
    MIN_WEIGHT: int = 1
    MAX_WEIGHT: int = 1000

    # Style keyword -> weight class. Compound keywords come first so that
    # "extrabold" is not read as "bold".
    WEIGHT_LADDER: Tuple[Tuple[str, int], ...] = (
        ("extralight", 200),
        ("ultralight", 200),
        ("semibold", 600),
        ("demibold", 600),
        ("extrabold", 800),
        ("ultrabold", 800),
        ("hairline", 100),
        ("regular", 400),
        ("medium", 500),
        ("normal", 400),
        ("black", 900),
        ("heavy", 900),
        ("light", 300),
        ("thin", 100),
        ("book", 400),
        ("bold", 700),
    )

    # OS/2 fsSelection bit 0
    FS_SELECTION_ITALIC: int = 0x0001

    # fvar axis tag -> display name
    AXIS_NAMES: Dict[str, str] = field(
        default_factory=lambda: {
            "wght": "Weight",
            "wdth": "Width",
            "slnt": "Slant",
            "ital": "Italic",
            "opsz": "Optical Size",
            "GRAD": "Grade",
            "grad": "Grade",
            "XHGT": "X Height",
            "XOPQ": "X Opaque",
            "YOPQ": "Y Opaque",
            "YTLC": "Y Transparent LC",
            "YTUC": "Y Transparent UC",
            "YTAS": "Y Transparent Ascender",
            "YTDE": "Y Transparent Descender",
            "YTFI": "Y Transparent Figure",
        }
    )
    WEIGHT_AXIS_TAG: str = "wght"
    WIDE_WEIGHT_RANGE: float = 700

    # OpenType feature tag -> display title
    FEATURE_TITLES: Dict[str, str] = field(
        default_factory=lambda: {
            "kern": "Kerning",
            "liga": "Standard Ligatures",
            "dlig": "Discretionary Ligatures",
            "clig": "Contextual Ligatures",
            "hlig": "Historical Ligatures",
            "smcp": "Small Capitals",
            "c2sc": "Small Capitals From Capitals",
            "case": "Case-Sensitive Forms",
            "cpsp": "Capital Spacing",
            "titl": "Titling",
            "swsh": "Swash",
            "cswh": "Contextual Swash",
            "salt": "Stylistic Alternates",
            "calt": "Contextual Alternates",
            "onum": "Oldstyle Figures",
            "pnum": "Proportional Figures",
            "tnum": "Tabular Figures",
            "lnum": "Lining Figures",
            "zero": "Slashed Zero",
            "frac": "Fractions",
            "sups": "Superscript",
            "subs": "Subscript",
            "ordn": "Ordinals",
            **_stylistic_set_titles(),
            **_character_variant_titles(),
        }
    )

    # Tags grouped as "alternates" rather than "other features"
    ALTERNATE_FEATURE_TAGS: FrozenSet[str] = frozenset(
        {"salt", *_stylistic_set_titles().keys()}
    )

    # Script name -> (block start, block end, sampled code points)
    SCRIPT_SAMPLES: Dict[str, Tuple[int, int, Tuple[int, ...]]] = field(
        default_factory=lambda: {
            "Cyrillic": (
                0x0400,
                0x04FF,
                (0x0410, 0x0411, 0x0412, 0x0413, 0x0414,
                 0x0415, 0x0430, 0x0431, 0x0432, 0x0433),
            ),
            "Greek": (
                0x0370,
                0x03FF,
                (0x0391, 0x0392, 0x0393, 0x0394, 0x0395,
                 0x03B1, 0x03B2, 0x03B3, 0x03B4, 0x03B5),
            ),
            "Hebrew": (
                0x0590,
                0x05FF,
                (0x05D0, 0x05D1, 0x05D2, 0x05D3, 0x05D4,
                 0x05D5, 0x05D6, 0x05D7, 0x05D8, 0x05D9),
            ),
            "Arabic": (
                0x0600,
                0x06FF,
                (0x0627, 0x0628, 0x062A, 0x062B, 0x062C,
                 0x062D, 0x062E, 0x062F, 0x0630, 0x0631),
            ),
            "Chinese": (
                0x4E00,
                0x9FFF,
                (0x4E00, 0x4E0A, 0x4E0D, 0x4E2D, 0x4EBA,
                 0x5927, 0x56FD, 0x65E5, 0x662F, 0x7684),
            ),
            "Japanese": (
                0x3040,
                0x309F,
                (0x3042, 0x3044, 0x3046, 0x3048, 0x304A,
                 0x304B, 0x304D, 0x304F, 0x3051, 0x3053),
            ),
            "Korean": (
                0xAC00,
                0xD7AF,
                (0xAC00, 0xB098, 0xB2E4, 0xB77C, 0xB9C8,
                 0xBC14, 0xC0AC, 0xC544, 0xC790, 0xD558),
            ),
        }
    )
    SCRIPT_MIN_HITS: int = 3
    BASELINE_SCRIPT: str = "Latin"

    # Family-name pattern -> style tag, checked in order
    FAMILY_STYLE_PATTERNS: Tuple[Tuple[str, str], ...] = (
        (r"mono|code|terminal", "Monospace"),
        (r"display|title|headline", "Display"),
        (r"script|handwriting|brush", "Script"),
    )

    # Feature-title fragment -> style tag
    FEATURE_STYLE_FRAGMENTS: Tuple[Tuple[str, str], ...] = (
        ("ligature", "Ligatures"),
        ("stylistic", "Stylistic Sets"),
        ("swash", "Swashes"),
        ("small cap", "Small Caps"),
    )

    DEFAULT_CATEGORY: str = "Sans"

    # Family used when neither the name table nor the filename gives one
    UNKNOWN_FAMILY: str = "Unknown"


# Global configuration instance
CONFIG = PipelineConfig()
