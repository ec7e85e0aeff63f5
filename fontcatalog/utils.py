"""
Shared utilities for the font metadata tools.

Filename handling and font file collection.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

FONT_EXTENSIONS = {".ttf", ".otf", ".woff", ".woff2"}


def filename_stem(filename: str) -> str:
    """Filename without directory or extension."""
    base = os.path.basename(filename)
    stem, _ = os.path.splitext(base)
    return stem or base


def detect_format(filename: str, format_map: Dict[str, str], default: str = "truetype") -> str:
    """
    Map a filename extension onto a CSS font format name.

    Args:
        filename: Font filename
        format_map: Extension (without dot) -> format name
        default: Format used for unknown or missing extensions

    Returns:
        Format name such as "truetype" or "woff2"
    """
    _, ext = os.path.splitext(filename)
    return format_map.get(ext.lstrip(".").lower(), default)


def validate_font_file(path: Path) -> bool:
    """
    Basic font file validation.

    Checks if file exists and has a valid font extension.

    Args:
        path: Path to font file

    Returns:
        True if file appears to be a valid font file
    """
    if not path.is_file():
        return False
    return path.suffix.lower() in FONT_EXTENSIONS


def collect_font_files(paths: List[str], recursive: bool = False) -> List[Path]:
    """
    Collect font files from paths.

    Args:
        paths: List of file paths or directory paths
        recursive: If True, search directories recursively

    Returns:
        Sorted list of Path objects to font files
    """
    font_files: List[Path] = []
    for path_str in paths:
        path = Path(path_str)
        if path.is_file():
            font_files.append(path)
        elif path.is_dir():
            pattern = "**/*" if recursive else "*"
            font_files.extend(
                sorted(p for p in path.glob(pattern) if validate_font_file(p))
            )
    return font_files


def find_font_file(directory: Path, filename: str) -> Optional[Path]:
    """Locate ``filename`` directly inside ``directory``."""
    candidate = directory / os.path.basename(filename)
    if candidate.is_file():
        return candidate
    return None
