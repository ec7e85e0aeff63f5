#!/usr/bin/env python3
"""
Extract catalog metadata from font files.

Runs the metadata pipeline over each font and writes the records as JSON,
keyed by filename. Files that are not recognizably fonts are reported and
skipped; every other problem is carried in the record's warnings.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from fontcatalog.console import emit_status, emit_summary
from fontcatalog.errors import InvalidSignature
from fontcatalog.pipeline import FontProcessor, process_font_with_timeout
from fontcatalog.utils import collect_font_files

# Suppress fontTools table-decoding chatter
logging.getLogger("fontTools").setLevel(logging.ERROR)


def process_files(
    font_files: List[Path],
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> Dict[str, Any]:
    """Process fonts in order; returns {"records": {...}, "errors": {...}}."""
    processor = FontProcessor()
    records: Dict[str, Any] = {}
    errors: Dict[str, str] = {}

    for font_path in font_files:
        emit_status("parsing", f"Processing: {font_path.name}")
        try:
            if timeout:
                data = font_path.read_bytes()
                record = process_font_with_timeout(
                    data, font_path.name, len(data), timeout, processor
                )
            else:
                record = processor.process_file(font_path)
        except InvalidSignature as e:
            emit_status("error", f"Skipped {font_path.name}: {e}")
            errors[str(font_path)] = str(e)
            continue

        records[str(font_path)] = record.to_dict()
        emit_status(
            "info",
            f"{record.family} {record.style} ({record.weight})",
            f"{len(record.open_type_features)} features, "
            f"languages: {', '.join(record.languages)}",
        )
        if verbose:
            for warning in record.warnings:
                emit_status("warning", warning)

    return {"records": records, "errors": errors}


def main():
    """Main entry point for metadata extraction CLI."""
    parser = argparse.ArgumentParser(
        description="Extract catalog metadata (family, style, axes, features, scripts) from fonts"
    )
    parser.add_argument(
        "fonts",
        nargs="+",
        help="Font files or directories to process",
    )
    parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        help="Search directories recursively",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write JSON to this file instead of stdout",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-font wall-clock limit in seconds; slow fonts get filename defaults",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show per-font warnings",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    font_files = collect_font_files(args.fonts, recursive=args.recursive)
    if not font_files:
        emit_status("error", "No font files found")
        return 1

    emit_status("info", f"Found {len(font_files)} font file(s)")

    output = process_files(font_files, timeout=args.timeout, verbose=args.verbose)
    payload = json.dumps(output["records"], indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
        emit_status("success", f"Wrote metadata to {args.output}")
    else:
        sys.stdout.write(payload + "\n")

    warning_count = sum(len(r["warnings"]) for r in output["records"].values())
    if len(font_files) > 1:
        emit_summary(len(output["records"]), len(output["errors"]), warning_count)

    return 0 if not output["errors"] else 1


if __name__ == "__main__":
    sys.exit(main())
