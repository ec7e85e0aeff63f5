#!/usr/bin/env python3
"""
Re-parse stored font metadata against the original font files.

Loads a JSON catalog ({font id: record}), re-runs the metadata pipeline on
each record's original file from a fonts directory, and writes back the
pipeline-owned fields that changed. Admin-edited fields are left alone.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from fontcatalog.console import emit_status, emit_summary
from fontcatalog.maintenance import reprocess_fonts
from fontcatalog.stores import DirectoryBinaryStore, InMemoryMetadataStore

# Suppress fontTools table-decoding chatter
logging.getLogger("fontTools").setLevel(logging.ERROR)


def main():
    """Main entry point for the re-parse CLI."""
    parser = argparse.ArgumentParser(
        description="Refresh stored font metadata by re-parsing the original files"
    )
    parser.add_argument(
        "catalog",
        help="JSON file mapping font ids to stored records",
    )
    parser.add_argument(
        "fonts_dir",
        help="Directory holding the original font files",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the refreshed catalog here (default: overwrite the input)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report changes without writing them",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show per-font changes",
    )

    args = parser.parse_args()

    catalog_path = Path(args.catalog)
    try:
        records = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        emit_status("error", f"Cannot read catalog {catalog_path}: {e}")
        return 1

    binary_store = DirectoryBinaryStore(Path(args.fonts_dir))
    metadata_store = InMemoryMetadataStore(records)

    report = reprocess_fonts(binary_store, metadata_store, dry_run=args.dry_run)

    for result in report.results:
        if not result.success:
            emit_status("error", f"{result.font_id}: {result.error}")
        elif result.changes:
            emit_status(
                "info",
                f"{result.font_id}: updated {', '.join(sorted(result.changes))}",
            )
            if args.verbose:
                for key, value in sorted(result.changes.items()):
                    emit_status("info", f"  {key}", json.dumps(value, ensure_ascii=False))

    if not args.dry_run and report.updated:
        output_path = Path(args.output) if args.output else catalog_path
        output_path.write_text(
            json.dumps(metadata_store.records, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        emit_status("success", f"Wrote refreshed catalog to {output_path}")

    emit_summary(report.total - report.errors, report.errors)
    return 0 if report.errors == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
