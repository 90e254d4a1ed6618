#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, ".")

from booking_engine.application.utils.catalog_migration import migrate_catalog, variant_to_record


def migrate_file(source: Path) -> list[dict]:
    records = json.loads(source.read_text(encoding="utf-8"))
    if isinstance(records, dict):
        records = records.get("variants", [])
    return [variant_to_record(v) for v in migrate_catalog(records)]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Rewrite a service-variant catalog with explicit pricing types and structured durations"
    )
    parser.add_argument("source", type=Path, help="JSON file with a list of variant records")
    parser.add_argument("--output", type=Path, help="Where to write the migrated catalog (default: stdout)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    migrated = migrate_file(args.source)
    text = json.dumps(migrated, indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
        print(f"Wrote {len(migrated)} variants to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()
