"""
Import LevelUp Quest data from JSON files.

A full backup replaces everything in storage. A quest-list file is merged
into one student (overwriting a list with the same name).

Usage:
    python -m scripts.import_data backup.json --backup
    python -m scripts.import_data week1.json --student Mia
"""

import argparse
import sys
from pathlib import Path

from quest import storage
from quest.curriculum import CurriculumError, get_student
from quest.transfer import ImportValidationError, import_list, import_snapshot


def main(argv=None, store=None) -> int:
    parser = argparse.ArgumentParser(description="Restore a full backup or import a word list")
    parser.add_argument("source", type=Path, help="JSON file to import")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--backup", action="store_true", help="Replace all data with a full backup")
    target.add_argument("--student", help="Student receiving the list")
    args = parser.parse_args(argv)

    store = store or storage.get_store()
    raw = args.source.read_text(encoding="utf-8")

    try:
        if args.backup:
            data = import_snapshot(raw)
            print(f"Restoring backup with {len(data.students)} student(s)...")
        else:
            data = storage.load_app_data(store)
            list_name = import_list(get_student(data, args.student), raw)
            print(f"Imported list {list_name!r} for {args.student}")
    except (ImportValidationError, CurriculumError) as e:
        print(f"⚠ {e}")
        return 1

    storage.save_app_data(store, data)
    print("✓ Import complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
