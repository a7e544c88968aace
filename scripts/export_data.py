"""
Export LevelUp Quest data to JSON files.

Writes either the full backup (every student, all settings) or a single
word list in the shareable quest-list format.

Usage:
    python -m scripts.export_data backup.json
    python -m scripts.export_data --student Mia --list "Week 1" week1.json
"""

import argparse
import sys
from pathlib import Path

from quest import storage
from quest.curriculum import CurriculumError, get_student
from quest.transfer import dump_snapshot, export_list


def main(argv=None, store=None) -> int:
    parser = argparse.ArgumentParser(description="Export a full backup or a single word list")
    parser.add_argument("output", type=Path, help="File to write")
    parser.add_argument("--student", help="Student owning the list (with --list)")
    parser.add_argument("--list", dest="list_name", help="Export only this list")
    args = parser.parse_args(argv)

    data = storage.load_app_data(store or storage.get_store())

    if args.list_name:
        if not args.student:
            parser.error("--list requires --student")
        try:
            student = get_student(data, args.student)
            payload = export_list(student, args.list_name)
        except CurriculumError as e:
            print(f"⚠ {e}")
            return 1
        except KeyError:
            print(f"⚠ {args.student} has no list named {args.list_name!r}")
            return 1
    else:
        payload = dump_snapshot(data, indent=2)

    args.output.write_text(payload, encoding="utf-8")
    print(f"✓ Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
