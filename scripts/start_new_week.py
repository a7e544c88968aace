"""
Start a new week: reset weekly goal progress for every student.

XP, medals and goal milestones are kept.

Usage:
    python -m scripts.start_new_week
    python -m scripts.start_new_week --yes
"""

import argparse
import sys

from quest import ledger, storage


def main(argv=None, store=None) -> int:
    parser = argparse.ArgumentParser(description="Reset weekly progress for all students")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args(argv)

    store = store or storage.get_store()
    data = storage.load_app_data(store)

    if not args.yes:
        response = input(f"Reset weekly progress for {len(data.students)} student(s)? (type 'yes' to confirm): ")
        if response.lower() != "yes":
            print("\nCancelled. No changes made.")
            return 0

    for name, student in data.students.items():
        print(f"  {name}: {student.weekly_progress}/{student.weekly_goal} -> 0")
        ledger.reset_weekly_progress(student)

    storage.save_app_data(store, data)
    print("✓ New week started!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
