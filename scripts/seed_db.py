"""Seed the roster.

Usage: python scripts/seed_db.py [roster.json]

The JSON file is a list of {"roll_no", "name", "course"?} objects. Without a
file a small demo roster is used. Existing roll numbers are skipped.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.student_attendance.student_attendance.container import build_container
from src.student_attendance.student_attendance.core.exceptions import DuplicateKeyError, ValidationError

DEMO_ROSTER = [
    {"roll_no": "S001", "name": "Alice Johnson", "course": "BSc CS"},
    {"roll_no": "S002", "name": "Bob Smith", "course": "BSc CS"},
    {"roll_no": "S003", "name": "Carol White", "course": "BSc IT"},
    {"roll_no": "S004", "name": "David Brown", "course": "BSc IT"},
]


def load_roster(path: str | None) -> list[dict]:
    if not path:
        return DEMO_ROSTER
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise SystemExit(f"{path}: expected a JSON list of students")
    return data


def main(argv: list[str]) -> None:
    settings = load_settings()
    container = build_container(data_file=settings.DATA_FILE, default_subject=settings.DEFAULT_SUBJECT)

    added, skipped = 0, 0
    for row in load_roster(argv[1] if len(argv) > 1 else None):
        try:
            container.roster_service.add_student(
                roll_no=row.get("roll_no"),
                name=row.get("name"),
                course=row.get("course"),
            )
            added += 1
        except DuplicateKeyError:
            skipped += 1
        except ValidationError as e:
            print(f"SKIP {row!r}: {e}")
            skipped += 1

    print(f"OK: Seeded roster -> {settings.DATA_FILE} (added={added}, skipped={skipped})")


if __name__ == "__main__":
    main(sys.argv)
