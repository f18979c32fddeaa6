from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from ..attendance.model import AttendanceEntry
from ..common.datetime_utils import is_iso_date
from ..roster.model import Student

# subject -> date -> entries
AttendanceBuckets = dict[str, dict[str, list[AttendanceEntry]]]


@dataclass
class AttendanceDocument:
    """The single persisted document: roster plus every attendance bucket."""

    students: list[Student] = field(default_factory=list)
    attendance: AttendanceBuckets = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "AttendanceDocument":
        return cls()

    def copy(self) -> "AttendanceDocument":
        # Students and entries are frozen, so copying the containers is enough.
        return AttendanceDocument(
            students=list(self.students),
            attendance={
                subject: {day: list(entries) for day, entries in by_date.items()}
                for subject, by_date in self.attendance.items()
            },
        )

    def find_student(self, roll_no: str) -> Optional[Student]:
        for s in self.students:
            if s.roll_no == roll_no:
                return s
        return None

    def iter_buckets(self, subject: Optional[str] = None) -> Iterator[tuple[str, str, list[AttendanceEntry]]]:
        """Yield (subject, date, entries), restricted to one subject when given."""
        for subj, by_date in self.attendance.items():
            if subject is not None and subj != subject:
                continue
            for day, entries in by_date.items():
                yield subj, day, entries

    def to_dict(self) -> dict:
        return {
            "students": [s.to_dict() for s in self.students],
            "attendance": {
                subject: {day: [e.to_dict() for e in entries] for day, entries in sorted(by_date.items())}
                for subject, by_date in sorted(self.attendance.items())
            },
        }

    @classmethod
    def from_dict(cls, data: Any, *, default_subject: str) -> "AttendanceDocument":
        """Build a document from decoded JSON.

        Missing `students` / `attendance` keys are backfilled. A flat
        `{date: [entries]}` attendance mapping is read into `default_subject`.
        Raises ValueError, KeyError or TypeError when the structure is wrong.
        """
        if not isinstance(data, dict):
            raise ValueError("document root must be a JSON object")

        students_raw = data.get("students")
        if students_raw is None:
            students_raw = []
        if not isinstance(students_raw, list):
            raise ValueError("'students' must be a list")

        attendance_raw = data.get("attendance")
        if attendance_raw is None:
            attendance_raw = {}
        if not isinstance(attendance_raw, dict):
            raise ValueError("'attendance' must be an object")

        attendance: AttendanceBuckets = {}
        for key, value in attendance_raw.items():
            if isinstance(value, list):
                _require_date_key(key)
                attendance.setdefault(default_subject, {})[key] = _entries_from_list(value)
            elif isinstance(value, dict):
                by_date = attendance.setdefault(key, {})
                for day, entries in value.items():
                    _require_date_key(day)
                    if not isinstance(entries, list):
                        raise ValueError(f"bucket {key}/{day} must be a list")
                    by_date[day] = _entries_from_list(entries)
            else:
                raise ValueError(f"attendance key {key!r} has unsupported value")

        students = sorted((Student.from_dict(s) for s in students_raw), key=lambda s: s.roll_no)
        for prev, cur in zip(students, students[1:]):
            if prev.roll_no == cur.roll_no:
                raise ValueError(f"duplicate roll_no {cur.roll_no!r}")

        return cls(
            students=students,
            attendance=attendance,
        )


def _require_date_key(key: str) -> None:
    if not is_iso_date(key):
        raise ValueError(f"attendance date {key!r} is not YYYY-MM-DD")


def _entries_from_list(items: list) -> list[AttendanceEntry]:
    return [AttendanceEntry.from_dict(e) for e in items]
