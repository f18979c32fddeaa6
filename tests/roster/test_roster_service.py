from __future__ import annotations

from typing import Optional

import pytest

from src.student_attendance.student_attendance.attendance.model import AttendanceEntry
from src.student_attendance.student_attendance.core.enums import AttendanceStatus
from src.student_attendance.student_attendance.core.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from src.student_attendance.student_attendance.roster.model import Student
from src.student_attendance.student_attendance.roster.service import RosterService
from src.student_attendance.student_attendance.store.model import AttendanceDocument


class InMemoryStore:
    def __init__(self, doc: Optional[AttendanceDocument] = None):
        self._doc = doc or AttendanceDocument.empty()
        self.saves = 0

    def load(self) -> AttendanceDocument:
        return self._doc.copy()

    def save(self, doc: AttendanceDocument) -> None:
        self._doc = doc.copy()
        self.saves += 1


class FailingStore(InMemoryStore):
    def save(self, doc: AttendanceDocument) -> None:
        raise PersistenceError("disk full")


def _entry(roll_no: str, status: str = "present") -> AttendanceEntry:
    return AttendanceEntry(roll_no=roll_no, status=AttendanceStatus(status), name=roll_no)


def test_add_student_keeps_roster_sorted_by_roll_no():
    store = InMemoryStore()
    svc = RosterService(store)

    svc.add_student(roll_no="003", name="Carol")
    svc.add_student(roll_no="001", name="Alice")
    created = svc.add_student(roll_no="002", name="Bob", course="BSc CS")

    assert created == Student(roll_no="002", name="Bob", course="BSc CS")
    assert [s.roll_no for s in svc.list_students()] == ["001", "002", "003"]
    assert svc.list_students()[0].course == "N/A"
    assert store.saves == 3


def test_add_duplicate_roll_no_raises_and_keeps_roster():
    store = InMemoryStore()
    svc = RosterService(store)
    svc.add_student(roll_no="001", name="Alice")

    with pytest.raises(DuplicateKeyError):
        svc.add_student(roll_no="001", name="Someone Else")

    assert svc.list_students() == [Student(roll_no="001", name="Alice")]
    assert store.saves == 1


@pytest.mark.parametrize(
    "roll_no, name",
    [("", "Alice"), ("001", ""), (None, "Alice"), ("001", None), ("   ", "Alice")],
)
def test_add_student_requires_roll_no_and_name(roll_no, name):
    store = InMemoryStore()

    with pytest.raises(ValidationError):
        RosterService(store).add_student(roll_no=roll_no, name=name)

    assert store.saves == 0


def test_remove_unknown_student_raises_not_found():
    with pytest.raises(NotFoundError):
        RosterService(InMemoryStore()).remove_student(roll_no="404")


def test_remove_student_cascades_into_every_bucket():
    doc = AttendanceDocument(
        students=[Student(roll_no="S001", name="Alice"), Student(roll_no="S002", name="Bob")],
        attendance={
            "general": {
                "2024-01-01": [_entry("S001"), _entry("S002", "absent")],
                "2024-01-02": [_entry("S001", "absent")],
            },
            "math": {"2024-01-01": [_entry("S001"), _entry("S002")]},
        },
    )
    store = InMemoryStore(doc)
    svc = RosterService(store)

    svc.remove_student(roll_no="S001")

    saved = store.load()
    assert [s.roll_no for s in saved.students] == ["S002"]
    for _, _, entries in saved.iter_buckets():
        assert all(e.roll_no != "S001" for e in entries)
    assert saved.attendance["general"]["2024-01-02"] == []
    assert [e.roll_no for e in saved.attendance["math"]["2024-01-01"]] == ["S002"]
    assert store.saves == 1


def test_failed_save_does_not_change_roster():
    store = FailingStore(AttendanceDocument(students=[Student(roll_no="001", name="Alice")]))
    svc = RosterService(store)

    with pytest.raises(PersistenceError):
        svc.add_student(roll_no="002", name="Bob")
    with pytest.raises(PersistenceError):
        svc.remove_student(roll_no="001")

    assert [s.roll_no for s in svc.list_students()] == ["001"]
