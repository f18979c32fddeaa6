from __future__ import annotations

from src.student_attendance.student_attendance.attendance.model import AttendanceEntry
from src.student_attendance.student_attendance.core.enums import AttendanceStatus
from src.student_attendance.student_attendance.metrics.service import MetricsService
from src.student_attendance.student_attendance.roster.model import Student
from src.student_attendance.student_attendance.store.model import AttendanceDocument


class FakeStore:
    def __init__(self, doc: AttendanceDocument):
        self._doc = doc
        self.loads = 0

    def load(self) -> AttendanceDocument:
        self.loads += 1
        return self._doc.copy()

    def save(self, doc: AttendanceDocument) -> None:
        raise AssertionError("metrics must not write")


def _doc() -> AttendanceDocument:
    def mark(roll_no, status):
        return AttendanceEntry(roll_no=roll_no, status=AttendanceStatus(status), name=roll_no)

    return AttendanceDocument(
        students=[Student(roll_no="001", name="Alice"), Student(roll_no="002", name="Bob"), Student(roll_no="003", name="Cid")],
        attendance={
            "general": {
                "2024-01-01": [mark("001", "present"), mark("002", "present"), mark("003", "absent")],
                "2024-01-02": [mark("001", "present"), mark("002", "absent"), mark("003", "absent")],
            }
        },
    )


def test_overview_payload_is_formatted():
    svc = MetricsService(FakeStore(_doc()))

    overview = svc.overview()

    assert overview["totalClasses"] == 2
    assert overview["avgAttendance"] == "50.0%"
    assert overview["bestDay"] == "2024-01-01 (66.7%)"
    assert overview["worstDay"] == "2024-01-02 (33.3%)"
    assert set(overview["dailyRates"]) == {"2024-01-01", "2024-01-02"}


def test_overview_without_data_reports_dash():
    overview = MetricsService(FakeStore(AttendanceDocument.empty())).overview()

    assert overview == {
        "totalClasses": 0,
        "avgAttendance": "0.0%",
        "bestDay": "-",
        "worstDay": "-",
        "dailyRates": {},
    }


def test_student_rows_follow_roster_order():
    rows = MetricsService(FakeStore(_doc())).student_rows()

    assert [(r["roll_no"], r["present"], r["absent"], r["total"], r["attendance_percent"]) for r in rows] == [
        ("001", 2, 0, 2, "100.0"),
        ("002", 1, 1, 2, "50.0"),
        ("003", 0, 2, 2, "0.0"),
    ]


def test_rankings_payload():
    rankings = MetricsService(FakeStore(_doc())).rankings()

    assert rankings == [
        {"rank": 1, "roll_no": "001", "name": "Alice", "attendance_percent": "100.0"},
        {"rank": 2, "roll_no": "002", "name": "Bob", "attendance_percent": "50.0"},
        {"rank": 3, "roll_no": "003", "name": "Cid", "attendance_percent": "0.0"},
    ]


def test_every_call_recomputes_from_the_store():
    store = FakeStore(_doc())
    svc = MetricsService(store)

    svc.overview()
    svc.rankings()

    assert store.loads == 2
