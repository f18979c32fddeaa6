from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import require_iso_date, require_non_empty, require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..store.repository import DocumentStore
from .model import AttendanceEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceMark:
    """Validated input mark, before it is matched against the roster."""

    roll_no: str
    status: AttendanceStatus


class AttendanceService:
    def __init__(self, store: DocumentStore, *, default_subject: str):
        self._store = store
        self._default_subject = default_subject

    @property
    def default_subject(self) -> str:
        return self._default_subject

    def _subject(self, subject: Optional[str]) -> str:
        if subject is None:
            return self._default_subject
        return require_non_empty(subject, "Subject")

    @staticmethod
    def _parse_marks(entries: Any) -> list[AttendanceMark]:
        if not isinstance(entries, list):
            raise ValidationError("Invalid attendance data format. Expected an array.")

        marks = []
        for item in entries:
            if not isinstance(item, Mapping):
                raise ValidationError("Each attendance record must be an object with roll_no and status.")
            try:
                roll_no = require_non_empty(item.get("roll_no"), "roll_no")
                status = require_status(item.get("status"))
            except ValidationError:
                raise ValidationError("Each attendance record must have roll_no and status (present/absent).")
            marks.append(AttendanceMark(roll_no=roll_no, status=status))
        return marks

    def set_attendance(self, date: str, entries: Any, *, subject: Optional[str] = None) -> list[AttendanceEntry]:
        """Replace the bucket for (subject, date) with `entries`.

        Everything is validated before the store is read. Marks for roll numbers
        missing from the roster are dropped; the rest get the student's name.
        """
        date = require_iso_date(date)
        subject = self._subject(subject)
        marks = self._parse_marks(entries)

        doc = self._store.load()
        names = {s.roll_no: s.name for s in doc.students}

        stored = [
            AttendanceEntry(roll_no=m.roll_no, status=m.status, name=names[m.roll_no])
            for m in marks
            if m.roll_no in names
        ]
        dropped = len(marks) - len(stored)

        doc.attendance.setdefault(subject, {})[date] = stored
        self._store.save(doc)

        if dropped:
            logger.info("Dropped %d marks for unknown students on %s/%s", dropped, subject, date)
        logger.info("Saved %d marks for %s/%s", len(stored), subject, date)
        return stored

    def get_attendance(self, date: str, *, subject: Optional[str] = None) -> list[AttendanceEntry]:
        date = require_iso_date(date)
        subject = self._subject(subject)
        return self._store.load().attendance.get(subject, {}).get(date, [])

    def get_all(self) -> dict:
        return self._store.load().to_dict()["attendance"]

    def list_dates(self, *, subject: Optional[str] = None) -> list[str]:
        """Recorded dates, newest first."""
        if subject is not None:
            subject = require_non_empty(subject, "Subject")
        dates = {day for _, day, _ in self._store.load().iter_buckets(subject)}
        return sorted(dates, reverse=True)

    def list_subjects(self) -> list[str]:
        return sorted(self._store.load().attendance)
