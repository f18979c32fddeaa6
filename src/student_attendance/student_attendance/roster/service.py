from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_COURSE
from ..core.exceptions import DuplicateKeyError, NotFoundError
from ..store.repository import DocumentStore
from .model import Student

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: manage the student roster."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def list_students(self) -> list[Student]:
        return self._store.load().students

    def add_student(self, *, roll_no: str, name: str, course: Optional[str] = None) -> Student:
        roll_no = require_non_empty(roll_no, "Roll No")
        name = require_non_empty(name, "Name")
        course = course.strip() if isinstance(course, str) and course.strip() else DEFAULT_COURSE

        doc = self._store.load()
        if doc.find_student(roll_no):
            raise DuplicateKeyError(f"Student with Roll No {roll_no} already exists")

        student = Student(roll_no=roll_no, name=name, course=course)
        doc.students.append(student)
        doc.students.sort(key=lambda s: s.roll_no)

        self._store.save(doc)
        logger.info("Added student %s", roll_no)
        return student

    def remove_student(self, *, roll_no: str) -> None:
        """Delete a student and every attendance entry that references them."""
        doc = self._store.load()
        if not doc.find_student(roll_no):
            raise NotFoundError(f"Student {roll_no} not found")

        doc.students = [s for s in doc.students if s.roll_no != roll_no]

        removed = 0
        for by_date in doc.attendance.values():
            for day, entries in by_date.items():
                kept = [e for e in entries if e.roll_no != roll_no]
                removed += len(entries) - len(kept)
                by_date[day] = kept

        self._store.save(doc)
        logger.info("Removed student %s and %d attendance entries", roll_no, removed)
