from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance mark stored per student per bucket."""

    PRESENT = "present"
    ABSENT = "absent"
