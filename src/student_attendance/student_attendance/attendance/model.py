from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one student's mark inside a (subject, date) bucket.

    `name` is copied from the roster when the bucket is written and is not
    kept in sync afterwards.
    """

    roll_no: str
    status: AttendanceStatus
    name: str

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    def to_dict(self) -> dict:
        return {"roll_no": self.roll_no, "status": self.status.value, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceEntry":
        roll_no = data["roll_no"]
        if roll_no is None or not str(roll_no).strip():
            raise ValueError("attendance entry roll_no must not be empty")
        return cls(
            roll_no=str(roll_no),
            status=AttendanceStatus(data["status"]),
            name=str(data.get("name") or ""),
        )
