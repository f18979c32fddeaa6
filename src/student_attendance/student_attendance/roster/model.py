from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.constants import DEFAULT_COURSE


@dataclass(frozen=True)
class Student:
    """Domain entity: one roster record, keyed by roll_no."""

    roll_no: str
    name: str
    course: str = DEFAULT_COURSE

    def to_dict(self) -> dict:
        return {"roll_no": self.roll_no, "name": self.name, "course": self.course}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        roll_no, name = data["roll_no"], data["name"]
        if roll_no is None or not str(roll_no).strip():
            raise ValueError("student roll_no must not be empty")
        if name is None or not str(name).strip():
            raise ValueError(f"student {roll_no} has an empty name")
        return cls(
            roll_no=str(roll_no),
            name=str(name),
            course=str(data.get("course") or DEFAULT_COURSE),
        )
