from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import NO_DAY
from ..store.repository import DocumentStore
from .calculator import compute_metrics, rank_students
from .model import DayRate, MetricsSummary


def _fmt_percent(value: float) -> str:
    return f"{value:.1f}"


def _fmt_day(day: Optional[DayRate]) -> str:
    if day is None:
        return NO_DAY
    return f"{day.date} ({_fmt_percent(day.rate)}%)"


class MetricsService:
    """Read-only reports, recomputed from the stored document on every call."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def summary(self, *, subject: Optional[str] = None) -> MetricsSummary:
        if subject is not None:
            subject = require_non_empty(subject, "Subject")
        return compute_metrics(self._store.load(), subject=subject)

    def overview(self, *, subject: Optional[str] = None) -> dict:
        m = self.summary(subject=subject)
        return {
            "totalClasses": m.total_classes,
            "avgAttendance": f"{_fmt_percent(m.avg_attendance)}%",
            "bestDay": _fmt_day(m.best_day),
            "worstDay": _fmt_day(m.worst_day),
            "dailyRates": m.daily_rates,
        }

    def student_rows(self, *, subject: Optional[str] = None) -> list[dict]:
        return [
            {
                "roll_no": s.roll_no,
                "name": s.name,
                "course": s.course,
                "present": s.present,
                "absent": s.absent,
                "total": s.total,
                "attendance_percent": _fmt_percent(s.percent),
            }
            for s in self.summary(subject=subject).students
        ]

    def rankings(self, *, subject: Optional[str] = None) -> list[dict]:
        return [
            {
                "rank": r.rank,
                "roll_no": r.roll_no,
                "name": r.name,
                "attendance_percent": _fmt_percent(r.percent),
            }
            for r in rank_students(self.summary(subject=subject).students)
        ]
