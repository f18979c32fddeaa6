from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..store.model import AttendanceDocument
from .model import DayRate, MetricsSummary, RankedStudent, StudentMetrics


def compute_metrics(doc: AttendanceDocument, *, subject: Optional[str] = None) -> MetricsSummary:
    """Aggregate every bucket of `doc` (or of one subject).

    Entries whose roll_no is no longer on the roster are ignored. Buckets of
    different subjects on the same date count towards the same day.
    """
    per_student = {s.roll_no: StudentMetrics(roll_no=s.roll_no, name=s.name, course=s.course) for s in doc.students}
    day_present: dict[str, int] = {}
    day_valid: dict[str, int] = {}
    total_classes = 0

    for _, day, entries in doc.iter_buckets(subject):
        total_classes += 1
        day_present.setdefault(day, 0)
        day_valid.setdefault(day, 0)
        for entry in entries:
            m = per_student.get(entry.roll_no)
            if m is None:
                continue
            day_valid[day] += 1
            if entry.is_present:
                day_present[day] += 1
                per_student[entry.roll_no] = replace(m, present=m.present + 1, total=m.total + 1)
            else:
                per_student[entry.roll_no] = replace(m, absent=m.absent + 1, total=m.total + 1)

    days = sorted(day_valid)
    daily_rates = {
        day: (day_present[day] / day_valid[day]) * 100 if day_valid[day] > 0 else 0.0 for day in days
    }

    # max/min keep the first of equal values, so the earliest date wins ties.
    rated = [DayRate(date=day, rate=daily_rates[day]) for day in days if day_valid[day] > 0]
    best_day = max(rated, key=lambda d: d.rate) if rated else None
    worst_day = min(rated, key=lambda d: d.rate) if rated else None

    total_valid = sum(day_valid.values())
    total_present = sum(day_present.values())
    avg_attendance = (total_present / total_valid) * 100 if total_valid > 0 else 0.0

    return MetricsSummary(
        total_classes=total_classes,
        avg_attendance=avg_attendance,
        best_day=best_day,
        worst_day=worst_day,
        daily_rates=daily_rates,
        students=list(per_student.values()),
    )


def rank_students(students: Sequence[StudentMetrics]) -> list[RankedStudent]:
    """Standard competition ranking: 90, 90, 80 -> 1, 1, 3.

    Ordered by percentage descending, then name ascending.
    """
    ordered = sorted(students, key=lambda s: (-s.percent, s.name))

    ranked: list[RankedStudent] = []
    rank = 0
    last_percent: Optional[float] = None
    for position, s in enumerate(ordered, start=1):
        if s.percent != last_percent:
            rank = position
            last_percent = s.percent
        ranked.append(RankedStudent(rank=rank, roll_no=s.roll_no, name=s.name, percent=s.percent))
    return ranked
