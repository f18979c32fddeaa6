from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class StudentMetrics:
    """Read-model: attendance totals for one current roster student."""

    roll_no: str
    name: str
    course: str
    present: int = 0
    absent: int = 0
    total: int = 0

    @property
    def percent(self) -> float:
        return (self.present / self.total) * 100 if self.total > 0 else 0.0


@dataclass(frozen=True)
class DayRate:
    date: str
    rate: float


@dataclass(frozen=True)
class MetricsSummary:
    total_classes: int
    avg_attendance: float
    best_day: Optional[DayRate]
    worst_day: Optional[DayRate]
    daily_rates: dict[str, float] = field(default_factory=dict)
    students: list[StudentMetrics] = field(default_factory=list)


@dataclass(frozen=True)
class RankedStudent:
    rank: int
    roll_no: str
    name: str
    percent: float
