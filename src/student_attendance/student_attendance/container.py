from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SUBJECT
from .metrics.service import MetricsService
from .roster.service import RosterService
from .store.json_store import JsonDocumentStore
from .store.repository import DocumentStore


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    roster_service: RosterService
    attendance_service: AttendanceService
    metrics_service: MetricsService


def build_container(*, data_file: str, default_subject: str = DEFAULT_SUBJECT) -> Container:
    """Build the store and services once per process.

    The document is loaded eagerly so a missing or corrupt data file is
    replaced at startup, not on the first request.
    """
    store = JsonDocumentStore(data_file, default_subject=default_subject)
    store.load()

    return Container(
        store=store,
        roster_service=RosterService(store),
        attendance_service=AttendanceService(store, default_subject=default_subject),
        metrics_service=MetricsService(store),
    )
