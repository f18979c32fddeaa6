from __future__ import annotations

from typing import Protocol

from .model import AttendanceDocument


class DocumentStore(Protocol):
    """Repository interface for the attendance document.

    Note (DIP): services depend on this interface, not on the JSON file store.
    """

    def load(self) -> AttendanceDocument:
        """Return a private copy of the current document.

        Callers may mutate the copy freely; nothing changes until `save()`.
        """

        raise NotImplementedError

    def save(self, doc: AttendanceDocument) -> None:
        """Persist the whole document, raising PersistenceError on failure."""

        raise NotImplementedError
