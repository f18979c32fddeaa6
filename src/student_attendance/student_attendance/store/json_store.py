from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..core.constants import DEFAULT_SUBJECT, JSON_INDENT
from ..core.exceptions import PersistenceError
from .model import AttendanceDocument

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """Keeps the attendance document in one pretty-printed JSON file.

    The file is read once and cached; every save rewrites the whole file.
    There is no locking: two callers that load, mutate and save concurrently
    get last-writer-wins.
    """

    def __init__(self, path: Union[str, Path], *, default_subject: str = DEFAULT_SUBJECT):
        self._path = Path(path)
        self._default_subject = default_subject
        self._cache: Optional[AttendanceDocument] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def default_subject(self) -> str:
        return self._default_subject

    def load(self) -> AttendanceDocument:
        if self._cache is None:
            self._cache = self._read()
        return self._cache.copy()

    def save(self, doc: AttendanceDocument) -> None:
        try:
            payload = json.dumps(doc.to_dict(), ensure_ascii=False, indent=JSON_INDENT) + "\n"
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Could not serialize attendance data: {e}") from e

        tmp_name: Optional[str] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            logger.error("Failed to save attendance data to %s: %s", self._path, e)
            raise PersistenceError("Failed to save attendance data") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        self._cache = doc.copy()
        logger.info(
            "Saved %d students and %d attendance buckets to %s",
            len(doc.students),
            sum(1 for _ in doc.iter_buckets()),
            self._path,
        )

    def _read(self) -> AttendanceDocument:
        if not self._path.exists():
            logger.info("No data file at %s, starting with an empty document", self._path)
            return self._initial_document()

        try:
            raw = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Data file %s is not valid UTF-8 (%s), replacing it with an empty document", self._path, e)
            return self._initial_document()
        except OSError as e:
            # Serve an empty document but leave the unreadable file alone.
            logger.error("Could not read data file %s (%s), starting with an empty document", self._path, e)
            return AttendanceDocument.empty()

        try:
            doc = AttendanceDocument.from_dict(json.loads(raw), default_subject=self._default_subject)
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            logger.warning(
                "Could not parse %s (%s), replacing it with an empty document. Raw content: %r",
                self._path,
                e,
                raw,
            )
            return self._initial_document()

        logger.info(
            "Loaded %d students and %d attendance buckets from %s",
            len(doc.students),
            sum(1 for _ in doc.iter_buckets()),
            self._path,
        )
        return doc

    def _initial_document(self) -> AttendanceDocument:
        doc = AttendanceDocument.empty()
        try:
            self.save(doc)
        except PersistenceError:
            # Keep serving the empty document; the next successful save creates the file.
            logger.exception("Could not write initial data file %s", self._path)
        return doc
