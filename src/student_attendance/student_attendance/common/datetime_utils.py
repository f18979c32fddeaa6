from __future__ import annotations

import re
from datetime import date, datetime

from ..core.constants import DATE_FORMAT

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_iso_date(value: str) -> bool:
    """True only for a literal YYYY-MM-DD string naming a real calendar day.

    strptime alone accepts "2024-1-1", so the literal shape is checked first.
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()
