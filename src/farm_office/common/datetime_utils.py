from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def require_iso_date(value, field_name: str) -> str:
    """Validate a YYYY-MM-DD string and return it normalized.

    Work-log dates are kept as strings; in this format lexical and
    chronological order coincide.
    """
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    try:
        return parse_iso_date(str(value or "").strip()).strftime(DATE_FORMAT)
    except ValueError:
        raise ValidationError(f"{field_name} inválida (use AAAA-MM-DD)")

