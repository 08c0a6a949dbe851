# ward_core/common/dates.py
from __future__ import annotations

from datetime import date, datetime

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from ward_core.common.errors import ValidationError


def as_local_date(value, *, field: str = "date") -> date:
    """
    Normalize a date-ish value to a calendar date in the active timezone.

    Accepts date, datetime (aware or naive) and ISO-8601 strings.
    Raises ValidationError for anything else.
    """
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        raw = value.strip()
        try:
            parsed_date = parse_date(raw)
            if parsed_date:
                return parsed_date
            parsed_dt = parse_datetime(raw)
        except ValueError:
            # well formatted but out of range, e.g. 2024-02-30
            parsed_date = parsed_dt = None
        if parsed_dt:
            return as_local_date(parsed_dt, field=field)

    raise ValidationError(
        f"{field} is invalid. Use an ISO date (YYYY-MM-DD).",
        detail={field: str(value)},
    )


def today() -> date:
    return timezone.localdate()
