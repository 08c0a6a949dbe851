# ward_core/admissions/stay.py
from __future__ import annotations

from django.conf import settings
from django.utils import timezone

from ward_core.admissions.constants import DEFAULT_LONG_STAY_THRESHOLD_DAYS
from ward_core.common.dates import as_local_date


def long_stay_threshold_days() -> int:
    return int(getattr(settings, "WARD_LONG_STAY_THRESHOLD_DAYS", DEFAULT_LONG_STAY_THRESHOLD_DAYS))


def duration_days(admission_date, reference=None) -> int:
    """
    Whole calendar days from admission_date to reference (default: now).
    Same day is 0; an admission dated after the reference is negative.
    """
    ref = as_local_date(reference if reference is not None else timezone.now(), field="reference")
    start = as_local_date(admission_date, field="admission_date")
    return (ref - start).days


def is_long_stay(admission_date, reference=None, threshold_days: int | None = None) -> bool:
    """
    True once the stay reaches the threshold.

    Status-agnostic: only call it for active admissions.
    """
    threshold = long_stay_threshold_days() if threshold_days is None else threshold_days
    return duration_days(admission_date, reference) >= threshold
