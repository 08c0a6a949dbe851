# ward_core/admissions/shifts.py
"""
Shift classification for admissions.

`classify` is a pure reducer over (admission date, weekend opt-in, current
shift). Callers re-run it whenever the date or the opt-in changes and keep
only its output; it never looks at a previous classification.
"""
from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings

from ward_core.admissions.constants import (
    DAY_NAMES,
    DEFAULT_WEEKEND_DAYS,
    WEEKDAY_SHIFTS,
    WEEKEND_SHIFTS,
    ShiftType,
)
from ward_core.common.dates import as_local_date
from ward_core.common.errors import ValidationError


@dataclass(frozen=True)
class ShiftClassification:
    shift_type: str
    is_weekend: bool
    use_weekend_shift: bool


def weekend_days() -> frozenset[int]:
    configured = getattr(settings, "WARD_WEEKEND_DAYS", None)
    if configured is None:
        return DEFAULT_WEEKEND_DAYS
    return frozenset(int(d) for d in configured)


def day_of_week(value) -> int:
    """0=Sunday .. 6=Saturday."""
    d = as_local_date(value, field="admission_date")
    # date.weekday() is 0=Monday
    return (d.weekday() + 1) % 7


def is_weekend_day(value) -> bool:
    return day_of_week(value) in weekend_days()


def _resolve_current(current_shift_type) -> str | None:
    if current_shift_type in (None, ""):
        return None
    value = str(current_shift_type)
    if value not in ShiftType.values:
        raise ValidationError(
            f"Unknown shift type '{value}'.",
            detail={"shift_type": value, "allowed": list(ShiftType.values)},
        )
    return value


def classify(admission_date, use_weekend_shift: bool, current_shift_type=None) -> ShiftClassification:
    """
    Derive (shift_type, is_weekend, use_weekend_shift) for an admission.

    - Weekday admission: opt-in is forced off, weekend shifts fall back to
      morning, weekday shifts are kept.
    - Weekend admission with opt-in: weekend_morning or weekend_night
      (weekend_morning unless the current value already is a weekend shift).
    - Weekend admission without opt-in: weekday rules, is_weekend stays True.

    Raises ValidationError for an unparseable date or unknown shift type.
    """
    weekend = is_weekend_day(admission_date)
    current = _resolve_current(current_shift_type)

    if weekend and use_weekend_shift:
        shift = current if current in WEEKEND_SHIFTS else ShiftType.WEEKEND_MORNING.value
        return ShiftClassification(shift_type=shift, is_weekend=True, use_weekend_shift=True)

    shift = current if current in WEEKDAY_SHIFTS else ShiftType.MORNING.value
    return ShiftClassification(shift_type=shift, is_weekend=weekend, use_weekend_shift=False)


def shift_label(shift_type: str) -> str:
    if shift_type in WEEKEND_SHIFTS:
        return ShiftType(shift_type).label
    return shift_type


def weekend_message(admission_date) -> str:
    dow = day_of_week(admission_date)
    if dow in weekend_days():
        return f"{DAY_NAMES[dow]} admission"
    return ""
