# ward_core/admissions/tests/test_stay_duration.py
from datetime import date, datetime, timedelta, timezone as dt_timezone

from django.utils import timezone

from ward_core.admissions.stay import duration_days, is_long_stay

TODAY = date(2024, 3, 10)


def test_same_day_is_zero():
    assert duration_days(TODAY, TODAY) == 0


def test_seven_days():
    assert duration_days(TODAY - timedelta(days=7), TODAY) == 7


def test_future_admission_is_negative():
    assert duration_days(TODAY + timedelta(days=2), TODAY) == -2


def test_long_stay_threshold_boundary():
    assert is_long_stay(TODAY - timedelta(days=6), TODAY) is True
    assert is_long_stay(TODAY - timedelta(days=5), TODAY) is False


def test_whole_calendar_days_ignore_time_of_day():
    reference = datetime(2024, 3, 10, 0, 5, tzinfo=dt_timezone.utc)
    assert duration_days("2024-03-09", reference) == 1


def test_threshold_override_and_setting(settings):
    assert is_long_stay(TODAY - timedelta(days=3), TODAY, threshold_days=3) is True

    settings.WARD_LONG_STAY_THRESHOLD_DAYS = 10
    assert is_long_stay(TODAY - timedelta(days=6), TODAY) is False


def test_reference_defaults_to_now():
    assert duration_days(timezone.localdate()) == 0
    assert is_long_stay(timezone.localdate() - timedelta(days=8)) is True
