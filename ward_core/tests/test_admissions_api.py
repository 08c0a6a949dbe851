# ward_core/tests/test_admissions_api.py
import pytest

pytestmark = pytest.mark.django_db

URL = "/api/v1/admissions/classify-shift/"


def test_friday_with_weekend_opt_in(api_client):
    r = api_client.post(URL, {"admission_date": "2024-03-01", "use_weekend_shift": True}, format="json")

    assert r.status_code == 200, r.data
    assert r.data == {
        "shift_type": "weekend_morning",
        "shift_label": "Weekend Day (7:00 - 19:00)",
        "is_weekend": True,
        "use_weekend_shift": True,
        "weekend_message": "Friday admission",
    }


def test_weekday_forces_opt_in_off(api_client):
    r = api_client.post(
        URL,
        {"admission_date": "2024-03-04", "use_weekend_shift": True, "shift_type": "weekend_night"},
        format="json",
    )

    assert r.data["shift_type"] == "morning"
    assert r.data["use_weekend_shift"] is False
    assert r.data["is_weekend"] is False
    assert r.data["weekend_message"] == ""


def test_bad_date_uses_error_envelope(api_client):
    r = api_client.post(URL, {"admission_date": "not-a-date"}, format="json")

    assert r.status_code == 400
    assert r.data["error"]["code"] == "validation_error"
