# ward_core/tests/test_census_api.py
import pytest

from ward_core.appointments.models import Appointment
from ward_core.consultations.models import Consultation

pytestmark = pytest.mark.django_db


@pytest.fixture
def ward(admit, other_doctor):
    long_stay = admit(mrn="N-1", name="Long Stayer", days_ago=8, safety_type="emergency")
    admit(mrn="N-2", name="New Arrival", days_ago=1, admitting_doctor_id=other_doctor.id)
    admit(mrn="H-1", name="Blood Work", department="Hematology", days_ago=2)
    Consultation.objects.create(consultation_specialty="Neurology", patient_name="Consult Me", mrn="C-1")
    Appointment.objects.create(specialty="Neurology", patient_name="Clinic Visit", medical_number="A-1")
    return long_stay


def test_rollup_for_specialty(api_client, ward):
    r = api_client.get("/api/v1/census/", {"specialty": "Neurology"})

    assert r.status_code == 200, r.data
    assert r.data["count"] == 2
    assert [p["mrn"] for p in r.data["long_stay_patients"]] == ["N-1"]
    assert r.data["safety_type_counts"] == {"emergency": 1, "observation": 0, "short-stay": 0}
    assert r.data["pending_consultations"] == 1
    assert r.data["upcoming_appointments"][0]["medical_number"] == "A-1"
    assert r.data["applied_filter"] == {"specialty": "Neurology", "doctor_id": None, "date_range": None}


def test_rollup_doctor_filter(api_client, ward, other_doctor):
    r = api_client.get("/api/v1/census/", {"doctor_id": other_doctor.id})
    assert [p["mrn"] for p in r.data["active_patients"]] == ["N-2"]


def test_rollup_rejects_half_date_range(api_client, ward):
    r = api_client.get("/api/v1/census/", {"start": "2024-03-01"})
    assert r.status_code == 400
    assert r.data["error"]["code"] == "validation_error"


def test_specialty_grid(api_client, ward):
    r = api_client.get("/api/v1/census/specialties/")

    assert r.status_code == 200
    cards = {c["name"]: c for c in r.data}
    assert len(cards) == 11
    assert cards["Neurology"]["active_count"] == 2
    assert cards["Neurology"]["long_stay_count"] == 1
    assert cards["Hematology"]["active_count"] == 1
    assert cards["Safety Admission"]["active_count"] == 0


def test_long_stay_report(api_client, ward):
    r = api_client.get("/api/v1/census/long-stay/")

    assert r.status_code == 200
    rows = r.data["rows"]
    assert len(rows) == 1
    assert rows[0]["patient"]["mrn"] == "N-1"
    assert rows[0]["stay_days"] == 8
    assert rows[0]["admission"]["is_long_stay"] is True


def test_share_patient(api_client, ward):
    r = api_client.get("/api/v1/census/share/", {"kind": "patient", "id": ward.patient_id})

    assert r.status_code == 200
    assert r.data["kind"] == "patient"
    assert r.data["text"].startswith("Patient: Long Stayer\nMRN: N-1\n")


def test_share_unknown_kind_and_missing_item(api_client, ward):
    bad_kind = api_client.get("/api/v1/census/share/", {"kind": "invoice", "id": 1})
    assert bad_kind.status_code == 400

    missing = api_client.get("/api/v1/census/share/", {"kind": "appointment", "id": 999999})
    assert missing.status_code == 404
