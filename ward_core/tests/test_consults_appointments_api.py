# ward_core/tests/test_consults_appointments_api.py
import pytest

from ward_core.appointments.models import Appointment
from ward_core.consultations.models import Consultation

pytestmark = pytest.mark.django_db


def test_consultations_filter_by_specialty_and_status(api_client):
    Consultation.objects.create(consultation_specialty="Neurology", patient_name="A", mrn="C-1")
    Consultation.objects.create(consultation_specialty="Neurology", patient_name="B", mrn="C-2", status="closed")
    Consultation.objects.create(consultation_specialty="Hematology", patient_name="C", mrn="C-3")

    r = api_client.get("/api/v1/consultations/", {"consultation_specialty": "Neurology", "status": "active"})

    assert r.status_code == 200, r.data
    assert r.data["count"] == 1
    assert r.data["results"][0]["mrn"] == "C-1"


def test_consultations_are_read_only(api_client):
    r = api_client.post("/api/v1/consultations/", {"patient_name": "X"}, format="json")
    assert r.status_code == 405


def test_appointments_filter_by_status(api_client):
    Appointment.objects.create(specialty="Neurology", patient_name="A", medical_number="A-1")
    Appointment.objects.create(specialty="Neurology", patient_name="B", medical_number="A-2", status="completed")

    r = api_client.get("/api/v1/appointments/", {"status": "pending"})

    assert r.status_code == 200
    assert [a["medical_number"] for a in r.data["results"]] == ["A-1"]
