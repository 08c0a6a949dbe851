# ward_core/admissions/tests/test_admission_service.py
from datetime import date, timedelta

import pytest
from django.utils import timezone

from ward_core.admissions.models import Admission
from ward_core.admissions.services import AdmissionService, date_of_birth_from_age
from ward_core.audit.models import AuditEvent
from ward_core.common.errors import ValidationError
from ward_core.patients.models import Patient

pytestmark = pytest.mark.django_db

FRIDAY = date(2024, 3, 1)


def test_admit_creates_patient_and_active_admission(admit, doctor):
    adm = admit(mrn="MRN-A-1", department="Pulmonology")

    assert adm.status == "active"
    assert adm.visit_number == 1
    assert adm.admitting_doctor_id == doctor.id
    assert adm.patient.mrn == "MRN-A-1"
    assert adm.patient.date_of_birth == date(timezone.localdate().year - 54, 1, 1)
    assert AuditEvent.objects.filter(event_code="admission.created", entity_id=adm.id).exists()
    assert AuditEvent.objects.filter(event_code="patient.created", entity_id=adm.patient_id).exists()


def test_friday_admission_with_weekend_opt_in(admit):
    adm = admit(mrn="MRN-A-2", admission_date=FRIDAY, use_weekend_shift=True)
    assert adm.shift_type == "weekend_morning"
    assert adm.is_weekend is True


def test_weekend_flag_is_derived_from_date(admit):
    adm = admit(mrn="MRN-A-3", admission_date=date(2024, 3, 4), shift_type="night")
    assert adm.is_weekend is False
    assert adm.shift_type == "night"

    adm.is_weekend = True
    adm.save()
    adm.refresh_from_db()
    assert adm.is_weekend is False


def test_missing_doctor_is_rejected_before_any_write(admit):
    with pytest.raises(ValidationError) as exc:
        admit(mrn="MRN-A-4", admitting_doctor_id=None)

    assert exc.value.message == "Please select an assigned doctor"
    assert not Patient.objects.filter(mrn="MRN-A-4").exists()


def test_unknown_doctor_is_rejected(admit):
    with pytest.raises(ValidationError):
        admit(mrn="MRN-A-5", admitting_doctor_id=999999)


@pytest.mark.parametrize("age", [-1, 151, "abc"])
def test_out_of_range_age_is_rejected(admit, age):
    with pytest.raises(ValidationError):
        admit(mrn="MRN-A-6", age=age)
    assert not Patient.objects.filter(mrn="MRN-A-6").exists()


def test_unknown_department_is_rejected(admit):
    with pytest.raises(ValidationError):
        admit(mrn="MRN-A-7", department="Cardiac Surgery")


def test_invalid_admission_date_is_rejected(admit):
    with pytest.raises(ValidationError):
        admit(mrn="MRN-A-8", admission_date="31/12/2024")
    assert not Patient.objects.filter(mrn="MRN-A-8").exists()


def test_second_active_admission_is_blocked(admit):
    admit(mrn="MRN-A-9")
    with pytest.raises(ValidationError):
        admit(mrn="MRN-A-9")
    assert Admission.objects.filter(patient__mrn="MRN-A-9").count() == 1


def test_readmission_increments_visit_number(admit, user):
    first = admit(mrn="MRN-A-10", days_ago=20)
    AdmissionService.discharge(
        admission_id=first.id,
        actor_user_id=user.id,
        discharge_date=timezone.localdate() - timedelta(days=2),
    )

    second = admit(mrn="MRN-A-10", days_ago=1)
    assert second.visit_number == 2
    assert second.patient_id == first.patient_id

    latest = Patient.objects.get(mrn="MRN-A-10").admissions.all()[0]
    assert latest.id == second.id


def test_discharge_is_terminal(admit, user):
    adm = admit(mrn="MRN-A-11", days_ago=3)
    out = AdmissionService.discharge(admission_id=adm.id, actor_user_id=user.id)
    assert out.status == "discharged"
    assert out.discharge_date == timezone.localdate()

    with pytest.raises(ValidationError):
        AdmissionService.discharge(admission_id=adm.id, actor_user_id=user.id)


def test_discharge_before_admission_is_rejected(admit, user):
    adm = admit(mrn="MRN-A-12", days_ago=1)
    with pytest.raises(ValidationError):
        AdmissionService.discharge(
            admission_id=adm.id,
            actor_user_id=user.id,
            discharge_date=timezone.localdate() - timedelta(days=5),
        )


def test_date_of_birth_from_age():
    assert date_of_birth_from_age(30, reference=date(2024, 6, 1)) == date(1994, 1, 1)
    assert date_of_birth_from_age("0", reference=date(2024, 6, 1)) == date(2024, 1, 1)


def test_readmission_before_previous_discharge_is_rejected(admit, user):
    first = admit(mrn="MRN-A-13", days_ago=3)
    AdmissionService.discharge(admission_id=first.id, actor_user_id=user.id)

    with pytest.raises(ValidationError) as exc:
        admit(mrn="MRN-A-13", days_ago=10)

    assert "previous discharge" in exc.value.message
    assert Admission.objects.filter(patient_id=first.patient_id).count() == 1


def test_readmission_on_discharge_day_is_allowed(admit, user):
    first = admit(mrn="MRN-A-14", days_ago=3)
    AdmissionService.discharge(admission_id=first.id, actor_user_id=user.id)

    second = admit(mrn="MRN-A-14", days_ago=0)

    assert second.visit_number == 2
    assert second.admission_date == timezone.localdate()


def test_non_numeric_doctor_id_is_a_validation_error(admit):
    with pytest.raises(ValidationError) as exc:
        admit(mrn="MRN-A-15", admitting_doctor_id="abc")

    assert exc.value.detail == {"admitting_doctor_id": "abc"}
    assert not Patient.objects.filter(mrn="MRN-A-15").exists()
