# ward_core/admissions/services.py
from __future__ import annotations

import logging
from datetime import date

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from ward_core.admissions.constants import (
    DEPARTMENTS,
    MAX_AGE,
    MIN_AGE,
    AdmissionStatus,
    SafetyType,
)
from ward_core.admissions.models import Admission
from ward_core.admissions.shifts import classify
from ward_core.audit.services import AuditService
from ward_core.common.dates import as_local_date, today
from ward_core.common.errors import ValidationError
from ward_core.patients.models import Gender
from ward_core.patients.services import PatientService

logger = logging.getLogger(__name__)


def admitting_departments() -> tuple[str, ...]:
    return tuple(getattr(settings, "WARD_DEPARTMENTS", DEPARTMENTS))


def date_of_birth_from_age(age, *, reference: date | None = None) -> date:
    """
    Ward intake records age only; date of birth is stored as Jan 1 of the birth year.
    """
    try:
        years = int(str(age).strip())
    except (TypeError, ValueError):
        raise ValidationError("Age must be a whole number.", detail={"age": age})

    if years < MIN_AGE or years > MAX_AGE:
        raise ValidationError(
            f"Age must be between {MIN_AGE} and {MAX_AGE}.",
            detail={"age": years},
        )

    ref = reference or today()
    return date(ref.year - years, 1, 1)


def _validate_doctor(admitting_doctor_id) -> int:
    if not admitting_doctor_id:
        raise ValidationError("Please select an assigned doctor", detail={"admitting_doctor_id": admitting_doctor_id})

    try:
        doctor_id = int(admitting_doctor_id)
    except (TypeError, ValueError):
        raise ValidationError(
            "admitting_doctor_id is invalid. Use an integer.",
            detail={"admitting_doctor_id": admitting_doctor_id},
        )

    User = get_user_model()
    if not User.objects.filter(id=doctor_id, is_active=True).exists():
        raise ValidationError(
            "Assigned doctor does not exist or is inactive.",
            detail={"admitting_doctor_id": admitting_doctor_id},
        )
    return doctor_id


class AdmissionService:
    @staticmethod
    @transaction.atomic
    def admit(
        *,
        actor_user_id: int | None,
        mrn: str,
        name: str,
        age,
        gender: str,
        admission_date,
        department: str,
        admitting_doctor_id: int | None,
        diagnosis: str = "",
        use_weekend_shift: bool = False,
        shift_type: str | None = None,
        safety_type: str | None = None,
    ) -> Admission:
        """
        Admit a patient (new or returning, matched by MRN).

        Everything is validated before the first write:
        doctor assignment, age, department, safety type, shift classification.
        """
        doctor_id = _validate_doctor(admitting_doctor_id)
        date_of_birth = date_of_birth_from_age(age)
        adm_date = as_local_date(admission_date, field="admission_date")

        if department not in admitting_departments():
            raise ValidationError(
                f"Unknown department '{department}'.",
                detail={"department": department, "allowed": list(admitting_departments())},
            )

        if gender and gender not in Gender.values:
            raise ValidationError(f"Unknown gender '{gender}'.", detail={"gender": gender})

        safety = safety_type or None
        if safety is not None and safety not in SafetyType.values:
            raise ValidationError(
                f"Unknown safety type '{safety}'.",
                detail={"safety_type": safety, "allowed": list(SafetyType.values)},
            )

        shift = classify(adm_date, use_weekend_shift, shift_type)

        patient, created = PatientService.register(
            actor_user_id=actor_user_id,
            mrn=mrn,
            name=name,
            gender=gender,
            date_of_birth=date_of_birth,
        )

        if Admission.objects.filter(patient=patient, status=AdmissionStatus.ACTIVE).exists():
            raise ValidationError(
                "Patient already has an active admission.",
                detail={"mrn": patient.mrn},
            )

        last = Admission.objects.filter(patient=patient).order_by("-visit_number").first()
        last_visit = last.visit_number if last is not None else 0

        if last is not None and last.discharge_date and adm_date < last.discharge_date:
            raise ValidationError(
                "Readmission date cannot be before the previous discharge date.",
                detail={
                    "mrn": patient.mrn,
                    "admission_date": str(adm_date),
                    "previous_discharge_date": str(last.discharge_date),
                },
            )

        try:
            admission = Admission.objects.create(
                patient=patient,
                admitting_doctor_id=doctor_id,
                department=department,
                status=AdmissionStatus.ACTIVE,
                admission_date=adm_date,
                diagnosis=diagnosis or "",
                visit_number=last_visit + 1,
                shift_type=shift.shift_type,
                safety_type=safety,
            )
        except IntegrityError:
            raise ValidationError(
                "Patient already has an active admission.",
                detail={"mrn": patient.mrn},
            )

        AuditService.log(
            event_code="admission.created",
            entity_type="Admission",
            entity_id=admission.id,
            actor_user_id=actor_user_id,
            metadata={
                "patient_id": patient.id,
                "department": department,
                "visit_number": admission.visit_number,
                "shift_type": admission.shift_type,
                "new_patient": created,
            },
        )
        logger.info(
            "admitted patient %s (visit %s) to %s, shift=%s",
            patient.mrn,
            admission.visit_number,
            department,
            admission.shift_type,
        )
        return admission

    @staticmethod
    @transaction.atomic
    def discharge(
        *,
        admission_id: int,
        actor_user_id: int | None,
        discharge_date=None,
    ) -> Admission:
        admission = Admission.objects.select_for_update().get(id=admission_id)

        if admission.status != AdmissionStatus.ACTIVE:
            raise ValidationError(
                "Only active admissions can be discharged.",
                detail={"admission_id": admission.id, "status": admission.status},
            )

        out_date = as_local_date(discharge_date, field="discharge_date") if discharge_date else today()
        if out_date < admission.admission_date:
            raise ValidationError(
                "Discharge date cannot be before the admission date.",
                detail={"admission_date": str(admission.admission_date), "discharge_date": str(out_date)},
            )

        admission.status = AdmissionStatus.DISCHARGED
        admission.discharge_date = out_date
        admission.save(update_fields=["status", "discharge_date", "updated_at"])

        AuditService.log(
            event_code="admission.discharged",
            entity_type="Admission",
            entity_id=admission.id,
            actor_user_id=actor_user_id,
            metadata={"patient_id": admission.patient_id, "discharge_date": str(out_date)},
        )
        logger.info("discharged admission %s (patient %s)", admission.id, admission.patient_id)
        return admission

    @staticmethod
    def active_admission_for(*, patient_id: int) -> Admission:
        try:
            return Admission.objects.get(patient_id=patient_id, status=AdmissionStatus.ACTIVE)
        except Admission.DoesNotExist:
            raise ValidationError("Patient has no active admission.", detail={"patient_id": patient_id})
