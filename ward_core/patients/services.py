# ward_core/patients/services.py
from __future__ import annotations

from datetime import date

from django.db import IntegrityError, transaction

from ward_core.audit.services import AuditService
from ward_core.common.errors import ValidationError
from ward_core.patients.models import Patient


class PatientService:
    @staticmethod
    @transaction.atomic
    def register(
        *,
        actor_user_id: int | None,
        mrn: str,
        name: str,
        gender: str = "",
        date_of_birth: date | None = None,
    ) -> tuple[Patient, bool]:
        """
        Return the patient for this MRN, creating it on first admission.
        The second element is True when a new record was written.
        """
        mrn = (mrn or "").strip()
        name = (name or "").strip()
        if not mrn:
            raise ValidationError("MRN is required.", detail={"mrn": mrn})
        if not name:
            raise ValidationError("Patient name is required.", detail={"name": name})

        existing = Patient.objects.select_for_update().filter(mrn=mrn).first()
        if existing is not None:
            return existing, False

        try:
            patient = Patient.objects.create(
                mrn=mrn,
                name=name,
                gender=gender or "",
                date_of_birth=date_of_birth,
            )
        except IntegrityError:
            # MRN uniqueness is enforced by constraint; surface readable error.
            raise ValidationError("MRN already exists.", detail={"mrn": mrn})

        AuditService.log(
            event_code="patient.created",
            entity_type="Patient",
            entity_id=patient.id,
            actor_user_id=actor_user_id,
            metadata={"mrn": mrn},
        )
        return patient, True
