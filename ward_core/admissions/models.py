# ward_core/admissions/models.py
from django.conf import settings
from django.db import models
from django.db.models import Q

from ward_core.admissions.constants import AdmissionStatus, SafetyType, ShiftType
from ward_core.admissions.shifts import is_weekend_day
from ward_core.common.models import TimeStampedModel
from ward_core.patients.models import Patient


class Admission(TimeStampedModel):
    """
    One inpatient stay. Created active, later discharged (terminal).
    """
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="admissions")

    admitting_doctor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="admissions",
    )
    department = models.CharField(max_length=128, db_index=True)
    status = models.CharField(
        max_length=16,
        choices=AdmissionStatus.choices,
        default=AdmissionStatus.ACTIVE,
        db_index=True,
    )

    admission_date = models.DateField(db_index=True)
    discharge_date = models.DateField(null=True, blank=True)
    diagnosis = models.TextField(blank=True)

    visit_number = models.PositiveIntegerField(default=1)
    shift_type = models.CharField(max_length=32, choices=ShiftType.choices, default=ShiftType.MORNING)
    # derived from admission_date on every save
    is_weekend = models.BooleanField(default=False, editable=False)
    safety_type = models.CharField(max_length=16, choices=SafetyType.choices, null=True, blank=True)

    class Meta:
        db_table = "admissions_admission"
        # per patient, visit_number is the recency order
        ordering = ["-visit_number"]
        indexes = [
            models.Index(fields=["department", "status"], name="admissions_dept_status_idx"),
            models.Index(fields=["patient", "visit_number"], name="admissions_patient_visit_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["patient"],
                condition=Q(status=AdmissionStatus.ACTIVE),
                name="uq_active_admission_per_patient",
            ),
            models.UniqueConstraint(
                fields=["patient", "visit_number"],
                name="uq_admission_visit_number_per_patient",
            ),
        ]

    def save(self, *args, **kwargs):
        self.is_weekend = is_weekend_day(self.admission_date)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "admission_date" in update_fields:
            kwargs["update_fields"] = {*update_fields, "is_weekend"}
        return super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"Admission({self.patient_id}, #{self.visit_number}, {self.status})"
