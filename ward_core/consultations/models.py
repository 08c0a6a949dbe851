# ward_core/consultations/models.py
from django.conf import settings
from django.db import models

from ward_core.common.models import TimeStampedModel


class ConsultationStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    CLOSED = "closed", "Closed"


class Urgency(models.TextChoices):
    ROUTINE = "routine", "Routine"
    URGENT = "urgent", "Urgent"
    EMERGENCY = "emergency", "Emergency"


class Consultation(TimeStampedModel):
    """
    Specialty consultation request raised by another department.
    Patient fields are denormalized; the requester may not have a ward patient record.
    """
    consultation_specialty = models.CharField(max_length=128, db_index=True)
    requesting_department = models.CharField(max_length=128, blank=True)
    status = models.CharField(
        max_length=16,
        choices=ConsultationStatus.choices,
        default=ConsultationStatus.ACTIVE,
        db_index=True,
    )
    urgency = models.CharField(max_length=16, choices=Urgency.choices, default=Urgency.ROUTINE)

    patient_name = models.CharField(max_length=255)
    mrn = models.CharField(max_length=64, db_index=True)
    age = models.PositiveIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=16, blank=True)

    doctor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="consultations",
        null=True,
        blank=True,
    )
    doctor_name = models.CharField(max_length=255, blank=True)
    reason = models.TextField(blank=True)

    class Meta:
        db_table = "consultations_consultation"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["consultation_specialty", "status"], name="consult_specialty_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Consultation({self.mrn}, {self.consultation_specialty}, {self.status})"
