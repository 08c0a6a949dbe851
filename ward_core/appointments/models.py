# ward_core/appointments/models.py
from django.db import models

from ward_core.common.models import TimeStampedModel


class AppointmentStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


class AppointmentType(models.TextChoices):
    ROUTINE = "routine", "Routine"
    URGENT = "urgent", "Urgent"


class Appointment(TimeStampedModel):
    specialty = models.CharField(max_length=128, db_index=True)
    status = models.CharField(
        max_length=16,
        choices=AppointmentStatus.choices,
        default=AppointmentStatus.PENDING,
        db_index=True,
    )
    appointment_type = models.CharField(
        max_length=16,
        choices=AppointmentType.choices,
        default=AppointmentType.ROUTINE,
    )

    patient_name = models.CharField(max_length=255)
    medical_number = models.CharField(max_length=64, db_index=True)
    notes = models.TextField(blank=True)

    class Meta:
        db_table = "appointments_appointment"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["specialty", "status"], name="appt_specialty_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Appointment({self.medical_number}, {self.specialty}, {self.status})"
