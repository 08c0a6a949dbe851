# ward_core/longstay/models.py
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from ward_core.common.models import TimeStampedModel
from ward_core.patients.models import Patient


class LongStayNote(TimeStampedModel):
    """
    Append-only note on a long-stay patient.
    Ordering authority is the server-assigned created_at, then id.
    """
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="long_stay_notes")
    content = models.TextField()
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="long_stay_notes",
    )

    class Meta:
        db_table = "longstay_note"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["patient", "created_at"], name="longstay_patient_created_idx"),
        ]

    def __str__(self) -> str:
        return f"LongStayNote({self.patient_id} @ {self.created_at})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("LongStayNote is immutable and cannot be modified once created.")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("LongStayNote is immutable and cannot be deleted.")
