# ward_core/patients/models.py
from django.db import models

from ward_core.common.models import TimeStampedModel


class Gender(models.TextChoices):
    MALE = "male", "Male"
    FEMALE = "female", "Female"


class Patient(TimeStampedModel):
    """
    Ward patient. Admissions hang off the patient, most recent first.
    """
    mrn = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=255)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=16, choices=Gender.choices, blank=True)

    class Meta:
        db_table = "patients_patient"
        indexes = [
            models.Index(fields=["name"], name="patients_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.mrn})"
