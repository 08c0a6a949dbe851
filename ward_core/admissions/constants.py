# ward_core/admissions/constants.py
from django.db import models


class AdmissionStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    DISCHARGED = "discharged", "Discharged"


class ShiftType(models.TextChoices):
    MORNING = "morning", "Morning"
    EVENING = "evening", "Evening"
    NIGHT = "night", "Night"
    WEEKEND_MORNING = "weekend_morning", "Weekend Day (7:00 - 19:00)"
    WEEKEND_NIGHT = "weekend_night", "Weekend Night (19:00 - 7:00)"


class SafetyType(models.TextChoices):
    EMERGENCY = "emergency", "Emergency"
    OBSERVATION = "observation", "Observation"
    SHORT_STAY = "short-stay", "Short Stay"


WEEKDAY_SHIFTS = frozenset({ShiftType.MORNING, ShiftType.EVENING, ShiftType.NIGHT})
WEEKEND_SHIFTS = frozenset({ShiftType.WEEKEND_MORNING, ShiftType.WEEKEND_NIGHT})

# Day numbering used by shift rules: 0=Sunday .. 6=Saturday.
# Friday and Saturday admissions are eligible for the weekend rota.
DEFAULT_WEEKEND_DAYS = frozenset({5, 6})
DEFAULT_LONG_STAY_THRESHOLD_DAYS = 6

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

DEPARTMENTS = (
    "Internal Medicine",
    "Pulmonology",
    "Neurology",
    "Gastroenterology",
    "Rheumatology",
    "Endocrinology",
    "Hematology",
    "Infectious Disease",
    "Thrombosis Medicine",
    "Immunology & Allergy",
)

MIN_AGE = 0
MAX_AGE = 150
