# ward_core/census/constants.py
from ward_core.admissions.constants import DEPARTMENTS, SafetyType

# Census cards: every admitting department plus the safety admission unit.
SPECIALTIES = DEPARTMENTS + ("Safety Admission",)

SAFETY_BUCKETS = (SafetyType.EMERGENCY.value, SafetyType.OBSERVATION.value, SafetyType.SHORT_STAY.value)

# patients shown on a specialty card before "+N more"
CARD_PREVIEW_SIZE = 3
