# ward_core/patients/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from ward_core.admissions.constants import MAX_AGE, MIN_AGE, SafetyType, ShiftType
from ward_core.patients.models import Gender


class AdmitPatientSerializer(serializers.Serializer):
    """
    Intake form contract. Field-level checks only; the admission rules
    (doctor assignment, department, shift classification) run in AdmissionService.
    """
    mrn = serializers.CharField(max_length=64)
    name = serializers.CharField(max_length=255)
    age = serializers.IntegerField(min_value=MIN_AGE, max_value=MAX_AGE)
    gender = serializers.ChoiceField(choices=Gender.choices, default=Gender.MALE)
    admission_date = serializers.DateField()
    use_weekend_shift = serializers.BooleanField(required=False, default=False)
    shift_type = serializers.ChoiceField(choices=ShiftType.choices, required=False, allow_null=True, default=None)
    admitting_doctor_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    department = serializers.CharField(max_length=128)
    diagnosis = serializers.CharField(required=False, allow_blank=True, default="")
    safety_type = serializers.ChoiceField(
        choices=SafetyType.choices,
        required=False,
        allow_null=True,
        allow_blank=True,
        default=None,
    )


class DischargeSerializer(serializers.Serializer):
    discharge_date = serializers.DateField(required=False, allow_null=True, default=None)


class LongStayNoteCreateSerializer(serializers.Serializer):
    content = serializers.CharField(allow_blank=True)


class LongStayNoteSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    patient_id = serializers.IntegerField()
    content = serializers.CharField()
    created_by_id = serializers.IntegerField()
    created_by_name = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
