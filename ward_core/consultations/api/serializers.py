# ward_core/consultations/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from ward_core.consultations.models import Consultation


class ConsultationSerializer(serializers.ModelSerializer):
    doctor_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Consultation
        fields = [
            "id",
            "consultation_specialty",
            "requesting_department",
            "status",
            "urgency",
            "patient_name",
            "mrn",
            "age",
            "gender",
            "doctor_id",
            "doctor_name",
            "reason",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
