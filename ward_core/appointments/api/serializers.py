# ward_core/appointments/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from ward_core.appointments.models import Appointment


class AppointmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Appointment
        fields = [
            "id",
            "specialty",
            "status",
            "appointment_type",
            "patient_name",
            "medical_number",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
