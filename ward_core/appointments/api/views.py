# ward_core/appointments/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets

from ward_core.appointments.api.serializers import AppointmentSerializer
from ward_core.appointments.selectors import list_appointments


@extend_schema_view(
    list=extend_schema(tags=["Appointments"], operation_id="v1_appointments_list"),
    retrieve=extend_schema(tags=["Appointments"], operation_id="v1_appointments_retrieve"),
)
class AppointmentViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = AppointmentSerializer
    filterset_fields = ["specialty", "status", "appointment_type"]
    ordering_fields = ["created_at"]
    ordering = ["-created_at", "-id"]

    def get_queryset(self):
        return list_appointments()
