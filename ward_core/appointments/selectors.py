# ward_core/appointments/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from ward_core.appointments.models import Appointment


def list_appointments() -> QuerySet[Appointment]:
    return Appointment.objects.order_by("-created_at", "-id")
