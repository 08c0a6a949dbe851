# ward_core/consultations/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from ward_core.consultations.models import Consultation


def list_consultations() -> QuerySet[Consultation]:
    # field filters come from the viewset's filterset_fields
    return Consultation.objects.select_related("doctor").order_by("-created_at", "-id")
