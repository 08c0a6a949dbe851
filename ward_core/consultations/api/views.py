# ward_core/consultations/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets

from ward_core.consultations.api.serializers import ConsultationSerializer
from ward_core.consultations.selectors import list_consultations


@extend_schema_view(
    list=extend_schema(tags=["Consultations"], operation_id="v1_consultations_list"),
    retrieve=extend_schema(tags=["Consultations"], operation_id="v1_consultations_retrieve"),
)
class ConsultationViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Consultation lifecycle is owned upstream; the ward only reads current status.
    """
    serializer_class = ConsultationSerializer
    filterset_fields = ["consultation_specialty", "status", "urgency", "mrn"]
    ordering_fields = ["created_at", "urgency"]
    ordering = ["-created_at", "-id"]

    def get_queryset(self):
        return list_consultations()
