# ward_core/census/api/views.py
from __future__ import annotations

from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from ward_core.census.aggregator import SpecialtyAggregator
from ward_core.census.api.serializers import (
    LongStayReportSerializer,
    ShareTextSerializer,
    SpecialtyCardSerializer,
    SpecialtyRollupSerializer,
)
from ward_core.census.selectors import census_filter_from_params
from ward_core.census.sharing import share_record_for, share_text
from ward_core.census.snapshot import build_snapshot
from ward_core.common.errors import ValidationError

CENSUS_FILTER_PARAMETERS = [
    OpenApiParameter(name="specialty", location=OpenApiParameter.QUERY, required=False, type=str),
    OpenApiParameter(name="doctor_id", location=OpenApiParameter.QUERY, required=False, type=int),
    OpenApiParameter(
        name="start",
        location=OpenApiParameter.QUERY,
        required=False,
        type=str,
        description="ISO date, inclusive; requires end",
    ),
    OpenApiParameter(
        name="end",
        location=OpenApiParameter.QUERY,
        required=False,
        type=str,
        description="ISO date, inclusive; requires start",
    ),
]


class CensusViewSet(viewsets.ViewSet):
    """
    Read-only census views. Each request takes a fresh snapshot.
    """

    @extend_schema(
        responses={200: SpecialtyRollupSerializer},
        tags=["Census"],
        parameters=CENSUS_FILTER_PARAMETERS,
        operation_id="v1_census_rollup",
    )
    def list(self, request):
        census_filter = census_filter_from_params(request.query_params)
        now = timezone.now()

        rollup = SpecialtyAggregator.aggregate(build_snapshot(), census_filter, reference=now)
        data = SpecialtyRollupSerializer(rollup, context={"reference": now}).data
        return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        responses={200: SpecialtyCardSerializer(many=True)},
        tags=["Census"],
        operation_id="v1_census_specialties",
    )
    @action(detail=False, methods=["get"], url_path="specialties")
    def specialties(self, request):
        cards = SpecialtyAggregator.specialty_grid(build_snapshot(), reference=timezone.now())
        return Response(SpecialtyCardSerializer(cards, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        responses={200: LongStayReportSerializer},
        tags=["Census"],
        parameters=CENSUS_FILTER_PARAMETERS,
        operation_id="v1_census_long_stay",
    )
    @action(detail=False, methods=["get"], url_path="long-stay")
    def long_stay(self, request):
        census_filter = census_filter_from_params(request.query_params)
        now = timezone.now()

        report = SpecialtyAggregator.long_stay_report(build_snapshot(), census_filter, reference=now)
        return Response(LongStayReportSerializer(report, context={"reference": now}).data, status=status.HTTP_200_OK)

    @extend_schema(
        responses={200: ShareTextSerializer},
        tags=["Census"],
        parameters=[
            OpenApiParameter(
                name="kind",
                location=OpenApiParameter.QUERY,
                required=True,
                type=str,
                enum=["patient", "consultation", "appointment"],
            ),
            OpenApiParameter(name="id", location=OpenApiParameter.QUERY, required=True, type=int),
        ],
        operation_id="v1_census_share",
    )
    @action(detail=False, methods=["get"], url_path="share")
    def share(self, request):
        kind = request.query_params.get("kind")
        raw_id = request.query_params.get("id")
        try:
            item_id = int(raw_id)
        except (TypeError, ValueError):
            raise ValidationError("id is invalid. Use an integer.", detail={"id": raw_id})

        snapshot = build_snapshot()
        pools = {
            "patient": snapshot.patients,
            "consultation": snapshot.consultations,
            "appointment": snapshot.appointments,
        }
        if kind not in pools:
            raise ValidationError(
                f"kind is invalid. Allowed: {sorted(pools)}",
                detail={"kind": kind},
            )

        item = next((x for x in pools[kind] if x.id == item_id), None)
        if item is None:
            raise NotFound(f"{kind} {item_id} not found.")

        record = share_record_for(item)
        out = ShareTextSerializer({"kind": record.kind, "text": share_text(record)})
        return Response(out.data, status=status.HTTP_200_OK)
