# ward_core/patients/api/views.py
from __future__ import annotations

from asgiref.sync import async_to_sync
from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from ward_core.admissions.services import AdmissionService
from ward_core.census.api.serializers import PatientRecordSerializer
from ward_core.census.snapshot import patient_record
from ward_core.common.api.pagination import DefaultPagination
from ward_core.longstay.notes import LongStayNotesLog
from ward_core.patients.api.serializers import (
    AdmitPatientSerializer,
    DischargeSerializer,
    LongStayNoteCreateSerializer,
    LongStayNoteSerializer,
)
from ward_core.patients.models import Patient
from ward_core.patients.selectors import get_patient, search_patients


def _actor_id(request) -> int | None:
    return request.user.id if request.user and request.user.is_authenticated else None


class PatientViewSet(viewsets.ViewSet):
    # drf-spectacular reads these for the paged list schema
    serializer_class = PatientRecordSerializer
    pagination_class = DefaultPagination

    def _get_patient(self, pk) -> Patient:
        try:
            return get_patient(patient_id=int(pk))
        except (Patient.DoesNotExist, TypeError, ValueError):
            raise NotFound("Patient not found.")

    def _render(self, patient: Patient, status_code=status.HTTP_200_OK) -> Response:
        now = timezone.now()
        data = PatientRecordSerializer(patient_record(patient), context={"reference": now}).data
        return Response(data, status=status_code)

    @extend_schema(
        responses={200: PatientRecordSerializer(many=True)},
        tags=["Patients"],
        parameters=[
            OpenApiParameter(
                name="q",
                location=OpenApiParameter.QUERY,
                required=False,
                type=str,
                description="Substring of patient name or MRN",
            ),
        ],
        operation_id="v1_patients_list",
    )
    def list(self, request):
        q = request.query_params.get("q", "").strip()
        qs = search_patients(q=q)

        paginator = self.pagination_class()
        page = paginator.paginate_queryset(qs, request, view=self)
        now = timezone.now()
        data = PatientRecordSerializer(
            [patient_record(p) for p in page],
            many=True,
            context={"reference": now},
        ).data
        return paginator.get_paginated_response(data)

    @extend_schema(responses={200: PatientRecordSerializer}, tags=["Patients"], operation_id="v1_patients_retrieve")
    def retrieve(self, request, pk=None):
        return self._render(self._get_patient(pk))

    @extend_schema(
        request=AdmitPatientSerializer,
        responses={201: PatientRecordSerializer},
        tags=["Patients"],
        operation_id="v1_patients_admit",
    )
    def create(self, request):
        ser = AdmitPatientSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        admission = AdmissionService.admit(actor_user_id=_actor_id(request), **ser.validated_data)
        return self._render(get_patient(patient_id=admission.patient_id), status.HTTP_201_CREATED)

    @extend_schema(
        request=DischargeSerializer,
        responses={200: PatientRecordSerializer},
        tags=["Patients"],
        operation_id="v1_patients_discharge",
    )
    @action(detail=True, methods=["post"], url_path="discharge")
    def discharge(self, request, pk=None):
        patient = self._get_patient(pk)

        ser = DischargeSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        admission = AdmissionService.active_admission_for(patient_id=patient.id)
        AdmissionService.discharge(
            admission_id=admission.id,
            actor_user_id=_actor_id(request),
            discharge_date=ser.validated_data.get("discharge_date"),
        )
        return self._render(get_patient(patient_id=patient.id))

    @extend_schema(
        methods=["GET"],
        responses={200: LongStayNoteSerializer(many=True)},
        tags=["Long-stay notes"],
        operation_id="v1_patients_long_stay_notes_list",
    )
    @extend_schema(
        methods=["POST"],
        request=LongStayNoteCreateSerializer,
        responses={201: LongStayNoteSerializer},
        tags=["Long-stay notes"],
        operation_id="v1_patients_long_stay_notes_create",
    )
    @action(detail=True, methods=["get", "post"], url_path="long-stay-notes")
    def long_stay_notes(self, request, pk=None):
        patient = self._get_patient(pk)
        log = LongStayNotesLog()

        if request.method == "POST":
            ser = LongStayNoteCreateSerializer(data=request.data)
            ser.is_valid(raise_exception=True)

            entry = async_to_sync(log.append)(patient.id, ser.validated_data["content"], request.user)
            return Response(LongStayNoteSerializer(entry).data, status=status.HTTP_201_CREATED)

        notes = async_to_sync(log.fetch)(patient.id)
        return Response(LongStayNoteSerializer(notes, many=True).data, status=status.HTTP_200_OK)
