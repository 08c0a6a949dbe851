# ward_core/admissions/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from ward_core.admissions.api.serializers import ClassifyShiftInputSerializer, ShiftClassificationSerializer
from ward_core.admissions.shifts import classify, shift_label, weekend_message


class AdmissionViewSet(viewsets.ViewSet):
    @extend_schema(
        request=ClassifyShiftInputSerializer,
        responses={200: ShiftClassificationSerializer},
        tags=["Admissions"],
        operation_id="v1_admissions_classify_shift",
    )
    @action(detail=False, methods=["post"], url_path="classify-shift")
    def classify_shift(self, request):
        """
        Re-derive the shift for the intake form. Called on every change of
        admission date or weekend opt-in.
        """
        ser = ClassifyShiftInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        result = classify(data["admission_date"], data["use_weekend_shift"], data["shift_type"])

        out = ShiftClassificationSerializer(
            {
                "shift_type": result.shift_type,
                "shift_label": shift_label(result.shift_type),
                "is_weekend": result.is_weekend,
                "use_weekend_shift": result.use_weekend_shift,
                "weekend_message": weekend_message(data["admission_date"]),
            }
        )
        return Response(out.data, status=status.HTTP_200_OK)
