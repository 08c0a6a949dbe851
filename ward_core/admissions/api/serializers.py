# ward_core/admissions/api/serializers.py
from __future__ import annotations

from rest_framework import serializers


class ClassifyShiftInputSerializer(serializers.Serializer):
    # parsed by the classifier so bad dates surface as its ValidationError
    admission_date = serializers.CharField()
    use_weekend_shift = serializers.BooleanField(required=False, default=False)
    shift_type = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)


class ShiftClassificationSerializer(serializers.Serializer):
    shift_type = serializers.CharField()
    shift_label = serializers.CharField()
    is_weekend = serializers.BooleanField()
    use_weekend_shift = serializers.BooleanField()
    weekend_message = serializers.CharField(allow_blank=True)
