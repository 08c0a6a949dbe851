# ward_core/census/api/serializers.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema_serializer
from rest_framework import serializers

from ward_core.admissions.constants import AdmissionStatus
from ward_core.admissions.shifts import shift_label
from ward_core.admissions.stay import duration_days, is_long_stay


class AdmissionRecordSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    patient_id = serializers.IntegerField()
    admitting_doctor_id = serializers.IntegerField()
    doctor_name = serializers.CharField()
    department = serializers.CharField()
    status = serializers.CharField()
    admission_date = serializers.DateField()
    discharge_date = serializers.DateField(allow_null=True)
    diagnosis = serializers.CharField()
    visit_number = serializers.IntegerField()
    shift_type = serializers.CharField()
    shift_label = serializers.SerializerMethodField()
    is_weekend = serializers.BooleanField()
    safety_type = serializers.CharField(allow_null=True)
    stay_days = serializers.SerializerMethodField()
    is_long_stay = serializers.SerializerMethodField()

    def _reference(self):
        return self.context.get("reference")

    def get_shift_label(self, obj) -> str:
        return shift_label(obj.shift_type)

    def get_stay_days(self, obj) -> int | None:
        # only meaningful for ongoing stays
        if obj.status != AdmissionStatus.ACTIVE:
            return None
        return duration_days(obj.admission_date, self._reference())

    def get_is_long_stay(self, obj) -> bool:
        if obj.status != AdmissionStatus.ACTIVE:
            return False
        return is_long_stay(obj.admission_date, self._reference())


class PatientRecordSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    mrn = serializers.CharField()
    name = serializers.CharField()
    date_of_birth = serializers.DateField(allow_null=True)
    gender = serializers.CharField()
    admissions = AdmissionRecordSerializer(many=True)


class ConsultationRecordSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    consultation_specialty = serializers.CharField()
    requesting_department = serializers.CharField()
    status = serializers.CharField()
    urgency = serializers.CharField()
    patient_name = serializers.CharField()
    mrn = serializers.CharField()
    age = serializers.IntegerField(allow_null=True)
    gender = serializers.CharField()
    doctor_id = serializers.IntegerField(allow_null=True)
    doctor_name = serializers.CharField()
    reason = serializers.CharField()
    created_at = serializers.DateTimeField()


class AppointmentRecordSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    specialty = serializers.CharField()
    status = serializers.CharField()
    appointment_type = serializers.CharField()
    patient_name = serializers.CharField()
    medical_number = serializers.CharField()
    created_at = serializers.DateTimeField()
    notes = serializers.CharField()


class CensusFilterSerializer(serializers.Serializer):
    specialty = serializers.CharField(allow_null=True)
    doctor_id = serializers.IntegerField(allow_null=True)
    date_range = serializers.DictField(allow_null=True)

    def to_representation(self, instance):
        return instance.as_dict()


# single object even though it answers the list route
@extend_schema_serializer(many=False)
class SpecialtyRollupSerializer(serializers.Serializer):
    applied_filter = CensusFilterSerializer()
    count = serializers.IntegerField()
    active_patients = PatientRecordSerializer(many=True)
    long_stay_patients = PatientRecordSerializer(many=True)
    readmission_count = serializers.IntegerField()
    safety_type_counts = serializers.DictField(child=serializers.IntegerField())
    pending_consultations = serializers.IntegerField()
    active_consultations = ConsultationRecordSerializer(many=True)
    upcoming_appointments = AppointmentRecordSerializer(many=True)


class CardPatientSerializer(serializers.Serializer):
    patient_id = serializers.IntegerField()
    name = serializers.CharField()
    doctor_name = serializers.CharField()
    diagnosis = serializers.CharField()


class SpecialtyCardSerializer(serializers.Serializer):
    name = serializers.CharField()
    active_count = serializers.IntegerField()
    readmission_count = serializers.IntegerField()
    long_stay_count = serializers.IntegerField()
    pending_consultations = serializers.IntegerField()
    safety_type_counts = serializers.DictField(child=serializers.IntegerField())
    preview = CardPatientSerializer(many=True)
    more_count = serializers.IntegerField()


class LongStayRowSerializer(serializers.Serializer):
    patient = PatientRecordSerializer()
    admission = AdmissionRecordSerializer()
    stay_days = serializers.IntegerField()


class LongStayReportSerializer(serializers.Serializer):
    applied_filter = CensusFilterSerializer()
    reference_date = serializers.DateField()
    rows = LongStayRowSerializer(many=True)


class ShareTextSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=["patient", "consultation", "appointment"])
    text = serializers.CharField()
