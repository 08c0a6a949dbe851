# ward_core/census/snapshot.py
"""
Immutable view of the ward state consumed by the census aggregator.

The aggregator never touches the ORM; `build_snapshot` is the one place where
database rows become frozen records.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from django.db.models import Prefetch

from ward_core.admissions.models import Admission
from ward_core.appointments.models import Appointment
from ward_core.consultations.models import Consultation
from ward_core.patients.models import Patient


@dataclass(frozen=True)
class AdmissionRecord:
    id: int
    patient_id: int
    admitting_doctor_id: int
    doctor_name: str
    department: str
    status: str
    admission_date: date
    discharge_date: Optional[date]
    diagnosis: str
    visit_number: int
    shift_type: str
    is_weekend: bool
    safety_type: Optional[str]


@dataclass(frozen=True)
class PatientRecord:
    id: int
    mrn: str
    name: str
    date_of_birth: Optional[date]
    gender: str
    # most recent first
    admissions: tuple[AdmissionRecord, ...] = ()

    @property
    def latest_admission(self) -> Optional[AdmissionRecord]:
        return self.admissions[0] if self.admissions else None


@dataclass(frozen=True)
class ConsultationRecord:
    id: int
    consultation_specialty: str
    requesting_department: str
    status: str
    urgency: str
    patient_name: str
    mrn: str
    age: Optional[int]
    gender: str
    doctor_id: Optional[int]
    doctor_name: str
    reason: str
    created_at: datetime


@dataclass(frozen=True)
class AppointmentRecord:
    id: int
    specialty: str
    status: str
    appointment_type: str
    patient_name: str
    medical_number: str
    created_at: datetime
    notes: str = ""


@dataclass(frozen=True)
class CensusSnapshot:
    patients: tuple[PatientRecord, ...] = field(default_factory=tuple)
    consultations: tuple[ConsultationRecord, ...] = field(default_factory=tuple)
    appointments: tuple[AppointmentRecord, ...] = field(default_factory=tuple)


def _display_name(user) -> str:
    if user is None:
        return ""
    return user.get_full_name() or user.get_username()


def admission_record(adm: Admission) -> AdmissionRecord:
    return AdmissionRecord(
        id=adm.id,
        patient_id=adm.patient_id,
        admitting_doctor_id=adm.admitting_doctor_id,
        doctor_name=_display_name(adm.admitting_doctor),
        department=adm.department,
        status=adm.status,
        admission_date=adm.admission_date,
        discharge_date=adm.discharge_date,
        diagnosis=adm.diagnosis,
        visit_number=adm.visit_number,
        shift_type=adm.shift_type,
        is_weekend=adm.is_weekend,
        safety_type=adm.safety_type or None,
    )


def patient_record(patient: Patient) -> PatientRecord:
    return PatientRecord(
        id=patient.id,
        mrn=patient.mrn,
        name=patient.name,
        date_of_birth=patient.date_of_birth,
        gender=patient.gender,
        admissions=tuple(admission_record(a) for a in patient.admissions.all()),
    )


def consultation_record(c: Consultation) -> ConsultationRecord:
    return ConsultationRecord(
        id=c.id,
        consultation_specialty=c.consultation_specialty,
        requesting_department=c.requesting_department,
        status=c.status,
        urgency=c.urgency,
        patient_name=c.patient_name,
        mrn=c.mrn,
        age=c.age,
        gender=c.gender,
        doctor_id=c.doctor_id,
        doctor_name=c.doctor_name or _display_name(c.doctor),
        reason=c.reason,
        created_at=c.created_at,
    )


def appointment_record(a: Appointment) -> AppointmentRecord:
    return AppointmentRecord(
        id=a.id,
        specialty=a.specialty,
        status=a.status,
        appointment_type=a.appointment_type,
        patient_name=a.patient_name,
        medical_number=a.medical_number,
        created_at=a.created_at,
        notes=a.notes,
    )


def build_snapshot() -> CensusSnapshot:
    """
    Read the current ward state in one pass.
    Each call returns a fresh snapshot; records are never updated in place.
    """
    patients = Patient.objects.order_by("-created_at", "-id").prefetch_related(
        Prefetch(
            "admissions",
            queryset=Admission.objects.select_related("admitting_doctor").order_by("-visit_number"),
        )
    )
    consultations = Consultation.objects.select_related("doctor").order_by("-created_at", "-id")
    appointments = Appointment.objects.order_by("-created_at", "-id")

    return CensusSnapshot(
        patients=tuple(patient_record(p) for p in patients),
        consultations=tuple(consultation_record(c) for c in consultations),
        appointments=tuple(appointment_record(a) for a in appointments),
    )
