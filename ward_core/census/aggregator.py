# ward_core/census/aggregator.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from django.conf import settings
from django.utils import timezone

from ward_core.admissions.constants import AdmissionStatus
from ward_core.admissions.stay import duration_days, is_long_stay
from ward_core.appointments.models import AppointmentStatus
from ward_core.census.constants import CARD_PREVIEW_SIZE, SAFETY_BUCKETS, SPECIALTIES
from ward_core.census.snapshot import (
    AdmissionRecord,
    AppointmentRecord,
    CensusSnapshot,
    ConsultationRecord,
    PatientRecord,
)
from ward_core.common.dates import as_local_date
from ward_core.common.errors import ValidationError
from ward_core.consultations.models import ConsultationStatus


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @classmethod
    def parse(cls, start, end) -> "DateRange":
        s = as_local_date(start, field="start")
        e = as_local_date(end, field="end")
        if s > e:
            raise ValidationError(
                "Date range start must not be after its end.",
                detail={"start": str(s), "end": str(e)},
            )
        return cls(start=s, end=e)

    def __contains__(self, value) -> bool:
        return self.start <= as_local_date(value) <= self.end


@dataclass(frozen=True)
class CensusFilter:
    """Every field is optional; an unset field matches everything."""
    specialty: Optional[str] = None
    doctor_id: Optional[int] = None
    date_range: Optional[DateRange] = None

    def as_dict(self) -> dict:
        return {
            "specialty": self.specialty,
            "doctor_id": self.doctor_id,
            "date_range": (
                {"start": self.date_range.start.isoformat(), "end": self.date_range.end.isoformat()}
                if self.date_range
                else None
            ),
        }


@dataclass(frozen=True)
class SpecialtyRollup:
    applied_filter: CensusFilter
    active_patients: tuple[PatientRecord, ...]
    long_stay_patients: tuple[PatientRecord, ...]
    readmission_count: int
    safety_type_counts: dict[str, int]
    pending_consultations: int
    active_consultations: tuple[ConsultationRecord, ...] = ()
    upcoming_appointments: tuple[AppointmentRecord, ...] = ()

    @property
    def count(self) -> int:
        return len(self.active_patients)


@dataclass(frozen=True)
class CardPatient:
    patient_id: int
    name: str
    doctor_name: str
    diagnosis: str


@dataclass(frozen=True)
class SpecialtyCard:
    name: str
    active_count: int
    readmission_count: int
    long_stay_count: int
    pending_consultations: int
    safety_type_counts: dict[str, int]
    preview: tuple[CardPatient, ...] = ()
    more_count: int = 0


@dataclass(frozen=True)
class LongStayRow:
    patient: PatientRecord
    admission: AdmissionRecord
    stay_days: int


@dataclass(frozen=True)
class LongStayReport:
    applied_filter: CensusFilter
    reference_date: date
    rows: tuple[LongStayRow, ...] = field(default_factory=tuple)


def census_specialties() -> tuple[str, ...]:
    return tuple(getattr(settings, "WARD_SPECIALTIES", SPECIALTIES))


class SpecialtyAggregator:
    """
    Census rollups over an immutable snapshot.

    Read-only: every query rescans the snapshot, nothing is cached between
    calls, so the same snapshot + filter + reference always gives the same result.
    """

    @staticmethod
    def matches(patient: PatientRecord, census_filter: CensusFilter) -> bool:
        admission = patient.latest_admission
        if admission is None or admission.status != AdmissionStatus.ACTIVE:
            return False

        f = census_filter
        if f.specialty and admission.department != f.specialty:
            return False
        if f.doctor_id and admission.admitting_doctor_id != f.doctor_id:
            return False
        if f.date_range and admission.admission_date not in f.date_range:
            return False
        return True

    @staticmethod
    def active_patients(snapshot: CensusSnapshot, census_filter: CensusFilter) -> tuple[PatientRecord, ...]:
        return tuple(p for p in snapshot.patients if SpecialtyAggregator.matches(p, census_filter))

    @staticmethod
    def active_consultations(snapshot: CensusSnapshot, specialty: Optional[str]) -> tuple[ConsultationRecord, ...]:
        return tuple(
            c
            for c in snapshot.consultations
            if c.status == ConsultationStatus.ACTIVE
            and (not specialty or c.consultation_specialty == specialty)
        )

    @staticmethod
    def upcoming_appointments(snapshot: CensusSnapshot, specialty: Optional[str]) -> tuple[AppointmentRecord, ...]:
        return tuple(
            a
            for a in snapshot.appointments
            if a.status == AppointmentStatus.PENDING and (not specialty or a.specialty == specialty)
        )

    @staticmethod
    def aggregate(
        snapshot: CensusSnapshot,
        census_filter: CensusFilter | None = None,
        *,
        reference=None,
    ) -> SpecialtyRollup:
        f = census_filter or CensusFilter()
        ref = reference if reference is not None else timezone.now()

        active = SpecialtyAggregator.active_patients(snapshot, f)

        long_stay = tuple(p for p in active if is_long_stay(p.latest_admission.admission_date, ref))
        readmissions = sum(1 for p in active if p.latest_admission.visit_number > 1)

        safety_counts = {bucket: 0 for bucket in SAFETY_BUCKETS}
        for p in active:
            st = p.latest_admission.safety_type
            if st in safety_counts:
                safety_counts[st] += 1

        consultations = SpecialtyAggregator.active_consultations(snapshot, f.specialty)

        return SpecialtyRollup(
            applied_filter=f,
            active_patients=active,
            long_stay_patients=long_stay,
            readmission_count=readmissions,
            safety_type_counts=safety_counts,
            pending_consultations=len(consultations),
            active_consultations=consultations,
            upcoming_appointments=SpecialtyAggregator.upcoming_appointments(snapshot, f.specialty),
        )

    @staticmethod
    def specialty_grid(
        snapshot: CensusSnapshot,
        specialties: tuple[str, ...] | None = None,
        *,
        reference=None,
    ) -> tuple[SpecialtyCard, ...]:
        ref = reference if reference is not None else timezone.now()
        cards: list[SpecialtyCard] = []

        for name in specialties if specialties is not None else census_specialties():
            rollup = SpecialtyAggregator.aggregate(snapshot, CensusFilter(specialty=name), reference=ref)
            preview = tuple(
                CardPatient(
                    patient_id=p.id,
                    name=p.name,
                    doctor_name=p.latest_admission.doctor_name,
                    diagnosis=p.latest_admission.diagnosis,
                )
                for p in rollup.active_patients[:CARD_PREVIEW_SIZE]
            )
            cards.append(
                SpecialtyCard(
                    name=name,
                    active_count=rollup.count,
                    readmission_count=rollup.readmission_count,
                    long_stay_count=len(rollup.long_stay_patients),
                    pending_consultations=rollup.pending_consultations,
                    safety_type_counts=rollup.safety_type_counts,
                    preview=preview,
                    more_count=max(0, rollup.count - CARD_PREVIEW_SIZE),
                )
            )

        return tuple(cards)

    @staticmethod
    def long_stay_report(
        snapshot: CensusSnapshot,
        census_filter: CensusFilter | None = None,
        *,
        reference=None,
    ) -> LongStayReport:
        """
        Rows for the long-stay export: matched long-stay patients with their stay length.
        """
        f = census_filter or CensusFilter()
        ref = reference if reference is not None else timezone.now()
        rollup = SpecialtyAggregator.aggregate(snapshot, f, reference=ref)

        rows = tuple(
            LongStayRow(
                patient=p,
                admission=p.latest_admission,
                stay_days=duration_days(p.latest_admission.admission_date, ref),
            )
            for p in rollup.long_stay_patients
        )
        return LongStayReport(
            applied_filter=f,
            reference_date=as_local_date(ref, field="reference"),
            rows=rows,
        )
