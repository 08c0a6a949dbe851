# ward_core/census/sharing.py
"""
Plain-text share blocks for census entries.

Each entry is wrapped in a ShareRecord whose `kind` says what it is; the
renderer dispatches on that tag only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from ward_core.census.snapshot import AppointmentRecord, ConsultationRecord, PatientRecord

ShareKind = Literal["patient", "consultation", "appointment"]


@dataclass(frozen=True)
class ShareRecord:
    kind: ShareKind
    item: Union[PatientRecord, ConsultationRecord, AppointmentRecord]


_KIND_BY_TYPE = {
    PatientRecord: "patient",
    ConsultationRecord: "consultation",
    AppointmentRecord: "appointment",
}


def share_record_for(item) -> ShareRecord:
    kind = _KIND_BY_TYPE.get(type(item))
    if kind is None:
        raise TypeError(f"Cannot share {type(item).__name__}")
    return ShareRecord(kind=kind, item=item)


def _fmt_date(value) -> str:
    return value.strftime("%Y-%m-%d") if value else "N/A"


def share_text(record: ShareRecord) -> str:
    item = record.item

    if record.kind == "patient":
        admission = item.latest_admission
        lines = [
            f"Patient: {item.name}",
            f"MRN: {item.mrn}",
            f"Department: {admission.department if admission else 'N/A'}",
            f"Doctor: {(admission.doctor_name if admission else '') or 'Not assigned'}",
            f"Admission Date: {_fmt_date(admission.admission_date if admission else None)}",
        ]
    elif record.kind == "consultation":
        lines = [
            f"Consultation for {item.patient_name}",
            f"MRN: {item.mrn}",
            f"Specialty: {item.consultation_specialty}",
            f"Doctor: {item.doctor_name or 'Pending Assignment'}",
            f"Created: {_fmt_date(item.created_at)}",
            f"Reason: {item.reason}",
        ]
    elif record.kind == "appointment":
        lines = [
            f"Appointment for {item.patient_name}",
            f"MRN: {item.medical_number}",
            f"Specialty: {item.specialty}",
            f"Date: {_fmt_date(item.created_at)}",
            f"Type: {item.appointment_type}",
        ]
    else:
        raise ValueError(f"Unknown share kind '{record.kind}'")

    return "\n".join(lines)
