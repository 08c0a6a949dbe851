# ward_core/patients/selectors.py
from __future__ import annotations

from django.db.models import Prefetch, Q, QuerySet

from ward_core.admissions.models import Admission
from ward_core.patients.models import Patient


def _with_admissions(qs: QuerySet[Patient]) -> QuerySet[Patient]:
    return qs.prefetch_related(
        Prefetch(
            "admissions",
            queryset=Admission.objects.select_related("admitting_doctor").order_by("-visit_number"),
        )
    )


def get_patient(*, patient_id: int) -> Patient:
    return _with_admissions(Patient.objects.filter(id=patient_id)).get()


def search_patients(*, q: str | None = None) -> QuerySet[Patient]:
    qs = Patient.objects.all()

    qv = (q or "").strip()
    if qv:
        qs = qs.filter(Q(name__icontains=qv) | Q(mrn__icontains=qv))

    return _with_admissions(qs).order_by("-created_at", "-id")
