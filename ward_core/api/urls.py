# ward_core/api/urls.py
from __future__ import annotations

from rest_framework.routers import DefaultRouter

from ward_core.admissions.api.views import AdmissionViewSet
from ward_core.appointments.api.views import AppointmentViewSet
from ward_core.census.api.views import CensusViewSet
from ward_core.consultations.api.views import ConsultationViewSet
from ward_core.patients.api.views import PatientViewSet

router = DefaultRouter()

router.register(r"patients", PatientViewSet, basename="patients")
router.register(r"admissions", AdmissionViewSet, basename="admissions")
router.register(r"census", CensusViewSet, basename="census")
router.register(r"consultations", ConsultationViewSet, basename="consultations")
router.register(r"appointments", AppointmentViewSet, basename="appointments")

urlpatterns = [
    *router.urls,
]
