# ward_core/conftest.py
from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from ward_core.admissions.services import AdmissionService


@pytest.fixture
def user(db):
    User = get_user_model()
    return User.objects.create_user(
        username="nurse",
        password="testpass",
        first_name="Nora",
        last_name="Nurse",
        is_active=True,
    )


@pytest.fixture
def doctor(db):
    User = get_user_model()
    return User.objects.create_user(
        username="dr_house",
        password="testpass",
        first_name="Greg",
        last_name="House",
        is_active=True,
    )


@pytest.fixture
def other_doctor(db):
    User = get_user_model()
    return User.objects.create_user(
        username="dr_wilson",
        password="testpass",
        first_name="James",
        last_name="Wilson",
        is_active=True,
    )


@pytest.fixture
def api_client(user):
    c = APIClient()
    c.force_authenticate(user=user)
    return c


@pytest.fixture
def admit(user, doctor):
    """
    Factory: admit a patient via AdmissionService so all admission rules apply.
    `days_ago` backdates the admission relative to today.
    """
    def _admit(*, mrn="MRN-001", name="Test Patient", department="Neurology", days_ago=0, **overrides):
        params = {
            "actor_user_id": user.id,
            "mrn": mrn,
            "name": name,
            "age": 54,
            "gender": "female",
            "admission_date": timezone.localdate() - timedelta(days=days_ago),
            "department": department,
            "admitting_doctor_id": doctor.id,
            "diagnosis": "Observation",
        }
        params.update(overrides)
        return AdmissionService.admit(**params)

    return _admit
