# ward_core/tests/test_error_envelope.py
from django.test import RequestFactory
from rest_framework.exceptions import NotFound

from ward_core.common.api.exceptions import api_exception_handler
from ward_core.common.errors import NotAuthenticatedError, PersistenceError, ValidationError


def handle(exc):
    req = RequestFactory().get("/api/v1/census/")
    return api_exception_handler(exc, {"request": req})


def test_domain_validation_error_envelope():
    resp = handle(ValidationError("Please select an assigned doctor", detail={"admitting_doctor_id": None}))

    assert resp.status_code == 400
    err = resp.data["error"]
    assert err["code"] == "validation_error"
    assert err["message"] == "Please select an assigned doctor"
    assert err["details"] == {"admitting_doctor_id": None}
    assert err["request_id"]


def test_domain_errors_keep_their_status():
    assert handle(NotAuthenticatedError("User not authenticated")).status_code == 401

    resp = handle(PersistenceError("Could not load long-stay notes."))
    assert resp.status_code == 503
    assert resp.data["error"]["code"] == "persistence_error"


def test_code_override_is_rendered():
    resp = handle(ValidationError("Patient not found.", code="not_found"))
    assert resp.data["error"]["code"] == "not_found"


def test_drf_exception_envelope():
    resp = handle(NotFound("Patient not found."))

    assert resp.status_code == 404
    assert resp.data["error"]["code"] == "not_found"
    assert resp.data["error"]["message"] == "Patient not found."
    assert resp.data["error"]["details"] is None


def test_unhandled_error_becomes_server_error():
    resp = handle(RuntimeError("boom"))

    assert resp.status_code == 500
    assert resp.data["error"]["code"] == "server_error"
    assert resp.data["error"]["message"] == "Unexpected server error."
