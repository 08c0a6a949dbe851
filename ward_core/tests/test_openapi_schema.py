# ward_core/tests/test_openapi_schema.py
import pytest

pytestmark = pytest.mark.django_db


@pytest.fixture
def paths(api_client):
    r = api_client.get("/api/schema/", {"format": "json"})
    assert r.status_code == 200
    return r.data["paths"]


def path_ending(paths, suffix):
    return next(v for k, v in paths.items() if k.endswith(suffix))


def param_names(operation):
    return {p["name"] for p in operation.get("parameters", [])}


def test_admit_and_discharge_publish_request_bodies(paths):
    admit = paths["/api/v1/patients/"]["post"]
    assert "requestBody" in admit
    assert "201" in admit["responses"]
    assert admit["tags"] == ["Patients"]

    discharge = path_ending(paths, "/discharge/")["post"]
    assert "requestBody" in discharge

    listing = paths["/api/v1/patients/"]["get"]
    assert "q" in param_names(listing)


def test_long_stay_notes_document_both_methods(paths):
    notes = path_ending(paths, "/long-stay-notes/")
    assert "requestBody" in notes["post"]
    assert "201" in notes["post"]["responses"]
    assert "200" in notes["get"]["responses"]


def test_classify_shift_is_documented(paths):
    op = paths["/api/v1/admissions/classify-shift/"]["post"]
    assert "requestBody" in op
    assert "200" in op["responses"]


def test_census_endpoints_document_filters(paths):
    rollup = paths["/api/v1/census/"]["get"]
    assert {"specialty", "doctor_id", "start", "end"} <= param_names(rollup)
    body = rollup["responses"]["200"]["content"]["application/json"]["schema"]
    assert "$ref" in body

    long_stay = paths["/api/v1/census/long-stay/"]["get"]
    assert {"specialty", "doctor_id", "start", "end"} <= param_names(long_stay)

    share = paths["/api/v1/census/share/"]["get"]
    assert {"kind", "id"} <= param_names(share)

    assert "200" in paths["/api/v1/census/specialties/"]["get"]["responses"]
