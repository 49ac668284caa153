"""Payload Routes — HTTP tests for the transform endpoints and error envelope.

Invariants:
    - Valid bodies → 200 {success: true, data: converted envelope}
    - Invalid bodies → 400 VALIDATION_ERROR with per-field details
    - Details hidden when expose_validation_details is off
    - Non-object bodies → 400 from request validation, same envelope
    - X-Request-ID echoed and recorded as trace_id
    - Each rejection produces one WARNING log line with its context
"""

import logging

import pytest


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "leaps-payloads"


@pytest.mark.parametrize("code", ["LEARN", "EXPLORE", "AMPLIFY", "PRESENT", "SHINE"])
async def test_to_storage_converts(client, api_samples, storage_samples, code):
    res = await client.post("/api/v1/payloads/to-storage", json=api_samples[code])
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": storage_samples[code]}


@pytest.mark.parametrize("code", ["LEARN", "AMPLIFY"])
async def test_to_api_converts(client, api_samples, storage_samples, code):
    res = await client.post("/api/v1/payloads/to-api", json=storage_samples[code])
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": api_samples[code]}


async def test_to_storage_rejects_range_violation(client, api_samples):
    body = api_samples["AMPLIFY"]
    body["data"]["peersTrained"] = 100
    res = await client.post("/api/v1/payloads/to-storage", json=body)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Invalid payload for selected activity"
    assert error["context"]["activity_code"] == "AMPLIFY"
    assert [d["field"] for d in error["details"]] == ["data.peersTrained"]


async def test_to_api_rejects_wrong_convention(client, api_samples):
    res = await client.post("/api/v1/payloads/to-api", json=api_samples["LEARN"])
    assert res.status_code == 400
    types = {d["type"] for d in res.json()["error"]["details"]}
    assert "extra_forbidden" in types


async def test_unknown_activity_code(client):
    res = await client.post(
        "/api/v1/payloads/to-storage", json={"activityCode": "INVALID", "data": {}},
    )
    assert res.status_code == 400


async def test_details_hidden_when_disabled(client, api_samples, monkeypatch):
    monkeypatch.setenv("EXPOSE_VALIDATION_DETAILS", "false")
    body = api_samples["SHINE"]
    body["data"]["ideaTitle"] = "No"
    res = await client.post("/api/v1/payloads/to-storage", json=body)
    assert res.status_code == 400
    assert "details" not in res.json()["error"]


async def test_non_object_body_rejected(client):
    res = await client.post("/api/v1/payloads/to-storage", json=["LEARN"])
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert res.json()["error"]["details"]


async def test_non_object_body_message(client):
    res = await client.post("/api/v1/payloads/to-api", json="not an object")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid request data"


async def test_request_id_echoed_as_trace_id(client, api_samples):
    body = api_samples["LEARN"]
    body["data"]["courseName"] = "A"
    res = await client.post(
        "/api/v1/payloads/to-storage", json=body, headers={"X-Request-ID": "req-42"},
    )
    assert res.status_code == 400
    assert res.headers["X-Request-ID"] == "req-42"
    assert res.json()["error"]["context"]["trace_id"] == "req-42"


async def test_rejection_logged_once_with_context(client, api_samples, caplog):
    body = api_samples["AMPLIFY"]
    body["data"]["peersTrained"] = 100
    with caplog.at_level(logging.DEBUG, logger="leaps"):
        res = await client.post("/api/v1/payloads/to-storage", json=body)
    assert res.status_code == 400
    records = [r for r in caplog.records if r.name.startswith("leaps")]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].activity_code == "AMPLIFY"
    assert records[0].issue_count == 1
    assert records[0].error_code == "VALIDATION_ERROR"
