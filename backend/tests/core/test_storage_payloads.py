"""Storage Payloads — tests for the snake_case submission shapes.

Tests cover:
    - Each activity envelope parses with all fields and with required fields only
    - Per-field constraints (lengths, numeric ranges, provider, URL)
    - Envelope dispatch on activityCode; unknown and missing codes fail
    - Optional fields must be omitted, not null
    - Failed results list every broken rule with paths as submitted
"""

import pytest

from leaps.core.storage_payloads import (
    AmplifyStoragePayload,
    LearnStoragePayload,
    parse_amplify_storage_payload,
    parse_explore_storage_payload,
    parse_learn_storage_payload,
    parse_present_storage_payload,
    parse_shine_storage_payload,
    parse_submission_storage_payload,
    safe_parse_submission_storage_payload,
)


def _fields(result) -> set[str]:
    return {issue.field for issue in result.issues}


# ─── Envelope ────────────────────────────────────────────────────

@pytest.mark.parametrize("code", ["LEARN", "EXPLORE", "AMPLIFY", "PRESENT", "SHINE"])
def test_full_sample_parses(storage_samples, code):
    parsed = parse_submission_storage_payload(storage_samples[code])
    assert parsed is not None
    assert parsed.activity_code == code


def test_union_picks_variant_by_activity_code(storage_samples):
    parsed = parse_submission_storage_payload(storage_samples["AMPLIFY"])
    assert isinstance(parsed, AmplifyStoragePayload)
    assert parsed.data.peers_trained == 5
    assert parsed.data.location.city == "Lisbon"


def test_unknown_activity_code_fails(storage_samples):
    body = storage_samples["LEARN"]
    body["activityCode"] = "LEAP"
    result = safe_parse_submission_storage_payload(body)
    assert not result.ok
    assert result.value is None


def test_missing_activity_code_fails(storage_samples):
    body = storage_samples["LEARN"]
    del body["activityCode"]
    assert parse_submission_storage_payload(body) is None


@pytest.mark.parametrize("value", [None, "LEARN", 42, [], {}])
def test_non_envelope_values_fail(value):
    assert parse_submission_storage_payload(value) is None


def test_data_for_wrong_activity_fails(storage_samples):
    body = {"activityCode": "SHINE", "data": storage_samples["LEARN"]["data"]}
    assert parse_submission_storage_payload(body) is None


def test_extra_envelope_key_fails(storage_samples):
    body = storage_samples["SHINE"]
    body["userId"] = "u1"
    assert parse_submission_storage_payload(body) is None


# ─── LEARN ───────────────────────────────────────────────────────

def test_learn_required_fields_only():
    parsed = parse_learn_storage_payload({
        "activityCode": "LEARN",
        "data": {"provider": "ILS", "course_name": "AI", "completed_at": "2025-01-15"},
    })
    assert isinstance(parsed, LearnStoragePayload)
    assert parsed.data.certificate_url is None
    assert parsed.data.certificate_hash is None


@pytest.mark.parametrize(
    "patch",
    [{"provider": "COURSERA"}, {"course_name": "A"}, {"completed_at": 20250115}],
)
def test_learn_field_constraints(storage_samples, patch):
    body = storage_samples["LEARN"]
    body["data"].update(patch)
    assert parse_learn_storage_payload(body) is None


def test_learn_null_optional_is_rejected(storage_samples):
    body = storage_samples["LEARN"]
    body["data"]["certificate_url"] = None
    result = safe_parse_submission_storage_payload(body)
    assert not result.ok
    assert result.issues[0].code == "null_field"
    assert "certificate_url" in result.issues[0].message


# ─── EXPLORE ─────────────────────────────────────────────────────

def test_explore_reflection_boundary(storage_samples):
    body = storage_samples["EXPLORE"]
    body["data"]["reflection"] = "r" * 150
    assert parse_explore_storage_payload(body) is not None
    body["data"]["reflection"] = "r" * 149
    assert parse_explore_storage_payload(body) is None


def test_explore_evidence_files_must_be_strings(storage_samples):
    body = storage_samples["EXPLORE"]
    body["data"]["evidence_files"] = ["ok.jpg", 7]
    assert parse_explore_storage_payload(body) is None


# ─── AMPLIFY ─────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "peers, students, ok",
    [(0, 0, True), (50, 200, True), (51, 0, False), (0, 201, False), (-1, 0, False)],
)
def test_amplify_count_ranges(storage_samples, peers, students, ok):
    body = storage_samples["AMPLIFY"]
    body["data"]["peers_trained"] = peers
    body["data"]["students_trained"] = students
    assert (parse_amplify_storage_payload(body) is not None) is ok


def test_amplify_counts_must_be_integers(storage_samples):
    body = storage_samples["AMPLIFY"]
    body["data"]["peers_trained"] = "5"
    assert parse_amplify_storage_payload(body) is None
    body["data"]["peers_trained"] = 5.5
    assert parse_amplify_storage_payload(body) is None


def test_amplify_negative_duration_fails(storage_samples):
    body = storage_samples["AMPLIFY"]
    body["data"]["duration_minutes"] = -10
    assert parse_amplify_storage_payload(body) is None


def test_amplify_location_rejects_unknown_key(storage_samples):
    body = storage_samples["AMPLIFY"]
    body["data"]["location"]["room"] = "B12"
    assert parse_amplify_storage_payload(body) is None


def test_amplify_empty_list_is_kept(storage_samples):
    body = storage_samples["AMPLIFY"]
    body["data"]["co_facilitators"] = []
    parsed = parse_amplify_storage_payload(body)
    assert parsed.data.co_facilitators == []


# ─── PRESENT / SHINE ─────────────────────────────────────────────

def test_present_requires_absolute_linkedin_url(storage_samples):
    body = storage_samples["PRESENT"]
    body["data"]["linkedin_url"] = "linkedin.com/posts/1"
    result = safe_parse_submission_storage_payload(body)
    assert not result.ok
    assert result.issues[0].field == "data.linkedin_url"
    assert result.issues[0].message == "Invalid URL format"


def test_present_caption_min_length(storage_samples):
    body = storage_samples["PRESENT"]
    body["data"]["caption"] = "too short"
    assert parse_present_storage_payload(body) is None


def test_shine_minimums(storage_samples):
    body = storage_samples["SHINE"]
    body["data"]["idea_title"] = "Bot"
    body["data"]["idea_summary"] = "short"
    result = safe_parse_submission_storage_payload(body)
    assert _fields(result) == {"data.idea_title", "data.idea_summary"}
    assert parse_shine_storage_payload(body) is None
