"""Payload Transforms — explicit renames between API shape and storage shape.

Invariants:
    - One mapper per activity per direction; every source field maps to exactly one target field
    - Absent optional fields stay absent; empty lists stay empty lists; nothing is defaulted
    - Round trip is lossless: storage_to_api(api_to_storage(x)) == x for every valid x
    - Dispatchers raise on an activityCode they cannot route (contract violation, never pass-through)

Design Decisions:
    - Each mapper spells out its key table instead of a generic camel/snake converter:
      a new field must be added on purpose in both directions (ADR: no convention-over-config)
    - Targets are built with model_validate, so the output is checked against its own
      schema on the way out
    - Explicit route dicts: every activityCode→mapper mapping visible in one place
"""

from leaps.core.api_payloads import (
    AmplifyApiData, AmplifyApiPayload,
    ExploreApiData, ExploreApiPayload,
    LearnApiData, LearnApiPayload,
    PresentApiData, PresentApiPayload,
    ShineApiData, ShineApiPayload,
    SubmissionApiPayload,
)
from leaps.core.domain_constants import ActivityCode
from leaps.core.errors import (
    ErrorContext, PayloadShapeMismatchError, UnknownActivityCodeError,
)
from leaps.core.storage_payloads import (
    AmplifyStorageData, AmplifyStoragePayload,
    ExploreStorageData, ExploreStoragePayload,
    LearnStorageData, LearnStoragePayload,
    PresentStorageData, PresentStoragePayload,
    ShineStorageData, ShineStoragePayload,
    SubmissionStoragePayload,
)


def _present(fields: dict[str, object]) -> dict[str, object]:
    """Drop absent optionals. Payload models never hold null, so None means absent."""
    return {key: value for key, value in fields.items() if value is not None}


# ─── API → Storage ───────────────────────────────────────────────

def learn_api_to_storage(api: LearnApiData) -> LearnStorageData:
    return LearnStorageData.model_validate(_present({
        "provider": api.provider,
        "course_name": api.course_name,
        "certificate_url": api.certificate_url,
        "certificate_hash": api.certificate_hash,
        "completed_at": api.completed_at,
    }))


def explore_api_to_storage(api: ExploreApiData) -> ExploreStorageData:
    return ExploreStorageData.model_validate(_present({
        "reflection": api.reflection,
        "class_date": api.class_date,
        "school": api.school,
        "evidence_files": api.evidence_files,
    }))


def amplify_api_to_storage(api: AmplifyApiData) -> AmplifyStorageData:
    return AmplifyStorageData.model_validate(_present({
        "peers_trained": api.peers_trained,
        "students_trained": api.students_trained,
        "attendance_proof_files": api.attendance_proof_files,
        "session_date": api.session_date,
        "session_start_time": api.session_start_time,
        "duration_minutes": api.duration_minutes,
        "location": api.location,
        "session_title": api.session_title,
        "co_facilitators": api.co_facilitators,
        "evidence_note": api.evidence_note,
    }))


def present_api_to_storage(api: PresentApiData) -> PresentStorageData:
    return PresentStorageData.model_validate(_present({
        "linkedin_url": api.linkedin_url,
        "screenshot_url": api.screenshot_url,
        "caption": api.caption,
    }))


def shine_api_to_storage(api: ShineApiData) -> ShineStorageData:
    return ShineStorageData.model_validate(_present({
        "idea_title": api.idea_title,
        "idea_summary": api.idea_summary,
        "attachments": api.attachments,
    }))


# ─── Storage → API ───────────────────────────────────────────────

def learn_storage_to_api(stored: LearnStorageData) -> LearnApiData:
    return LearnApiData.model_validate(_present({
        "provider": stored.provider,
        "courseName": stored.course_name,
        "certificateUrl": stored.certificate_url,
        "certificateHash": stored.certificate_hash,
        "completedAt": stored.completed_at,
    }))


def explore_storage_to_api(stored: ExploreStorageData) -> ExploreApiData:
    return ExploreApiData.model_validate(_present({
        "reflection": stored.reflection,
        "classDate": stored.class_date,
        "school": stored.school,
        "evidenceFiles": stored.evidence_files,
    }))


def amplify_storage_to_api(stored: AmplifyStorageData) -> AmplifyApiData:
    return AmplifyApiData.model_validate(_present({
        "peersTrained": stored.peers_trained,
        "studentsTrained": stored.students_trained,
        "attendanceProofFiles": stored.attendance_proof_files,
        "sessionDate": stored.session_date,
        "sessionStartTime": stored.session_start_time,
        "durationMinutes": stored.duration_minutes,
        "location": stored.location,
        "sessionTitle": stored.session_title,
        "coFacilitators": stored.co_facilitators,
        "evidenceNote": stored.evidence_note,
    }))


def present_storage_to_api(stored: PresentStorageData) -> PresentApiData:
    return PresentApiData.model_validate(_present({
        "linkedinUrl": stored.linkedin_url,
        "screenshotUrl": stored.screenshot_url,
        "caption": stored.caption,
    }))


def shine_storage_to_api(stored: ShineStorageData) -> ShineApiData:
    return ShineApiData.model_validate(_present({
        "ideaTitle": stored.idea_title,
        "ideaSummary": stored.idea_summary,
        "attachments": stored.attachments,
    }))


# ─── Envelope Dispatch ───────────────────────────────────────────

# activityCode → (source data model, mapper, target envelope)
_API_TO_STORAGE = {
    ActivityCode.LEARN.value: (LearnApiData, learn_api_to_storage, LearnStoragePayload),
    ActivityCode.EXPLORE.value: (ExploreApiData, explore_api_to_storage, ExploreStoragePayload),
    ActivityCode.AMPLIFY.value: (AmplifyApiData, amplify_api_to_storage, AmplifyStoragePayload),
    ActivityCode.PRESENT.value: (PresentApiData, present_api_to_storage, PresentStoragePayload),
    ActivityCode.SHINE.value: (ShineApiData, shine_api_to_storage, ShineStoragePayload),
}

_STORAGE_TO_API = {
    ActivityCode.LEARN.value: (LearnStorageData, learn_storage_to_api, LearnApiPayload),
    ActivityCode.EXPLORE.value: (ExploreStorageData, explore_storage_to_api, ExploreApiPayload),
    ActivityCode.AMPLIFY.value: (AmplifyStorageData, amplify_storage_to_api, AmplifyApiPayload),
    ActivityCode.PRESENT.value: (PresentStorageData, present_storage_to_api, PresentApiPayload),
    ActivityCode.SHINE.value: (ShineStorageData, shine_storage_to_api, ShineApiPayload),
}


def _route(routes: dict, payload):
    activity_code = getattr(payload, "activity_code", None)
    route = routes.get(activity_code) if isinstance(activity_code, str) else None
    if route is None:
        raise UnknownActivityCodeError(
            activity_code,
            ErrorContext(
                activity_code=activity_code if isinstance(activity_code, str) else None,
            ),
        )
    source_model, mapper, target_envelope = route
    data = payload.data
    if not isinstance(data, source_model):
        raise PayloadShapeMismatchError(
            activity_code, source_model.__name__, type(data).__name__,
            ErrorContext(activity_code=activity_code),
        )
    return target_envelope.model_validate({
        "activityCode": activity_code,
        "data": mapper(data),
    })


def transform_api_payload_to_storage(
    payload: SubmissionApiPayload,
) -> SubmissionStoragePayload:
    """Route a validated API envelope to its activity mapper."""
    return _route(_API_TO_STORAGE, payload)


def transform_storage_payload_to_api(
    payload: SubmissionStoragePayload,
) -> SubmissionApiPayload:
    """Route a validated storage envelope to its activity mapper."""
    return _route(_STORAGE_TO_API, payload)
