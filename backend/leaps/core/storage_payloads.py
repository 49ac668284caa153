"""Storage Payload Schemas — snake_case shapes handed to the persistence layer.

Invariants:
    - Field names match the stored JSON column and the DB trigger expectations exactly
    - camelCase keys are rejected, never silently mapped
    - activityCode fully determines which data model applies
    - Parsers return None (or a failed ParseResult) for bad input; they never raise

Design Decisions:
    - Storage shape is the canonical record of a submission; API shape is derived
      from it by core/transform_payloads.py (ADR: storage-first naming)
    - Discriminated union on activityCode: pydantic picks the variant by tag and
      reports unknown tags as union_tag_invalid instead of trying every variant
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field, StrictInt, StrictStr, TypeAdapter

from leaps.core.domain_constants import ACTIVITY_CODES, Url
from leaps.core.parse_result import ParseResult, safe_parse
from leaps.core.payload_base import EnvelopeModel, SessionLocation, StorageShapeModel


# ─── Data Shapes ─────────────────────────────────────────────────

class LearnStorageData(StorageShapeModel):
    provider: Literal["SPL", "ILS"]
    course_name: StrictStr = Field(min_length=2)
    certificate_url: StrictStr | None = None
    certificate_hash: StrictStr | None = None  # duplicate certificate detection
    completed_at: StrictStr


class ExploreStorageData(StorageShapeModel):
    reflection: StrictStr = Field(min_length=150)
    class_date: StrictStr
    school: StrictStr | None = None
    evidence_files: list[StrictStr] | None = None


class AmplifyStorageData(StorageShapeModel):
    peers_trained: StrictInt = Field(ge=0, le=50)
    students_trained: StrictInt = Field(ge=0, le=200)
    attendance_proof_files: list[StrictStr] | None = None
    session_date: StrictStr
    session_start_time: StrictStr | None = None
    duration_minutes: Annotated[StrictInt, Field(ge=0)] | None = None
    location: SessionLocation | None = None
    session_title: StrictStr | None = None
    co_facilitators: list[StrictStr] | None = None
    evidence_note: StrictStr | None = None


class PresentStorageData(StorageShapeModel):
    linkedin_url: Url
    screenshot_url: StrictStr | None = None
    caption: StrictStr = Field(min_length=10)


class ShineStorageData(StorageShapeModel):
    idea_title: StrictStr = Field(min_length=4)
    idea_summary: StrictStr = Field(min_length=50)
    attachments: list[StrictStr] | None = None


# ─── Envelopes ───────────────────────────────────────────────────

class LearnStoragePayload(EnvelopeModel):
    activity_code: Literal["LEARN"]
    data: LearnStorageData


class ExploreStoragePayload(EnvelopeModel):
    activity_code: Literal["EXPLORE"]
    data: ExploreStorageData


class AmplifyStoragePayload(EnvelopeModel):
    activity_code: Literal["AMPLIFY"]
    data: AmplifyStorageData


class PresentStoragePayload(EnvelopeModel):
    activity_code: Literal["PRESENT"]
    data: PresentStorageData


class ShineStoragePayload(EnvelopeModel):
    activity_code: Literal["SHINE"]
    data: ShineStorageData


SubmissionStoragePayload = Annotated[
    Union[
        LearnStoragePayload,
        ExploreStoragePayload,
        AmplifyStoragePayload,
        PresentStoragePayload,
        ShineStoragePayload,
    ],
    Field(discriminator="activity_code"),
]

_SUBMISSION = TypeAdapter(SubmissionStoragePayload)
_LEARN = TypeAdapter(LearnStoragePayload)
_EXPLORE = TypeAdapter(ExploreStoragePayload)
_AMPLIFY = TypeAdapter(AmplifyStoragePayload)
_PRESENT = TypeAdapter(PresentStoragePayload)
_SHINE = TypeAdapter(ShineStoragePayload)


# ─── Parsers ─────────────────────────────────────────────────────

def safe_parse_submission_storage_payload(payload: Any) -> ParseResult:
    """Validate any storage envelope. Failed result lists every broken rule."""
    return safe_parse(_SUBMISSION, payload, ACTIVITY_CODES)


def parse_submission_storage_payload(payload: Any) -> SubmissionStoragePayload | None:
    return safe_parse(_SUBMISSION, payload, ACTIVITY_CODES).value


def parse_learn_storage_payload(payload: Any) -> LearnStoragePayload | None:
    return safe_parse(_LEARN, payload).value


def parse_explore_storage_payload(payload: Any) -> ExploreStoragePayload | None:
    return safe_parse(_EXPLORE, payload).value


def parse_amplify_storage_payload(payload: Any) -> AmplifyStoragePayload | None:
    return safe_parse(_AMPLIFY, payload).value


def parse_present_storage_payload(payload: Any) -> PresentStoragePayload | None:
    return safe_parse(_PRESENT, payload).value


def parse_shine_storage_payload(payload: Any) -> ShineStoragePayload | None:
    return safe_parse(_SHINE, payload).value
