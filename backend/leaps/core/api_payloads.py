"""API Payload Schemas — camelCase shapes received from and returned to API clients.

Invariants:
    - Only camelCase keys are accepted; snake_case keys are unknown keys and fail
    - Constraints mirror core/storage_payloads.py field for field
    - activityCode fully determines which data model applies
    - Parsers return None (or a failed ParseResult) for bad input; they never raise

Design Decisions:
    - Python attributes stay snake_case; the camelCase contract lives in the alias
      generator on ApiShapeModel, so callers read api.course_name either way
    - Separate classes from the storage shape even where fields coincide
      (ADR: cross-convention rejection falls out of two schemas, not a runtime flag)
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field, StrictInt, StrictStr, TypeAdapter

from leaps.core.domain_constants import ACTIVITY_CODES, Url
from leaps.core.parse_result import ParseResult, safe_parse
from leaps.core.payload_base import ApiShapeModel, EnvelopeModel, SessionLocation


# ─── Data Shapes ─────────────────────────────────────────────────

class LearnApiData(ApiShapeModel):
    provider: Literal["SPL", "ILS"]
    course_name: StrictStr = Field(min_length=2)
    certificate_url: StrictStr | None = None
    certificate_hash: StrictStr | None = None
    completed_at: StrictStr


class ExploreApiData(ApiShapeModel):
    reflection: StrictStr = Field(min_length=150)
    class_date: StrictStr
    school: StrictStr | None = None
    evidence_files: list[StrictStr] | None = None


class AmplifyApiData(ApiShapeModel):
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


class PresentApiData(ApiShapeModel):
    linkedin_url: Url
    screenshot_url: StrictStr | None = None
    caption: StrictStr = Field(min_length=10)


class ShineApiData(ApiShapeModel):
    idea_title: StrictStr = Field(min_length=4)
    idea_summary: StrictStr = Field(min_length=50)
    attachments: list[StrictStr] | None = None


# ─── Envelopes ───────────────────────────────────────────────────

class LearnApiPayload(EnvelopeModel):
    activity_code: Literal["LEARN"]
    data: LearnApiData


class ExploreApiPayload(EnvelopeModel):
    activity_code: Literal["EXPLORE"]
    data: ExploreApiData


class AmplifyApiPayload(EnvelopeModel):
    activity_code: Literal["AMPLIFY"]
    data: AmplifyApiData


class PresentApiPayload(EnvelopeModel):
    activity_code: Literal["PRESENT"]
    data: PresentApiData


class ShineApiPayload(EnvelopeModel):
    activity_code: Literal["SHINE"]
    data: ShineApiData


SubmissionApiPayload = Annotated[
    Union[
        LearnApiPayload,
        ExploreApiPayload,
        AmplifyApiPayload,
        PresentApiPayload,
        ShineApiPayload,
    ],
    Field(discriminator="activity_code"),
]

_SUBMISSION = TypeAdapter(SubmissionApiPayload)
_LEARN = TypeAdapter(LearnApiPayload)
_EXPLORE = TypeAdapter(ExploreApiPayload)
_AMPLIFY = TypeAdapter(AmplifyApiPayload)
_PRESENT = TypeAdapter(PresentApiPayload)
_SHINE = TypeAdapter(ShineApiPayload)


# ─── Parsers ─────────────────────────────────────────────────────

def safe_parse_submission_api_payload(payload: Any) -> ParseResult:
    """Validate a request body envelope. Failed result lists every broken rule."""
    return safe_parse(_SUBMISSION, payload, ACTIVITY_CODES)


def parse_submission_api_payload(payload: Any) -> SubmissionApiPayload | None:
    return safe_parse(_SUBMISSION, payload, ACTIVITY_CODES).value


def parse_learn_api_payload(payload: Any) -> LearnApiPayload | None:
    return safe_parse(_LEARN, payload).value


def parse_explore_api_payload(payload: Any) -> ExploreApiPayload | None:
    return safe_parse(_EXPLORE, payload).value


def parse_amplify_api_payload(payload: Any) -> AmplifyApiPayload | None:
    return safe_parse(_AMPLIFY, payload).value


def parse_present_api_payload(payload: Any) -> PresentApiPayload | None:
    return safe_parse(_PRESENT, payload).value


def parse_shine_api_payload(payload: Any) -> ShineApiPayload | None:
    return safe_parse(_SHINE, payload).value
