"""Payload Intake — parse, reject or transform request bodies at the HTTP boundary.

Invariants:
    - Failed parses become PayloadValidationError here and nowhere else
    - Contract violations from the dispatchers propagate untouched
    - The claimed activity_code travels in ErrorContext; the error handler logs it once

Design Decisions:
    - Shell owns exceptions so the core stays pure (ADR: impureim sandwich)
    - activity_code read from the raw body only for error context; it is not trusted
"""

from typing import Any

from leaps.core.api_payloads import SubmissionApiPayload, safe_parse_submission_api_payload
from leaps.core.errors import ErrorContext, PayloadValidationError
from leaps.core.parse_result import ParseResult
from leaps.core.storage_payloads import (
    SubmissionStoragePayload, safe_parse_submission_storage_payload,
)
from leaps.core.transform_payloads import (
    transform_api_payload_to_storage, transform_storage_payload_to_api,
)


def _claimed_activity_code(body: Any) -> str | None:
    if isinstance(body, dict):
        code = body.get("activityCode")
        return code if isinstance(code, str) else None
    return None


def _require(result: ParseResult, body: Any):
    if result.ok:
        return result.value
    raise PayloadValidationError(
        result.issues, context=ErrorContext(activity_code=_claimed_activity_code(body)),
    )


def accept_api_payload(body: Any) -> SubmissionStoragePayload:
    """Validate an API-shape envelope and return it in storage shape."""
    api_payload = _require(safe_parse_submission_api_payload(body), body)
    return transform_api_payload_to_storage(api_payload)


def present_stored_payload(body: Any) -> SubmissionApiPayload:
    """Validate a storage-shape envelope and return it in API shape."""
    stored = _require(safe_parse_submission_storage_payload(body), body)
    return transform_storage_payload_to_api(stored)
