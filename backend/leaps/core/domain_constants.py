"""Domain Constants — single source of truth for LEAPS vocabularies and primitive rules.

Invariants:
    - Every closed vocabulary is a str Enum plus a tuple of its allowed values
    - Every validator is pure: same input, same ParseResult, no side effects
    - Handle rejections always carry HANDLE_ERROR_MESSAGE verbatim (UI displays it as-is)
    - URL validation checks shape only; the accepted string is returned unchanged

Design Decisions:
    - str Enums: values serialize to JSON without custom encoders
    - Annotated types (Handle, Url, DateTimeWithOffset, Cohort, School) are reused inside
      models, so a rule is written once and enforced everywhere
    - PydanticCustomError for fixed messages: pydantic would otherwise prefix
      "Value error, " to a plain ValueError message
"""

import re
from datetime import date
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AfterValidator, AnyUrl, EmailStr, Field, StrictStr, TypeAdapter, ValidationError,
)
from pydantic_core import PydanticCustomError

from leaps.core.parse_result import ParseResult, safe_parse


# ─── Enums ───────────────────────────────────────────────────────

class ActivityCode(str, Enum):
    """The five LEAPS stages. Each is a distinct submission kind."""
    LEARN = "LEARN"
    EXPLORE = "EXPLORE"
    AMPLIFY = "AMPLIFY"
    PRESENT = "PRESENT"
    SHINE = "SHINE"


class UserRole(str, Enum):
    PARTICIPANT = "PARTICIPANT"
    REVIEWER = "REVIEWER"
    ADMIN = "ADMIN"
    SUPERADMIN = "SUPERADMIN"


class UserType(str, Enum):
    """Educators submit activities; students are counted, never submit."""
    EDUCATOR = "EDUCATOR"
    STUDENT = "STUDENT"


class SubmissionStatus(str, Enum):
    """Review workflow states of a submission."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    REVOKED = "REVOKED"


class Visibility(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


class LedgerSource(str, Enum):
    """Where a points ledger entry came from."""
    MANUAL = "MANUAL"
    WEBHOOK = "WEBHOOK"
    FORM = "FORM"


ACTIVITY_CODES: tuple[str, ...] = tuple(c.value for c in ActivityCode)
USER_ROLES: tuple[str, ...] = tuple(r.value for r in UserRole)
USER_TYPES: tuple[str, ...] = tuple(t.value for t in UserType)
SUBMISSION_STATUSES: tuple[str, ...] = tuple(s.value for s in SubmissionStatus)
VISIBILITY_OPTIONS: tuple[str, ...] = tuple(v.value for v in Visibility)
LEDGER_SOURCES: tuple[str, ...] = tuple(s.value for s in LedgerSource)

LEARN_PROVIDERS: tuple[str, ...] = ("SPL", "ILS")

# Admin listing filters: "ALL" disables the filter
ACTIVITY_FILTER_OPTIONS: tuple[str, ...] = ("ALL", *ACTIVITY_CODES)
STATUS_FILTER_OPTIONS: tuple[str, ...] = ("ALL", *SUBMISSION_STATUSES)
ROLE_FILTER_OPTIONS: tuple[str, ...] = ("ALL", *USER_ROLES)


# ─── Limits ──────────────────────────────────────────────────────

LIMITS = {
    "HANDLE_MIN": 3,
    "HANDLE_MAX": 30,
    "COHORT_MAX": 100,
    "SCHOOL_MAX": 200,
    "LEARN_COURSE_NAME_MIN": 2,
    "EXPLORE_REFLECTION_MIN": 150,
    "AMPLIFY_PEERS_MAX": 50,
    "AMPLIFY_STUDENTS_MAX": 200,
    "AMPLIFY_WINDOW_DAYS": 7,
    "AMPLIFY_WINDOW_PEERS_MAX": 50,
    "AMPLIFY_WINDOW_STUDENTS_MAX": 200,
    "PRESENT_CAPTION_MIN": 10,
    "SHINE_IDEA_TITLE_MIN": 4,
    "SHINE_IDEA_SUMMARY_MIN": 50,
}


# ─── Primitive Rules ─────────────────────────────────────────────

HANDLE_PATTERN = re.compile(r"[A-Za-z0-9_-]{3,30}")
HANDLE_ERROR_MESSAGE = (
    "Handle must be 3-30 characters and contain only letters, numbers, "
    "underscores, and hyphens"
)
URL_ERROR_MESSAGE = "Invalid URL format"
DATETIME_ERROR_MESSAGE = "Invalid ISO-8601 datetime with offset"

_DATETIME_WITH_OFFSET = re.compile(
    r"(\d{4}-\d{2}-\d{2})T([01]\d|2[0-3]):[0-5]\d:[0-5]\d(\.\d+)?"
    r"(Z|[+-]([01]\d|2[0-3]):[0-5]\d)",
    re.ASCII,
)

_ANY_URL = TypeAdapter(AnyUrl)


def _check_handle(value: str) -> str:
    if HANDLE_PATTERN.fullmatch(value) is None:
        raise PydanticCustomError("handle_format", HANDLE_ERROR_MESSAGE)
    return value


def _check_url(value: str) -> str:
    try:
        _ANY_URL.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_format", URL_ERROR_MESSAGE) from None
    return value


def _check_datetime_with_offset(value: str) -> str:
    match = _DATETIME_WITH_OFFSET.fullmatch(value)
    if match is None:
        raise PydanticCustomError("datetime_format", DATETIME_ERROR_MESSAGE)
    try:
        date.fromisoformat(match.group(1))
    except ValueError:
        raise PydanticCustomError("datetime_format", DATETIME_ERROR_MESSAGE) from None
    return value


Handle = Annotated[StrictStr, AfterValidator(_check_handle)]
Url = Annotated[StrictStr, AfterValidator(_check_url)]
DateTimeWithOffset = Annotated[StrictStr, AfterValidator(_check_datetime_with_offset)]
Cohort = Annotated[StrictStr, Field(min_length=1, max_length=LIMITS["COHORT_MAX"])]
School = Annotated[StrictStr, Field(min_length=1, max_length=LIMITS["SCHOOL_MAX"])]

_HANDLE = TypeAdapter(Handle)
_EMAIL = TypeAdapter(EmailStr)
_URL = TypeAdapter(Url)
_COHORT = TypeAdapter(Cohort)
_SCHOOL = TypeAdapter(School)
_DATETIME = TypeAdapter(DateTimeWithOffset)


def validate_handle(value: Any) -> ParseResult[str]:
    return safe_parse(_HANDLE, value)


def validate_email(value: Any) -> ParseResult[str]:
    return safe_parse(_EMAIL, value)


def validate_url(value: Any) -> ParseResult[str]:
    """Absolute URL with scheme. Bare domains ("example.com") fail."""
    return safe_parse(_URL, value)


def validate_datetime_with_offset(value: Any) -> ParseResult[str]:
    return safe_parse(_DATETIME, value)


def validate_cohort(value: Any) -> ParseResult[str]:
    """Cohort label, 1-100 characters."""
    return safe_parse(_COHORT, value)


def validate_school(value: Any) -> ParseResult[str]:
    """School name, 1-200 characters."""
    return safe_parse(_SCHOOL, value)


# ─── Enum Validators ─────────────────────────────────────────────

_ACTIVITY_CODE = TypeAdapter(ActivityCode)
_USER_ROLE = TypeAdapter(UserRole)
_USER_TYPE = TypeAdapter(UserType)
_SUBMISSION_STATUS = TypeAdapter(SubmissionStatus)
_VISIBILITY = TypeAdapter(Visibility)
_LEDGER_SOURCE = TypeAdapter(LedgerSource)


def parse_activity_code(value: Any) -> ParseResult[ActivityCode]:
    return safe_parse(_ACTIVITY_CODE, value)


def parse_user_role(value: Any) -> ParseResult[UserRole]:
    return safe_parse(_USER_ROLE, value)


def parse_user_type(value: Any) -> ParseResult[UserType]:
    return safe_parse(_USER_TYPE, value)


def parse_submission_status(value: Any) -> ParseResult[SubmissionStatus]:
    return safe_parse(_SUBMISSION_STATUS, value)


def parse_visibility(value: Any) -> ParseResult[Visibility]:
    return safe_parse(_VISIBILITY, value)


def parse_ledger_source(value: Any) -> ParseResult[LedgerSource]:
    return safe_parse(_LEDGER_SOURCE, value)


def is_valid_activity_code(value: Any) -> bool:
    return value in ACTIVITY_CODES


def is_valid_user_role(value: Any) -> bool:
    return value in USER_ROLES


def is_valid_user_type(value: Any) -> bool:
    return value in USER_TYPES


def is_valid_submission_status(value: Any) -> bool:
    return value in SUBMISSION_STATUSES


def is_valid_visibility(value: Any) -> bool:
    return value in VISIBILITY_OPTIONS


def is_valid_ledger_source(value: Any) -> bool:
    return value in LEDGER_SOURCES
