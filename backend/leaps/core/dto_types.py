"""DTO Types — externally safe projections of internal records.

Invariants:
    - Field names serialize camelCase; timestamps are ISO-8601 strings, never datetimes
    - A DTO declares its own fields; nothing from an internal record appears unless listed here
    - Fields left unset are absent from dump_dto output; fields set to None serialize as null
      (only where the DTO models null explicitly, e.g. badge iconUrl)

Design Decisions:
    - Pydantic models over TypedDicts: the allow-list is enforced on construction (extra="forbid")
    - exclude_unset on dump: "not applicable" (absent) stays distinct from "known empty" (null)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from leaps.core.domain_constants import ActivityCode, SubmissionStatus, Visibility


class DTOModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        use_enum_values=True,
    )


# ─── Leaderboard ─────────────────────────────────────────────────

class LeaderboardBadge(DTOModel):
    code: str
    name: str
    icon_url: str | None


class LeaderboardUserBadgeDTO(DTOModel):
    badge: LeaderboardBadge


class LeaderboardUserDTO(DTOModel):
    id: str
    handle: str
    name: str
    school: str | None = None
    avatar_url: str | None = None
    earned_badges: list[LeaderboardUserBadgeDTO] | None = None
    total_points: int


class LeaderboardEntryDTO(DTOModel):
    rank: int
    user: LeaderboardUserDTO


# ─── Submissions ─────────────────────────────────────────────────

class ActivityRefDTO(DTOModel):
    code: str
    name: str


class SubmissionDTO(DTOModel):
    id: str
    activity_code: ActivityCode
    activity: ActivityRefDTO
    status: SubmissionStatus
    visibility: Visibility
    payload: dict[str, Any] | None = None
    created_at: str
    updated_at: str


# ─── Profiles ────────────────────────────────────────────────────

class ProfileBadge(DTOModel):
    code: str
    name: str
    description: str | None
    icon_url: str | None


class UserProfileBadgeDTO(DTOModel):
    badge: ProfileBadge
    earned_at: str


class UserProfileDTO(DTOModel):
    id: str
    handle: str
    name: str
    email: str | None = None  # only when the caller is allowed to see it
    avatar_url: str | None = None
    school: str | None = None
    cohort: str | None = None
    created_at: str
    submissions: list[SubmissionDTO]
    earned_badges: list[UserProfileBadgeDTO]
    total_points: int


def dump_dto(dto: DTOModel) -> dict:
    """Final external shape: camelCase keys, unset optionals omitted."""
    return dto.model_dump(mode="json", by_alias=True, exclude_unset=True)
