"""DTO Mappers — project internal storage records into DTOs.

Invariants:
    - Every DTO is built field by field from an allow-list; records are never spread
    - Internal-only fields (email unless permitted, user_id, reviewer_id, admin_notes,
      is_public, raw aggregation wrappers) never reach a DTO
    - datetimes become ISO-8601 UTC strings with a Z suffix; strings pass through unchanged
    - null display fields (school, avatar_url, cohort) become absent, not null
    - extract_points_from_aggregation is the only place a default (0) is synthesized

Design Decisions:
    - Records are plain mappings in storage naming (ORM row dicts): no ORM import in core
    - Submission payloads are re-read through the storage schema and converted to API shape,
      so a DTO never carries snake_case payload keys; unreadable payloads are omitted
"""

from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from leaps.core.dto_types import (
    ActivityRefDTO,
    LeaderboardBadge,
    LeaderboardEntryDTO,
    LeaderboardUserBadgeDTO,
    LeaderboardUserDTO,
    ProfileBadge,
    SubmissionDTO,
    UserProfileBadgeDTO,
    UserProfileDTO,
)
from leaps.core.payload_base import to_wire
from leaps.core.storage_payloads import parse_submission_storage_payload
from leaps.core.transform_payloads import transform_storage_payload_to_api


def to_iso(value: datetime | date | str) -> str:
    """Match JavaScript Date.toISOString(): UTC, millisecond precision, Z suffix."""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        utc = value.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return value.isoformat()


def _present(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


def extract_points_from_aggregation(aggregation: Mapping | None) -> int:
    """Summed points from an aggregation wrapper ({"_sum": {"points": n}}).

    A missing wrapper, missing _sum, or null sum means no points were recorded,
    which is zero.
    """
    if not aggregation:
        return 0
    sums = aggregation.get("_sum")
    if not sums:
        return 0
    points = sums.get("points")
    return points if points is not None else 0


# ─── Leaderboard ─────────────────────────────────────────────────

def map_leaderboard_user_badge_to_dto(earned_badge: Mapping) -> LeaderboardUserBadgeDTO:
    badge = earned_badge["badge"]
    return LeaderboardUserBadgeDTO(
        badge=LeaderboardBadge(
            code=badge["code"],
            name=badge["name"],
            icon_url=badge.get("icon_url"),
        ),
    )


def map_leaderboard_entry_to_dto(
    rank: int, user: Mapping, total_points: int,
) -> LeaderboardEntryDTO:
    earned_badges = user.get("earned_badges")
    return LeaderboardEntryDTO(
        rank=rank,
        user=LeaderboardUserDTO(**_present({
            "id": user["id"],
            "handle": user["handle"],
            "name": user["name"],
            "school": user.get("school"),
            "avatar_url": user.get("avatar_url"),
            "earned_badges": (
                [map_leaderboard_user_badge_to_dto(b) for b in earned_badges]
                if earned_badges is not None else None
            ),
            "total_points": total_points,
        })),
    )


def map_raw_leaderboard_entry_to_dto(rank: int, raw_user: Mapping) -> LeaderboardEntryDTO:
    """Leaderboard row that carries its own _sum aggregation wrapper."""
    return map_leaderboard_entry_to_dto(
        rank, raw_user, extract_points_from_aggregation(raw_user),
    )


# ─── Submissions ─────────────────────────────────────────────────

def _external_payload(activity_code: str, payload: Any) -> dict | None:
    stored = parse_submission_storage_payload(
        {"activityCode": activity_code, "data": payload},
    )
    if stored is None:
        return None
    return to_wire(transform_storage_payload_to_api(stored))["data"]


def map_submission_to_dto(submission: Mapping) -> SubmissionDTO:
    activity = submission["activity"]
    return SubmissionDTO(**_present({
        "id": submission["id"],
        "activity_code": submission["activity_code"],
        "activity": ActivityRefDTO(code=activity["code"], name=activity["name"]),
        "status": submission["status"],
        "visibility": submission["visibility"],
        "payload": _external_payload(
            submission["activity_code"], submission.get("payload"),
        ),
        "created_at": to_iso(submission["created_at"]),
        "updated_at": to_iso(submission["updated_at"]),
    }))


# ─── Profiles ────────────────────────────────────────────────────

def map_user_profile_badge_to_dto(earned_badge: Mapping) -> UserProfileBadgeDTO:
    badge = earned_badge["badge"]
    return UserProfileBadgeDTO(
        badge=ProfileBadge(
            code=badge["code"],
            name=badge["name"],
            description=badge.get("description"),
            icon_url=badge.get("icon_url"),
        ),
        earned_at=to_iso(earned_badge["earned_at"]),
    )


def map_user_profile_to_dto(
    user: Mapping, total_points: int, include_email: bool = False,
) -> UserProfileDTO:
    """Profile DTO. Email is only copied when include_email is set."""
    return UserProfileDTO(**_present({
        "id": user["id"],
        "handle": user["handle"],
        "name": user["name"],
        "email": user.get("email") if include_email else None,
        "avatar_url": user.get("avatar_url"),
        "school": user.get("school"),
        "cohort": user.get("cohort"),
        "created_at": to_iso(user["created_at"]),
        "submissions": [map_submission_to_dto(s) for s in user.get("submissions") or ()],
        "earned_badges": [
            map_user_profile_badge_to_dto(b) for b in user.get("earned_badges") or ()
        ],
        "total_points": total_points,
    }))


def map_raw_user_profile_to_dto(raw_user: Mapping) -> UserProfileDTO:
    """Public profile row that carries its own _sum aggregation wrapper.

    Email is never exposed here. Timestamps may be datetimes or ISO strings.
    """
    return map_user_profile_to_dto(
        raw_user, extract_points_from_aggregation(raw_user), include_email=False,
    )
