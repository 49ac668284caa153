"""AMPLIFY Window Limits — rolling 7-day caps on peers and students trained.

Invariants:
    - All functions are PURE: the clock is passed in as `now`, records are plain mappings
    - Return error dict on violation, None on success
    - Stored payloads that fail the storage schema count as zero (legacy rows never block)
    - created_at may be a datetime or an ISO-8601 string; an unparseable one counts as zero
    - A record exactly window_days old is still inside the window

Design Decisions:
    - Return dicts (not exceptions): the caller decides the HTTP status and message,
      same shape as every other pure check (status, error_code, message)
    - Window totals computed from storage-shape records because that is what the
      persistence layer hands back
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from leaps.core.api_payloads import AmplifyApiData
from leaps.core.domain_constants import LIMITS
from leaps.core.storage_payloads import parse_amplify_storage_payload


@dataclass(frozen=True)
class AmplifyWindowTotals:
    peers: int = 0
    students: int = 0


def _as_aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _created_at(value: datetime | str) -> datetime | None:
    """Row timestamp as an aware datetime. ISO strings accepted, "Z" included."""
    if isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            return None
    return _as_aware(value)


def sum_amplify_window(
    records: Iterable[Mapping],
    now: datetime,
    window_days: int = LIMITS["AMPLIFY_WINDOW_DAYS"],
) -> AmplifyWindowTotals:
    """Sum peers/students over AMPLIFY records created in the trailing window."""
    cutoff = _as_aware(now) - timedelta(days=window_days)
    peers = 0
    students = 0
    for record in records:
        created_at = _created_at(record["created_at"])
        if created_at is None or created_at < cutoff:
            continue
        stored = parse_amplify_storage_payload(
            {"activityCode": "AMPLIFY", "data": record.get("payload")},
        )
        if stored is None:
            continue
        peers += stored.data.peers_trained
        students += stored.data.students_trained
    return AmplifyWindowTotals(peers=peers, students=students)


def check_amplify_window_limits(
    records: Iterable[Mapping],
    new_data: AmplifyApiData,
    now: datetime,
) -> dict | None:
    """Reject a new AMPLIFY submission that would push the window past its caps."""
    totals = sum_amplify_window(records, now)
    peers_max = LIMITS["AMPLIFY_WINDOW_PEERS_MAX"]
    students_max = LIMITS["AMPLIFY_WINDOW_STUDENTS_MAX"]
    days = LIMITS["AMPLIFY_WINDOW_DAYS"]

    if totals.peers + new_data.peers_trained > peers_max:
        return {
            "status": "error",
            "error_code": "AMPLIFY_PEER_LIMIT_EXCEEDED",
            "message": (
                f"Peer training limit exceeded. You've trained {totals.peers} "
                f"peers in the last {days} days. Maximum allowed: {peers_max}."
            ),
            "window_total": totals.peers,
        }
    if totals.students + new_data.students_trained > students_max:
        return {
            "status": "error",
            "error_code": "AMPLIFY_STUDENT_LIMIT_EXCEEDED",
            "message": (
                f"Student training limit exceeded. You've trained {totals.students} "
                f"students in the last {days} days. Maximum allowed: {students_max}."
            ),
            "window_total": totals.students,
        }
    return None
