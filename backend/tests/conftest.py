"""Root conftest — shared test configuration and sample payloads.

Every fixture returns a fresh dict, so tests may mutate what they receive.
"""

import pytest

REFLECTION = (
    "Today the class built a small weather station and compared readings with the "
    "national forecast. Students noticed the humidity drift and proposed calibrating "
    "against a wet-bulb thermometer next week."
)


def _api_samples() -> dict[str, dict]:
    return {
        "LEARN": {
            "activityCode": "LEARN",
            "data": {
                "provider": "SPL",
                "courseName": "AI Foundations",
                "certificateUrl": "https://example.com/certificates/123",
                "certificateHash": "sha256:abc123",
                "completedAt": "2025-01-15T10:00:00Z",
            },
        },
        "EXPLORE": {
            "activityCode": "EXPLORE",
            "data": {
                "reflection": REFLECTION,
                "classDate": "2025-02-03",
                "school": "Riverside High",
                "evidenceFiles": ["evidence/photo-1.jpg"],
            },
        },
        "AMPLIFY": {
            "activityCode": "AMPLIFY",
            "data": {
                "peersTrained": 5,
                "studentsTrained": 20,
                "attendanceProofFiles": ["proof/sheet.pdf"],
                "sessionDate": "2025-03-10",
                "sessionStartTime": "14:00",
                "durationMinutes": 90,
                "location": {"venue": "Library", "city": "Lisbon", "country": "PT"},
                "sessionTitle": "Prompting basics",
                "coFacilitators": ["maria"],
                "evidenceNote": "Slides shared afterwards",
            },
        },
        "PRESENT": {
            "activityCode": "PRESENT",
            "data": {
                "linkedinUrl": "https://www.linkedin.com/posts/example-123",
                "screenshotUrl": "screens/post.png",
                "caption": "Sharing what my class built this term",
            },
        },
        "SHINE": {
            "activityCode": "SHINE",
            "data": {
                "ideaTitle": "Peer grading bot",
                "ideaSummary": (
                    "A classroom assistant that drafts rubric feedback for educators to review."
                ),
                "attachments": ["ideas/deck.pdf"],
            },
        },
    }


def _storage_samples() -> dict[str, dict]:
    return {
        "LEARN": {
            "activityCode": "LEARN",
            "data": {
                "provider": "SPL",
                "course_name": "AI Foundations",
                "certificate_url": "https://example.com/certificates/123",
                "certificate_hash": "sha256:abc123",
                "completed_at": "2025-01-15T10:00:00Z",
            },
        },
        "EXPLORE": {
            "activityCode": "EXPLORE",
            "data": {
                "reflection": REFLECTION,
                "class_date": "2025-02-03",
                "school": "Riverside High",
                "evidence_files": ["evidence/photo-1.jpg"],
            },
        },
        "AMPLIFY": {
            "activityCode": "AMPLIFY",
            "data": {
                "peers_trained": 5,
                "students_trained": 20,
                "attendance_proof_files": ["proof/sheet.pdf"],
                "session_date": "2025-03-10",
                "session_start_time": "14:00",
                "duration_minutes": 90,
                "location": {"venue": "Library", "city": "Lisbon", "country": "PT"},
                "session_title": "Prompting basics",
                "co_facilitators": ["maria"],
                "evidence_note": "Slides shared afterwards",
            },
        },
        "PRESENT": {
            "activityCode": "PRESENT",
            "data": {
                "linkedin_url": "https://www.linkedin.com/posts/example-123",
                "screenshot_url": "screens/post.png",
                "caption": "Sharing what my class built this term",
            },
        },
        "SHINE": {
            "activityCode": "SHINE",
            "data": {
                "idea_title": "Peer grading bot",
                "idea_summary": (
                    "A classroom assistant that drafts rubric feedback for educators to review."
                ),
                "attachments": ["ideas/deck.pdf"],
            },
        },
    }


@pytest.fixture
def api_samples() -> dict[str, dict]:
    """Valid API-shape envelope per activity code, every optional field present."""
    return _api_samples()


@pytest.fixture
def storage_samples() -> dict[str, dict]:
    """Storage-shape twins of api_samples."""
    return _storage_samples()
