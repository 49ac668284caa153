"""Parse Results — success/failure values returned by every parse entry point.

Invariants:
    - A ParseResult is either ok (value set, no issues) or failed (value None, >= 1 issue)
    - safe_parse never raises for malformed input; pydantic ValidationError stops here
    - Issue paths use the keys as submitted (aliases), so messages match the request body

Design Decisions:
    - Result value over exceptions: malformed input is expected data, not a defect
      (ADR: only contract violations raise — see core/errors.py)
    - Frozen dataclasses: results are shared freely between callers without copying
"""

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class FieldIssue:
    """One failed rule on one input location."""
    path: tuple[str | int, ...]
    message: str
    code: str

    @property
    def field(self) -> str:
        return ".".join(str(part) for part in self.path)

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.code}


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of validating an untyped value against a schema."""
    value: T | None = None
    issues: tuple[FieldIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, issues: tuple[FieldIssue, ...]) -> "ParseResult[T]":
        return cls(value=None, issues=issues)


def issues_from_error(
    exc: ValidationError, union_tags: Collection[str] = (),
) -> tuple[FieldIssue, ...]:
    """Flatten a pydantic ValidationError into FieldIssues.

    pydantic prefixes locations inside a discriminated union with the tag value
    (("LEARN", "data", "courseName")); tags listed in union_tags are dropped so
    paths read as in the request body.
    """
    issues = []
    for err in exc.errors():
        loc = tuple(err["loc"])
        if loc and loc[0] in union_tags:
            loc = loc[1:]
        issues.append(FieldIssue(path=loc, message=err["msg"], code=err["type"]))
    return tuple(issues)


def safe_parse(
    adapter: TypeAdapter[T], value: Any, union_tags: Collection[str] = (),
) -> ParseResult[T]:
    """Validate value with adapter. Returns a failed result instead of raising."""
    try:
        return ParseResult.success(adapter.validate_python(value))
    except ValidationError as exc:
        return ParseResult.failure(issues_from_error(exc, union_tags))
