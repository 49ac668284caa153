"""Payload Model Bases — shared config for the two payload shape families.

Invariants:
    - StorageShapeModel accepts snake_case keys only; ApiShapeModel accepts camelCase keys only
    - Unknown keys are rejected (extra="forbid"), so a wrong-convention key never slips through
    - Optional fields are omitted, never null: an explicit null fails validation
    - Models are frozen: a parsed payload is a value, not a mutable record

Design Decisions:
    - Two sibling bases instead of one model with aliases on both sides: each shape
      validates independently, and the only bridge is core/transform_payloads.py
    - Strict scalars (StrictStr/StrictInt in field annotations) rather than model-level
      strict: nested models still validate from plain dicts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def _reject_nulls(data: Any) -> Any:
    if isinstance(data, dict):
        nulls = sorted(str(key) for key, value in data.items() if value is None)
        if nulls:
            raise PydanticCustomError(
                "null_field",
                "Optional fields must be omitted, not null: {fields}",
                {"fields": ", ".join(nulls)},
            )
    return data


class StorageShapeModel(BaseModel):
    """Base for snake_case payloads handed to the persistence layer."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def reject_explicit_nulls(cls, data: Any) -> Any:
        return _reject_nulls(data)


class ApiShapeModel(BaseModel):
    """Base for camelCase payloads received from or returned to API clients."""
    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def reject_explicit_nulls(cls, data: Any) -> Any:
        return _reject_nulls(data)


class EnvelopeModel(BaseModel):
    """Base for the {activityCode, data} wrapper. Same keys in both shapes."""
    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel,
    )


class SessionLocation(StorageShapeModel):
    """AMPLIFY session venue. Single-word keys, identical in both shapes."""
    venue: StrictStr | None = None
    city: StrictStr | None = None
    country: StrictStr | None = None


def to_wire(model: BaseModel) -> dict:
    """Serialize a payload or envelope to its wire dict (aliases, absent fields omitted)."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
