"""Base Pydantic schemas and helpers for ReelPass models."""

import math
import uuid

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Pydantic Base Classes
# =============================================================================


class ReelPassBaseModel(BaseModel):
    """Base Pydantic model for all schemas with common configuration."""

    model_config = ConfigDict(
        # Allow conversion from row objects handed over by the persistence layer
        from_attributes=True,
        # Validate on assignment
        validate_assignment=True,
        # Use enum values instead of enum members
        use_enum_values=True,
        str_strip_whitespace=True,
    )


class FrozenSchema(ReelPassBaseModel):
    """Immutable schema for static tables and computed reports."""

    model_config = ConfigDict(frozen=True)


class IdentifiedSchema(ReelPassBaseModel):
    """Schema with UUID identifier."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique identifier")


# =============================================================================
# Utility Functions
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    The builtin round() rounds halves to even, which would shift scores that
    land exactly on .5 down by one point.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound value to [lower, upper]."""
    return max(lower, min(upper, value))
