"""Skill records as handed to the score engine (Pydantic only)."""

from typing import Any

from pydantic import Field, field_validator

from .base import IdentifiedSchema
from .enums import Proficiency, SkillCategory


class Skill(IdentifiedSchema):
    """A self-reported skill with its verification state.

    Records usually come straight from the skills table, where optional
    columns arrive as ``None``. Those are normalised here so scoring code
    never has to special-case them.
    """

    name: str = Field("", description="Display name")
    category: SkillCategory = Field(..., description="Skill category")
    proficiency: Proficiency = Field(..., description="Self-reported proficiency")
    years_experience: float = Field(0.0, ge=0, description="Years practising the skill")
    verified: bool = Field(False, description="Manually verified by an administrator")
    endorsements: int = Field(0, ge=0, description="Peer endorsements (not scored)")
    video_demo_url: str | None = Field(None, description="Demonstration video location")
    ai_rating: float | None = Field(None, ge=1, le=5, description="AI assessment, 1-5 stars")
    video_verified: bool = Field(False, description="Verified from AI video analysis")

    @field_validator("years_experience", "endorsements", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("verified", "video_verified", mode="before")
    @classmethod
    def _none_to_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("video_demo_url", mode="before")
    @classmethod
    def _blank_url_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("ai_rating", mode="before")
    @classmethod
    def _unrated_to_none(cls, value: Any) -> Any:
        # 0 is what the dashboard stores before any assessment has run
        if value == 0:
            return None
        return value

    @property
    def proficiency_weight(self) -> int:
        """Ordinal weight of the proficiency (1-5)."""
        return Proficiency.weight_of(self.proficiency)

    @property
    def has_video(self) -> bool:
        return self.video_demo_url is not None

    @property
    def has_ai_rating(self) -> bool:
        return self.ai_rating is not None

    @property
    def is_verified(self) -> bool:
        """Verified either manually or from video analysis."""
        return self.verified or self.video_verified
