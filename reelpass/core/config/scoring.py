"""Scoring parameters passed explicitly into the score engine."""

from typing import Any

from pydantic import Field, field_validator, model_validator

from ..models.base import FrozenSchema
from ..models.score import SCORE_CEILING


class ScoringConfig(FrozenSchema):
    """Points and caps for each ReelPass Score component.

    Defaults reproduce the published ReelPass formula. The six caps must fit
    within ``max_score``, and ``max_score`` itself is pinned to the top of the
    level table: levels, progress and next-step bands are all on that scale.
    """

    # Base score: points per skill
    points_per_skill: float = Field(20, ge=0)
    base_cap: float = Field(300, ge=0)

    # Proficiency: points per proficiency weight unit
    points_per_proficiency: float = Field(8, ge=0)
    proficiency_cap: float = Field(200, ge=0)

    # Experience: points per year
    points_per_year: float = Field(3, ge=0)
    experience_cap: float = Field(150, ge=0)

    # Diversity: points per distinct category
    points_per_category: float = Field(25, ge=0)
    diversity_cap: float = Field(100, ge=0)

    # Verification
    points_per_verified: float = Field(15, ge=0)
    points_per_video: float = Field(10, ge=0)
    verification_cap: float = Field(150, ge=0)

    # AI rating: points per average star
    points_per_ai_star: float = Field(20, ge=0)
    ai_rating_cap: float = Field(100, ge=0)

    max_score: int = Field(SCORE_CEILING, gt=0)
    max_recommendations: int = Field(4, ge=0)

    # Potential score projection
    potential_ai_rating: float = Field(4, ge=1, le=5)
    potential_video_url: str = Field("potential-video", min_length=1)

    @field_validator("max_score")
    @classmethod
    def _max_score_matches_levels(cls, value: int) -> int:
        if value != SCORE_CEILING:
            raise ValueError(f"max_score must be {SCORE_CEILING}, the top of the level table")
        return value

    @model_validator(mode="after")
    def _caps_fit_ceiling(self) -> "ScoringConfig":
        caps = (
            self.base_cap
            + self.proficiency_cap
            + self.experience_cap
            + self.diversity_cap
            + self.verification_cap
            + self.ai_rating_cap
        )
        if caps > self.max_score:
            raise ValueError(
                f"component caps sum to {caps:g}, above max_score {self.max_score}"
            )
        return self

    @classmethod
    def from_config(cls, config: dict[str, Any] | None) -> "ScoringConfig":
        """Build from the ``scoring`` section of a loaded configuration."""
        section = (config or {}).get("scoring") or {}
        return cls.model_validate(section)


DEFAULT_SCORING_CONFIG = ScoringConfig()
