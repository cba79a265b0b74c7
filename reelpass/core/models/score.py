"""Score report models produced by the score engine (Pydantic only)."""

from pydantic import Field, field_serializer

from .base import FrozenSchema

# Top of the tier table; every score report is on this scale
SCORE_CEILING = 1000

# =============================================================================
# Pydantic Schemas
# =============================================================================


class ScoreBreakdown(FrozenSchema):
    """The six capped components of a ReelPass Score."""

    base_score: float = Field(0.0, ge=0.0, description="Points for number of skills")
    proficiency_bonus: float = Field(0.0, ge=0.0, description="Points for proficiency levels")
    experience_bonus: float = Field(0.0, ge=0.0, description="Points for years of experience")
    diversity_bonus: float = Field(0.0, ge=0.0, description="Points for distinct categories")
    verification_bonus: float = Field(0.0, ge=0.0, description="Points for verified skills and videos")
    ai_rating_bonus: float = Field(0.0, ge=0.0, description="Points for average AI rating")
    total: int = Field(0, ge=0, description="Rounded sum of all components")
    max_possible: int = Field(SCORE_CEILING, gt=0, description="Nominal score ceiling")
    percentage_complete: int = Field(0, ge=0, le=100, description="Total as a percentage of ceiling")

    @field_serializer(
        "base_score",
        "proficiency_bonus",
        "experience_bonus",
        "diversity_bonus",
        "verification_bonus",
        "ai_rating_bonus",
    )
    def _whole_points_as_int(self, value: float) -> int | float:
        # Reports read 20, not 20.0
        if value.is_integer():
            return int(value)
        return value

    @property
    def components(self) -> dict[str, float]:
        """Component name to points, in display order."""
        return {
            "base_score": self.base_score,
            "proficiency_bonus": self.proficiency_bonus,
            "experience_bonus": self.experience_bonus,
            "diversity_bonus": self.diversity_bonus,
            "verification_bonus": self.verification_bonus,
            "ai_rating_bonus": self.ai_rating_bonus,
        }


class ScoreLevel(FrozenSchema):
    """A named, inclusive score range."""

    min_score: int = Field(..., ge=0, description="Lowest score in the tier")
    max_score: int = Field(..., ge=0, description="Highest score in the tier")
    name: str = Field(..., description="Tier display name")

    def contains(self, score: float) -> bool:
        return self.min_score <= score <= self.max_score


class LevelInfo(ScoreLevel):
    """Level metadata for a known score."""

    progress: int = Field(0, ge=0, le=100, description="Progress through the tier (%)")
    next_level: ScoreLevel | None = Field(None, description="Next tier up, None at the top")


class ScoreDetails(FrozenSchema):
    """Full ReelPass Score report."""

    current_score: int = Field(..., ge=0, description="ReelPass Score")
    max_score: int = Field(SCORE_CEILING, gt=0, description="Nominal score ceiling")
    breakdown: ScoreBreakdown = Field(..., description="Component breakdown")
    recommendations: list[str] = Field(default_factory=list, description="Up to 4 suggestions")
    next_steps: list[str] = Field(default_factory=list, description="Stage-appropriate actions")
    level_name: str = Field(..., description="Current tier name")
    level_progress: int = Field(0, ge=0, le=100, description="Progress through the tier (%)")


class ScorePreview(FrozenSchema):
    """Current score alongside the fully-verified projection."""

    details: ScoreDetails = Field(..., description="Current score report")
    potential_score: int = Field(..., ge=0, description="Score if every skill were verified")
    potential_gain: int = Field(0, ge=0, description="Points available through verification")
    level_info: LevelInfo = Field(..., description="Level metadata for the current score")
    completion_ratio: float = Field(0.0, ge=0.0, le=1.0, description="Current score / ceiling")
