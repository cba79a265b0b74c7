"""ReelPass data models for skills and score reports."""

from .base import (
    FrozenSchema,
    IdentifiedSchema,
    ReelPassBaseModel,
    clamp,
    round_half_up,
)
from .enums import PROFICIENCY_WEIGHTS, Proficiency, SkillCategory
from .score import (
    SCORE_CEILING,
    LevelInfo,
    ScoreBreakdown,
    ScoreDetails,
    ScoreLevel,
    ScorePreview,
)
from .skill import Skill

__all__ = [
    # Base
    "ReelPassBaseModel",
    "FrozenSchema",
    "IdentifiedSchema",
    "round_half_up",
    "clamp",
    # Enums
    "SkillCategory",
    "Proficiency",
    "PROFICIENCY_WEIGHTS",
    # Skill
    "Skill",
    # Score
    "SCORE_CEILING",
    "ScoreBreakdown",
    "ScoreLevel",
    "LevelInfo",
    "ScoreDetails",
    "ScorePreview",
]
