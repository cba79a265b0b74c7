"""ReelPass Score engine: aggregation, tiers, recommendations and projection."""

from .engine import (
    build_score_preview,
    calculate_breakdown,
    calculate_potential_score,
    calculate_reelpass_score,
    project_fully_verified,
)
from .levels import SCORE_LEVELS, classify_level, get_score_level_info, level_progress
from .recommendations import generate_next_steps, generate_recommendations

__all__ = [
    "calculate_reelpass_score",
    "calculate_potential_score",
    "calculate_breakdown",
    "build_score_preview",
    "project_fully_verified",
    "get_score_level_info",
    "classify_level",
    "level_progress",
    "SCORE_LEVELS",
    "generate_recommendations",
    "generate_next_steps",
]
