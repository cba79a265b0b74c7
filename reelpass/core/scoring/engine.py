"""ReelPass Score engine.

Pure functions from a skill collection to a score report. Nothing here keeps
state between calls, reads configuration on its own, or performs I/O beyond
debug logging; scoring parameters arrive as a ``ScoringConfig``.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ...observability.logger import get_logger
from ..config.scoring import DEFAULT_SCORING_CONFIG, ScoringConfig
from ..models.base import clamp, round_half_up
from ..models.score import ScoreBreakdown, ScoreDetails, ScorePreview
from ..models.skill import Skill
from .levels import SCORE_LEVELS, classify_level, get_score_level_info, level_progress
from .recommendations import (
    ONBOARDING_NEXT_STEPS,
    ONBOARDING_RECOMMENDATIONS,
    generate_next_steps,
    generate_recommendations,
)

logger = get_logger(__name__)

SkillInput = Skill | Mapping[str, Any]


def _coerce_skills(skills: Sequence[SkillInput]) -> list[Skill]:
    """Validate raw records into Skill models, passing models through."""
    return [s if isinstance(s, Skill) else Skill.model_validate(s) for s in skills]


def calculate_breakdown(
    skills: Sequence[Skill], config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> ScoreBreakdown:
    """Compute the six capped components for a non-empty collection.

    Args:
        skills: At least one skill
        config: Points and caps per component

    Returns:
        Breakdown with total bounded to [0, max_score]
    """
    if not skills:
        raise ValueError("calculate_breakdown requires at least one skill")

    base_score = min(len(skills) * config.points_per_skill, config.base_cap)

    proficiency_points = sum(s.proficiency_weight * config.points_per_proficiency for s in skills)
    proficiency_bonus = min(proficiency_points, config.proficiency_cap)

    total_years = sum(s.years_experience for s in skills)
    experience_bonus = min(total_years * config.points_per_year, config.experience_cap)

    categories = {s.category for s in skills}
    diversity_bonus = min(len(categories) * config.points_per_category, config.diversity_cap)

    verified_count = sum(1 for s in skills if s.is_verified)
    video_count = sum(1 for s in skills if s.has_video)
    verification_bonus = min(
        verified_count * config.points_per_verified + video_count * config.points_per_video,
        config.verification_cap,
    )

    ratings = [s.ai_rating for s in skills if s.ai_rating is not None]
    average_rating = sum(ratings) / len(ratings) if ratings else 0.0
    ai_rating_bonus = min(average_rating * config.points_per_ai_star, config.ai_rating_cap)

    raw_total = (
        base_score
        + proficiency_bonus
        + experience_bonus
        + diversity_bonus
        + verification_bonus
        + ai_rating_bonus
    )
    total = int(clamp(round_half_up(raw_total), 0, config.max_score))
    percentage = round_half_up(total * 100 / config.max_score)

    return ScoreBreakdown(
        base_score=base_score,
        proficiency_bonus=proficiency_bonus,
        experience_bonus=experience_bonus,
        diversity_bonus=diversity_bonus,
        verification_bonus=verification_bonus,
        ai_rating_bonus=ai_rating_bonus,
        total=total,
        max_possible=config.max_score,
        percentage_complete=int(clamp(percentage, 0, 100)),
    )


def _onboarding_details(config: ScoringConfig) -> ScoreDetails:
    """Fixed report for a profile with no skills yet."""
    return ScoreDetails(
        current_score=0,
        max_score=config.max_score,
        breakdown=ScoreBreakdown(max_possible=config.max_score),
        recommendations=list(ONBOARDING_RECOMMENDATIONS),
        next_steps=list(ONBOARDING_NEXT_STEPS),
        level_name=SCORE_LEVELS[0].name,
        level_progress=0,
    )


def calculate_reelpass_score(
    skills: Sequence[SkillInput], config: ScoringConfig | None = None
) -> ScoreDetails:
    """Compute the full ReelPass Score report for a skill collection.

    Args:
        skills: Skill models or raw skill records, in any order
        config: Scoring parameters (defaults to the standard formula)

    Returns:
        ScoreDetails with breakdown, tier, recommendations and next steps
    """
    config = config or DEFAULT_SCORING_CONFIG
    skill_models = _coerce_skills(skills)

    if not skill_models:
        logger.debug("reelpass_score_onboarding")
        return _onboarding_details(config)

    breakdown = calculate_breakdown(skill_models, config)
    level = classify_level(breakdown.total)

    details = ScoreDetails(
        current_score=breakdown.total,
        max_score=config.max_score,
        breakdown=breakdown,
        recommendations=generate_recommendations(
            skill_models, breakdown, limit=config.max_recommendations
        ),
        next_steps=generate_next_steps(breakdown.total),
        level_name=level.name,
        level_progress=level_progress(breakdown.total, level),
    )

    logger.debug(
        "reelpass_score_calculated",
        skill_count=len(skill_models),
        total=details.current_score,
        level=details.level_name,
    )
    return details


def project_fully_verified(skill: Skill, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> Skill:
    """Copy of skill as it would look after full verification."""
    return skill.model_copy(
        update={
            "verified": True,
            "video_verified": True,
            "video_demo_url": skill.video_demo_url or config.potential_video_url,
            "ai_rating": skill.ai_rating or config.potential_ai_rating,
        }
    )


def calculate_potential_score(
    skills: Sequence[SkillInput], config: ScoringConfig | None = None
) -> int:
    """Score the collection would reach if every skill were verified.

    Skills without an AI rating are assumed to receive
    ``config.potential_ai_rating``. That assumed rating can pull a higher
    existing average down, so the result is floored at the current score.
    """
    config = config or DEFAULT_SCORING_CONFIG
    skill_models = _coerce_skills(skills)
    projected = [project_fully_verified(s, config) for s in skill_models]

    current = calculate_reelpass_score(skill_models, config).current_score
    projected_score = calculate_reelpass_score(projected, config).current_score
    potential = max(current, projected_score)

    logger.debug(
        "potential_score_calculated",
        skill_count=len(projected),
        current=current,
        potential=potential,
    )
    return potential


def build_score_preview(
    skills: Sequence[SkillInput], config: ScoringConfig | None = None
) -> ScorePreview:
    """Current score, potential score and level info in one report."""
    config = config or DEFAULT_SCORING_CONFIG
    skill_models = _coerce_skills(skills)

    details = calculate_reelpass_score(skill_models, config)
    potential = calculate_potential_score(skill_models, config)

    return ScorePreview(
        details=details,
        potential_score=potential,
        potential_gain=max(0, potential - details.current_score),
        level_info=get_score_level_info(details.current_score),
        completion_ratio=min(1.0, details.current_score / details.max_score),
    )
