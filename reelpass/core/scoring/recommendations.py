"""Recommendation and next-step generation for score reports."""

from collections.abc import Callable, Sequence

from ..config.scoring import DEFAULT_SCORING_CONFIG
from ..models.enums import Proficiency
from ..models.score import ScoreBreakdown
from ..models.skill import Skill

ONBOARDING_RECOMMENDATIONS: tuple[str, ...] = (
    "Add your first skill to get started",
    "Choose skills that showcase your expertise",
    "Include both technical and soft skills",
)

ONBOARDING_NEXT_STEPS: tuple[str, ...] = (
    "Add 3-5 core skills",
    "Set realistic proficiency levels",
    "Upload ReelSkill videos for verification",
)

# (lower bound, steps); a score uses the last band whose bound it reaches
NEXT_STEP_BANDS: tuple[tuple[int, tuple[str, str, str]], ...] = (
    (
        0,
        (
            "Add 5+ core skills to establish your foundation",
            "Set realistic proficiency levels for each skill",
            "Create your first ReelSkill demonstration video",
        ),
    ),
    (
        200,
        (
            "Diversify across technical and soft skills",
            "Upload ReelSkill videos for top 3 skills",
            "Add more years of experience details",
        ),
    ),
    (
        400,
        (
            "Focus on getting AI verifications for key skills",
            "Add specialized or certification-based skills",
            "Improve proficiency levels for existing skills",
        ),
    ),
    (
        600,
        (
            "Complete AI assessments for all skills",
            "Add master-level skills in your expertise area",
            "Ensure all skills have video demonstrations",
        ),
    ),
    (
        800,
        (
            "Maintain high-quality skill demonstrations",
            "Share knowledge through advanced ReelSkills",
            "Mentor others and build your professional network",
        ),
    ),
)


# =============================================================================
# Recommendation rules
# =============================================================================
#
# Each rule looks at the collection and returns a message or None. Rules are
# evaluated in priority order and the first matches are kept.

Rule = Callable[[Sequence[Skill], ScoreBreakdown], str | None]


def _skill_count_rule(skills: Sequence[Skill], breakdown: ScoreBreakdown) -> str | None:
    if len(skills) < 5:
        return f"Add {5 - len(skills)} more skills to increase your base score"
    if len(skills) < 10:
        return "Consider adding more specialized skills to boost your profile"
    return None


def _proficiency_rule(skills: Sequence[Skill], breakdown: ScoreBreakdown) -> str | None:
    beginners = sum(1 for s in skills if s.proficiency == Proficiency.BEGINNER)
    if beginners > len(skills) * 0.5:
        return "Upgrade proficiency levels as you gain more experience"
    return None


def _category_rule(skills: Sequence[Skill], breakdown: ScoreBreakdown) -> str | None:
    if len({s.category for s in skills}) < 3:
        return (
            "Add skills from different categories "
            "(technical, soft skills, languages, certifications)"
        )
    return None


def _verification_rule(skills: Sequence[Skill], breakdown: ScoreBreakdown) -> str | None:
    unverified = sum(1 for s in skills if not s.is_verified)
    if unverified > 0:
        return f"Upload ReelSkill videos for {unverified} unverified skills"
    return None


def _experience_rule(skills: Sequence[Skill], breakdown: ScoreBreakdown) -> str | None:
    junior = sum(1 for s in skills if s.years_experience < 1)
    if junior > len(skills) * 0.3:
        return "Update years of experience for skills you've been practicing"
    return None


def _ai_assessment_rule(skills: Sequence[Skill], breakdown: ScoreBreakdown) -> str | None:
    if any(not s.has_ai_rating for s in skills):
        return "Complete AI assessments for more skills to boost your score"
    return None


RECOMMENDATION_RULES: tuple[Rule, ...] = (
    _skill_count_rule,
    _proficiency_rule,
    _category_rule,
    _verification_rule,
    _experience_rule,
    _ai_assessment_rule,
)


def generate_recommendations(
    skills: Sequence[Skill],
    breakdown: ScoreBreakdown,
    limit: int | None = None,
) -> list[str]:
    """Collect triggered recommendations in priority order.

    Args:
        skills: Non-empty skill collection
        breakdown: Breakdown computed for the same collection
        limit: Maximum number of recommendations to return, defaults to
            ``ScoringConfig.max_recommendations``

    Returns:
        At most ``limit`` messages, highest priority first
    """
    if limit is None:
        limit = DEFAULT_SCORING_CONFIG.max_recommendations

    recommendations: list[str] = []
    for rule in RECOMMENDATION_RULES:
        message = rule(skills, breakdown)
        if message is not None:
            recommendations.append(message)
    return recommendations[:limit]


def generate_next_steps(total: float) -> list[str]:
    """Three stage-appropriate actions for a score."""
    steps = NEXT_STEP_BANDS[0][1]
    for lower, band_steps in NEXT_STEP_BANDS:
        if total >= lower:
            steps = band_steps
    return list(steps)
