"""Score tiers and within-tier progress."""

from ..models.base import clamp, round_half_up
from ..models.score import SCORE_CEILING, LevelInfo, ScoreLevel

SCORE_LEVELS: tuple[ScoreLevel, ...] = (
    ScoreLevel(min_score=0, max_score=199, name="Emerging Professional"),
    ScoreLevel(min_score=200, max_score=399, name="Developing Professional"),
    ScoreLevel(min_score=400, max_score=599, name="Competent Professional"),
    ScoreLevel(min_score=600, max_score=799, name="Skilled Professional"),
    ScoreLevel(min_score=800, max_score=SCORE_CEILING, name="Expert Professional"),
)


def classify_level(score: float) -> ScoreLevel:
    """Return the tier containing score, or the lowest tier if none does."""
    for level in SCORE_LEVELS:
        if level.contains(score):
            return level
    return SCORE_LEVELS[0]


def level_progress(score: float, level: ScoreLevel) -> int:
    """Percentage progress of score through level, clamped to [0, 100]."""
    span = level.max_score - level.min_score
    if span <= 0:
        return 100
    progress = round_half_up((score - level.min_score) * 100 / span)
    return int(clamp(progress, 0, 100))


def next_level(level: ScoreLevel) -> ScoreLevel | None:
    """The first tier starting above level, None for the top tier."""
    for candidate in SCORE_LEVELS:
        if candidate.min_score > level.max_score:
            return candidate
    return None


def get_score_level_info(score: float) -> LevelInfo:
    """Level metadata for an already-known score.

    Args:
        score: ReelPass Score, usually in [0, 1000]

    Returns:
        The matching tier with its progress and the next tier up
    """
    level = classify_level(score)
    return LevelInfo(
        min_score=level.min_score,
        max_score=level.max_score,
        name=level.name,
        progress=level_progress(score, level),
        next_level=next_level(level),
    )
