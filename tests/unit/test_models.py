"""Skill model normalisation and validation."""

import pytest
from pydantic import ValidationError

from reelpass.core.models import PROFICIENCY_WEIGHTS, Proficiency, Skill, round_half_up


def test_proficiency_weights_are_ordinal():
    ordered = list(Proficiency)
    assert [p.weight for p in ordered] == [1, 2, 3, 4, 5]
    assert set(PROFICIENCY_WEIGHTS) == set(Proficiency)
    assert Proficiency.weight_of("expert") == 4


def test_skill_defaults_for_missing_optional_fields():
    skill = Skill(category="soft", proficiency="intermediate")

    assert skill.id
    assert skill.years_experience == 0
    assert skill.verified is False
    assert skill.video_verified is False
    assert skill.endorsements == 0
    assert skill.video_demo_url is None
    assert skill.ai_rating is None
    assert skill.proficiency_weight == 2
    assert not skill.is_verified


def test_skill_ids_are_generated_per_record():
    first = Skill(category="soft", proficiency="beginner")
    second = Skill(category="soft", proficiency="beginner")

    assert first.id != second.id
    assert Skill(id="skill-1", category="soft", proficiency="beginner").id == "skill-1"


def test_skill_normalises_null_columns():
    skill = Skill.model_validate(
        {
            "category": "certification",
            "proficiency": "advanced",
            "years_experience": None,
            "verified": None,
            "video_verified": None,
            "endorsements": None,
            "video_demo_url": "   ",
            "ai_rating": 0,
        }
    )
    assert skill.years_experience == 0
    assert skill.verified is False
    assert skill.video_verified is False
    assert skill.endorsements == 0
    assert not skill.has_video
    assert not skill.has_ai_rating


@pytest.mark.parametrize(
    "overrides",
    [
        {"category": "hobby"},
        {"proficiency": "guru"},
        {"years_experience": -1},
        {"ai_rating": 6},
        {"ai_rating": 0.5},
        {"endorsements": -3},
    ],
)
def test_skill_rejects_out_of_range_values(overrides):
    fields = {"category": "technical", "proficiency": "beginner", **overrides}
    with pytest.raises(ValidationError):
        Skill(**fields)


@pytest.mark.parametrize(
    "value,expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (54.5, 55), (54.49, 54), (-0.5, 0), (-1.5, -1)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
