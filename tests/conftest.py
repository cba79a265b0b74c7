"""Shared fixtures for ReelPass tests."""

import pytest

from reelpass.core.models.skill import Skill


@pytest.fixture
def make_skill():
    """Factory for skills with scoring-neutral defaults."""

    def _make(**overrides) -> Skill:
        fields = {
            "name": "Python",
            "category": "technical",
            "proficiency": "beginner",
            "years_experience": 0,
            "verified": False,
            "video_verified": False,
        }
        fields.update(overrides)
        return Skill(**fields)

    return _make


@pytest.fixture
def showcase_skills(make_skill):
    """Five fully verified master-level skills across all four categories."""
    categories = ["technical", "soft", "language", "certification", "technical"]
    return [
        make_skill(
            name=f"Skill {idx}",
            category=category,
            proficiency="master",
            years_experience=2,
            verified=True,
            video_verified=True,
            video_demo_url=f"https://videos.example.com/{idx}.mp4",
            ai_rating=5,
        )
        for idx, category in enumerate(categories)
    ]
