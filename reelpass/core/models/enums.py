"""Enumeration types for ReelPass models."""

from enum import Enum


class SkillCategory(str, Enum):
    """Skill categories."""

    TECHNICAL = "technical"
    SOFT = "soft"
    LANGUAGE = "language"
    CERTIFICATION = "certification"


class Proficiency(str, Enum):
    """Self-reported proficiency, ordered from beginner to master."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"
    MASTER = "master"

    @property
    def weight(self) -> int:
        """Ordinal weight, 1 for beginner up to 5 for master."""
        return PROFICIENCY_WEIGHTS[self]

    @classmethod
    def weight_of(cls, value: "Proficiency | str") -> int:
        """Weight for an enum member or its stored string value."""
        return cls(value).weight


PROFICIENCY_WEIGHTS: dict[Proficiency, int] = {
    Proficiency.BEGINNER: 1,
    Proficiency.INTERMEDIATE: 2,
    Proficiency.ADVANCED: 3,
    Proficiency.EXPERT: 4,
    Proficiency.MASTER: 5,
}
