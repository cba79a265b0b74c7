"""Loading skill collections from JSON and YAML files."""

import json

import pytest
import yaml

from reelpass.core.scoring import build_score_preview
from reelpass.core.storage.skill_file import SkillFileError, load_skills, save_report

RECORDS = [
    {"id": "s1", "name": "Python", "category": "technical", "proficiency": "expert",
     "years_experience": 6, "verified": True, "video_verified": False, "endorsements": 12},
    {"id": "s2", "name": "Public speaking", "category": "soft", "proficiency": "advanced",
     "years_experience": 3, "video_demo_url": "https://videos.example.com/talk.mp4",
     "ai_rating": 4, "video_verified": True},
]


def test_load_json_list(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")

    skills = load_skills(path)

    assert [s.id for s in skills] == ["s1", "s2"]
    assert skills[1].ai_rating == 4


def test_load_yaml_with_skills_key(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text(yaml.safe_dump({"skills": RECORDS}), encoding="utf-8")

    assert len(load_skills(path)) == 2


def test_empty_file_is_empty_collection(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_skills(path) == []


@pytest.mark.parametrize(
    "name,content",
    [
        ("broken.json", "[{"),
        ("scalar.json", "42"),
        ("invalid.json", json.dumps([{"category": "hobby", "proficiency": "beginner"}])),
    ],
)
def test_bad_files_raise_skill_file_error(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(SkillFileError) as exc_info:
        load_skills(path)
    assert exc_info.value.path == path


def test_missing_file_raises_skill_file_error(tmp_path):
    with pytest.raises(SkillFileError):
        load_skills(tmp_path / "absent.json")


def test_save_report(tmp_path):
    path = tmp_path / "out" / "report.json"
    preview = build_score_preview(RECORDS)

    save_report(path, preview)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["details"]["current_score"] == preview.details.current_score
    assert data["potential_score"] == preview.potential_score
