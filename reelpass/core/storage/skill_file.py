"""Read skill collections from, and write score reports to, local files.

Skill files are JSON or YAML holding either a list of skill records or an
object with a ``skills`` list, matching rows exported from the skills table.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..models.skill import Skill

_SKILL_LIST = TypeAdapter(list[Skill])

YAML_SUFFIXES = {".yaml", ".yml"}


class SkillFileError(Exception):
    """A skill file could not be read, parsed, or validated."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def _parse(path: Path, text: str) -> Any:
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def load_skills(path: str | Path) -> list[Skill]:
    """Load and validate skills from a JSON or YAML file.

    Args:
        path: Skill file location

    Returns:
        Validated skills in file order

    Raises:
        SkillFileError: If the file is missing, malformed, or holds invalid records
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillFileError(path, f"cannot read file ({e})") from e

    try:
        data = _parse(path, text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SkillFileError(path, f"cannot parse file ({e})") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("skills", [])
    if not isinstance(data, list):
        raise SkillFileError(path, "expected a list of skills or an object with a 'skills' list")

    try:
        return _SKILL_LIST.validate_python(data)
    except ValidationError as e:
        raise SkillFileError(path, f"invalid skill record ({e.error_count()} errors)\n{e}") from e


def save_report(path: str | Path, report: BaseModel) -> None:
    """Write a report model as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report.model_dump(mode="json"), indent=2), encoding="utf-8")
