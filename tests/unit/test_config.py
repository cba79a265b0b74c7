"""Configuration hierarchy and scoring parameters."""

import os

import pytest
import yaml
from pydantic import ValidationError

from reelpass.core.config.loader import ConfigLoader, load_config
from reelpass.core.config.scoring import DEFAULT_SCORING_CONFIG, ScoringConfig


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith("REELPASS_"):
            monkeypatch.delenv(key)

    root = tmp_path / "config"
    _write(
        root / "default.yaml",
        {"logging": {"level": "INFO"}, "scoring": {"verification_cap": 150, "max_score": 1000}},
    )
    _write(root / "environments" / "staging.yaml", {"logging": {"level": "DEBUG"}})
    return root


def test_default_file_loaded(config_dir):
    config = ConfigLoader(config_dir).load()
    assert config["logging"]["level"] == "INFO"
    assert config["scoring"]["verification_cap"] == 150


def test_environment_file_merged(config_dir, monkeypatch):
    monkeypatch.setenv("REELPASS_ENV", "staging")
    config = ConfigLoader(config_dir).load()

    assert config["logging"]["level"] == "DEBUG"
    assert config["scoring"]["max_score"] == 1000
    assert "env" not in config


def test_overrides_then_environment_variables(config_dir, monkeypatch):
    monkeypatch.setenv("REELPASS_SCORING__VERIFICATION_CAP", "120")
    monkeypatch.setenv("REELPASS_LOGGING__FORMAT", "json")

    config = load_config(
        overrides={"scoring": {"verification_cap": 100, "points_per_video": 5}},
        config_dir=config_dir,
    )

    assert config["scoring"]["verification_cap"] == 120
    assert config["scoring"]["points_per_video"] == 5
    assert config["logging"]["format"] == "json"


def test_missing_config_dir_yields_empty_config(tmp_path, monkeypatch):
    monkeypatch.delenv("REELPASS_ENV", raising=False)
    assert ConfigLoader(tmp_path / "nowhere").load() == {}


def test_convert_value():
    loader = ConfigLoader()
    assert loader._convert_value("true") is True
    assert loader._convert_value("no") is False
    assert loader._convert_value("1") == 1
    assert loader._convert_value("2.5") == 2.5
    assert loader._convert_value("console") == "console"


def test_repository_default_config_matches_builtin_defaults(monkeypatch):
    for key in list(os.environ):
        if key.startswith("REELPASS_"):
            monkeypatch.delenv(key)
    loaded = ScoringConfig.from_config(load_config())
    assert loaded.model_dump() == DEFAULT_SCORING_CONFIG.model_dump()


def test_scoring_config_from_section():
    config = ScoringConfig.from_config({"scoring": {"potential_ai_rating": 3}})
    assert config.potential_ai_rating == 3
    assert config.verification_cap == 150
    assert ScoringConfig.from_config(None).model_dump() == DEFAULT_SCORING_CONFIG.model_dump()


def test_scoring_config_rejects_caps_above_ceiling():
    with pytest.raises(ValidationError):
        ScoringConfig(verification_cap=250)


def test_default_caps_sum_to_ceiling():
    c = DEFAULT_SCORING_CONFIG
    caps = (
        c.base_cap
        + c.proficiency_cap
        + c.experience_cap
        + c.diversity_cap
        + c.verification_cap
        + c.ai_rating_cap
    )
    assert caps == c.max_score == 1000


@pytest.mark.parametrize("max_score", [500, 2000])
def test_scoring_config_max_score_pinned_to_level_table(max_score):
    # A wider scale with raised caps would otherwise pass the caps check
    # and report 1500 points as "Emerging Professional"
    with pytest.raises(ValidationError, match="max_score must be 1000"):
        ScoringConfig(max_score=max_score, base_cap=800)


def test_max_score_environment_override_rejected(config_dir, monkeypatch):
    monkeypatch.setenv("REELPASS_SCORING__MAX_SCORE", "2000")
    with pytest.raises(ValidationError):
        ScoringConfig.from_config(load_config(config_dir=config_dir))
