"""Tests for configuration validation."""

import pytest

from gridsearch.config import Config, _optional_int


def test_defaults_validate(monkeypatch):
    monkeypatch.setattr(Config, "HEURISTIC", "manhattan")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "MAX_STEPS", None)

    Config.validate()


def test_unknown_heuristic_rejected(monkeypatch):
    monkeypatch.setattr(Config, "HEURISTIC", "bogus")

    with pytest.raises(ValueError, match="GRIDSEARCH_HEURISTIC"):
        Config.validate()


def test_non_positive_max_steps_rejected(monkeypatch):
    monkeypatch.setattr(Config, "HEURISTIC", "zero")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "MAX_STEPS", 0)

    with pytest.raises(ValueError, match="GRIDSEARCH_MAX_STEPS"):
        Config.validate()


def test_display_lists_settings(monkeypatch):
    monkeypatch.setattr(Config, "HEURISTIC", "euclidean")
    monkeypatch.setattr(Config, "MAX_STEPS", None)

    text = Config.display()

    assert "Heuristic: euclidean" in text
    assert "Max Steps: unbounded" in text


def test_optional_int_parsing():
    assert _optional_int(None) is None
    assert _optional_int("  ") is None
    assert _optional_int("250") == 250


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setattr(Config, "HEURISTIC", "manhattan")
    monkeypatch.setattr(Config, "MAX_STEPS", None)
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Config.validate()
