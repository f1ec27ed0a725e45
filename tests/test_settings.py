"""Smoke tests for settings loading and QuizConfig."""
import dataclasses

import pytest
from pydantic import ValidationError

from certiai.settings import QUIZ_SIZE, QuizConfig, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PASS_THRESHOLD", raising=False)
        s = Settings(_env_file=None)
        assert s.PASS_THRESHOLD == 60
        assert s.DEFAULT_SKILL == "JavaScript"
        assert s.OPENAI_MODEL == "gpt-4o-mini"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PASS_THRESHOLD", "75")
        monkeypatch.setenv("DEFAULT_SKILL", "Python")
        s = Settings(_env_file=None)
        assert s.PASS_THRESHOLD == 75
        assert s.DEFAULT_SKILL == "Python"

    def test_threshold_bounds(self, monkeypatch):
        monkeypatch.setenv("PASS_THRESHOLD", "150")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestQuizConfig:
    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("PASS_THRESHOLD", "80")
        cfg = QuizConfig.from_settings(Settings(_env_file=None))
        assert cfg.pass_threshold == 80
        assert cfg.quiz_size == QUIZ_SIZE == 5

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            QuizConfig().pass_threshold = 10
