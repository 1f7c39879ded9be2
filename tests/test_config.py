"""
Tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from excavation.config import Settings, get_settings
from excavation.constants import GRID_WIDTH, GRID_HEIGHT, SCORE_BUDGET, MAX_ATTEMPTS


class TestSettings:
    """Tests for Settings."""

    def test_defaults_match_constants(self, monkeypatch):
        monkeypatch.delenv("DIG_GRID_WIDTH", raising=False)
        settings = Settings(_env_file=None)

        assert settings.grid_size == (GRID_WIDTH, GRID_HEIGHT)
        assert settings.score_budget == SCORE_BUDGET
        assert settings.max_attempts == MAX_ATTEMPTS
        assert settings.seed is None

    def test_environment_overrides(self, monkeypatch):
        """DIG_* variables override the defaults."""
        monkeypatch.setenv("DIG_GRID_WIDTH", "8")
        monkeypatch.setenv("DIG_SEED", "42")

        settings = Settings(_env_file=None)

        assert settings.grid_width == 8
        assert settings.seed == 42

    def test_keyword_overrides_win(self, monkeypatch):
        monkeypatch.setenv("DIG_SCORE_BUDGET", "4")
        assert Settings(_env_file=None, score_budget=7).score_budget == 7

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, grid_width=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, score_budget=-1)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
