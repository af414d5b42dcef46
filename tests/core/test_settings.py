"""Tests for cadence.core.settings module.

Covers:
- CadenceSettings defaults
- Environment variable override (CADENCE_ prefix)
- Validation of log level and format
- get_settings caching and error translation
"""

import pytest

from cadence.core.errors import InvalidConfigError
from cadence.core.settings import CadenceSettings, clear_settings_cache, get_settings


class TestCadenceSettingsDefaults:
    def test_default_log_level(self):
        assert CadenceSettings().log_level == "INFO"

    def test_default_log_format(self):
        assert CadenceSettings().log_format == "auto"

    def test_default_service_name(self):
        assert CadenceSettings().service_name == "cadence"

    def test_default_rand_seed_unset(self):
        assert CadenceSettings().rand_seed is None


class TestCadenceSettingsEnvOverride:
    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("CADENCE_LOG_LEVEL", "debug")
        assert CadenceSettings().log_level == "DEBUG"

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("CADENCE_LOG_FORMAT", "JSON")
        assert CadenceSettings().log_format == "json"

    def test_rand_seed_from_env(self, monkeypatch):
        monkeypatch.setenv("CADENCE_RAND_SEED", "42")
        assert CadenceSettings().rand_seed == 42

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert CadenceSettings().log_level == "INFO"

    def test_constructor_kwargs(self):
        s = CadenceSettings(log_level="warning", service_name="scheduler")
        assert s.log_level == "WARNING"
        assert s.service_name == "scheduler"


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self):
        first = get_settings()
        assert get_settings(_force_reload=True) is not first

    def test_clear_cache_rereads_env(self, monkeypatch):
        assert get_settings().rand_seed is None
        monkeypatch.setenv("CADENCE_RAND_SEED", "5")
        assert get_settings().rand_seed is None
        clear_settings_cache()
        assert get_settings().rand_seed == 5

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("CADENCE_LOG_LEVEL", "LOUD")
        with pytest.raises(InvalidConfigError) as exc_info:
            get_settings()
        assert exc_info.value.key == "log_level"
        assert exc_info.value.value == "LOUD"

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("CADENCE_LOG_FORMAT", "xml")
        with pytest.raises(InvalidConfigError) as exc_info:
            get_settings()
        assert exc_info.value.key == "log_format"

    def test_invalid_seed(self, monkeypatch):
        monkeypatch.setenv("CADENCE_RAND_SEED", "not-a-number")
        with pytest.raises(InvalidConfigError) as exc_info:
            get_settings()
        assert exc_info.value.key == "rand_seed"
