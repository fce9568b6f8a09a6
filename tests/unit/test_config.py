"""Unit tests for settings."""

from geosweep.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GEOSWEEP_EPSILON", raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "geosweep"
        assert settings.epsilon == 1e-9
        assert settings.generate_count == 3

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("GEOSWEEP_EPSILON", "1e-6")
        monkeypatch.setenv("geosweep_generate_max_x", "50")
        settings = Settings(_env_file=None)
        assert settings.epsilon == 1e-6
        assert settings.generate_max_x == 50

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
