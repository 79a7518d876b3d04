"""AppSettings defaults, env overrides and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.api_base_url == "https://api.example.com"
        assert settings.default_user_id == "user-id"
        assert settings.decode_failure_as_empty is False
        assert settings.http_timeout_seconds == 20.0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SOLID_D2_API_BASE_URL", "https://other.test")
        monkeypatch.setenv("SOLID_D2_DECODE_FAILURE_AS_EMPTY", "true")
        settings = AppSettings(_env_file=None)
        assert settings.api_base_url == "https://other.test"
        assert settings.decode_failure_as_empty is True

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, http_timeout_seconds=0)

    def test_defaults_path_fallback(self):
        settings = AppSettings(_env_file=None)
        assert settings.resolved_defaults_path() == get_user_config_dir() / "defaults.json"

    def test_defaults_path_explicit(self, tmp_path):
        settings = AppSettings(_env_file=None, defaults_path=tmp_path / "d.json")
        assert settings.resolved_defaults_path() == tmp_path / "d.json"


class TestUserConfigDir:
    def test_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setattr("core.config.sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_config_dir() == Path(tmp_path) / "solid-d2"

    def test_home_fallback_without_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setattr("core.config.sys.platform", "linux")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr("core.config.Path.home", lambda: tmp_path)
        assert get_user_config_dir() == tmp_path / ".config" / "solid-d2"
