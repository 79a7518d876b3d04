"""CLI smoke tests (Typer CliRunner)."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cli.main import app
from core.errors import DecodeFailure

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SOLID_D2_DEFAULTS_PATH", str(tmp_path / "defaults.json"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


class TestShapesCommand:
    def test_default_total(self):
        result = runner.invoke(app, ["shapes"])
        assert result.exit_code == 0
        assert "Rectangle" in result.output
        assert "Square" in result.output
        assert "60" in result.output

    def test_custom_dimensions(self):
        result = runner.invoke(app, ["shapes", "--width", "2", "--height", "3", "--edge", "4"])
        assert result.exit_code == 0
        assert "22" in result.output

    def test_negative_rejected(self):
        result = runner.invoke(app, ["shapes", "--edge", "-1"])
        assert result.exit_code != 0


class TestCacheCommands:
    def test_show_when_empty(self):
        result = runner.invoke(app, ["cache", "show"])
        assert result.exit_code == 0
        assert "No user id stored" in result.output

    def test_save_then_show(self):
        saved = runner.invoke(app, ["cache", "save-user-id", "u-77"])
        assert saved.exit_code == 0

        shown = runner.invoke(app, ["cache", "show"])
        assert shown.exit_code == 0
        assert "u-77" in shown.output


class TestNetworkCommands:
    def test_products_with_malformed_base_url_is_empty(self, monkeypatch):
        monkeypatch.setenv("SOLID_D2_API_BASE_URL", "baseURL")
        result = runner.invoke(app, ["products", "u1"])
        assert result.exit_code == 0
        assert "Products for u1" in result.output

    def test_fetch_malformed_url_is_empty(self):
        result = runner.invoke(app, ["fetch", "users", "--url", "not a url"])
        assert result.exit_code == 0
        assert "no records" in result.output

    def test_sync_malformed_url_fails(self, tmp_path):
        output = tmp_path / "feed.json"
        result = runner.invoke(app, ["sync", "--url", "nowhere", "--output", str(output)])
        assert result.exit_code == 1
        assert not output.exists()


class TestCorruptStore:
    def test_save_with_corrupt_store_reports_error(self, tmp_path):
        defaults = tmp_path / "defaults.json"
        defaults.write_text("{nope", encoding="utf-8")

        result = runner.invoke(app, ["cache", "save-user-id", "u1"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, DecodeFailure)
        assert "Error" in result.output
        assert defaults.read_text(encoding="utf-8") == "{nope"

    def test_show_with_corrupt_store_reports_error(self, tmp_path):
        (tmp_path / "defaults.json").write_text("{nope", encoding="utf-8")
        result = runner.invoke(app, ["cache", "show"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestDoctorCommand:
    def test_runs_as_single_command(self, monkeypatch):
        monkeypatch.setenv("SOLID_D2_API_BASE_URL", "baseURL")
        result = runner.invoke(app, ["doctor"])
        assert result.exit_code == 0
        assert "SOLID-D2 Doctor" in result.output
        assert "HTTP connectivity" in result.output
        assert "FAIL" in result.output
