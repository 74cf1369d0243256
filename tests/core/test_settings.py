"""
Tests for base and API settings.
"""

from __future__ import annotations

from pathlib import Path

from pilothub.api.settings import PilotHubAPISettings
from pilothub.core.settings import PilotHubBaseSettings


class TestPilotHubBaseSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PILOTHUB_PORT", raising=False)
        s = PilotHubBaseSettings()
        assert s.host == "0.0.0.0"
        assert s.port == 5000
        assert s.debug is False
        assert s.log_level == "INFO"
        assert s.log_json is None

    def test_env_prefix(self):
        assert PilotHubBaseSettings.model_config["env_prefix"] == "PILOTHUB_"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PILOTHUB_PORT", "8080")
        monkeypatch.setenv("PILOTHUB_DEBUG", "true")
        s = PilotHubBaseSettings()
        assert s.port == 8080
        assert s.debug is True

    def test_unknown_env_ignored(self, monkeypatch):
        monkeypatch.setenv("PILOTHUB_NOT_A_SETTING", "x")
        PilotHubBaseSettings()


class TestPilotHubAPISettings:
    def test_defaults(self):
        s = PilotHubAPISettings()
        assert s.api_prefix == "/api"
        assert s.cors_origins == ["*"]
        assert s.seed_defaults is True
        assert s.admin_username == "admin"
        assert s.admin_password == "admin123"
        assert s.documents_root == Path.cwd()

    def test_custom_values(self, tmp_path):
        s = PilotHubAPISettings(api_prefix="/v2", documents_root=tmp_path, seed_defaults=False)
        assert s.api_prefix == "/v2"
        assert s.documents_root == tmp_path
        assert s.seed_defaults is False

    def test_documents_root_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PILOTHUB_DOCUMENTS_ROOT", str(tmp_path))
        assert PilotHubAPISettings().documents_root == tmp_path
