"""Tests for config.py: host settings and environment settings."""

import pytest
from pydantic import ValidationError

from browser_tools_bridge.config import BrowserToolsSettings, Settings


class TestFromHost:
    def test_none_gives_defaults(self):
        config = BrowserToolsSettings.from_host(None)
        assert (config.port, config.host) == (3025, "127.0.0.1")
        assert config.npx_command == "@agentdeskai/browser-tools-server@1.2.0"

    def test_missing_fields_default(self):
        config = BrowserToolsSettings.from_host({"host": "192.168.0.2"})
        assert config.host == "192.168.0.2"
        assert config.port == 3025

    def test_unknown_keys_ignored(self):
        config = BrowserToolsSettings.from_host({"port": 4000, "theme": "dark"})
        assert config.port == 4000

    @pytest.mark.parametrize("raw", [
        {"port": "abc", "host": "10.0.0.1"},
        {"port": 70000, "host": "10.0.0.1"},
        {"port": -1},
        {"host": 42},
        {"port": "4000", "host": "10.0.0.9"},
        {"port": True},
        {"port": 4000.0},
        ["port", 4000],
        "127.0.0.1:4000",
    ])
    def test_invalid_settings_reset_everything(self, raw):
        assert BrowserToolsSettings.from_host(raw) == BrowserToolsSettings()

    def test_base_url(self):
        assert BrowserToolsSettings(host="localhost", port=9000).base_url == "http://localhost:9000"

    def test_settings_are_read_only(self):
        config = BrowserToolsSettings()
        with pytest.raises(ValidationError):
            config.port = 1


class TestEnvironment:
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BROWSER_TOOLS_HOST", "10.9.8.7")
        monkeypatch.setenv("BROWSER_TOOLS_PORT", "4321")
        config = BrowserToolsSettings.from_environment(Settings())
        assert config.base_url == "http://10.9.8.7:4321"

    def test_environment_defaults(self, monkeypatch):
        for name in ("BROWSER_TOOLS_HOST", "BROWSER_TOOLS_PORT", "BROWSER_TOOLS_NPX_COMMAND"):
            monkeypatch.delenv(name, raising=False)
        env = Settings(_env_file=None)
        assert BrowserToolsSettings.from_environment(env) == BrowserToolsSettings()
