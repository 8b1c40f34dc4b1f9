"""Tests for wizard configuration loading."""

from pathlib import Path

import pytest

from tokenlist_wizard.core.config import (
    DEFAULT_ICON_BASE_URL,
    DEFAULT_MAINNET_ORIGIN,
    WizardConfig,
)
from tokenlist_wizard.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TOKENLIST_MAINNET_ORIGIN",
        "TOKENLIST_ICON_BASE_URL",
        "TOKENLIST_REGISTRY_ROOT",
        "TOKENLIST_PLACEHOLDER_ICON",
        "TOKENLIST_GIT_REMOTE",
        "TOKENLIST_REQUEST_TIMEOUT",
    ):
        # set first so teardown removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestWizardConfig:
    """Tests for WizardConfig."""

    def test_defaults(self):
        config = WizardConfig.from_env()

        assert config.mainnet_origin == DEFAULT_MAINNET_ORIGIN
        assert config.icon_base_url == DEFAULT_ICON_BASE_URL
        assert config.placeholder_icon == "axl.svg"
        assert config.request_timeout == 30.0
        assert config.git_remote == "origin"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TOKENLIST_REGISTRY_ROOT", str(tmp_path))
        monkeypatch.setenv("TOKENLIST_REQUEST_TIMEOUT", "5")
        monkeypatch.setenv("TOKENLIST_GIT_REMOTE", "upstream")

        config = WizardConfig.from_env()

        assert config.registry_root == tmp_path
        assert config.request_timeout == 5.0
        assert config.git_remote == "upstream"

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("TOKENLIST_REQUEST_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            WizardConfig.from_env()

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TOKENLIST_GIT_REMOTE=fork\n", encoding="utf-8")

        config = WizardConfig.load(env_file=env_file)

        assert config.git_remote == "fork"

    def test_yaml_overrides(self, tmp_path):
        config_file = tmp_path / "wizard.yaml"
        config_file.write_text(
            "mainnet_origin: https://portal.example.org\n"
            "registry_root: /srv/chain-configs\n"
            "request_timeout: 12\n",
            encoding="utf-8",
        )

        config = WizardConfig.load(config_file=config_file)

        assert config.mainnet_host == "https://portal.example.org"
        assert config.registry_root == Path("/srv/chain-configs")
        assert config.request_timeout == 12.0

    def test_yaml_unknown_keys(self, tmp_path):
        config_file = tmp_path / "wizard.yaml"
        config_file.write_text("colour: blue\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="colour"):
            WizardConfig.load(config_file=config_file)

    def test_yaml_missing_file_uses_defaults(self, tmp_path):
        config = WizardConfig.load(config_file=tmp_path / "missing.yaml")
        assert config.mainnet_origin == DEFAULT_MAINNET_ORIGIN
