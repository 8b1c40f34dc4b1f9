"""Configuration management for the token listing wizard.

Loads settings from environment variables (optionally via a .env file)
and an optional YAML file whose keys match the WizardConfig fields.
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MAINNET_ORIGIN = "https://interchain.axelar.dev"
DEFAULT_ICON_BASE_URL = (
    "https://raw.githubusercontent.com/axelarnetwork/public-chain-configs"
)


@dataclass
class WizardConfig:
    """Settings shared by the listing flow."""

    # Origin of the production ITS portal; anything else is treated as testnet
    mainnet_origin: str = DEFAULT_MAINNET_ORIGIN

    # Base URL the iconUrls.svg entries point at
    icon_base_url: str = DEFAULT_ICON_BASE_URL

    # Checkout of the chain-configs repository holding registry/ and images/
    registry_root: Path = field(default_factory=Path.cwd)

    # Icon copied as the placeholder for new tokens
    placeholder_icon: str = "axl.svg"

    request_timeout: float = 30.0
    git_remote: str = "origin"

    @classmethod
    def from_env(cls) -> "WizardConfig":
        """Load configuration from environment variables."""
        config = cls()
        overrides: dict[str, Any] = {}

        if os.getenv("TOKENLIST_MAINNET_ORIGIN"):
            overrides["mainnet_origin"] = os.environ["TOKENLIST_MAINNET_ORIGIN"]
        if os.getenv("TOKENLIST_ICON_BASE_URL"):
            overrides["icon_base_url"] = os.environ["TOKENLIST_ICON_BASE_URL"]
        if os.getenv("TOKENLIST_REGISTRY_ROOT"):
            overrides["registry_root"] = Path(os.environ["TOKENLIST_REGISTRY_ROOT"])
        if os.getenv("TOKENLIST_PLACEHOLDER_ICON"):
            overrides["placeholder_icon"] = os.environ["TOKENLIST_PLACEHOLDER_ICON"]
        if os.getenv("TOKENLIST_GIT_REMOTE"):
            overrides["git_remote"] = os.environ["TOKENLIST_GIT_REMOTE"]
        if os.getenv("TOKENLIST_REQUEST_TIMEOUT"):
            raw = os.environ["TOKENLIST_REQUEST_TIMEOUT"]
            try:
                overrides["request_timeout"] = float(raw)
            except ValueError:
                raise ConfigurationError(
                    "TOKENLIST_REQUEST_TIMEOUT", f"not a number: {raw}"
                )

        return replace(config, **overrides)

    @classmethod
    def load(
        cls,
        env_file: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> "WizardConfig":
        """
        Load configuration from .env, environment variables and YAML.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the current directory.
            config_file: Optional YAML file; its values win over the environment.

        Returns:
            WizardConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        config = cls.from_env()
        if config_file:
            config = config.merge_yaml(Path(config_file))
        return config

    def merge_yaml(self, config_file: Path) -> "WizardConfig":
        """Return a copy with values from a YAML file applied."""
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Config file not found: {config_file}, using defaults")
            return self
        except yaml.YAMLError as e:
            raise ConfigurationError(str(config_file), f"invalid YAML: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(str(config_file), "expected a mapping at top level")

        known = {f.name for f in fields(self)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                str(config_file), f"unknown keys: {', '.join(unknown)}"
            )

        if "registry_root" in data:
            data["registry_root"] = Path(data["registry_root"])
        if "request_timeout" in data:
            data["request_timeout"] = float(data["request_timeout"])

        logger.debug(f"Loaded config overrides from {config_file}: {sorted(data)}")
        return replace(self, **data)

    @property
    def mainnet_host(self) -> str:
        """Production origin without a trailing slash."""
        return self.mainnet_origin.rstrip("/")

