"""Configuration for list naming, URL bases and timestamp format.

Loaded from a YAML file (by default ``.github/assets.config.yaml`` under the
registry root) and overridden by environment variables.
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".github") / "assets.config.yaml"

# Environment variable -> config field
ENV_OVERRIDES: dict[str, str] = {
    "ASSETS_ORG_NAME": "org_name",
    "ASSETS_APP_URL": "assets_app_url",
    "ASSETS_LOGO_URL": "logo_url",
    "ASSETS_TIME_FORMAT": "time_format",
}


@dataclass(frozen=True)
class ManagerConfig:
    """Settings shared by the list and template operations."""

    # Prefix of every token list name, "<org_name>: <chain name>"
    org_name: str = "Trust Wallet"

    # Base URL the asset logos are served from
    assets_app_url: str = "https://assets-cdn.trustwallet.com"

    # Logo of the token lists themselves
    logo_url: str = "https://trustwallet.com/assets/images/favicon.png"

    # strftime format of the list timestamp
    time_format: str = "%Y-%m-%dT%H:%M:%S.%f"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ManagerConfig":
        """Build from the parsed YAML document."""
        urls = data.get("urls") or {}
        if not isinstance(urls, dict):
            raise ConfigurationError("urls", "expected a mapping")

        defaults = cls()
        return cls(
            org_name=str(data.get("org_name") or defaults.org_name),
            assets_app_url=str(urls.get("assets_app") or defaults.assets_app_url).rstrip("/"),
            logo_url=str(urls.get("logo") or defaults.logo_url),
            time_format=str(data.get("time_format") or defaults.time_format),
        )

    def with_env(self) -> "ManagerConfig":
        """Apply environment variable overrides."""
        overrides = {
            field: os.environ[env_var]
            for env_var, field in ENV_OVERRIDES.items()
            if os.environ.get(env_var)
        }
        if "assets_app_url" in overrides:
            overrides["assets_app_url"] = overrides["assets_app_url"].rstrip("/")
        return replace(self, **overrides)

    @classmethod
    def load(
        cls,
        config_path: Optional[Path] = None,
        root: Optional[Path] = None,
    ) -> "ManagerConfig":
        """
        Load configuration from a YAML file and environment variables.

        Args:
            config_path: Explicit YAML file. Must exist when given.
            root: Registry root, searched for the default config file
                when no explicit path is given.

        Returns:
            ManagerConfig instance with loaded values
        """
        if config_path is None:
            candidate = Path(root or ".") / DEFAULT_CONFIG_PATH
            if not candidate.exists():
                logger.debug(f"No config file at {candidate}, using defaults")
                return cls().with_env()
            config_path = candidate

        config_path = Path(config_path)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigurationError(str(config_path), "file not found") from None
        except yaml.YAMLError as e:
            raise ConfigurationError(str(config_path), f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(str(config_path), "expected a mapping at top level")

        logger.debug(f"Loaded config from {config_path}")
        return cls.from_dict(data).with_env()
