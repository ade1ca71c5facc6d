"""Configuration management for the FireEagle client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from fireeagle.exceptions import ConfigurationError

REQUIRED_FIELDS = ("consumer_key", "consumer_secret")
ACCESS_TOKEN_FIELDS = ("access_token", "access_token_secret")

_ENV_VARS = {
    "consumer_key": "FIREEAGLE_CONSUMER_KEY",
    "consumer_secret": "FIREEAGLE_CONSUMER_SECRET",
    "access_token": "FIREEAGLE_ACCESS_TOKEN",
    "access_token_secret": "FIREEAGLE_ACCESS_TOKEN_SECRET",
}


def _get_config_dir() -> Path:
    """Get XDG-compliant config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "fireeagle"
    return Path.home() / ".config" / "fireeagle"


def validate_credentials(values: dict[str, str | None]) -> None:
    """Raise ConfigurationError naming the first missing required field."""
    for name in REQUIRED_FIELDS:
        if not values.get(name):
            raise ConfigurationError(f"Missing required parameter '{name}'", field=name)


@dataclass(frozen=True, slots=True)
class FireEagleConfig:
    """FireEagle consumer credentials and, optionally, a stored access token."""

    consumer_key: str = ""
    consumer_secret: str = ""
    access_token: str | None = None
    access_token_secret: str | None = field(default=None, repr=False)

    # Service hosts; paths below are fixed by the service
    api_base_url: str = field(default="https://fireeagle.yahooapis.com", repr=False)
    web_base_url: str = field(default="https://fireeagle.yahoo.net", repr=False)

    def __post_init__(self) -> None:
        validate_credentials(
            {"consumer_key": self.consumer_key, "consumer_secret": self.consumer_secret}
        )

    @property
    def has_access_token(self) -> bool:
        """Whether both access token fields were supplied."""
        return all(getattr(self, name) for name in ACCESS_TOKEN_FIELDS)

    @property
    def request_token_url(self) -> str:
        return f"{self.api_base_url}/oauth/request_token"

    @property
    def authorization_url(self) -> str:
        return f"{self.web_base_url}/oauth/authorize"

    @property
    def access_token_url(self) -> str:
        return f"{self.api_base_url}/oauth/access_token"

    @property
    def query_url(self) -> str:
        return f"{self.api_base_url}/api/0.1/user"

    @property
    def update_url(self) -> str:
        return f"{self.api_base_url}/api/0.1/update"

    @property
    def lookup_url(self) -> str:
        return f"{self.api_base_url}/api/0.1/lookup"

    @classmethod
    def from_env(cls) -> FireEagleConfig:
        """Create config from environment variables.

        Expected env vars:
        - FIREEAGLE_CONSUMER_KEY
        - FIREEAGLE_CONSUMER_SECRET
        - FIREEAGLE_ACCESS_TOKEN (optional)
        - FIREEAGLE_ACCESS_TOKEN_SECRET (optional)
        """
        values = {name: os.environ.get(var) or None for name, var in _ENV_VARS.items()}
        validate_credentials(values)
        return cls(**values)  # type: ignore[arg-type]

    @classmethod
    def from_file(cls, path: Path | None = None) -> FireEagleConfig:
        """Load config from JSON file.

        Default path: ~/.config/fireeagle/config.json

        Expected format:
        {
            "consumer_key": "...",
            "consumer_secret": "...",
            "access_token": "...",          (optional)
            "access_token_secret": "..."    (optional)
        }
        """
        if path is None:
            path = _get_config_dir() / "config.json"

        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with path.open() as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(f"Failed to read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a JSON object")

        values = {name: data.get(name) or None for name in _ENV_VARS}
        validate_credentials(values)
        return cls(**values)  # type: ignore[arg-type]

    @classmethod
    def load(cls) -> FireEagleConfig:
        """Load config from environment or file (env takes precedence)."""
        try:
            return cls.from_env()
        except ConfigurationError:
            return cls.from_file()
